"""ratfem.errors
Error kinds raised by the rational basis engine.

Every error is fatal to the call that raised it; the engine never tries to
recover locally.  Each class also derives from the closest builtin so that
callers which only know about ``ValueError``/``IndexError`` still catch it.
"""


class RationalBasisError(Exception):
    """Base class for every error raised by ratfem."""


class MissingGeometry(RationalBasisError, TypeError):
    """Evaluation requested without a concrete element (no nodal weights)."""

    def __init__(self, what="element type"):
        super().__init__(
            f"Rational bases require the real element to query nodal weighting; got {what!r}."
        )


class InvalidDirectionIndex(RationalBasisError, IndexError):
    """Derivative direction outside the range valid for the dimension."""


class InvalidShapeIndex(RationalBasisError, IndexError):
    """Shape function index outside [0, n_sf)."""


class ShapeCountMismatch(RationalBasisError, ValueError):
    """Underlying basis size differs from the element node count."""

    def __init__(self, n_sf: int, n_nodes: int, family: str, order: int):
        self.n_sf = n_sf
        self.n_nodes = n_nodes
        super().__init__(
            f"{family} basis of order {order} has {n_sf} shape functions "
            f"but the element has {n_nodes} nodes."
        )


class ZeroDenominator(RationalBasisError, ZeroDivisionError):
    """Weighted sum of the underlying basis vanishes at the query point."""


class InvalidWeights(RationalBasisError, ValueError):
    """Nodal weights are non-finite or all zero."""


class SecondDerivativesDisabled(RationalBasisError, RuntimeError):
    """Second derivatives were requested but are switched off."""


class UnsupportedBasis(RationalBasisError, KeyError):
    """No basis registered for the requested element type / family / dimension."""
