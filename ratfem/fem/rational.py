"""ratfem.fem.rational
Rational (NURBS-like) basis built as a weighted reprojection of an
underlying polynomial basis.

For nodal weights w and underlying functions N the rational functions are

    R_i = w_i N_i / S,        S = sum_k w_k N_k

so they form a partition of unity and reduce to N when every weight is 1.
Derivatives follow from the quotient rule applied to the weighted sums.
All evaluations are vectorised over the shape index; the scalar entry
points pick one component.
"""
import logging
import numpy as np

from ratfem.config import Settings
from ratfem.errors import (InvalidShapeIndex, InvalidWeights,
                           MissingGeometry, SecondDerivativesDisabled,
                           ShapeCountMismatch, ZeroDenominator)
from ratfem.fem.hessian import HessianEntry, check_axis
from ratfem.fem.reference import get_reference

logger = logging.getLogger(__name__)


def _require_element(elem):
    """Rational weights live on concrete elements only."""
    if (elem is None or isinstance(elem, str)
            or not callable(getattr(elem, "weight", None))
            or not hasattr(elem, "element_type")):
        raise MissingGeometry(elem)
    return elem


class RationalBasis:
    """Shared weight/delegate plumbing of the 1D and 3D strategies."""

    dim = None

    def __init__(self, family: str = "bernstein", settings: Settings = None):
        self.family = family
        self.settings = settings if settings is not None else Settings.from_env()

    def __repr__(self):
        return f"{type(self).__name__}(family={self.family!r})"

    # ------------------------------------------------------------------
    # plumbing
    # ------------------------------------------------------------------
    def _setup(self, elem, order, add_p_level):
        """Return (underlying reference basis, validated nodal weights)."""
        _require_element(elem)
        if elem.dim != self.dim:
            raise ValueError(f"{self!r} evaluates {self.dim}D elements, "
                             f"got a {elem.dim}D {elem.element_type!r}.")
        extra_order = int(add_p_level) * elem.p_level
        ref = get_reference(elem.element_type, self.family, order + extra_order)

        n_sf = ref.n_shape_functions()
        n_nodes = elem.n_nodes()
        if n_sf != n_nodes:
            raise ShapeCountMismatch(n_sf, n_nodes, self.family, order + extra_order)

        w = np.array([elem.weight(n) for n in range(n_nodes)], dtype=float)
        if not np.all(np.isfinite(w)):
            raise InvalidWeights(f"Element {elem.id} has non-finite nodal weights: {w}")
        if not np.any(w):
            raise InvalidWeights(f"Element {elem.id} has all nodal weights equal to zero.")
        return ref, w

    def _denominator(self, W, p):
        S = W.sum()
        if S == 0.0:
            if self.settings.zero_denominator == "raise":
                raise ZeroDenominator(f"Weighted basis sum vanishes at p={p!r}.")
            logger.warning(f"Weighted basis sum vanishes at p={p!r}; propagating non-finite values.")
        return S

    def _check_direction(self, j):
        check_axis(j, self.dim)

    def _check_second_derivatives(self):
        if not self.settings.second_derivatives:
            raise SecondDerivativesDisabled(
                "Second derivatives are disabled (RATFEM_DISABLE_SECOND_DERIVATIVES)."
            )

    @staticmethod
    def _pick(values, i):
        if not 0 <= i < values.shape[0]:
            raise InvalidShapeIndex(f"Shape index {i} out of range [0, {values.shape[0]}).")
        return float(values[i])

    # ------------------------------------------------------------------
    # vectorised over the shape index
    # ------------------------------------------------------------------
    def all_shapes(self, elem, order, p, add_p_level=True):
        ref, w = self._setup(elem, order, add_p_level)
        W = w * ref.shape(p)
        S = self._denominator(W, p)
        with np.errstate(divide="ignore", invalid="ignore"):
            return W / S

    def all_shape_derivs(self, elem, order, j, p, add_p_level=True):
        self._check_direction(j)
        ref, w = self._setup(elem, order, add_p_level)
        W = w * ref.shape(p)
        G = w * ref.shape_deriv(j, p)
        S = self._denominator(W, p)
        Gs = G.sum()
        with np.errstate(divide="ignore", invalid="ignore"):
            return (S * G - W * Gs) / S / S

    def all_shape_second_derivs(self, elem, order, j, p, add_p_level=True):
        raise NotImplementedError

    # ------------------------------------------------------------------
    # one shape function
    # ------------------------------------------------------------------
    def shape(self, elem, order, i, p, add_p_level=True):
        return self._pick(self.all_shapes(elem, order, p, add_p_level), i)

    def shape_deriv(self, elem, order, i, j, p, add_p_level=True):
        return self._pick(self.all_shape_derivs(elem, order, j, p, add_p_level), i)

    def shape_second_deriv(self, elem, order, i, j, p, add_p_level=True):
        return self._pick(self.all_shape_second_derivs(elem, order, j, p, add_p_level), i)

    def shape_grad(self, elem, order, i, p, add_p_level=True):
        """Parametric gradient of shape function ``i``, shape (dim,)."""
        return np.array([self.shape_deriv(elem, order, i, j, p, add_p_level)
                         for j in range(self.dim)])

    def shape_hessian(self, elem, order, i, p, add_p_level=True):
        """Symmetric parametric Hessian of shape function ``i``, shape (dim, dim)."""
        H = np.empty((self.dim, self.dim), dtype=float)
        n_entries = 1 if self.dim == 1 else len(HessianEntry)
        for j in range(n_entries):
            a, b = HessianEntry(j).axes
            H[a, b] = H[b, a] = self.shape_second_deriv(elem, order, i, j, p, add_p_level)
        return H


class RationalBasis1D(RationalBasis):
    dim = 1

    def all_shape_second_derivs(self, elem, order, j, p, add_p_level=True):
        # only d2/dxi2 in 1D
        self._check_second_derivatives()
        HessianEntry.coerce(j, self.dim)
        ref, w = self._setup(elem, order, add_p_level)
        W = w * ref.shape(p)
        G = w * ref.shape_deriv(0, p)
        H = w * ref.shape_second_deriv(0, p)
        S = self._denominator(W, p)
        Gs, Hs = G.sum(), H.sum()
        with np.errstate(divide="ignore", invalid="ignore"):
            return (S * S * (S * H - W * Hs)
                    - (S * G - W * Gs) * 2 * S * Gs) / (S * S * S * S)


class RationalBasis3D(RationalBasis):
    dim = 3

    def all_shape_second_derivs(self, elem, order, j, p, add_p_level=True):
        self._check_second_derivatives()
        entry = HessianEntry.coerce(j, self.dim)
        j1, j2 = entry.axes
        return self._mixed_second_derivs(elem, order, j1, j2, entry, p, add_p_level)

    def shape_second_deriv_axes(self, elem, order, i, a, b, p, add_p_level=True):
        """d2 R_i / (dx_a dx_b); the axis pair may be given in either order."""
        self._check_second_derivatives()
        self._check_direction(a)
        self._check_direction(b)
        entry = HessianEntry.from_axes(a, b)
        values = self._mixed_second_derivs(elem, order, a, b, entry, p, add_p_level)
        return self._pick(values, i)

    def _mixed_second_derivs(self, elem, order, j1, j2, entry, p, add_p_level):
        ref, w = self._setup(elem, order, add_p_level)
        W = w * ref.shape(p)
        Ga = w * ref.shape_deriv(j1, p)
        Gb = Ga if j1 == j2 else w * ref.shape_deriv(j2, p)
        H = w * ref.shape_second_deriv(int(entry), p)
        S = self._denominator(W, p)
        Gas, Gbs, Hs = Ga.sum(), Gb.sum(), H.sum()
        with np.errstate(divide="ignore", invalid="ignore"):
            return (S * H - Ga * Gbs - W * Hs - Gb * Gas
                    + 2 * Gas * W * Gbs / S) / S / S
