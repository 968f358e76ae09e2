# ratfem.fem.reference
"""
Order-agnostic reference-element factory for the underlying (non-rational)
polynomial bases.
"""
from functools import lru_cache
from importlib import import_module
import logging
import numpy as np

from ratfem.core.topology import ELEMENT_DIMS
from ratfem.errors import UnsupportedBasis
from ratfem.fem.hessian import HessianEntry, check_axis

logger = logging.getLogger(__name__)

# (element_type, family) -> (module, builder)
_BUILDERS = {
    ("edge", "bernstein"): ("ratfem.fem.reference.edge_bn", "edge_bn"),
    ("hex",  "bernstein"): ("ratfem.fem.reference.hex_bn", "hex_bn"),
    ("edge", "lagrange"):  ("ratfem.fem.reference.lagrange", "edge_ln"),
    ("hex",  "lagrange"):  ("ratfem.fem.reference.lagrange", "hex_ln"),
}


def _as_point(p, dim):
    """Hashable reference point of length ``dim``."""
    coords = np.atleast_1d(np.asarray(p, dtype=float)).ravel()
    if coords.shape[0] != dim:
        raise ValueError(f"Expected a {dim}-component reference point, got {p!r}.")
    return tuple(float(c) for c in coords)


def _frozen(values):
    """Read-only float table; cached tables are shared by every caller."""
    arr = np.array(values, dtype=float).ravel()
    arr.setflags(write=False)
    return arr

class Ref:
    def __init__(self, dim, n_sf, shape_lambda, deriv_lambdas):
        self.dim = dim
        self.n_sf = n_sf
        self.shape_lambda = shape_lambda
        self.deriv_lambdas = deriv_lambdas

    def n_shape_functions(self) -> int:
        return self.n_sf

    # --- all shape functions at once -------------------------------------
    def shape(self, p):
        return self._shape(_as_point(p, self.dim))

    def shape_deriv(self, j, p):
        check_axis(j, self.dim)
        alpha = tuple(1 if a == j else 0 for a in range(self.dim))
        return self.derivative(_as_point(p, self.dim), alpha)

    def shape_second_deriv(self, j, p):
        entry = HessianEntry.coerce(j, self.dim)
        alpha = [0] * self.dim
        for a in entry.axes:
            alpha[a] += 1
        return self.derivative(_as_point(p, self.dim), tuple(alpha))

    # --- one shape function ----------------------------------------------
    def value(self, sf, p):
        return self.shape(p)[sf]

    def first_derivative(self, sf, j, p):
        return self.shape_deriv(j, p)[sf]

    def second_derivative(self, sf, j, p):
        return self.shape_second_deriv(j, p)[sf]

    # --- cached tables ----------------------------------------------------
    @lru_cache(maxsize=None)
    def _shape(self, pt):
        return _frozen(self.shape_lambda(*pt))

    @lru_cache(maxsize=None)
    def derivative(self, pt, alpha):
        if alpha not in self.deriv_lambdas:
            raise ValueError(f"Derivative order {alpha} not computed. "
                             f"Adjust max_deriv_order >= {sum(alpha)}.")
        return _frozen(self.deriv_lambdas[alpha](*pt))


@lru_cache(maxsize=None)
def get_reference(element_type: str, family: str = "bernstein", poly_order: int = 1,
                  max_deriv_order: int = 2):
    try:
        module_name, builder = _BUILDERS[(element_type, family)]
    except KeyError:
        raise UnsupportedBasis((element_type, family)) from None
    if poly_order < 1:
        raise ValueError(f"Polynomial order must be >= 1, got {poly_order}.")
    dim = ELEMENT_DIMS[element_type]
    logger.debug(f"Building {family} reference basis for {element_type}, order {poly_order}.")
    shape_l, deriv_lambdas = getattr(import_module(module_name), builder)(poly_order, max_deriv_order)
    return Ref(dim, (poly_order + 1) ** dim, shape_l, deriv_lambdas)
