"""ratfem.fem.interface
Entry points used by an assembly loop: pick the rational strategy for an
element's dimension and the requested family, then evaluate.
"""
from dataclasses import dataclass
import numpy as np

from ratfem.config import Settings
from ratfem.errors import UnsupportedBasis
from ratfem.fem.rational import RationalBasis1D, RationalBasis3D, _require_element

# (dim, rational family) -> (strategy class, underlying polynomial family)
RATIONAL_FAMILIES = {
    (1, "rational_bernstein"): (RationalBasis1D, "bernstein"),
    (3, "rational_bernstein"): (RationalBasis3D, "bernstein"),
    (1, "rational_lagrange"):  (RationalBasis1D, "lagrange"),
    (3, "rational_lagrange"):  (RationalBasis3D, "lagrange"),
}


@dataclass(frozen=True)
class FEType:
    order: int = 1
    family: str = "rational_bernstein"


def get_rational_basis(dim: int, family: str = "rational_bernstein", settings: Settings = None):
    try:
        cls, underlying = RATIONAL_FAMILIES[(dim, family)]
    except KeyError:
        raise UnsupportedBasis((dim, family)) from None
    return cls(underlying, settings=settings)


def basis_for(fe_type: FEType, elem, settings=None):
    _require_element(elem)
    return get_rational_basis(elem.dim, fe_type.family, settings)


def shape(fe_type, elem, i, p, add_p_level=True, settings=None):
    return basis_for(fe_type, elem, settings).shape(elem, fe_type.order, i, p, add_p_level)


def shape_deriv(fe_type, elem, i, j, p, add_p_level=True, settings=None):
    return basis_for(fe_type, elem, settings).shape_deriv(elem, fe_type.order, i, j, p, add_p_level)


def shape_second_deriv(fe_type, elem, i, j, p, add_p_level=True, settings=None):
    return basis_for(fe_type, elem, settings).shape_second_deriv(elem, fe_type.order, i, j, p, add_p_level)


def shape_grad(fe_type, elem, i, p, add_p_level=True, settings=None):
    return basis_for(fe_type, elem, settings).shape_grad(elem, fe_type.order, i, p, add_p_level)


def shape_hessian(fe_type, elem, i, p, add_p_level=True, settings=None):
    return basis_for(fe_type, elem, settings).shape_hessian(elem, fe_type.order, i, p, add_p_level)


def all_shapes(fe_type, elem, points, add_p_level=True, settings=None):
    """Values of every rational shape function at every point, shape (n_pts, n_sf)."""
    basis = basis_for(fe_type, elem, settings)
    return np.array([basis.all_shapes(elem, fe_type.order, p, add_p_level) for p in points])
