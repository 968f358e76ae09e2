from .hessian import HessianEntry
from .rational import RationalBasis, RationalBasis1D, RationalBasis3D
from .interface import FEType, get_rational_basis, RATIONAL_FAMILIES
__all__=['HessianEntry','RationalBasis','RationalBasis1D','RationalBasis3D',
         'FEType','get_rational_basis','RATIONAL_FAMILIES']
