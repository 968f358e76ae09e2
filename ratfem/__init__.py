"""ratfem: rational (NURBS-like) finite-element basis functions."""
from .config import Settings
from .core import Node, Element, edge_element, hex_element
from .fem import (HessianEntry, RationalBasis1D, RationalBasis3D, FEType,
                  get_rational_basis)
from . import errors

__version__ = "0.1.0"
__all__ = ['Settings', 'Node', 'Element', 'edge_element', 'hex_element',
           'HessianEntry', 'RationalBasis1D', 'RationalBasis3D', 'FEType',
           'get_rational_basis', 'errors']
