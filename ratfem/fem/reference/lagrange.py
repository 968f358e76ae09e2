from functools import lru_cache
import sympy as sp
import numpy as np

from .edge_bn import _eval_1d
from .hex_bn import _tensor_3d


@lru_cache(maxsize=None)
def _lagrange_basis_1d(n: int, max_deriv_order: int):
    """Return 1D Lagrange basis + derivatives as NUMPY-callable lambdas."""
    x = sp.symbols('x')
    nodes = np.linspace(-1.0, 1.0, n+1)
    L = []
    dL = {k: [] for k in range(max_deriv_order+1)}
    for i, xi in enumerate(nodes):
        num = 1
        den = 1.0
        for j, xj in enumerate(nodes):
            if i == j:
                continue
            num *= (x - xj)
            den *= (xi - xj)
        Li = sp.simplify(num/den)
        # lambdify shape & all required derivatives (SymPy -> numpy functions)
        L.append(sp.lambdify(x, Li, 'numpy'))
        for k in range(max_deriv_order+1):
            dL[k].append(sp.lambdify(x, sp.diff(Li, x, k), 'numpy'))
    return nodes, L, dL


@lru_cache(maxsize=None)
def edge_ln(n: int, max_deriv_order: int = 2):
    """Equispaced Lagrange L_n on [-1,1]; same return layout as ``edge_bn``."""
    _, L, dL = _lagrange_basis_1d(n, max_deriv_order)

    def shape(xi):
        return _eval_1d(L, xi)

    derivs = {}
    for a in range(max_deriv_order+1):
        def make(a=a):
            def d(xi):
                return _eval_1d(dL[a], xi)
            return d
        derivs[(a,)] = make()
    return shape, derivs


@lru_cache(maxsize=None)
def hex_ln(n: int, max_deriv_order: int = 2):
    """Tensor-product Q_n on [-1,1]^3; same return layout as ``hex_bn``."""
    _, L, dL = _lagrange_basis_1d(n, max_deriv_order)
    return _tensor_3d(L, dL, max_deriv_order)
