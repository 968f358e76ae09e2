from functools import lru_cache
import numpy as np

from .edge_bn import _bernstein_basis_1d, _eval_1d


def _tensor_3d(L, dL, max_deriv_order):
    """
    Tensor-product a 1D family onto [-1,1]^3.
    Stacking order is (zeta outer, eta, xi inner): index = k*(n+1)^2 + j*(n+1) + i
    """
    def _combine(lx, ly, lz):
        return np.einsum('k,j,i->kji', lz, ly, lx).reshape(-1)

    def shape(xi, eta, zeta):
        return _combine(_eval_1d(L, xi), _eval_1d(L, eta), _eval_1d(L, zeta))

    derivs = {}
    for ax in range(max_deriv_order+1):
        for ay in range(max_deriv_order+1):
            for az in range(max_deriv_order+1):
                if ax + ay + az > max_deriv_order:
                    continue
                def make(ax=ax, ay=ay, az=az):
                    def d(xi, eta, zeta):
                        return _combine(_eval_1d(dL[ax], xi),
                                        _eval_1d(dL[ay], eta),
                                        _eval_1d(dL[az], zeta))
                    return d
                derivs[(ax, ay, az)] = make()
    return shape, derivs


@lru_cache(maxsize=None)
def hex_bn(n: int, max_deriv_order: int = 2):
    """
    Tensor-product Bernstein on [-1,1]^3.
    Returns: (shape_fn, deriv_fns) where
      shape_fn(xi,eta,zeta) -> ( (n+1)^3, )
      deriv_fns[(ax,ay,az)](xi,eta,zeta) -> ( (n+1)^3, ), ax+ay+az<=max_deriv_order
    """
    B, dB = _bernstein_basis_1d(n, max_deriv_order)
    return _tensor_3d(B, dB, max_deriv_order)
