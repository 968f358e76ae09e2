from functools import lru_cache
import sympy as sp
import numpy as np


@lru_cache(maxsize=None)
def _bernstein_basis_1d(n: int, max_deriv_order: int):
    """Return 1D Bernstein basis on [-1,1] + derivatives as NUMPY-callable lambdas.

    B_k(x) = C(n,k) ((1-x)/2)^(n-k) ((1+x)/2)^k,  k = 0..n
    """
    if n < 1:
        raise ValueError("Bernstein order n must be >= 1.")
    x = sp.symbols('x')
    s = (1 + x) / 2
    B = []
    dB = {k: [] for k in range(max_deriv_order+1)}
    for k in range(n + 1):
        Bk = sp.expand(sp.binomial(n, k) * (1 - s)**(n - k) * s**k)
        B.append(sp.lambdify(x, Bk, 'numpy'))
        for d in range(max_deriv_order+1):
            dB[d].append(sp.lambdify(x, sp.diff(Bk, x, d), 'numpy'))
    return B, dB


def _eval_1d(vals, z):
    # vals is a list of 1D lambdas; output shape (n+1,)
    return np.array([f(z) for f in vals], dtype=float)


@lru_cache(maxsize=None)
def edge_bn(n: int, max_deriv_order: int = 2):
    """
    Bernstein B_n on [-1,1].
    Returns: (shape_fn, deriv_fns) where
      shape_fn(xi) -> (n+1,)
      deriv_fns[(a,)](xi) -> (n+1,), a <= max_deriv_order
    """
    B, dB = _bernstein_basis_1d(n, max_deriv_order)

    def shape(xi):
        return _eval_1d(B, xi)

    derivs = {}
    for a in range(max_deriv_order+1):
        def make(a=a):
            def d(xi):
                return _eval_1d(dB[a], xi)
            return d
        derivs[(a,)] = make()
    return shape, derivs
