"""ratfem.integration.quadrature
Gauss–Legendre rules on the reference edge [-1,1] and hex [-1,1]^3.
"""
import numpy as np
from functools import lru_cache
from numpy.polynomial.legendre import leggauss


# -------------------------------------------------------------------------
# 1‑D Gauss–Legendre
# -------------------------------------------------------------------------
def gauss_legendre(order: int):
    if order < 1:
        raise ValueError(order)
    return leggauss(order)  # (points, weights)

# -------------------------------------------------------------------------
# Tensor‑product construction helpers
# -------------------------------------------------------------------------
@lru_cache(maxsize=None)
def edge_rule(order: int):
    xi, wi = gauss_legendre(order)
    return xi.reshape(-1, 1), wi

@lru_cache(maxsize=None)
def hex_rule(order: int):
    xi, wi = gauss_legendre(order)
    pts = np.array([[x, y, z] for z in xi for y in xi for x in xi])
    wts = np.array([wx * wy * wz for wz in wi for wy in wi for wx in wi])
    return pts, wts

def volume(element_type: str, order: int = 2):
    if element_type == "edge":
        return edge_rule(order)
    if element_type == "hex":
        return hex_rule(order)
    raise KeyError(element_type)
