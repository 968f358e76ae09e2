"""ratfem.integration.pre_tabulates
Tabulate rational shape functions and their parametric derivatives at a set
of reference points (typically a quadrature rule) for one element.
"""
import logging
import numpy as np

from ratfem.fem.hessian import HessianEntry
from ratfem.fem.interface import basis_for

logger = logging.getLogger(__name__)


def tabulate(fe_type, elem, points, deriv_order: int = 2, add_p_level=True, settings=None):
    """
    Returns a dict with
      "phi"   : (n_qp, n_sf)
      "dphi"  : (n_qp, n_sf, dim)
      "d2phi" : (n_qp, n_sf, dim, dim)   only if deriv_order >= 2
    """
    if deriv_order not in (0, 1, 2):
        raise ValueError(f"deriv_order must be 0, 1 or 2, got {deriv_order}")
    basis = basis_for(fe_type, elem, settings)
    dim, order = basis.dim, fe_type.order
    points = np.asarray(points, dtype=float).reshape(-1, dim)
    n_qp = points.shape[0]

    phi = np.array([basis.all_shapes(elem, order, p, add_p_level) for p in points])
    n_sf = phi.shape[1] if n_qp else elem.n_nodes()
    out = {"phi": phi.reshape(n_qp, n_sf)}
    logger.debug(f"Tabulating {fe_type} on element {elem.id}: {n_qp} points, {n_sf} functions.")
    if deriv_order >= 1:
        dphi = np.empty((n_qp, n_sf, dim))
        for q, p in enumerate(points):
            for j in range(dim):
                dphi[q, :, j] = basis.all_shape_derivs(elem, order, j, p, add_p_level)
        out["dphi"] = dphi
    if deriv_order >= 2:
        d2phi = np.empty((n_qp, n_sf, dim, dim))
        n_entries = 1 if dim == 1 else len(HessianEntry)
        for q, p in enumerate(points):
            for j in range(n_entries):
                a, b = HessianEntry(j).axes
                vals = basis.all_shape_second_derivs(elem, order, j, p, add_p_level)
                d2phi[q, :, a, b] = vals
                d2phi[q, :, b, a] = vals
        out["d2phi"] = d2phi
    return out
