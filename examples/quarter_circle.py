"""Example: exact quarter circle from a rational quadratic edge"""
import numpy as np
import matplotlib.pyplot as plt
from ratfem import FEType, edge_element
from ratfem.fem import interface
from ratfem.integration import quadrature as q
from ratfem.integration.pre_tabulates import tabulate
from ratfem.plotting.basis import plot_rational_basis_1d

ctrl = np.array([[1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
elem = edge_element(2, weights=[1.0, 1/np.sqrt(2), 1.0])
fe = FEType(2)

xs = np.linspace(-1, 1, 41)
arc = interface.all_shapes(fe, elem, xs) @ ctrl
print('max radius error =', np.abs(np.linalg.norm(arc, axis=1) - 1.0).max())

# arc length by quadrature: |dx/dxi| integrated over [-1,1]
pts, wts = q.volume('edge', 8)
tab = tabulate(fe, elem, pts, deriv_order=1)
dx = np.einsum('qi,id->qd', tab['dphi'][:, :, 0], ctrl)
print('arc length =', wts @ np.linalg.norm(dx, axis=1), ' exact =', np.pi/2)

fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(10, 4))
plot_rational_basis_1d(fe, elem, ax=ax0)
ax1.plot(arc[:, 0], arc[:, 1], 'b-')
ax1.plot(ctrl[:, 0], ctrl[:, 1], 'ro--')
ax1.set_aspect('equal')
plt.show()
