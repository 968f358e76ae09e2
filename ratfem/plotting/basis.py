import numpy as np
import matplotlib.pyplot as plt

from ratfem.fem.interface import all_shapes


def plot_rational_basis_1d(fe_type, elem, n_samples: int = 101, ax=None, add_p_level=True):
    """Plot every rational shape function of a 1D element over [-1, 1]."""
    if elem.dim != 1:
        raise ValueError(f"plot_rational_basis_1d needs a 1D element, got dim={elem.dim}")
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))
    xs = np.linspace(-1.0, 1.0, n_samples)
    R = all_shapes(fe_type, elem, xs, add_p_level=add_p_level)
    for i in range(R.shape[1]):
        ax.plot(xs, R[:, i], label=f"$R_{{{i}}}$ (w={elem.weight(i):g})")
    ax.plot(xs, R.sum(axis=1), 'k--', lw=0.8, label="sum")
    ax.set_xlabel(r"$\xi$")
    ax.set_title(f"{fe_type.family}, order {fe_type.order}")
    ax.legend(fontsize='small')
    return ax
