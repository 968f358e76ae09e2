"""ratfem.fem.hessian
Linear encoding of the six distinct entries of a symmetric 3x3 Hessian.
"""
from enum import IntEnum
import numbers

import numpy as np

from ratfem.errors import InvalidDirectionIndex


class HessianEntry(IntEnum):
    XX = 0   # d2/dxi2
    XY = 1   # d2/dxi deta
    YY = 2   # d2/deta2
    XZ = 3   # d2/dxi dzeta
    YZ = 4   # d2/deta dzeta
    ZZ = 5   # d2/dzeta2

    @property
    def axes(self):
        return _AXES[self]

    @classmethod
    def from_axes(cls, a: int, b: int) -> "HessianEntry":
        """Entry for the axis pair (a, b); the pair is unordered."""
        key = (min(a, b), max(a, b))
        for entry, axes in _AXES.items():
            if axes == key:
                return entry
        raise InvalidDirectionIndex(f"No Hessian entry for axis pair ({a}, {b}).")

    @classmethod
    def coerce(cls, j, dim: int = 3) -> "HessianEntry":
        """Validate a raw second-derivative index for a ``dim``-dimensional element."""
        n_valid = 1 if dim == 1 else len(cls)
        if not _is_index(j):
            raise InvalidDirectionIndex(f"Second-derivative index {j!r} is not an integer.")
        j = int(j)
        if not 0 <= j < n_valid:
            raise InvalidDirectionIndex(
                f"Second-derivative index {j} out of range [0, {n_valid}) for dim={dim}."
            )
        return cls(j)


def _is_index(j):
    return isinstance(j, (numbers.Integral, np.integer)) and not isinstance(j, (bool, np.bool_))


def check_axis(j, dim: int):
    """Validate a first-derivative direction for a ``dim``-dimensional element."""
    if not _is_index(j) or not 0 <= j < dim:
        raise InvalidDirectionIndex(
            f"First-derivative direction {j!r} out of range [0, {dim}) for dim={dim}."
        )
    return int(j)


_AXES = {
    HessianEntry.XX: (0, 0),
    HessianEntry.XY: (0, 1),
    HessianEntry.YY: (1, 1),
    HessianEntry.XZ: (0, 2),
    HessianEntry.YZ: (1, 2),
    HessianEntry.ZZ: (2, 2),
}
