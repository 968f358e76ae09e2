import numpy as np
from dataclasses import dataclass
from typing import Tuple, Sequence

# element_type -> parametric dimension
ELEMENT_DIMS = {"edge": 1, "hex": 3}


class Node:
    def __init__(self, id, x, y=0.0, z=0.0, weight=1.0, tag=None):
        self.id = id
        self.x = x
        self.y = y
        self.z = z
        self.weight = float(weight)
        self.tag = tag

    def __repr__(self):
        return (f"Node {self.id}({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, "
                f"w={self.weight:.3f}, tag='{self.tag}')")

    def __getitem__(self, idx):
        if   idx == 0: return self.x
        elif idx == 1: return self.y
        elif idx == 2: return self.z
        raise IndexError("Node supports indices 0 (x), 1 (y) and 2 (z)")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


@dataclass(slots=True)
class Element:
    id: int                           # Element ID
    nodes: Tuple[Node, ...]           # Nodes in local order
    element_type: str = "edge"
    p_level: int = 0                  # extra polynomial order from p-refinement
    tag: str = ""

    def __post_init__(self):
        if self.element_type not in ELEMENT_DIMS:
            raise KeyError(self.element_type)
        if self.p_level < 0:
            raise ValueError(f"p_level must be non-negative, got {self.p_level}")
        self.nodes = tuple(self.nodes)

    @property
    def dim(self) -> int:
        return ELEMENT_DIMS[self.element_type]

    def n_nodes(self) -> int:
        return len(self.nodes)

    def weight(self, n: int) -> float:
        """Rational weight attached to local node ``n``."""
        return self.nodes[n].weight

    def weights(self) -> np.ndarray:
        return np.array([nd.weight for nd in self.nodes], dtype=float)


# ---------------------------------------------------------------------------
# Reference-shaped element factories
# ---------------------------------------------------------------------------
def _check_weights(weights, n_expected):
    if weights is None:
        return [1.0] * n_expected
    weights = list(weights)
    if len(weights) != n_expected:
        raise ValueError(f"Expected {n_expected} weights, got {len(weights)}.")
    return weights


def edge_element(order: int, weights: Sequence[float] = None, p_level: int = 0, id: int = 0) -> Element:
    """Edge on [-1,1] with ``order+1`` equispaced control nodes."""
    if order < 1:
        raise ValueError(f"order must be >= 1, got {order}")
    n = order + 1
    weights = _check_weights(weights, n)
    xs = np.linspace(-1.0, 1.0, n)
    nodes = tuple(Node(k, float(x), weight=w) for k, (x, w) in enumerate(zip(xs, weights)))
    return Element(id, nodes, element_type="edge", p_level=p_level)


def hex_element(order: int, weights: Sequence[float] = None, p_level: int = 0, id: int = 0) -> Element:
    """
    Hex on [-1,1]^3 with ``(order+1)^3`` control nodes.
    Stacking order is (zeta outer, eta, xi inner): index = k*(n+1)^2 + j*(n+1) + i
    """
    if order < 1:
        raise ValueError(f"order must be >= 1, got {order}")
    n = order + 1
    weights = _check_weights(weights, n ** 3)
    xs = np.linspace(-1.0, 1.0, n)
    nodes = []
    for k, z in enumerate(xs):
        for j, y in enumerate(xs):
            for i, x in enumerate(xs):
                idx = k * n * n + j * n + i
                nodes.append(Node(idx, float(x), float(y), float(z), weight=weights[idx]))
    return Element(id, tuple(nodes), element_type="hex", p_level=p_level)
