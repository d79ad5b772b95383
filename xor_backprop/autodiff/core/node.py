# xor_backprop/autodiff/core/node.py
from __future__ import annotations
from numbers import Real
from typing import Any, Iterable, NamedTuple, Optional, Tuple

import numpy as np


class Edge(NamedTuple):
    """
    One recorded operand of a derived node.

    Attributes
    ----------
    parent : Node
        The operand that contributed to the node's value.
    local_derivative : np.float64
        ∂(node.value)/∂(parent.value), evaluated when the node was built.
    """
    parent: "Node"
    local_derivative: np.float64


def _as_float64(x: Any) -> np.float64:
    # bool is a Real; NaN/Inf are accepted as-is
    if isinstance(x, Node) or not isinstance(x, Real):
        raise TypeError(
            f"Node only accepts real scalars (int, float, numpy floating), but got {type(x)}"
        )
    return np.float64(x)


class Node:
    """
    Scalar vertex of the differentiable value graph.

    Attributes
    ----------
    value : np.float64
        Forward value. Read-only for derived nodes; leaves may be reassigned
        (this is how parameters are updated between training steps).
    grad : np.float64
        Accumulated gradient of the objective w.r.t. this node. Starts at 0,
        is only incremented by backward traversals and must be reset by the
        caller (`zero_grad`) before reusing the node in a new pass.
    edges : Tuple[Edge, ...]
        One (parent, local_derivative) pair per operand, in operand order.
        Empty for leaves.
    op_tag : str
        Debug tag of the producing operation ("leaf", "add", "mul", ...).
    name : Optional[str]
        Optional display name.
    """

    __slots__ = ("_value", "grad", "_edges", "op_tag", "name", "__weakref__")

    def __init__(self, value: Any, edges: Iterable[Tuple["Node", Any]] = (),
                 op_tag: str = "leaf", name: Optional[str] = None):
        self._value = _as_float64(value)
        self.grad = np.float64(0.0)

        recorded = []
        for parent, local in edges:
            if not isinstance(parent, Node):
                raise TypeError(f"edge parent must be a Node, got {type(parent)}")
            recorded.append(Edge(parent, np.float64(local)))
        self._edges = tuple(recorded)

        self.op_tag = op_tag
        self.name = name

    @property
    def value(self) -> np.float64:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._edges:
            raise AttributeError(
                f"value of a derived node ({self.op_tag!r}) is read-only"
            )
        self._value = _as_float64(new_value)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def parents(self) -> Tuple["Node", ...]:
        return tuple(e.parent for e in self._edges)

    @property
    def is_leaf(self) -> bool:
        return not self._edges

    def zero_grad(self) -> None:
        self.grad = np.float64(0.0)

    def backward(self, seed: float = 1.0, *, strategy: str = "topological") -> None:
        """Propagate `seed` from this node to every ancestor (see engine.backward)."""
        from .engine import backward
        backward(self, seed, strategy=strategy)

    def __repr__(self):
        label = f", name={self.name!r}" if self.name is not None else ""
        return (f"Node(value={float(self._value)!r}, grad={float(self.grad)!r}, "
                f"op={self.op_tag!r}{label})")

    # Operator overloading for graph construction
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(other, self)

    def sigmoid(self) -> "Node":
        from ..ops.activations import sigmoid
        return sigmoid(self)


def make_leaf(value: Any, *, name: Optional[str] = None) -> Node:
    """Wrap an external number as a leaf: no edges, zero gradient."""
    return Node(value, name=name)


def derived(value: Any, edges: Iterable[Tuple[Node, Any]], op_tag: str) -> Node:
    """
    Build the result node of an operation.

    `edges` must hold exactly one (operand, ∂value/∂operand) pair per operand
    consumed, with the partial evaluated at the operands' current values.
    This is the only contract a new operation has to satisfy for the backward
    traversal to handle it.
    """
    return Node(value, edges, op_tag=op_tag)
