# xor_backprop/autodiff/core/__init__.py

"""
Core public API of the value graph.

Exports:
    Node, Edge        : Scalar graph vertex and its recorded (parent, local derivative) pair.
    make_leaf         : Wrap an external number as a leaf.
    derived           : Build an operation's result node (extension hook).
    backward          : Propagate a seed gradient to every ancestor.
    zero_grad         : Reset gradients of a graph or of given nodes.
    grad, grads       : Convenience: gradients of a function at a point.
    value             : Convenience: numeric value of a Node.
"""

from .node import Node, Edge, make_leaf, derived
from .engine import backward, backward_topological, backward_recursive, zero_grad, STRATEGIES
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node", "Edge", "make_leaf", "derived",
    "backward", "backward_topological", "backward_recursive", "zero_grad", "STRATEGIES",
    "grad", "grads", "grads_list", "value",
]
