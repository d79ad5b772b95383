# xor_backprop/autodiff/ops/primitive.py
"""
Building blocks for operations on the value graph.

An operation computes its forward value and records, for each operand it
consumed, the exact partial derivative of the result w.r.t. that operand at
the operands' current values. The backward traversal needs nothing else, so a
new operation is just

    cube = unary_primitive(lambda x: x**3, lambda x, y: 3.0 * x * x, "cube")
"""
from typing import Any, Callable

import numpy as np

from ..core.node import Node, derived


def _as_node(x: Any) -> Node:
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else Node(x, op_tag="const")


def apply_unary(x: Any, f: Callable, dfdx: Callable, tag: str) -> Node:
    """
    Generic unary primitive:
      - out.value = f(x.value)
      - records one edge (x, dfdx(x.value, out.value))
    The derivative gets the output too, for rules like sigmoid' = s(1-s).
    """
    x = _as_node(x)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        y = f(x.value)
        return derived(y, [(x, dfdx(x.value, y))], tag)


def apply_binary(x: Any, y: Any, f: Callable, dfdx: Callable, dfdy: Callable, tag: str) -> Node:
    """
    Generic binary primitive:
      - out.value = f(x.value, y.value)
      - records edges (x, ∂out/∂x), (y, ∂out/∂y), in that order
    """
    x = _as_node(x)
    y = _as_node(y)
    a, b = x.value, y.value
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        return derived(f(a, b), [(x, dfdx(a, b)), (y, dfdy(a, b))], tag)


def unary_primitive(f: Callable, dfdx: Callable, tag: str) -> Callable[[Any], Node]:
    """Turn a forward rule and its derivative rule dfdx(x, out) into an operation."""
    def op(x):
        return apply_unary(x, f, dfdx, tag)
    op.__name__ = tag
    return op


def binary_primitive(f: Callable, dfdx: Callable, dfdy: Callable, tag: str) -> Callable[[Any, Any], Node]:
    """Turn a forward rule f(a, b) and partials dfdx(a, b), dfdy(a, b) into an operation."""
    def op(x, y):
        return apply_binary(x, y, f, dfdx, dfdy, tag)
    op.__name__ = tag
    return op
