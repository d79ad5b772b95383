# xor_backprop/autodiff/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Each helper builds fresh leaves, so nothing
# has to be reset between calls.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

import numpy as np

from .node import Node, make_leaf
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _as_output(y: Any) -> Node:
    # f may return a constant; every partial is then zero
    return y if isinstance(y, Node) else make_leaf(y, name="y")


def grad(f: Callable[[Node], Node], x0: float, *,
         strategy: str = "topological") -> np.float64:
    """
    Derivative of a scalar function y=f(x) at x0, via one backward pass.

    Example
    -------
    grad(lambda x: x * x + 3 * x, 2.0) -> 7.0
    """
    x = make_leaf(x0, name="x")
    y = _as_output(f(x))
    backward(y, 1.0, strategy=strategy)
    return x.grad


def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, float], *,
          strategy: str = "topological") -> Dict[str, np.float64]:
    """
    Partials of y=f(vars) w.r.t. ALL inputs (dict form), from ONE backward pass.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a scalar Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: partial}  # same key order as `inputs`
    """
    vars_ad = {k: make_leaf(v, name=k) for k, v in inputs.items()}
    y = _as_output(f(vars_ad))
    backward(y, 1.0, strategy=strategy)
    return {k: vars_ad[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[float], *,
               strategy: str = "topological") -> List[np.float64]:
    """
    Same as grads(), with inputs given as a list.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs = [make_leaf(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _as_output(f(xs))
    backward(y, 1.0, strategy=strategy)
    return [x.grad for x in xs]
