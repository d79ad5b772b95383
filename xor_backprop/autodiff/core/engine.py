# xor_backprop/autodiff/core/engine.py
"""
Backward traversal over the value graph.

Starting from a node and a seed gradient, every ancestor's `grad` is increased
by seed * Σ_paths Π(local derivatives along the path), which is the
multivariate chain rule. Two strategies give the same numbers (up to
floating-point summation order):

    "topological"  (default) one ordering pass, then each node propagates
                   once; O(nodes + edges).
    "recursive"    one visit per root-to-node path, like a plain recursive
                   implementation; cost grows with the number of paths.
                   Uses an explicit stack, so depth is not bounded by the
                   recursion limit.

Every contribution is propagated, zeros included, so a zero upstream
gradient meeting an infinite local derivative yields NaN. Only the seed of
the current pass flows through the graph: grads left on intermediate nodes
by earlier passes are not re-propagated, but they are still added to, so
reset them with `zero_grad` between passes.

Not thread-safe: concurrent passes touching the same nodes (e.g. shared
weights) race on `grad`.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, Union

import numpy as np

from .node import Node
from .graph_utils import iter_nodes, topological_order

logger = logging.getLogger(__name__)

STRATEGIES = ("topological", "recursive")


def backward(node: Node, seed: float = 1.0, *, strategy: str = "topological") -> None:
    """
    Accumulate `seed` into `node.grad` and propagate it to every ancestor.

    Args:
        node: where the traversal starts (the objective, or a node whose
              upstream gradient is known).
        seed: upstream gradient; 1.0 when `node` is the scalar objective.
        strategy: "topological" or "recursive".

    Raises:
        ValueError: unknown strategy.
    """
    if strategy == "topological":
        backward_topological(node, seed)
    elif strategy == "recursive":
        backward_recursive(node, seed)
    else:
        raise ValueError(f"unknown backward strategy {strategy!r}; expected one of {STRATEGIES}")


def backward_topological(node: Node, seed: float = 1.0) -> None:
    order = topological_order(node)
    logger.debug("backward_topological: %d nodes, seed=%r", len(order), seed)

    # Pass-local upstream gradients; a node is reached only after all of its
    # consumers in this subgraph have contributed.
    upstream: Dict[Node, np.float64] = {node: np.float64(seed)}
    with np.errstate(over="ignore", invalid="ignore"):
        for v in reversed(order):
            g = upstream.pop(v, None)
            if g is None:
                continue
            v.grad = v.grad + g
            for parent, local in v.edges:
                upstream[parent] = upstream.get(parent, 0.0) + g * local


def backward_recursive(node: Node, seed: float = 1.0) -> None:
    visits = 0
    stack = [(node, np.float64(seed))]
    with np.errstate(over="ignore", invalid="ignore"):
        while stack:
            v, g = stack.pop()
            visits += 1
            v.grad = v.grad + g
            # reversed push keeps the recorded edge order on pop
            for parent, local in reversed(v.edges):
                stack.append((parent, g * local))
    logger.debug("backward_recursive: %d visits, seed=%r", visits, seed)


def zero_grad(target: Union[Node, Iterable[Node]]) -> None:
    """
    Reset gradients to zero.

    Given a single Node, resets every node reachable from it (like clearing
    all adjoints of a graph); given an iterable, resets exactly those nodes.
    """
    nodes = iter_nodes(target) if isinstance(target, Node) else target
    for v in nodes:
        v.zero_grad()
