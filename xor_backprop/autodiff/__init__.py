# xor_backprop/autodiff/__init__.py
# Reverse-mode automatic differentiation over scalar values

from .core.node import Node, Edge, make_leaf, derived
from .core.engine import backward, backward_topological, backward_recursive, zero_grad
from .core.seeds import grad, grads, grads_list, value
from .ops import add, multiply, mul, sigmoid, unary_primitive, binary_primitive

# Graph inspection
from .core import graph_utils
from .core.graph_utils import get_graph_stats, print_graph_summary

__all__ = [
    # Core
    'Node',
    'Edge',
    'make_leaf',
    'derived',
    # Engine
    'backward',
    'backward_topological',
    'backward_recursive',
    'zero_grad',
    # Operations
    'add',
    'multiply',
    'mul',
    'sigmoid',
    'unary_primitive',
    'binary_primitive',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'graph_utils',
    'get_graph_stats',
    'print_graph_summary',
]
