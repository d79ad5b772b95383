# xor_backprop/autodiff/ops/__init__.py

# Convenience re-exports so users can do: from xor_backprop.autodiff.ops import add, sigmoid, ...
from .primitive import apply_unary, apply_binary, unary_primitive, binary_primitive
from .arithmetic import add, multiply, mul
from .activations import sigmoid

__all__ = [
    "add", "multiply", "mul",
    "sigmoid",
    "apply_unary", "apply_binary", "unary_primitive", "binary_primitive",
]
