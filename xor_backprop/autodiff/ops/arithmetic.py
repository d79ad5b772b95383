# xor_backprop/autodiff/ops/arithmetic.py
from .primitive import apply_binary


def add(x, y):
    """Sum; ∂/∂x = ∂/∂y = 1 whatever the operand values."""
    return apply_binary(x, y, lambda a, b: a + b, lambda a, b: 1.0, lambda a, b: 1.0, "add")


def multiply(x, y):
    """Product; each factor's local derivative is the other factor's current value."""
    return apply_binary(x, y, lambda a, b: a * b, lambda a, b: b, lambda a, b: a, "mul")


mul = multiply
