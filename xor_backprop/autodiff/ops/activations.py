# xor_backprop/autodiff/ops/activations.py
from scipy.special import expit

from .primitive import apply_unary


def sigmoid(x):
    """
    Logistic activation s = 1 / (1 + exp(-x)).

    Derivative: s * (1 - s), evaluated at the same point. expit saturates to
    0/1 at extreme inputs instead of overflowing; NaN stays NaN.
    """
    return apply_unary(x, expit, lambda _, s: s * (1.0 - s), "sigmoid")
