"""Scalar reverse-mode autodiff engine and the XOR network trained with it."""

__version__ = "0.1.0"
