"""
2-2-1 sigmoid network for XOR, built on the scalar value graph.

    h1 = σ(x1*w1 + x2*w2 + b1)
    h2 = σ(x1*w3 + x2*w4 + b2)
    o  = σ(h1*w5 + h2*w6 + b3)

Parameters are leaf Nodes shared by every forward pass; their gradients
accumulate across passes until `zero_grad` is called.
"""

from typing import Dict, List, Mapping, Optional

import numpy as np

from ..autodiff import Node, make_leaf, add, multiply, sigmoid

# Draw order of the initialiser
PARAM_NAMES = ("w1", "w2", "w3", "w4", "b1", "b2", "w5", "w6", "b3")


class XORNetwork:
    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None,
                 init: Optional[Mapping[str, float]] = None):
        """
        Args:
            seed: Seed for a fresh generator (ignored when `rng` is given)
            rng: Generator used for the uniform [0, 1) initialisation
            init: Explicit starting values for some or all parameters; the
                  generator is still drawn for every parameter so the other
                  values do not depend on which ones were overridden
        """
        rng = rng if rng is not None else np.random.default_rng(seed)
        init = dict(init or {})
        unknown = set(init) - set(PARAM_NAMES)
        if unknown:
            raise ValueError(f"unknown parameters: {sorted(unknown)}")

        self.params: Dict[str, Node] = {}
        for name in PARAM_NAMES:
            drawn = rng.random()
            self.params[name] = make_leaf(init.get(name, drawn), name=name)

    def __getitem__(self, name: str) -> Node:
        return self.params[name]

    def parameters(self) -> List[Node]:
        return list(self.params.values())

    def named_parameters(self):
        return list(self.params.items())

    def state_dict(self) -> Dict[str, float]:
        return {name: float(p.value) for name, p in self.params.items()}

    def zero_grad(self):
        for p in self.params.values():
            p.zero_grad()

    def sgd_step(self, learning_rate: float):
        """Plain gradient descent: p.value -= lr * p.grad."""
        for p in self.params.values():
            p.value = p.value - learning_rate * p.grad

    def forward(self, x1, x2) -> Node:
        """Build the graph for one input pair and return the output node."""
        p = self.params
        x1 = x1 if isinstance(x1, Node) else make_leaf(x1, name="x1")
        x2 = x2 if isinstance(x2, Node) else make_leaf(x2, name="x2")

        h1 = sigmoid(add(add(multiply(x1, p["w1"]), multiply(x2, p["w2"])), p["b1"]))
        h2 = sigmoid(add(add(multiply(x1, p["w3"]), multiply(x2, p["w4"])), p["b2"]))
        return sigmoid(add(add(multiply(h1, p["w5"]), multiply(h2, p["w6"])), p["b3"]))

    __call__ = forward

    def __repr__(self):
        values = ", ".join(f"{k}={v:.4f}" for k, v in self.state_dict().items())
        return f"XORNetwork({values})"
