"""
Training configuration for the XOR network.

Defaults reproduce the classic setup (learning rate 0.5, 10000 epochs).
Environment variables override the defaults; command-line flags override both.
"""

import math
import os
from dataclasses import dataclass
from typing import Optional

from ..autodiff.core.engine import STRATEGIES


def parse_seed(text: str) -> Optional[int]:
    """Parse a seed: "none" or an empty string means fresh entropy, anything else must be an int."""
    return None if text.strip().lower() in ("", "none") else int(text)


@dataclass
class TrainConfig:
    """
    Attributes:
        learning_rate: Gradient-descent step size
        epochs: Passes over the four XOR samples
        seed: Seed for the parameter initialiser (None = fresh entropy)
        log_every: Log mean loss every N epochs (0 disables)
        strategy: Backward traversal strategy ("topological" or "recursive")
        history_csv: Optional path for the per-epoch loss table
        plot_path: Optional path for the loss-curve PNG
    """
    learning_rate: float = 0.5
    epochs: int = 10000
    seed: Optional[int] = 0
    log_every: int = 1000
    strategy: str = "topological"
    history_csv: Optional[str] = None
    plot_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "TrainConfig":
        """Defaults overridden by XOR_LEARNING_RATE, XOR_EPOCHS, XOR_SEED, XOR_LOG_EVERY, XOR_STRATEGY."""
        cfg = cls()
        lr = os.getenv("XOR_LEARNING_RATE")
        if lr is not None:
            cfg.learning_rate = float(lr)
        epochs = os.getenv("XOR_EPOCHS")
        if epochs is not None:
            cfg.epochs = int(epochs)
        seed = os.getenv("XOR_SEED")
        if seed is not None:
            cfg.seed = parse_seed(seed)
        log_every = os.getenv("XOR_LOG_EVERY")
        if log_every is not None:
            cfg.log_every = int(log_every)
        cfg.strategy = os.getenv("XOR_STRATEGY", cfg.strategy)
        return cfg

    def validate(self) -> "TrainConfig":
        if self.epochs <= 0:
            raise ValueError(f"epochs must be positive, got {self.epochs}")
        if not math.isfinite(self.learning_rate) or self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be a positive finite number, got {self.learning_rate}")
        if self.log_every < 0:
            raise ValueError(f"log_every must be >= 0, got {self.log_every}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy {self.strategy!r}; expected one of {STRATEGIES}")
        return self
