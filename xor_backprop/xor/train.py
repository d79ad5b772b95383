"""
Train the 2-2-1 network on XOR with per-sample gradient descent.

For every sample: reset parameter grads, build the graph, compute the squared
error 0.5*(o - y)^2 outside the graph and seed the backward pass with its
derivative (o - y), then step every parameter.

Usage:
    python -m xor_backprop.xor --epochs 10000 --learning-rate 0.5
"""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from ..autodiff import backward
from ..autodiff.core.engine import STRATEGIES
from ..logger import setup_logger
from .dataset import xor_arrays, xor_frame
from .network import XORNetwork
from .xor_config import TrainConfig, parse_seed

logger = logging.getLogger(__name__)


@dataclass
class TrainResult:
    network: XORNetwork
    history: pd.DataFrame   # columns: epoch, loss (mean over the four samples)


def train_step(network: XORNetwork, x1: float, x2: float, target: float,
               learning_rate: float, strategy: str = "topological") -> float:
    """One sample: forward, backward, update. Returns the sample loss."""
    network.zero_grad()
    out = network.forward(x1, x2)
    err = float(out.value) - target
    backward(out, seed=err, strategy=strategy)
    network.sgd_step(learning_rate)
    return 0.5 * err * err


def train(config: Optional[TrainConfig] = None,
          network: Optional[XORNetwork] = None) -> TrainResult:
    config = (config or TrainConfig()).validate()
    network = network if network is not None else XORNetwork(seed=config.seed)
    inputs, targets = xor_arrays()

    logger.info("Training XOR network: %d epochs, lr=%s, strategy=%s",
                config.epochs, config.learning_rate, config.strategy)

    rows = []
    for epoch in range(config.epochs):
        total = 0.0
        for (x1, x2), y in zip(inputs, targets):
            total += train_step(network, x1, x2, y, config.learning_rate, config.strategy)
        mean_loss = total / len(targets)
        rows.append((epoch, mean_loss))

        if config.log_every and (epoch + 1) % config.log_every == 0:
            logger.info("Epoch %05d | mean loss %.6f", epoch + 1, mean_loss,
                        extra={"epoch": epoch + 1, "loss": mean_loss})

    history = pd.DataFrame(rows, columns=["epoch", "loss"])
    return TrainResult(network=network, history=history)


def predict(network: XORNetwork) -> pd.DataFrame:
    """Dataset table plus the network output for each input pair."""
    df = xor_frame()
    df['output'] = [float(network.forward(x1, x2).value) for x1, x2 in zip(df['x1'], df['x2'])]
    return df


def plot_history(history: pd.DataFrame, save_path) -> None:
    """Save the loss curve as an image."""
    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(history['epoch'], history['loss'])
    ax.set_yscale('log')
    ax.set_xlabel('Epoch')
    ax.set_ylabel('Mean squared error (x0.5)')
    ax.set_title('XOR training loss')
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches='tight')
    plt.close(fig)


def parse_args(argv=None, defaults: Optional[TrainConfig] = None):
    """Parse command line arguments on top of env/default config."""
    d = defaults or TrainConfig.from_env()
    parser = argparse.ArgumentParser(
        description='Train a 2-2-1 sigmoid network on XOR',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--learning-rate', type=float, default=d.learning_rate,
                        help='Gradient-descent step size')
    parser.add_argument('--epochs', type=int, default=d.epochs,
                        help='Passes over the dataset')
    parser.add_argument('--seed', type=parse_seed, default=d.seed,
                        help='Initialiser seed ("none" for fresh entropy)')
    parser.add_argument('--log-every', type=int, default=d.log_every,
                        help='Log mean loss every N epochs (0 = off)')
    parser.add_argument('--strategy', choices=STRATEGIES, default=d.strategy,
                        help='Backward traversal strategy')
    parser.add_argument('--history-csv', type=str, default=d.history_csv,
                        help='Write per-epoch loss to this CSV file')
    parser.add_argument('--plot', dest='plot_path', type=str, default=d.plot_path,
                        help='Save the loss curve to this image file')
    parser.add_argument('--json-logs', action='store_true',
                        help='Emit logs as JSON lines')
    parser.add_argument('--log-level', default='INFO',
                        help='Logging level')
    return parser.parse_args(argv)


def main(argv=None) -> TrainResult:
    args = parse_args(argv)
    setup_logger("xor_backprop", level=args.log_level.upper(), json_format=args.json_logs)

    config = TrainConfig(
        learning_rate=args.learning_rate,
        epochs=args.epochs,
        seed=args.seed,
        log_every=args.log_every,
        strategy=args.strategy,
        history_csv=args.history_csv,
        plot_path=args.plot_path,
    )
    result = train(config)

    if config.history_csv:
        Path(config.history_csv).parent.mkdir(parents=True, exist_ok=True)
        result.history.to_csv(config.history_csv, index=False)
        logger.info("Loss history written to %s", config.history_csv)
    if config.plot_path:
        Path(config.plot_path).parent.mkdir(parents=True, exist_ok=True)
        plot_history(result.history, config.plot_path)
        logger.info("Loss curve saved to %s", config.plot_path)

    for row in predict(result.network).itertuples(index=False):
        print(f"Input: {row.x1:g} {row.x2:g} Output: {row.output:.6f}")

    return result
