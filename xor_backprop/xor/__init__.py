"""
XOR harness: fixed dataset, 2-2-1 sigmoid network and a gradient-descent
training loop driving the value-graph engine.
"""

from .xor_config import TrainConfig, parse_seed
from .dataset import XOR_INPUTS, XOR_TARGETS, xor_arrays, xor_frame
from .network import XORNetwork, PARAM_NAMES
from .train import TrainResult, train, train_step, predict, plot_history, main

__all__ = ['TrainConfig', 'parse_seed',
           'XOR_INPUTS', 'XOR_TARGETS', 'xor_arrays', 'xor_frame',
           'XORNetwork', 'PARAM_NAMES',
           'TrainResult', 'train', 'train_step', 'predict', 'plot_history', 'main']
