"""
Training configuration defaults, environment overrides and validation.
"""

import pytest

from xor_backprop.xor import TrainConfig, parse_seed
from xor_backprop.xor.train import parse_args


def test_defaults():
    cfg = TrainConfig()
    assert cfg.learning_rate == 0.5
    assert cfg.epochs == 10000
    assert cfg.strategy == "topological"
    assert cfg.validate() is cfg


def test_from_env(monkeypatch):
    monkeypatch.setenv("XOR_LEARNING_RATE", "0.25")
    monkeypatch.setenv("XOR_EPOCHS", "50")
    monkeypatch.setenv("XOR_SEED", "none")
    monkeypatch.setenv("XOR_LOG_EVERY", "0")
    monkeypatch.setenv("XOR_STRATEGY", "recursive")
    cfg = TrainConfig.from_env()
    assert cfg.learning_rate == 0.25
    assert cfg.epochs == 50
    assert cfg.seed is None
    assert cfg.log_every == 0
    assert cfg.strategy == "recursive"


def test_from_env_without_overrides(monkeypatch):
    for key in ("XOR_LEARNING_RATE", "XOR_EPOCHS", "XOR_SEED", "XOR_LOG_EVERY", "XOR_STRATEGY"):
        monkeypatch.delenv(key, raising=False)
    assert TrainConfig.from_env() == TrainConfig()


@pytest.mark.parametrize("overrides", [
    {"epochs": 0},
    {"learning_rate": 0.0},
    {"learning_rate": float("nan")},
    {"log_every": -1},
    {"strategy": "memoized"},
])
def test_validate_rejects(overrides):
    with pytest.raises(ValueError):
        TrainConfig(**overrides).validate()


@pytest.mark.parametrize("text,expected", [("7", 7), ("none", None), ("None", None), ("", None), (" 3 ", 3)])
def test_parse_seed(text, expected):
    assert parse_seed(text) == expected


def test_parse_seed_rejects_garbage():
    with pytest.raises(ValueError):
        parse_seed("seven")


def test_cli_seed_accepts_none():
    assert parse_args(["--seed", "none"], defaults=TrainConfig()).seed is None
    assert parse_args(["--seed", "42"], defaults=TrainConfig()).seed == 42
    assert parse_args([], defaults=TrainConfig()).seed == 0


def test_cli_seed_rejects_garbage():
    with pytest.raises(SystemExit):
        parse_args(["--seed", "seven"], defaults=TrainConfig())
