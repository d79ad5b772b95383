"""
XOR network and training loop.
"""

import logging

import numpy as np
import pandas as pd
import pytest
from scipy.special import expit

from xor_backprop.autodiff import backward
from xor_backprop.xor import (
    PARAM_NAMES, TrainConfig, XORNetwork, main, predict, train, train_step, xor_arrays, xor_frame,
)


def manual_forward(p, x1, x2):
    h1 = expit(x1 * p["w1"] + x2 * p["w2"] + p["b1"])
    h2 = expit(x1 * p["w3"] + x2 * p["w4"] + p["b2"])
    return h1, h2, expit(h1 * p["w5"] + h2 * p["w6"] + p["b3"])


def test_dataset():
    inputs, targets = xor_arrays()
    assert inputs.shape == (4, 2)
    assert list(targets) == [0.0, 1.0, 1.0, 0.0]
    df = xor_frame()
    assert list(df.columns) == ["x1", "x2", "target"]
    assert (df["target"] == (df["x1"] != df["x2"]).astype(float)).all()


def test_initialisation_is_seeded_uniform():
    a, b = XORNetwork(seed=7), XORNetwork(seed=7)
    assert a.state_dict() == b.state_dict()
    assert list(a.state_dict()) == list(PARAM_NAMES)
    assert all(0.0 <= v < 1.0 for v in a.state_dict().values())
    assert all(p.is_leaf for p in a.parameters())


def test_init_overrides_do_not_shift_other_draws():
    base = XORNetwork(seed=1).state_dict()
    net = XORNetwork(seed=1, init={"w1": 0.5})
    assert net["w1"].value == 0.5
    assert {k: v for k, v in net.state_dict().items() if k != "w1"} == \
           {k: v for k, v in base.items() if k != "w1"}


def test_unknown_init_parameter():
    with pytest.raises(ValueError):
        XORNetwork(init={"w7": 1.0})


def test_forward_matches_manual_computation():
    net = XORNetwork(seed=3)
    p = net.state_dict()
    for x1, x2 in [(0, 0), (0, 1), (1, 0), (1, 1)]:
        *_, o = manual_forward(p, x1, x2)
        assert float(net(x1, x2).value) == pytest.approx(o, rel=1e-12)


def test_backward_gives_hand_derived_output_layer_gradients():
    net = XORNetwork(seed=5)
    p = net.state_dict()
    h1, h2, o = manual_forward(p, 1.0, 0.0)
    err = o - 1.0

    out = net.forward(1.0, 0.0)
    backward(out, seed=float(out.value) - 1.0)

    delta = err * o * (1 - o)
    assert net["w5"].grad == pytest.approx(delta * h1)
    assert net["w6"].grad == pytest.approx(delta * h2)
    assert net["b3"].grad == pytest.approx(delta)
    assert net["w1"].grad == pytest.approx(delta * p["w5"] * h1 * (1 - h1) * 1.0)
    assert net["w2"].grad == 0.0


def test_train_step_updates_parameters():
    net = XORNetwork(seed=5)
    before = net.state_dict()
    loss = train_step(net, 1.0, 0.0, 1.0, learning_rate=0.5)
    *_, o = manual_forward(before, 1.0, 0.0)
    assert loss == pytest.approx(0.5 * (o - 1.0) ** 2)
    after = net.state_dict()
    assert after["b3"] == pytest.approx(before["b3"] - 0.5 * (o - 1.0) * o * (1 - o))
    assert after["w2"] == before["w2"]


def test_zero_grad_and_sgd_step():
    net = XORNetwork(init={"w1": 1.0})
    net["w1"].grad = np.float64(2.0)
    net.sgd_step(0.25)
    assert net["w1"].value == pytest.approx(0.5)
    net.zero_grad()
    assert all(p.grad == 0.0 for p in net.parameters())


def test_training_reduces_loss():
    result = train(TrainConfig(epochs=300, seed=0, log_every=0))
    history = result.history
    assert isinstance(history, pd.DataFrame)
    assert list(history.columns) == ["epoch", "loss"]
    assert len(history) == 300
    assert history["loss"].iloc[-1] < history["loss"].iloc[0]


def test_training_is_reproducible():
    a = train(TrainConfig(epochs=20, seed=11, log_every=0))
    b = train(TrainConfig(epochs=20, seed=11, log_every=0))
    assert a.network.state_dict() == b.network.state_dict()
    assert a.history["loss"].tolist() == b.history["loss"].tolist()


def test_strategies_train_identically():
    topo = train(TrainConfig(epochs=10, seed=2, log_every=0, strategy="topological"))
    rec = train(TrainConfig(epochs=10, seed=2, log_every=0, strategy="recursive"))
    t, r = topo.network.state_dict(), rec.network.state_dict()
    for name in PARAM_NAMES:
        assert t[name] == pytest.approx(r[name], rel=1e-9)


def test_train_rejects_bad_config():
    with pytest.raises(ValueError):
        train(TrainConfig(epochs=-1))


def test_predict_table():
    df = predict(XORNetwork(seed=0))
    assert list(df.columns) == ["x1", "x2", "target", "output"]
    assert df["output"].between(0.0, 1.0).all()


@pytest.fixture
def package_logger():
    logger = logging.getLogger("xor_backprop")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_main_prints_outputs_and_writes_artifacts(tmp_path, capsys, package_logger):
    csv_path = tmp_path / "history.csv"
    png_path = tmp_path / "loss.png"
    main(["--epochs", "5", "--log-every", "0",
          "--history-csv", str(csv_path), "--plot", str(png_path)])

    lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("Input:")]
    assert len(lines) == 4
    assert lines[0].startswith("Input: 0 0 Output: ")
    assert len(pd.read_csv(csv_path)) == 5
    assert png_path.stat().st_size > 0
