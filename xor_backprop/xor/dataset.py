"""The four XOR training pairs."""

import numpy as np
import pandas as pd

XOR_INPUTS = np.array([[0.0, 0.0],
                       [0.0, 1.0],
                       [1.0, 0.0],
                       [1.0, 1.0]])
XOR_TARGETS = np.array([0.0, 1.0, 1.0, 0.0])


def xor_arrays():
    """Return copies of (inputs [4, 2], targets [4])."""
    return XOR_INPUTS.copy(), XOR_TARGETS.copy()


def xor_frame() -> pd.DataFrame:
    """Dataset as a table with columns x1, x2, target."""
    return pd.DataFrame({
        'x1': XOR_INPUTS[:, 0],
        'x2': XOR_INPUTS[:, 1],
        'target': XOR_TARGETS,
    })
