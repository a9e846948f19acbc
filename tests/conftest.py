import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def x():
    return np.linspace(-5, 5, 50)


@pytest.fixture
def cos_sin(x):
    """Axes with a cos and a sin line and a labels-only legend."""
    fig, ax = plt.subplots()
    cos_line, = ax.plot(x, np.cos(x))
    sin_line, = ax.plot(x, np.sin(x))
    lh = ax.legend(["cos", "sin"])
    return ax, lh, cos_line, sin_line
