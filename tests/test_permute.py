import matplotlib.pyplot as plt
import numpy as np
import pytest

import legtools
from legtools.errors import (
    BadSubscriptError, InvalidIndexError, NotEnoughUniqueIndicesError, TooManyIndicesError
)
from legtools.model.entries import legend_options, plot_children


def _texts(lh):
    return [t.get_text() for t in lh.texts]


def test_permute_reorders_strings_and_artists(cos_sin):
    ax, lh, cos_line, sin_line = cos_sin

    new = legtools.permute(lh, [1, 0])

    assert _texts(new) == ["sin", "cos"]
    assert plot_children(new) == [sin_line, cos_line]


def test_permute_accepts_numpy_order(cos_sin, x):
    ax, lh, _, _ = cos_sin
    ax.plot(x, x)
    lh = legtools.append(lh, "line")

    new = legtools.permute(lh, np.array([2, 0, 1]))

    assert _texts(new) == ["line", "cos", "sin"]


def test_permute_twice_composes(cos_sin, x):
    ax, lh, _, _ = cos_sin
    ax.plot(x, x)
    lh = legtools.append(lh, "line")

    lh = legtools.permute(lh, [2, 1, 0])
    lh = legtools.permute(lh, [1, 2, 0])

    assert _texts(lh) == ["sin", "cos", "line"]


def test_permute_length_mismatch(cos_sin):
    _, lh, _, _ = cos_sin
    with pytest.raises(TooManyIndicesError) as excinfo:
        legtools.permute(lh, [0, 1, 2])
    assert excinfo.value.identifier == "legtools:permute:TooManyIndices"


def test_permute_repeated_index(cos_sin):
    _, lh, _, _ = cos_sin
    with pytest.raises(NotEnoughUniqueIndicesError) as excinfo:
        legtools.permute(lh, [0, 0])
    assert excinfo.value.identifier == "legtools:permute:NotEnoughUniqueIndices"


def test_permute_out_of_range(cos_sin):
    _, lh, _, _ = cos_sin
    with pytest.raises(BadSubscriptError):
        legtools.permute(lh, [0, 2])
    with pytest.raises(IndexError):
        legtools.permute(lh, [-1, 0])


def test_permute_rejects_float_indices(cos_sin):
    _, lh, _, _ = cos_sin
    with pytest.raises(InvalidIndexError):
        legtools.permute(lh, [1.0, 0.0])


def test_permute_keeps_legend_options(x):
    fig, ax = plt.subplots()
    ax.plot(x, np.cos(x))
    ax.plot(x, np.sin(x))
    lh = ax.legend(["cos", "sin"], loc="upper left", title="Curves", ncols=2, fontsize=8, frameon=False)
    lh.set_draggable(True)

    new = legtools.permute(lh, [1, 0])
    options = legend_options(new)

    assert options["loc"] == 2
    assert options["title"] == "Curves"
    assert options["ncols"] == 2
    assert options["frameon"] is False
    assert new.texts[0].get_fontsize() == 8
    assert new.get_draggable()


def test_permute_figure_legend(x):
    fig, (ax1, ax2) = plt.subplots(1, 2)
    left, = ax1.plot(x, np.cos(x), label="left")
    right, = ax2.plot(x, np.sin(x), label="right")
    lh = fig.legend()

    new = legtools.permute(lh, [1, 0])

    assert _texts(new) == ["right", "left"]
    assert plot_children(new) == [right, left]
    assert fig.legends == [new]
