import matplotlib.pyplot as plt
import numpy as np
import pytest

import legtools
from legtools.errors import BadSubscriptError, TooManyIndicesError
from legtools.model.entries import legend_entries, plot_children


def _texts(lh):
    return [t.get_text() for t in lh.texts]


def test_remove_single_entry(cos_sin):
    ax, lh, cos_line, sin_line = cos_sin

    new = legtools.remove(lh, 0)

    assert _texts(new) == ["sin"]
    assert plot_children(new) == [sin_line]
    # Regular artists stay on the axes
    assert cos_line in ax.lines


def test_remove_with_duplicate_indices(cos_sin, x):
    ax, lh, _, _ = cos_sin
    ax.plot(x, x)
    lh = legtools.append(lh, "line")

    new = legtools.remove(lh, [1, 1])

    assert _texts(new) == ["cos", "line"]


def test_remove_all_entries_deletes_legend(cos_sin):
    ax, lh, _, _ = cos_sin

    assert legtools.remove(lh, [1, 0]) is None
    assert ax.get_legend() is None


def test_remove_deletes_dummy_lines(cos_sin):
    ax, lh, _, _ = cos_sin
    lh = legtools.adddummy(lh, "dummy")
    dummy = plot_children(lh)[2]

    new = legtools.remove(lh, 2)

    assert _texts(new) == ["cos", "sin"]
    assert dummy not in ax.lines


def test_remove_all_entries_deletes_dummy_lines(cos_sin):
    ax, lh, _, _ = cos_sin
    lh = legtools.adddummy(lh, ["a", "b"])

    assert legtools.remove(lh, np.arange(4)) is None
    assert len(ax.lines) == 2


def test_remove_too_many_indices(cos_sin):
    _, lh, _, _ = cos_sin
    with pytest.raises(TooManyIndicesError) as excinfo:
        legtools.remove(lh, [0, 1, 2])
    assert excinfo.value.identifier == "legtools:remove:TooManyIndices"


def test_remove_index_out_of_range(cos_sin):
    _, lh, _, _ = cos_sin
    with pytest.raises(BadSubscriptError) as excinfo:
        legtools.remove(lh, 5)
    assert excinfo.value.identifier == "legtools:remove:BadSubscript"


def test_removed_artist_drops_its_entry(cos_sin):
    ax, lh, cos_line, sin_line = cos_sin
    lh = legtools.permute(lh, [0, 1])
    cos_line.remove()

    assert legend_entries(lh) == ([sin_line], ["sin"])
    assert legtools.remove(lh, 0) is None


def test_remove_negative_index(cos_sin):
    _, lh, _, _ = cos_sin
    with pytest.raises(BadSubscriptError):
        legtools.remove(lh, -1)


def test_remove_nothing_keeps_legend(cos_sin):
    ax, lh, _, _ = cos_sin

    new = legtools.remove(lh, [])

    assert _texts(new) == ["cos", "sin"]
    assert ax.get_legend() is new


def test_remove_nothing_from_empty_legend(x):
    fig, ax = plt.subplots()
    ax.plot(x, x)
    lh = ax.legend([])

    new = legtools.remove(lh, [])

    assert new is not None
    assert ax.get_legend() is new
    assert _texts(new) == []
