import matplotlib.pyplot as plt
import numpy as np
import pytest

from legtools.errors import (
    EmptyStringInputError, InvalidIndexError, InvalidLegendHandleError,
    InvalidLegendStringError, TooManyLegendsWarning, UnsupportedVersionError
)
from legtools.model import validation
from legtools.model.validation import handlecheck, indexcheck, strcheck, verchk


def test_verchk_accepts_installed_matplotlib():
    verchk()


def test_verchk_rejects_old_matplotlib(monkeypatch):
    monkeypatch.setattr(validation, "matplotlib_version", lambda: (3, 5))
    with pytest.raises(UnsupportedVersionError) as excinfo:
        verchk()
    assert excinfo.value.identifier == "legtools:UnsupportedMatplotlibVer"


def test_handlecheck_returns_legend(cos_sin):
    _, lh, _, _ = cos_sin
    assert handlecheck("append", lh) is lh


@pytest.mark.parametrize("value", [None, [], "legend", 42])
def test_handlecheck_rejects_non_legends(value):
    with pytest.raises(InvalidLegendHandleError) as excinfo:
        handlecheck("permute", value)
    assert excinfo.value.identifier == "legtools:permute:InvalidLegendHandle"


def test_handlecheck_rejects_replaced_legend(cos_sin):
    ax, lh, _, _ = cos_sin
    ax.legend(["a", "b"])
    with pytest.raises(InvalidLegendHandleError):
        handlecheck("remove", lh)


def test_handlecheck_keeps_first_of_many_legends(cos_sin):
    _, lh, _, _ = cos_sin
    fig2, ax2 = plt.subplots()
    ax2.plot([0, 1])
    other = ax2.legend(["line"])

    with pytest.warns(TooManyLegendsWarning):
        assert handlecheck("append", [lh, other]) is lh


def test_strcheck_single_string():
    assert strcheck("append", "cos") == ["cos"]


def test_strcheck_flattens_sequences():
    assert strcheck("append", ("a", ["b", "c"])) == ["a", "b", "c"]
    assert strcheck("append", np.array([["a", "b"], ["c", "d"]])) == ["a", "b", "c", "d"]


@pytest.mark.parametrize("value", [None, "", [], np.array([])])
def test_strcheck_empty(value):
    with pytest.raises(EmptyStringInputError) as excinfo:
        strcheck("adddummy", value)
    assert excinfo.value.identifier == "legtools:adddummy:EmptyStringInput"


@pytest.mark.parametrize("value", [5, ["a", None], {"a": 1}])
def test_strcheck_invalid_types(value):
    with pytest.raises(InvalidLegendStringError):
        strcheck("append", value)


def test_indexcheck_normalises():
    assert indexcheck("remove", 3) == [3]
    assert indexcheck("remove", np.int64(2)) == [2]
    assert indexcheck("remove", (0, 1)) == [0, 1]
    assert indexcheck("remove", np.array([[0], [2]])) == [0, 2]
    assert indexcheck("remove", []) == []


@pytest.mark.parametrize("value", [True, 1.5, "1", [0, None]])
def test_indexcheck_rejects_non_integers(value):
    with pytest.raises(InvalidIndexError):
        indexcheck("remove", value)
