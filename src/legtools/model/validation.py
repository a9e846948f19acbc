"""
Argument Validation
===================
Guards shared by every legend operation.

Why is this file needed?
------------------------
1. Consistency: All operations reject bad legends, strings and indices with the
   same identifiers and messages.
2. Normalisation: Strings and indices arrive in many shapes (str, list, tuple,
   numpy arrays of any dimension) and leave as flat Python lists.
"""
from __future__ import annotations

import logging
import numbers
import warnings
from typing import Any, List, Sequence

import matplotlib
import numpy as np
from matplotlib.axes import Axes
from matplotlib.legend import Legend

from legtools.config import MIN_MATPLOTLIB_VERSION
from legtools.errors import (
    UnsupportedVersionError, InvalidLegendHandleError, EmptyStringInputError,
    InvalidLegendStringError, InvalidIndexError, TooManyLegendsWarning
)

logger = logging.getLogger(__name__)


def matplotlib_version() -> tuple[int, int]:
    """Major and minor version of the installed matplotlib."""
    return tuple(matplotlib.__version_info__[:2])


def verchk() -> None:
    """Raise if matplotlib is older than the oldest supported release."""
    if matplotlib_version() < MIN_MATPLOTLIB_VERSION:
        required = ".".join(str(v) for v in MIN_MATPLOTLIB_VERSION)
        raise UnsupportedVersionError(
            "legtools:UnsupportedMatplotlibVer",
            f"matplotlib releases prior to {required} are not supported."
        )


def is_attached(lh: Legend) -> bool:
    """True if the legend is still the live legend of its parent."""
    parent = lh.parent
    if isinstance(parent, Axes):
        return parent.get_legend() is lh
    return lh in getattr(parent, "legends", [])


def handlecheck(src: str, lh: Any) -> Legend:
    """
    Make sure `lh` is a usable legend.

    A list, tuple or array of legends is accepted; only the first one is kept
    and a warning is issued.

    Args:
        src: Name of the calling operation, used in identifiers.
        lh: Candidate legend handle(s).

    Returns:
        The legend to operate on.
    """
    if isinstance(lh, (list, tuple, np.ndarray)):
        candidates = list(np.ravel(np.asarray(lh, dtype=object)))
    else:
        candidates = [lh]

    valid = (
        len(candidates) > 0
        and all(isinstance(c, Legend) for c in candidates)
        and is_attached(candidates[0])
    )
    if not valid:
        raise InvalidLegendHandleError(
            f"legtools:{src}:InvalidLegendHandle",
            "Invalid legend handle provided."
        )

    # Keep first legend handle if more than one is passed
    if len(candidates) > 1:
        msg = f"{len(candidates)} Legend objects specified, modifying the first one only."
        logger.warning(msg)
        warnings.warn(TooManyLegendsWarning(f"legtools:{src}:TooManyLegends", msg), stacklevel=3)

    return candidates[0]


def strcheck(src: str, new_strings: Any) -> List[str]:
    """
    Normalise the strings to add to a legend into a flat list.

    A single `str` is one entry. Lists, tuples and numpy arrays of any shape
    are flattened in row-major order.
    """
    if new_strings is None or _is_empty(new_strings):
        raise EmptyStringInputError(
            f"legtools:{src}:EmptyStringInput",
            "No strings provided."
        )

    if isinstance(new_strings, str):
        return [new_strings]

    if isinstance(new_strings, np.ndarray):
        flat = new_strings.ravel().tolist()
    elif isinstance(new_strings, (list, tuple)):
        flat = _flatten(new_strings)
    else:
        flat = [new_strings]

    bad = [s for s in flat if not isinstance(s, str)]
    if bad:
        raise InvalidLegendStringError(
            f"legtools:{src}:InvalidLegendString",
            f"Invalid data type passed: {type(bad[0]).__name__}\n"
            f"Data must be any of the following types: str, list of str, tuple of str, numpy array of str"
        )
    return flat


def _is_empty(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.size == 0
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    return False


def _flatten(items: Sequence) -> list:
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        elif isinstance(item, np.ndarray):
            flat.extend(item.ravel().tolist())
        else:
            flat.append(item)
    return flat


def indexcheck(src: str, indices: Any) -> List[int]:
    """Normalise an integer or a sequence of integers into a list of ints."""
    if isinstance(indices, (numbers.Integral, np.integer)) and not isinstance(indices, bool):
        return [int(indices)]

    try:
        values = np.ravel(np.asarray(indices, dtype=object)).tolist()
    except (TypeError, ValueError) as e:
        raise InvalidIndexError(f"legtools:{src}:InvalidIndex", f"Invalid indices: {e}") from e

    result = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (numbers.Integral, np.integer)):
            raise InvalidIndexError(
                f"legtools:{src}:InvalidIndex",
                f"Indices must be integers, got {type(v).__name__}."
            )
        result.append(int(v))
    return result
