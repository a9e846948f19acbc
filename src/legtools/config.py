"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
legend tools.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic strings (e.g. the dummy tag) and version
   numbers from being scattered throughout the code.
2. Consistency: The list of legend options that survive a rebuild is defined
   once and used by both the reader and the writer of legend state.

Exports:
    DUMMY_TAG (str): Tag stored on artists created by `adddummy`.
    MIN_MATPLOTLIB_VERSION (tuple): Oldest supported matplotlib release.
    LEGEND_SPACING_OPTIONS (tuple): Legend attributes copied verbatim on rebuild.
"""
from __future__ import annotations

from importlib.metadata import version, PackageNotFoundError
from typing import Tuple

from matplotlib.collections import Collection
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

try:
    APP_VERSION: str = version("legtools")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# Our dummy lines are recognised by this tag
DUMMY_TAG: str = "legtools.dummy"
DUMMY_ATTRIBUTE: str = "_legtools_tag"

# `ncols` keyword and `Legend._ncols` appeared in matplotlib 3.6
MIN_MATPLOTLIB_VERSION: Tuple[int, int] = (3, 6)

# Artist types a legend can label (containers are handled separately)
LEGEND_ARTIST_TYPES: tuple = (Line2D, Patch, Collection)

# Public Legend attributes which map 1:1 onto `Axes.legend` keywords
LEGEND_SPACING_OPTIONS: Tuple[str, ...] = (
    "borderpad",
    "labelspacing",
    "handlelength",
    "handleheight",
    "handletextpad",
    "borderaxespad",
    "columnspacing",
    "markerscale",
    "numpoints",
    "scatterpoints",
    "shadow",
)
