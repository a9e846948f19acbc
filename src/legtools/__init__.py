"""
Tools to modify existing matplotlib legends.

    >>> lh = ax.legend(["cos", "sin"])
    >>> lh = legtools.adddummy(lh, "dummy", "ok")
    >>> lh = legtools.permute(lh, [2, 1, 0])
    >>> lh = legtools.remove(lh, 1)
    >>> lh = legtools.append(lh, "sin")

Each operation replaces the legend and returns the new one.
"""
from legtools.config import APP_VERSION as __version__
from legtools.controller.legappend import legappend
from legtools.controller.tools import LegendTools
from legtools.errors import (
    LegendToolsError, UnsupportedVersionError, InvalidLegendHandleError,
    EmptyStringInputError, InvalidLegendStringError, InvalidIndexError,
    TooManyIndicesError, NotEnoughUniqueIndicesError, BadSubscriptError,
    InvalidPlotParamsError, LegendToolsWarning, TooManyLegendsWarning, NoLegendWarning
)

append = LegendTools.append
permute = LegendTools.permute
remove = LegendTools.remove
adddummy = LegendTools.adddummy

__all__ = [
    "LegendTools", "append", "permute", "remove", "adddummy", "legappend",
    "LegendToolsError", "UnsupportedVersionError", "InvalidLegendHandleError",
    "EmptyStringInputError", "InvalidLegendStringError", "InvalidIndexError",
    "TooManyIndicesError", "NotEnoughUniqueIndicesError", "BadSubscriptError",
    "InvalidPlotParamsError", "LegendToolsWarning", "TooManyLegendsWarning",
    "NoLegendWarning",
]
