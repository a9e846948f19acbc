"""
Errors & Warnings
=================
Every failure raised by the legend tools carries a colon separated identifier
(``legtools:<operation>:<reason>``) so callers can tell apart e.g. a bad
permutation from a bad removal without parsing messages.

Each concrete error also derives from the builtin exception a Python caller
would expect (TypeError for wrong types, IndexError for out of range indices...)
"""
from __future__ import annotations


class LegendToolsError(Exception):
    """Base class for all legend tool errors."""

    def __init__(self, identifier: str, message: str):
        super().__init__(message)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"{self.args[0]} [{self.identifier}]"


class UnsupportedVersionError(LegendToolsError, RuntimeError):
    pass


class InvalidLegendHandleError(LegendToolsError, TypeError):
    pass


class EmptyStringInputError(LegendToolsError, ValueError):
    pass


class InvalidLegendStringError(LegendToolsError, TypeError):
    pass


class InvalidIndexError(LegendToolsError, TypeError):
    pass


class TooManyIndicesError(LegendToolsError, ValueError):
    pass


class NotEnoughUniqueIndicesError(LegendToolsError, ValueError):
    pass


class BadSubscriptError(LegendToolsError, IndexError):
    pass


class InvalidPlotParamsError(LegendToolsError, ValueError):
    pass


class LegendToolsWarning(UserWarning):
    """Base class for warnings issued by the legend tools."""

    def __init__(self, identifier: str, message: str):
        super().__init__(message)
        self.identifier = identifier


class TooManyLegendsWarning(LegendToolsWarning):
    pass


class NoLegendWarning(LegendToolsWarning):
    pass
