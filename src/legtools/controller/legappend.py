"""
Standalone legend append for the current figure.

Kept for scripts that do not hold on to their legend. Prefer
`LegendTools.append`, which respects the current entry order.
"""
from __future__ import annotations

import logging
import warnings
from typing import Any, Optional

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.legend import Legend

from legtools.errors import EmptyStringInputError, NoLegendWarning
from legtools.model.entries import legend_entries, parent_axes, eligible_children, rebuild_legend
from legtools.model.validation import verchk, strcheck

logger = logging.getLogger(__name__)


def legappend(new_strings: Any, fig: Optional[Figure] = None) -> Optional[Legend]:
    """
    Append new entries to the first legend of a figure.

    The legend is reset to label every artist of its axes in the order they
    were plotted, followed by the new strings.

    Args:
        new_strings: A string, or a list/tuple/array of strings.
        fig: Figure to search. Defaults to the current figure.

    Returns:
        The updated legend, or None if the figure has no legend.
    """
    verchk()

    try:
        new_strings = strcheck("legappend", new_strings)
    except EmptyStringInputError as e:
        raise EmptyStringInputError("legappend:EmptyInput", "No strings provided") from e

    if fig is None:
        fig = plt.gcf()

    legends = fig.findobj(Legend)
    if not legends:
        msg = "No legend objects present in current figure"
        logger.warning(msg)
        warnings.warn(NoLegendWarning("legappend:NoLegend", msg), stacklevel=2)
        return None

    # Operate only on the first legend handle returned
    lh = legends[0]
    legchildren, strings = legend_entries(lh)
    plothandles = eligible_children(lh, parent_axes(lh, legchildren))

    newstr = strings + new_strings
    n = min(len(plothandles), len(newstr))
    return rebuild_legend(lh, plothandles[:n], newstr[:n])
