"""
Legend Tools
============
Operations that modify an existing matplotlib legend.

Why is this file needed?
------------------------
matplotlib builds a legend once from (artist, label) pairs. These operations
let the user edit that legend afterwards: append entries for artists plotted
later, reorder entries, remove entries, or add entries for things a legend
cannot label on its own (dummy entries).

Every operation returns the legend now on display. The legend passed in is
replaced and should not be used again.

Classes:
    LegendTools: Namespace of the static legend operations.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from matplotlib.legend import Legend

from legtools.errors import (
    TooManyIndicesError, NotEnoughUniqueIndicesError, BadSubscriptError,
    InvalidPlotParamsError
)
from legtools.model.entries import (
    legend_entries, parent_axes, eligible_children, rebuild_legend,
    tag_dummy, is_dummy, contains_artist
)
from legtools.model.validation import verchk, handlecheck, strcheck, indexcheck

logger = logging.getLogger(__name__)

PlotParams = Tuple[Tuple[str, ...], Dict[str, Any]]


class LegendTools:
    """
    Methods to modify existing Legend objects.

    append   - Append entries to legend
    permute  - Rearrange legend entries
    remove   - Remove one or more legend entries
    adddummy - Add entries to the legend for unsupported graphics objects
    """

    @staticmethod
    def append(lh: Legend, new_strings: Any) -> Legend:
        """
        Append entries to a legend.

        The new strings label the artists of the parent axes (every axes of
        the figure for a figure legend) which are not yet in the legend, in
        the order they were added to the axes. Current entries keep their
        order, also after a `permute`.

        The total number of entries can exceed the number of artists in the
        axes; extra strings are not added. E.g. with two lines plotted and one
        legend entry, appending three strings only appends the first of them.

        Args:
            lh: Legend to modify. If several are given only the first is used.
            new_strings: A string, or a list/tuple/array of strings.

        Returns:
            The updated legend.
        """
        verchk()
        lh = handlecheck("append", lh)
        new_strings = strcheck("append", new_strings)

        legchildren, strings = legend_entries(lh)
        ax = parent_axes(lh, legchildren)
        axchildren = eligible_children(lh, ax)

        # Current entries first, in legend order, then the rest of the axes.
        # Entries from twin axes stay even though they are not in `ax`.
        children: List[Any] = list(legchildren)
        kept: List[str] = list(strings)
        children.extend(a for a in axchildren if not contains_artist(children, a))

        future_strings = kept + new_strings
        n = min(len(children), len(future_strings))
        if n < len(future_strings):
            logger.info(
                f"Only {len(children)} artists available, "
                f"{len(future_strings) - n} legend string(s) not added."
            )

        return rebuild_legend(lh, children[:n], future_strings[:n])

    @staticmethod
    def permute(lh: Legend, order: Any) -> Legend:
        """
        Rearrange legend entries.

        Args:
            lh: Legend to modify.
            order: Zero-based indices, one per legend entry, each used once.
                Entry `i` of the new legend is entry `order[i]` of the old one.

        Returns:
            The reordered legend.
        """
        verchk()
        lh = handlecheck("permute", lh)
        order = indexcheck("permute", order)

        children, strings = legend_entries(lh)
        n = len(strings)

        if len(order) != n:
            raise TooManyIndicesError(
                "legtools:permute:TooManyIndices",
                "Number of values in order must match number of legend strings."
            )
        if len(set(order)) != n:
            raise NotEnoughUniqueIndicesError(
                "legtools:permute:NotEnoughUniqueIndices",
                "Input argument order must contain enough unique indices to index all legend strings."
            )
        if any(i < 0 or i >= n for i in order):
            raise BadSubscriptError(
                "legtools:permute:BadSubscript",
                "Index in order exceeds number of legend entries."
            )

        return rebuild_legend(
            lh,
            [children[i] for i in order],
            [strings[i] for i in order]
        )

    @staticmethod
    def remove(lh: Legend, remidx: Any) -> Optional[Legend]:
        """
        Remove entries from a legend.

        Dummy artists (see `adddummy`) backing removed entries are deleted from
        the axes as well.

        Args:
            lh: Legend to modify.
            remidx: Zero-based index, or indices, of the entries to remove.

        Returns:
            The updated legend, or None if every entry was removed and the
            legend was deleted.
        """
        verchk()
        lh = handlecheck("remove", lh)
        remidx = indexcheck("remove", remidx)

        children, strings = legend_entries(lh)
        n = len(strings)
        unique = set(remidx)

        if len(unique) > n:
            raise TooManyIndicesError(
                "legtools:remove:TooManyIndices",
                "Number of unique values in remidx exceeds number of legend entries."
            )
        if remidx and (max(remidx) >= n or min(remidx) < 0):
            raise BadSubscriptError(
                "legtools:remove:BadSubscript",
                "Index in remidx exceeds number of legend entries."
            )

        if unique and len(unique) == n:
            dummies = [c for c in children if is_dummy(c)]
            lh.remove()
            for dummy in dummies:
                dummy.remove()
            logger.info("All entries removed, legend deleted.")
            return None

        # Dummy artists are deleted only once the legend no longer refers to them
        dummies = [children[i] for i in sorted(unique) if is_dummy(children[i])]
        keep = [i for i in range(n) if i not in unique]
        new_legend = rebuild_legend(
            lh,
            [children[i] for i in keep],
            [strings[i] for i in keep]
        )
        for dummy in dummies:
            dummy.remove()
        logger.debug(f"Removed {len(unique)} legend entries ({len(dummies)} dummies).")
        return new_legend

    @staticmethod
    def adddummy(lh: Legend, new_strings: Any, plot_params: Any = None) -> Legend:
        """
        Append entries for graphics objects that a legend does not support.

        For each string a line consisting of a single NaN point is added to the
        parent axes: nothing is drawn, but the legend gets a valid artist to
        label. `remove` deletes these lines together with their entries.

        Args:
            lh: Legend to modify.
            new_strings: A string, or a list/tuple/array of strings.
            plot_params: Styling, in `Axes.plot` terms. Either None, a format
                string ("ok") or a kwargs dict applied to every entry, or a
                sequence with one item per string. Each item is a format
                string, a kwargs dict, or a tuple of a format string and/or a
                kwargs dict, e.g. ("--r", {"linewidth": 2}).

        Returns:
            The updated legend.
        """
        verchk()
        lh = handlecheck("adddummy", lh)
        new_strings = strcheck("adddummy", new_strings)
        params = _normalize_plot_params(new_strings, plot_params)

        children, strings = legend_entries(lh)
        ax = parent_axes(lh, children)

        dummies = []
        created = []
        try:
            for text, (args, kwargs) in zip(new_strings, params):
                plot_kwargs = {"scalex": False, "scaley": False, **kwargs, "label": text}
                # Leave validation of the styling up to plot
                lines = ax.plot([np.nan], [np.nan], *args, **plot_kwargs)
                created.extend(lines)
                for line in lines:
                    tag_dummy(line)
                dummies.append(lines[0])
        except Exception as e:
            for line in created:
                line.remove()
            logger.error(f"Invalid plot parameters, {len(created)} dummy lines discarded: {e}")
            raise

        logger.debug(f"Added {len(dummies)} dummy lines.")
        return rebuild_legend(lh, children + dummies, strings + new_strings)


def _normalize_plot_params(new_strings: List[str], plot_params: Any) -> List[PlotParams]:
    n = len(new_strings)

    if plot_params is None:
        return [((), {}) for _ in range(n)]

    if isinstance(plot_params, (str, dict)):
        return [_entry_params(plot_params) for _ in range(n)]

    if isinstance(plot_params, (list, tuple)):
        if len(plot_params) != n:
            raise InvalidPlotParamsError(
                "legtools:adddummy:InvalidPlotParams",
                f"Got {len(plot_params)} plot parameter sets for {n} legend strings."
            )
        return [_entry_params(p) for p in plot_params]

    raise InvalidPlotParamsError(
        "legtools:adddummy:InvalidPlotParams",
        f"Invalid plot parameters of type {type(plot_params).__name__}."
    )


def _entry_params(params: Any) -> PlotParams:
    if params is None:
        return (), {}
    if isinstance(params, str):
        return (params,), {}
    if isinstance(params, dict):
        return (), dict(params)

    if isinstance(params, (list, tuple)):
        args: Sequence[Any] = list(params)
        kwargs: Dict[str, Any] = {}
        if args and isinstance(args[-1], dict):
            kwargs = dict(args[-1])
            args = args[:-1]
        if len(args) > 1 or not all(isinstance(a, str) for a in args):
            raise InvalidPlotParamsError(
                "legtools:adddummy:InvalidPlotParams",
                "Plot parameters take at most one format string followed by a kwargs dict."
            )
        return tuple(args), kwargs

    raise InvalidPlotParamsError(
        "legtools:adddummy:InvalidPlotParams",
        f"Invalid plot parameters of type {type(params).__name__}."
    )
