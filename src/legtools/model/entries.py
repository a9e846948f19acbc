"""
Legend Entries (matplotlib Adapter)
===================================
This module reads and writes the two paired sequences that make up a legend:
the display strings and the artists ("plot children") they label.

Why is this file needed?
------------------------
1. Recovery: matplotlib legends keep proxy artists only, not the artists they
   label. For legends we did not build, each proxy is matched back to the
   plotted artist it was copied from (same colour, line style, marker...).
2. Bookkeeping: Legends rebuilt by this package remember their plot children
   in a weak registry, so entry order survives e.g. a permutation.
3. Rebuilding: A legend cannot be edited in place, so it is replaced by a new
   legend on the same parent carrying the same display options.
"""
from __future__ import annotations

import logging
import weakref
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.collections import Collection
from matplotlib.colors import to_rgba
from matplotlib.container import Container
from matplotlib.legend import Legend
from matplotlib.lines import Line2D
from matplotlib.offsetbox import TextArea
from matplotlib.patches import Patch

from legtools.config import (
    DUMMY_TAG, DUMMY_ATTRIBUTE, LEGEND_ARTIST_TYPES, LEGEND_SPACING_OPTIONS
)
from legtools.errors import InvalidLegendHandleError

logger = logging.getLogger(__name__)

# Plot children of every legend built by `rebuild_legend`
_PLOT_CHILDREN: "weakref.WeakKeyDictionary[Legend, List[Any]]" = weakref.WeakKeyDictionary()

Signature = Tuple[Any, ...]


def index_of_artist(item: Any, seq: Sequence[Any]) -> int:
    # Containers are tuples, so compare by identity rather than equality
    for i, candidate in enumerate(seq):
        if candidate is item:
            return i
    return -1


def contains_artist(seq: Sequence[Any], item: Any) -> bool:
    return index_of_artist(item, seq) >= 0


def tag_dummy(artist: Artist) -> None:
    """Mark an artist as a placeholder created for a dummy legend entry."""
    setattr(artist, DUMMY_ATTRIBUTE, DUMMY_TAG)


def is_dummy(artist: Any) -> bool:
    return getattr(artist, DUMMY_ATTRIBUTE, None) == DUMMY_TAG


def legend_strings(lh: Legend) -> List[str]:
    return [text.get_text() for text in lh.texts]


def artist_axes(artist: Any) -> Optional[Axes]:
    """Axes holding an artist, looking inside containers."""
    if isinstance(artist, Container):
        for child in artist.get_children():
            ax = getattr(child, "axes", None)
            if ax is not None:
                return ax
        return None
    return getattr(artist, "axes", None)


def axes_children(ax: Axes, handler_map: Optional[Dict] = None) -> List[Any]:
    """
    Legend-eligible children of an axes, in creation order.

    Artists labelled '_nolegend_' and artists without a legend handler are
    skipped. Containers (bar, errorbar, stem) come last.

    Args:
        ax: The axes to inspect.
        handler_map: Handler map used to decide eligibility. Defaults to the
            matplotlib default handler map.
    """
    if handler_map is None:
        handler_map = Legend.get_default_handler_map()

    children = getattr(ax, "_children", None)
    if children is None:
        children = [*ax.lines, *ax.patches, *ax.collections]

    eligible = []
    for artist in [*children, *ax.containers]:
        if not isinstance(artist, LEGEND_ARTIST_TYPES + (Container,)):
            continue
        if artist.get_label() == "_nolegend_":
            continue
        if Legend.get_legend_handler(handler_map, artist) is None:
            continue
        eligible.append(artist)
    return eligible


def eligible_children(lh: Legend, parent_ax: Optional[Axes] = None) -> List[Any]:
    """
    Pool of artists a legend may label.

    Axes legends draw from their parent axes; figure legends draw from every
    axes of the figure.
    """
    handler_map = lh.get_legend_handler_map()
    if isinstance(lh.parent, Axes):
        return axes_children(parent_ax if parent_ax is not None else lh.parent, handler_map)
    return _figure_children(lh.parent.axes, handler_map)


def _figure_children(axes: Sequence[Axes], handler_map: Dict) -> List[Any]:
    pool: List[Any] = []
    for ax in axes:
        pool.extend(axes_children(ax, handler_map))
    return pool


def _is_plotted(artist: Any, handler_map: Dict) -> bool:
    ax = artist_axes(artist)
    return ax is not None and contains_artist(axes_children(ax, handler_map), artist)


def legend_entries(lh: Legend) -> Tuple[List[Any], List[str]]:
    """
    Index-aligned (plot children, strings) of a legend.

    Entries whose artist has been removed from its axes are dropped together
    with their string.
    """
    strings = legend_strings(lh)

    stored = _PLOT_CHILDREN.get(lh)
    if stored is not None and len(stored) == len(strings):
        handler_map = lh.get_legend_handler_map()
        children, kept = [], []
        for child, text in zip(stored, strings):
            if _is_plotted(child, handler_map):
                children.append(child)
                kept.append(text)
        if len(kept) < len(strings):
            logger.debug(f"Dropped {len(strings) - len(kept)} entries whose artists were removed.")
        return children, kept

    pools = [eligible_children(lh)]
    # Combined legends of twin axes label artists from sibling axes too
    if isinstance(lh.parent, Axes):
        siblings = [ax for ax in lh.parent.figure.axes if ax is not lh.parent]
        if siblings:
            pools.append(_figure_children([lh.parent, *siblings], lh.get_legend_handler_map()))

    for pool in pools:
        children, kept = _recover_children(lh, strings, pool, strict=True)
        if len(kept) == len(strings):
            return children, kept

    logger.debug("Legend proxies do not match the plotted artists, pairing by label and position.")
    return _recover_children(lh, strings, pools[0], strict=False)


def _legend_proxies(lh: Legend) -> List[Any]:
    handles = getattr(lh, "legend_handles", None)
    if handles is None:
        handles = getattr(lh, "legendHandles", [])
    return [h for h in handles if h is not None]


def _rgba(color: Any) -> Tuple[float, ...]:
    if isinstance(color, str):
        return tuple(round(float(c), 6) for c in to_rgba(color))
    values = np.asarray(color, dtype=float)
    if values.size == 0:
        return ()
    # Collections store one colour per element; the first one is shown
    return tuple(round(float(c), 6) for c in to_rgba(np.atleast_2d(values)[0]))


def artist_signature(artist: Any) -> Optional[Signature]:
    """
    Visual properties a legend proxy copies from the artist it stands for.

    Returns None for artists without a comparable look.
    """
    if isinstance(artist, Container):
        children = artist.get_children()
        if not children:
            return None
        artist = children[0]

    if isinstance(artist, Line2D):
        return (
            "line", _rgba(artist.get_color()), artist.get_linestyle(),
            str(artist.get_marker()), round(float(artist.get_linewidth()), 6)
        )
    if isinstance(artist, Patch):
        return (
            "patch", _rgba(artist.get_facecolor()), _rgba(artist.get_edgecolor()),
            artist.get_hatch()
        )
    if isinstance(artist, Collection):
        return (
            "collection", _rgba(artist.get_facecolor()), _rgba(artist.get_edgecolor())
        )
    return None


def _recover_children(
    lh: Legend, strings: List[str], pool: List[Any], strict: bool
) -> Tuple[List[Any], List[str]]:
    """
    Pair legend strings with artists of `pool`.

    With `strict`, an entry whose proxy looks like no artist of the pool is
    dropped; otherwise it takes the artist labelled like it, or the first
    unused one.
    """
    proxies = _legend_proxies(lh)
    if len(proxies) != len(strings):
        proxies = [None] * len(strings)

    children: List[Any] = []
    kept: List[str] = []
    for text, proxy in zip(strings, proxies):
        unused = [a for a in pool if not contains_artist(children, a)]
        signature = artist_signature(proxy) if proxy is not None else None

        candidates = unused
        if signature is not None:
            same_look = [a for a in unused if artist_signature(a) == signature]
            if same_look or strict:
                candidates = same_look

        if not candidates:
            logger.debug(f"No artist found for legend entry '{text}'.")
            continue

        named = [a for a in candidates if a.get_label() == text]
        if len(candidates) == 1:
            match = candidates[0]
        elif named:
            match = named[0]
        else:
            match = candidates[0]
            logger.debug(f"Legend entry '{text}' matched positionally among {len(candidates)} artists.")

        children.append(match)
        kept.append(text)

    return children, kept


def plot_children(lh: Legend) -> List[Any]:
    return legend_entries(lh)[0]


def parent_axes(lh: Legend, children: Sequence[Any]) -> Axes:
    """
    Axes the legend entries live in.

    The axes of the first plot child wins; legends without entries fall back to
    their own axes, or the first axes of their figure.
    """
    for child in children[:1]:
        ax = artist_axes(child)
        if ax is not None:
            return ax

    if isinstance(lh.parent, Axes):
        return lh.parent

    figure_axes = lh.parent.axes
    if figure_axes:
        return figure_axes[0]

    raise InvalidLegendHandleError(
        "legtools:NoParentAxes",
        "Legend has no entries and its figure has no axes."
    )


def _markerfirst(lh: Legend) -> bool:
    # Each entry is packed as [handle, text] or [text, handle]
    box = getattr(lh, "_legend_handle_box", None)
    if box is None:
        return True
    for column in box.get_children():
        for item in column.get_children():
            parts = item.get_children()
            if parts:
                return not isinstance(parts[0], TextArea)
    return True


def _outside_loc(lh: Legend) -> Optional[str]:
    """Rebuild the 'outside ...' location of a figure legend."""
    edge = getattr(lh, "_outside_loc", None)
    if not edge or isinstance(lh.parent, Axes):
        return None

    names = {code: name for name, code in Legend.codes.items()}
    name = names.get(lh._loc)
    if name is None:
        return None

    words = name.split()
    if len(words) == 2 and words[0] != "center" and edge == words[1]:
        return f"outside {words[1]} {words[0]}"
    return f"outside {name}"


def legend_options(lh: Legend) -> Dict[str, Any]:
    """
    Keyword arguments recreating the look and placement of a legend.

    Entry order is taken as displayed, so `reverse` is never passed on.
    """
    options: Dict[str, Any] = {
        name: getattr(lh, name) for name in LEGEND_SPACING_OPTIONS if hasattr(lh, name)
    }

    outside = _outside_loc(lh)
    if outside is not None:
        options["loc"] = outside
    elif not getattr(lh, "_loc_used_default", False):
        options["loc"] = lh._loc

    bbox = getattr(lh, "_bbox_to_anchor", None)
    if bbox is not None:
        options["bbox_to_anchor"] = bbox

    options["ncols"] = getattr(lh, "_ncols", 1)

    mode = getattr(lh, "_mode", None)
    if mode is not None:
        options["mode"] = mode

    alignment = getattr(lh, "_alignment", None)
    if alignment is not None:
        options["alignment"] = alignment

    options["markerfirst"] = _markerfirst(lh)

    # Font family, weight, style and size of the entries
    options["prop"] = lh.prop.copy()

    colors = {_rgba(text.get_color()) for text in lh.texts}
    if len(colors) == 1:
        options["labelcolor"] = lh.texts[0].get_color()

    title = lh.get_title()
    if title.get_text():
        options["title"] = title.get_text()
        options["title_fontproperties"] = title.get_fontproperties().copy()

    frame = lh.get_frame()
    options["frameon"] = lh.get_frame_on()
    options["facecolor"] = frame.get_facecolor()
    options["edgecolor"] = frame.get_edgecolor()
    if frame.get_alpha() is not None:
        options["framealpha"] = frame.get_alpha()

    handler_map = getattr(lh, "_custom_handler_map", None)
    if handler_map:
        options["handler_map"] = handler_map

    return options


def _entry_colors(lh: Legend) -> Tuple[List[Any], List[Any]]:
    # Entries coloured individually (e.g. labelcolor='linecolor') keep their colour
    children, strings = legend_entries(lh)
    if len(strings) != len(lh.texts):
        return [], []
    return children, [text.get_color() for text in lh.texts]


def rebuild_legend(lh: Legend, children: Sequence[Any], strings: Sequence[str]) -> Legend:
    """
    Replace a legend with one showing the given entries.

    Args:
        lh: Legend to replace. It is removed from its parent.
        children: Artists to label, index-aligned with `strings`.
        strings: Display strings.

    Returns:
        The new legend, attached to the same parent.
    """
    if len(children) != len(strings):
        raise ValueError(f"Got {len(children)} artists for {len(strings)} strings.")

    options = legend_options(lh)
    draggable = lh.get_draggable()
    visible = lh.get_visible()
    title_color = lh.get_title().get_color()
    if "labelcolor" not in options and lh.texts:
        old_children, old_colors = _entry_colors(lh)
    else:
        old_children, old_colors = [], []
    parent = lh.parent

    # Disconnect the old legend from canvas events before dropping it
    if draggable:
        lh.set_draggable(False)
    lh.remove()

    new_legend = parent.legend(list(children), list(strings), **options)
    new_legend.get_title().set_color(title_color)
    new_legend.set_visible(visible)
    if draggable:
        new_legend.set_draggable(True)

    for child, text in zip(children, new_legend.texts):
        i = index_of_artist(child, old_children)
        if i >= 0:
            text.set_color(old_colors[i])

    _PLOT_CHILDREN[new_legend] = list(children)
    logger.debug(f"Legend rebuilt with {len(strings)} entries.")
    return new_legend
