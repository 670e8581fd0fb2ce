# hunkforge/commute/core.py
from __future__ import annotations

import itertools
import logging
from typing import NamedTuple, Optional, Tuple

from .._logging import resolve_logger
from ..models.hunk import Hunk
from ..utils.iterators import uniform
from .result import CannotCommute, Commuted, CommuteResult, Unordered

__all__ = ["Anchors", "anchors", "commute", "commute_pair"]


class Anchors(NamedTuple):
    """Unchanged lines bordering a hunk, on both sides of the diff."""

    removed_before: int  # last unchanged line before it, original numbering
    removed_after: int   # first unchanged line after it, original numbering
    added_before: int    # last unchanged line before it, result numbering
    added_after: int     # first unchanged line after it, result numbering


def anchors(hunk: Hunk) -> Anchors:
    """
    Return the four unchanged lines around `hunk`.

    A pure insertion or deletion is a single point on its empty side, so both
    anchors on that side sit on either side of that point.
    """
    removed_len, added_len = len(hunk.removed), len(hunk.added)
    if not removed_len and not added_len:
        return Anchors(0, 1, 0, 1)
    if not added_len:
        start = hunk.removed.start
        return Anchors(start - 1, start + removed_len, start - 1, start)
    if not removed_len:
        start = hunk.added.start
        return Anchors(start - 1, start, start - 1, start + added_len)
    return Anchors(
        hunk.removed.start - 1,
        hunk.removed.start + removed_len,
        hunk.added.start - 1,
        hunk.added.start + added_len,
    )


def _interleavable(above: Hunk, below: Hunk) -> bool:
    """
    Two pure deletions (or two pure insertions) of one repeated line can be
    applied in either order, whatever their offsets.
    """
    if above.added.is_empty and below.added.is_empty:
        return uniform(itertools.chain(above.removed.lines, below.removed.lines))
    if above.removed.is_empty and below.removed.is_empty:
        return uniform(itertools.chain(above.added.lines, below.added.lines))
    return False


def commute(
    first: Hunk,
    second: Hunk,
    *,
    logger=None,
    log: bool = False,
) -> CommuteResult:
    """
    Try to swap two hunks that are applied `first`, then `second`.

    Returns:
        Commuted: the pair rewritten for the opposite order. `Commuted.first`
            is the rewritten `second` and `Commuted.second` the rewritten
            `first`, so applying them in that order gives the same file.
        CannotCommute: the hunks overlap and order matters.
        Unordered: the two sides disagree on which hunk is above the other.

    Inputs are never modified; rewritten hunks share their line buffers with
    the originals.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    # Work in content order rather than application order. Empty blocks keep
    # their start as-is: diff producers put it on the line before the gap.
    added_le = first.added.start <= second.added.start
    removed_le = first.removed.start <= second.removed.start
    if added_le != removed_le:
        log.debug(
            f"ordering mismatch: added {first.added.start}<={second.added.start} is {added_le}, "
            f"removed {first.removed.start}<={second.removed.start} is {removed_le}"
        )
        return Unordered()
    first_above = added_le
    above, below = (first, second) if first_above else (second, first)
    log.debug(f"content order: {'first' if first_above else 'second'} hunk is above")

    interleavable = _interleavable(above, below)
    if interleavable:
        log.debug("hunks repeat a single line; order is irrelevant")

    # At least one unchanged line must separate the hunk applied first (on its
    # added side) from the one applied second (on its removed side).
    if first_above:
        above_anchor, below_anchor = anchors(above).added_after, anchors(below).removed_before
    else:
        above_anchor, below_anchor = anchors(above).removed_after, anchors(below).added_before
    log.debug(f"anchors: above={above_anchor} below={below_anchor}")

    if above_anchor > below_anchor and not interleavable:
        log.debug("hunks overlap; cannot commute")
        return CannotCommute()

    offset = -above.delta if first_above else above.delta
    below = below.shifted(offset)
    if below.added.start < 0 or below.removed.start < 0:
        log.warning(
            f"rewritten hunk starts at removed={below.removed.start} added={below.added.start}; "
            "input hunks are probably malformed"
        )
    log.debug(f"commuted; shifted lower hunk by {offset:+d}")

    if first_above:
        return Commuted(below, above)
    return Commuted(above, below)


def commute_pair(first: Hunk, second: Hunk, **kwargs) -> Optional[Tuple[Hunk, Hunk]]:
    """
    Shortcut for ``commute(first, second).unwrap()``.

    Returns the swapped pair, or None when the hunks cannot commute.

    Raises:
        HunkOrderError: if the hunks are not consistently ordered.
    """
    return commute(first, second, **kwargs).unwrap()
