# hunkforge/commute/sequence.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from .._logging import resolve_logger
from ..models.hunk import Hunk
from .core import commute

__all__ = ["commute_through"]


def commute_through(
    hunk: Hunk,
    earlier: Sequence[Hunk],
    *,
    logger=None,
    log: bool = False,
) -> Optional[Hunk]:
    """
    Move `hunk` back past every hunk in `earlier`.

    `earlier` is in application order and `hunk` is applied after all of it.
    Returns `hunk` as it would read if applied before the whole sequence, or
    None as soon as one of the earlier hunks blocks it.

    Raises:
        HunkOrderError: if `hunk` and one of the earlier hunks are not
            consistently ordered.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    moved = hunk
    for index in range(len(earlier) - 1, -1, -1):
        swapped = commute(earlier[index], moved, logger=log).unwrap()
        if swapped is None:
            log.debug(f"blocked by earlier hunk #{index}")
            return None
        moved, _ = swapped
    log.debug(f"moved hunk past {len(earlier)} earlier hunk(s)")
    return moved
