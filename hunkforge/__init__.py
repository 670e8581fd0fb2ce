from .commute import (
    Anchors,
    CannotCommute,
    Commuted,
    CommuteResult,
    Unordered,
    anchors,
    commute,
    commute_pair,
    commute_through,
)
from .errors import CommuteError, HunkOrderError
from .models import Block, Hunk
from .utils import uniform

__all__ = [
    "Block",
    "Hunk",
    "anchors",
    "Anchors",
    "uniform",
    "commute",
    "commute_pair",
    "commute_through",
    "CommuteResult",
    "Commuted",
    "CannotCommute",
    "Unordered",
    "CommuteError",
    "HunkOrderError",
]
