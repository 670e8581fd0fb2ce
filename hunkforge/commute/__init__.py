from .core import Anchors, anchors, commute, commute_pair
from .result import CannotCommute, Commuted, CommuteResult, Unordered
from .sequence import commute_through

__all__ = [
    "Anchors",
    "anchors",
    "commute",
    "commute_pair",
    "commute_through",
    "CommuteResult",
    "Commuted",
    "CannotCommute",
    "Unordered",
]
