from .commute import CommuteError, HunkOrderError

__all__ = ["CommuteError", "HunkOrderError"]
