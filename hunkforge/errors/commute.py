class CommuteError(Exception):
    """Base class for errors raised while reordering hunks."""


class HunkOrderError(CommuteError):
    """The two hunks disagree on which one comes first in the file."""
