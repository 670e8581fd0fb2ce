from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class Block:
    """One side of a hunk: the lines removed from the original, or added to the result."""

    start: int                       # 1-based; 0 when the block has no concrete line
    lines: Tuple[bytes, ...] = field(default=())
    trailing_newline: bool = True    # whether the last line ends with a newline

    def __post_init__(self) -> None:
        # Freeze the line buffer once so clones can share it.
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def moved(self, offset: int) -> "Block":
        """Return a copy starting `offset` lines later. The line tuple is shared, not copied."""
        return replace(self, start=self.start + offset)


@dataclass(frozen=True)
class Hunk:
    """
    A single contiguous edit: `removed` lives in the original file's line
    numbering, `added` in the result file's. Both describe the same location.
    """

    removed: Block
    added: Block

    @property
    def is_insertion(self) -> bool:
        return self.removed.is_empty and not self.added.is_empty

    @property
    def is_deletion(self) -> bool:
        return self.added.is_empty and not self.removed.is_empty

    @property
    def delta(self) -> int:
        """Net number of lines this hunk adds to the file (negative for net deletions)."""
        return len(self.added) - len(self.removed)

    def shifted(self, offset: int) -> "Hunk":
        return Hunk(removed=self.removed.moved(offset), added=self.added.moved(offset))

