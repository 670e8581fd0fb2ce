from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ..errors.commute import HunkOrderError
from ..models.hunk import Hunk


class CommuteResult:
    """Outcome of commuting two hunks. One of Commuted, CannotCommute or Unordered."""

    commutes = False

    def unwrap(self) -> Optional[Tuple[Hunk, Hunk]]:
        raise NotImplementedError


@dataclass(frozen=True)
class Commuted(CommuteResult):
    """The hunks swap. `first` and `second` are in their new application order."""

    first: Hunk
    second: Hunk

    commutes = True

    def __iter__(self) -> Iterator[Hunk]:
        yield self.first
        yield self.second

    def unwrap(self) -> Tuple[Hunk, Hunk]:
        return self.first, self.second


@dataclass(frozen=True)
class CannotCommute(CommuteResult):
    """The hunks overlap, so their order matters."""

    def unwrap(self) -> None:
        return None


@dataclass(frozen=True)
class Unordered(CommuteResult):
    """The hunks disagree about which one is above the other. Malformed input."""

    reason: str = "nonsensical hunk ordering"

    def unwrap(self) -> None:
        raise HunkOrderError(self.reason)
