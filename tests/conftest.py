# conftest.py - pytest configuration
import pytest

from hunkforge.models import Block, Hunk


def _as_lines(lines):
    return [ln.encode("utf-8") if isinstance(ln, str) else ln for ln in lines]


@pytest.fixture
def make_hunk():
    """Build a Hunk from (start, lines) pairs; str lines are encoded to bytes."""

    def _make(removed_start, removed_lines, added_start, added_lines):
        return Hunk(
            removed=Block(start=removed_start, lines=_as_lines(removed_lines)),
            added=Block(start=added_start, lines=_as_lines(added_lines)),
        )

    return _make
