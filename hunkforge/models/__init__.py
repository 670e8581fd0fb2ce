from .hunk import Block, Hunk

__all__ = ["Block", "Hunk"]
