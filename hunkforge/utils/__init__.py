# hunkforge/utils/__init__.py
from .iterators import uniform

__all__ = ["uniform"]
