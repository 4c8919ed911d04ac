"""Utility tools."""

from .chance import RandomSource, FixedRandomSource

__all__ = ["RandomSource", "FixedRandomSource"]
