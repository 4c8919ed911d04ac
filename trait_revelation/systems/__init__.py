"""
Revelation systems.

Pattern recognition accumulates evidence; the revelation engine decides
when a trait surfaces and drives news generation.
"""

from .patterns import PatternRecognitionSystem, validate_player_pattern_data
from .revelation import (
    TraitRevelationEngine,
    TraitRevelationStatus,
    RevealedTraitsSummary,
    validate_revelation_result,
)

__all__ = [
    "PatternRecognitionSystem",
    "validate_player_pattern_data",
    "TraitRevelationEngine",
    "TraitRevelationStatus",
    "RevealedTraitsSummary",
    "validate_revelation_result",
]
