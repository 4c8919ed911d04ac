"""Hidden trait revelation engine for a football roster simulation."""

from .state.schema import GameEventContext, GameEventType, Player, Trait
from .systems.revelation import TraitRevelationEngine

__version__ = "0.1.0"

__all__ = [
    "GameEventContext",
    "GameEventType",
    "Player",
    "Trait",
    "TraitRevelationEngine",
]
