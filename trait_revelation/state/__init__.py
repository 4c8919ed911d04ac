"""State models, storage and notifications for trait revelation."""

from .schema import (
    Trait,
    GameEventType,
    ConfidenceLevel,
    NewsCategory,
    NewsPriority,
    GameEventContext,
    HiddenTraits,
    Player,
    EventObservation,
    TraitEvidence,
    PerformanceStats,
    PlayerPatternData,
    NewsEvent,
    ProcessedEvent,
    RevealedTrait,
    RevelationOptions,
    RevelationResult,
    get_confidence_level,
    get_opposite_trait,
)
from .store import PatternStore, MemoryPatternStore
from .event_bus import (
    EventBus,
    EngineEventType,
    EngineEvent,
)

__all__ = [
    # Schema
    "Trait",
    "GameEventType",
    "ConfidenceLevel",
    "NewsCategory",
    "NewsPriority",
    "GameEventContext",
    "HiddenTraits",
    "Player",
    "EventObservation",
    "TraitEvidence",
    "PerformanceStats",
    "PlayerPatternData",
    "NewsEvent",
    "ProcessedEvent",
    "RevealedTrait",
    "RevelationOptions",
    "RevelationResult",
    "get_confidence_level",
    "get_opposite_trait",
    # Store
    "PatternStore",
    "MemoryPatternStore",
    # Events
    "EventBus",
    "EngineEventType",
    "EngineEvent",
]
