"""
Notifications published by the revelation engine.

Each engine owns a bus. To watch several engines from one place, build
one EventBus and hand it to each of them.

    bus = EventBus()
    bus.on(EngineEventType.TRAIT_REVEALED, lambda e: print(e.data["trait"]))
    engine = TraitRevelationEngine(bus=bus)
"""

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class EngineEventType(Enum):
    EVIDENCE_UPDATED = "trait.evidence_updated"
    TRAIT_REVEALED = "trait.revealed"
    TRAIT_CONFIRMED = "trait.confirmed"
    NEWS_GENERATED = "news.generated"
    SEASON_DECAYED = "season.decayed"


@dataclass
class EngineEvent:
    """One notification. Payload keys depend on the event type."""
    type: EngineEventType
    player_id: str
    season: int
    data: dict = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


Listener = Callable[[EngineEvent], None]


class EventBus:
    """
    Synchronous fan-out to listeners, plus a short record of recent events.

    A listener that raises is logged and skipped; the engine carries on.
    """

    def __init__(self, history_limit: int = 100):
        self._listeners: dict[EngineEventType, list[Listener]] = defaultdict(list)
        self._recent: deque[EngineEvent] = deque(maxlen=history_limit)

    def on(self, event_type: EngineEventType, listener: Listener) -> None:
        if listener not in self._listeners[event_type]:
            self._listeners[event_type].append(listener)

    def off(self, event_type: EngineEventType, listener: Listener) -> None:
        if listener in self._listeners[event_type]:
            self._listeners[event_type].remove(listener)

    def emit(
        self,
        event_type: EngineEventType,
        player_id: str = "",
        season: int = 0,
        **data,
    ) -> EngineEvent:
        event = EngineEvent(type=event_type, player_id=player_id, season=season, data=data)
        self._recent.append(event)

        for listener in tuple(self._listeners[event_type]):
            try:
                listener(event)
            except Exception as e:
                logger.warning(f"Listener failed on {event_type.value} for {player_id}: {e}")
        return event

    def get_history(self, event_type: EngineEventType | None = None) -> list[EngineEvent]:
        """Recent events, oldest first, optionally of one type."""
        return [e for e in self._recent if event_type is None or e.type == event_type]
