"""
Pytest fixtures for trait revelation tests.

Provides in-memory stores, deterministic random sources and sample players.
"""

import pytest
from pathlib import Path

# Add repo root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from trait_revelation.state import (
    EventBus,
    GameEventContext,
    GameEventType,
    HiddenTraits,
    MemoryPatternStore,
    Player,
    PlayerPatternData,
    Trait,
)
from trait_revelation.systems import PatternRecognitionSystem, TraitRevelationEngine
from trait_revelation.tools import FixedRandomSource


@pytest.fixture
def memory_store():
    """In-memory pattern store for testing."""
    return MemoryPatternStore()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def always():
    """Random source where every draw succeeds."""
    return FixedRandomSource(outcome=True)


@pytest.fixture
def never():
    """Random source where every draw fails."""
    return FixedRandomSource(outcome=False)


@pytest.fixture
def engine(memory_store, always, bus):
    """Engine whose revelation draws always succeed."""
    return TraitRevelationEngine(store=memory_store, random_source=always, bus=bus)


@pytest.fixture
def patterns():
    return PatternRecognitionSystem()


@pytest.fixture
def pattern_data():
    """Empty pattern data for one player."""
    return PlayerPatternData(player_id="p1")


@pytest.fixture
def clutch_player():
    """Player who truly has the clutch trait."""
    return Player(
        id="p1",
        first_name="Sam",
        last_name="Reyes",
        hidden_traits=HiddenTraits(positive=[Trait.CLUTCH]),
    )


@pytest.fixture
def plain_player():
    """Player with no hidden traits."""
    return Player(id="p2", first_name="Alex", last_name="Cole")


@pytest.fixture
def make_context():
    """Factory for event contexts with sensible defaults."""
    def _make(event_type=GameEventType.GAME_WINNING_PLAY, **kwargs):
        kwargs.setdefault("season", 1)
        kwargs.setdefault("week", 1)
        return GameEventContext(event_type=event_type, **kwargs)
    return _make


@pytest.fixture
def clutch_play(make_context):
    """Non-playoff game-winning play in the final minute of a one-score game."""
    return make_context(
        GameEventType.GAME_WINNING_PLAY,
        quarter=4,
        time_remaining=60,
        score_differential=3,
    )


@pytest.fixture
def playoff_clutch_play(make_context):
    """Same play, in the playoffs."""
    return make_context(
        GameEventType.GAME_WINNING_PLAY,
        is_playoff=True,
        quarter=4,
        time_remaining=60,
        score_differential=3,
    )
