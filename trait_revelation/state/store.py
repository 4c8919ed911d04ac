"""
Pattern data storage abstraction.

Owns the player id -> PlayerPatternData map so that each engine (and each
simulation running in the same process) has its own state.
"""

from typing import Protocol, runtime_checkable

from .schema import PlayerPatternData


@runtime_checkable
class PatternStore(Protocol):
    """
    Storage interface for per-player pattern data.

    Implementations:
    - MemoryPatternStore: In-process dict (default)
    """

    def get_or_create(self, player_id: str) -> PlayerPatternData:
        """Return pattern data for a player, creating it on first access."""
        ...

    def get(self, player_id: str) -> PlayerPatternData | None:
        """Return pattern data if the player has any. Never creates."""
        ...

    def set(self, player_id: str, data: PlayerPatternData) -> None:
        """Replace a player's pattern data (restoring a save)."""
        ...

    def clear(self) -> None:
        """Drop all pattern data."""
        ...

    def player_ids(self) -> list[str]:
        """IDs of every player with pattern data."""
        ...


class MemoryPatternStore:
    """
    In-memory pattern storage.

    Not synchronized: callers running games in parallel must serialize
    access per player id themselves.
    """

    def __init__(self):
        self.patterns: dict[str, PlayerPatternData] = {}

    def get_or_create(self, player_id: str) -> PlayerPatternData:
        data = self.patterns.get(player_id)
        if data is None:
            data = PlayerPatternData(player_id=player_id)
            self.patterns[player_id] = data
        return data

    def get(self, player_id: str) -> PlayerPatternData | None:
        return self.patterns.get(player_id)

    def set(self, player_id: str, data: PlayerPatternData) -> None:
        self.patterns[player_id] = data

    def clear(self) -> None:
        """Clear all pattern data (test/reset utility)."""
        self.patterns.clear()

    def player_ids(self) -> list[str]:
        return list(self.patterns)

    def export_snapshot(self) -> dict[str, dict]:
        """Dump every player's pattern data to JSON-safe dicts."""
        return {
            player_id: data.model_dump(mode="json")
            for player_id, data in self.patterns.items()
        }

    def load_snapshot(self, snapshot: dict[str, dict]) -> int:
        """
        Replace all pattern data with a previously exported snapshot.

        Returns the number of players loaded.
        """
        self.patterns = {
            player_id: PlayerPatternData.model_validate(raw)
            for player_id, raw in snapshot.items()
        }
        return len(self.patterns)
