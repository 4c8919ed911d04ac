"""
Pattern recognition system.

Accumulates weighted evidence for hidden traits from observed events.
Operates on PlayerPatternData handed in by the caller; holds no state itself.
"""

import logging
from typing import Collection

from ..rules.triggers import get_triggers_for_event
from ..state.schema import (
    ConfidenceLevel,
    EventObservation,
    GameEventContext,
    GameEventType,
    PerformanceStats,
    PlayerPatternData,
    Trait,
    TraitEvidence,
    get_opposite_trait,
)

logger = logging.getLogger(__name__)


PLAYOFF_WEIGHT_MULTIPLIER = 1.5
HIGH_PRESSURE_WEIGHT_MULTIPLIER = 1.25
DEFAULT_DECAY_FACTOR = 0.8


def base_observation_weight(context: GameEventContext) -> float:
    """Contextual weight of an event before trigger scaling."""
    weight = 1.0
    if context.is_playoff:
        weight *= PLAYOFF_WEIGHT_MULTIPLIER
    if _is_high_pressure(context):
        weight *= HIGH_PRESSURE_WEIGHT_MULTIPLIER
    return weight


def _is_high_pressure(context: GameEventContext) -> bool:
    # Narrower than GameEventContext.is_high_pressure: primetime doesn't count here
    return context.is_playoff or (context.quarter or 0) >= 4


def _track_game(pattern_data: PlayerPatternData, context: GameEventContext) -> None:
    # Count each (season, week) with evidence once
    if pattern_data.observations:
        last = pattern_data.observations[-1]
        if (last.season, last.week) == (context.season, context.week):
            return
    pattern_data.games_tracked += 1


def update_stats(stats: PerformanceStats, context: GameEventContext) -> None:
    """Roll an event into the player's performance counters."""
    E = GameEventType
    event_type = context.event_type

    if event_type == E.INJURY_OCCURRED:
        stats.total_injuries += 1
        if (context.games_missed_this_season or 0) >= 4:
            stats.seasons_with_major_injuries += 1
            stats.consecutive_full_seasons = 0
    elif event_type == E.FULL_SEASON_PLAYED:
        stats.consecutive_full_seasons += 1
    elif event_type in (E.GAME_WINNING_PLAY, E.PLAYOFF_TOUCHDOWN):
        stats.clutch_plays += 1
    elif event_type in (E.CRUCIAL_DROP, E.BIG_GAME_DISAPPEARANCE):
        stats.clutch_failures += 1
    elif event_type == E.PENALTY_EJECTION:
        stats.ejections += 1
        stats.penalties += 1
    elif event_type == E.PRACTICE_ALTERCATION:
        stats.penalties += 1
    elif event_type in (E.FUMBLE_EVENT, E.DROP_EVENT):
        stats.ball_security_issues += 1


class PatternRecognitionSystem:
    """
    Turns event observations into trait evidence.

    For each trigger whose condition holds, the observation supports the
    trigger's trait and (at half weight) contradicts its declared opposite.
    """

    def record_observation(
        self,
        pattern_data: PlayerPatternData,
        context: GameEventContext,
        description: str,
        traits: Collection[Trait] | None = None,
    ) -> list[Trait]:
        """
        Record an event and update evidence for every matching trigger.

        Args:
            pattern_data: The player's pattern data (mutated in place)
            context: The event that occurred
            description: Human-readable summary kept in recent observations
            traits: If given, only triggers for these traits post evidence

        Returns:
            Traits that received supporting evidence
        """
        update_stats(pattern_data.stats, context)

        weight = base_observation_weight(context)
        supported: list[Trait] = []

        for trigger in get_triggers_for_event(context.event_type):
            if traits is not None and trigger.trait not in traits:
                continue
            if not trigger.check_condition(context):
                continue

            if not supported:
                _track_game(pattern_data, context)

            observation = EventObservation(
                event_type=context.event_type,
                season=context.season,
                week=context.week,
                is_high_pressure=_is_high_pressure(context),
                is_playoff=context.is_playoff,
                related_trait=trigger.trait,
                weight=weight * trigger.calculate_probability(context),
            )
            pattern_data.observations.append(observation)

            evidence = pattern_data.get_or_create_evidence(trigger.trait)
            evidence.add_observation(observation, description, supporting=True)
            supported.append(trigger.trait)

            opposite = get_opposite_trait(trigger.trait)
            if opposite is not None:
                pattern_data.get_or_create_evidence(opposite).add_observation(
                    observation, description, supporting=False,
                )

            logger.debug(
                f"{pattern_data.player_id}: {trigger.trait.value} +{observation.weight:.3f} "
                f"-> p={evidence.probability:.3f} ({evidence.confidence.value})"
            )

        return supported

    def get_trait_confidence(
        self, pattern_data: PlayerPatternData, trait: Trait
    ) -> TraitEvidence | None:
        """Get evidence for a trait, or None if it was never observed."""
        return pattern_data.trait_evidence.get(trait)

    def get_high_confidence_traits(self, pattern_data: PlayerPatternData) -> list[TraitEvidence]:
        """Evidence at moderate confidence or above, most probable first."""
        results = [
            e for e in pattern_data.trait_evidence.values()
            if e.confidence.at_least(ConfidenceLevel.MODERATE)
        ]
        return sorted(results, key=lambda e: e.probability, reverse=True)

    def get_all_trait_evidence(self, pattern_data: PlayerPatternData) -> list[TraitEvidence]:
        """Evidence with at least one supporting observation, most probable first."""
        results = [
            e for e in pattern_data.trait_evidence.values()
            if e.supporting_observations > 0
        ]
        return sorted(results, key=lambda e: e.probability, reverse=True)

    def should_confirm_trait(self, pattern_data: PlayerPatternData, trait: Trait) -> bool:
        evidence = pattern_data.trait_evidence.get(trait)
        if evidence is None:
            return False
        return evidence.confidence == ConfidenceLevel.CONFIRMED

    def confirm_trait(self, pattern_data: PlayerPatternData, trait: Trait) -> bool:
        """Mark a trait as confirmed. Returns False if it already was."""
        if trait in pattern_data.confirmed_traits:
            return False
        pattern_data.confirmed_traits.append(trait)
        return True

    def apply_evidence_decay(
        self,
        pattern_data: PlayerPatternData,
        decay_factor: float = DEFAULT_DECAY_FACTOR,
    ) -> None:
        """
        Shrink all accumulated evidence so fresh behavior outweighs old.

        Call once at the end of each season.
        """
        for evidence in pattern_data.trait_evidence.values():
            evidence.decay(decay_factor)

    def get_pattern_summary(self, pattern_data: PlayerPatternData) -> str:
        """Plain-text summary for debugging."""
        confirmed = ", ".join(t.value for t in pattern_data.confirmed_traits) or "None"
        lines = [
            "Player Pattern Data Summary",
            f"Games Tracked: {pattern_data.games_tracked}",
            f"Seasons Tracked: {pattern_data.seasons_tracked}",
            f"Total Observations: {len(pattern_data.observations)}",
            f"Confirmed Traits: {confirmed}",
            "",
            "Trait Evidence:",
        ]

        for evidence in self.get_all_trait_evidence(pattern_data):
            lines.append(
                f"  {evidence.trait.value}: {evidence.confidence.value} "
                f"({evidence.probability * 100:.1f}%) - "
                f"{evidence.supporting_observations} supporting, "
                f"{evidence.contradicting_observations} contradicting"
            )

        return "\n".join(lines)


def validate_player_pattern_data(data: PlayerPatternData) -> bool:
    """Structural check for pattern data restored from outside the engine."""
    if not data.player_id or not isinstance(data.player_id, str):
        return False
    if not isinstance(data.observations, list):
        return False
    if not isinstance(data.confirmed_traits, list):
        return False
    if data.games_tracked < 0 or data.seasons_tracked < 0:
        return False
    return True
