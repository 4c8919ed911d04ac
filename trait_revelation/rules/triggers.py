"""
Revelation triggers as pure functions.

Each trigger ties a trait to the events that can supply evidence for it,
a condition the event must meet, and the probability that the event
actually surfaces the trait. Nothing here mutates state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..state.schema import GameEventContext, GameEventType, Trait

E = GameEventType

Condition = Callable[[GameEventContext], bool]
ProbabilityFn = Callable[[GameEventContext, float], float]


@dataclass(frozen=True)
class RevelationTrigger:
    """A rule connecting event types to a trait."""
    trait: Trait
    event_types: frozenset[GameEventType]
    base_probability: float
    description: str
    condition: Condition
    probability: ProbabilityFn

    def check_condition(self, context: GameEventContext) -> bool:
        """Whether the event context meets this trigger's conditions."""
        return self.condition(context)

    def calculate_probability(self, context: GameEventContext) -> float:
        """Revelation probability for this context, clamped to 1.0."""
        return min(self.probability(context, self.base_probability), 1.0)


def _base(context: GameEventContext, base: float) -> float:
    return base


def _event_in(*event_types: GameEventType) -> Condition:
    return lambda context: context.event_type in event_types


# =============================================================================
# Positive trait rules
# =============================================================================

def _clutch_condition(context: GameEventContext) -> bool:
    if context.event_type == E.GAME_WINNING_PLAY:
        return context.is_clutch_time
    if context.event_type == E.PLAYOFF_TOUCHDOWN:
        return context.is_playoff
    if context.event_type == E.BIG_GAME_PERFORMANCE:
        return context.is_high_pressure
    return False


def _clutch_probability(context: GameEventContext, base: float) -> float:
    probability = base
    if context.is_playoff:
        probability += 0.2
    if context.quarter and context.quarter >= 4:
        probability += 0.1
    if context.score_differential is not None and abs(context.score_differential) <= 3:
        probability += 0.1
    return probability


def _iron_man_condition(context: GameEventContext) -> bool:
    if context.event_type == E.FULL_SEASON_PLAYED:
        return (context.consecutive_full_seasons or 0) >= 3
    if context.event_type == E.RETURNED_FROM_INJURY:
        # Quick recovery from a minor knock
        return (context.games_missed_this_season or 0) <= 1
    return False


def _iron_man_probability(context: GameEventContext, base: float) -> float:
    full_seasons = context.consecutive_full_seasons or 0
    if full_seasons >= 5:
        return base + 0.4
    if full_seasons >= 4:
        return base + 0.3
    if full_seasons >= 3:
        return base + 0.2
    return base


def _leader_probability(context: GameEventContext, base: float) -> float:
    # Veterans get noticed
    if context.season >= 5:
        return base + 0.2
    if context.season >= 3:
        return base + 0.1
    return base


def _cool_under_pressure_probability(context: GameEventContext, base: float) -> float:
    probability = base
    if context.is_playoff:
        probability += 0.25
    if context.is_clutch_time:
        probability += 0.15
    return probability


CLUTCH_TRIGGER = RevelationTrigger(
    trait=Trait.CLUTCH,
    event_types=frozenset({E.GAME_WINNING_PLAY, E.PLAYOFF_TOUCHDOWN, E.BIG_GAME_PERFORMANCE}),
    base_probability=0.6,
    description="Game-winning play in playoff or clutch situation",
    condition=_clutch_condition,
    probability=_clutch_probability,
)

IRON_MAN_TRIGGER = RevelationTrigger(
    trait=Trait.IRON_MAN,
    event_types=frozenset({E.FULL_SEASON_PLAYED, E.RETURNED_FROM_INJURY}),
    base_probability=0.5,
    description="Plays every game for 3+ consecutive seasons",
    condition=_iron_man_condition,
    probability=_iron_man_probability,
)

LEADER_TRIGGER = RevelationTrigger(
    trait=Trait.LEADER,
    event_types=frozenset({E.LEADERSHIP_MOMENT, E.TEAM_MEETING_BEHAVIOR}),
    base_probability=0.4,
    description="Demonstrated leadership in team settings",
    condition=_event_in(E.LEADERSHIP_MOMENT, E.TEAM_MEETING_BEHAVIOR),
    probability=_leader_probability,
)

FILM_JUNKIE_TRIGGER = RevelationTrigger(
    trait=Trait.FILM_JUNKIE,
    event_types=frozenset({E.FILM_STUDY_REPORT}),
    base_probability=0.35,
    description="Coach reports exceptional film study habits",
    condition=_event_in(E.FILM_STUDY_REPORT),
    probability=_base,
)

COOL_UNDER_PRESSURE_TRIGGER = RevelationTrigger(
    trait=Trait.COOL_UNDER_PRESSURE,
    event_types=frozenset({E.BIG_GAME_PERFORMANCE, E.GAME_WINNING_PLAY}),
    base_probability=0.45,
    description="Maintained composure in high-pressure situations",
    condition=lambda context: context.is_high_pressure,
    probability=_cool_under_pressure_probability,
)

MOTOR_TRIGGER = RevelationTrigger(
    trait=Trait.MOTOR,
    event_types=frozenset({E.PRACTICE_EFFORT, E.BIG_GAME_PERFORMANCE}),
    base_probability=0.3,
    description="Consistently gives maximum effort",
    condition=_event_in(E.PRACTICE_EFFORT, E.BIG_GAME_PERFORMANCE),
    probability=_base,
)

TEAM_FIRST_TRIGGER = RevelationTrigger(
    trait=Trait.TEAM_FIRST,
    event_types=frozenset({E.CONTRACT_NEGOTIATION, E.TEAM_MEETING_BEHAVIOR}),
    base_probability=0.35,
    description="Puts team success above personal stats and money",
    condition=_event_in(E.CONTRACT_NEGOTIATION, E.TEAM_MEETING_BEHAVIOR),
    probability=_base,
)

# Big games are listed but only a scheme change satisfies the condition
SCHEME_VERSATILE_TRIGGER = RevelationTrigger(
    trait=Trait.SCHEME_VERSATILE,
    event_types=frozenset({E.SCHEME_CHANGE, E.BIG_GAME_PERFORMANCE}),
    base_probability=0.4,
    description="Adapts well to different offensive and defensive schemes",
    condition=_event_in(E.SCHEME_CHANGE),
    probability=_base,
)


# =============================================================================
# Negative trait rules
# =============================================================================

def _chokes_condition(context: GameEventContext) -> bool:
    if context.event_type == E.CRUCIAL_DROP:
        return context.is_clutch_time
    if context.event_type == E.BIG_GAME_DISAPPEARANCE:
        return context.is_high_pressure
    return False


def _chokes_probability(context: GameEventContext, base: float) -> float:
    probability = base
    if context.is_playoff:
        probability += 0.25  # Playoff failures are more damning
    if context.is_clutch_time:
        probability += 0.15
    return probability


def _injury_prone_condition(context: GameEventContext) -> bool:
    if context.event_type != E.INJURY_OCCURRED:
        return False
    games_missed = context.games_missed_this_season or 0
    injury_seasons = context.seasons_with_major_injuries or 0
    return games_missed >= 4 or injury_seasons >= 2


def _injury_prone_probability(context: GameEventContext, base: float) -> float:
    injury_seasons = context.seasons_with_major_injuries or 0
    if injury_seasons >= 3:
        return base + 0.4
    if injury_seasons >= 2:
        return base + 0.25
    return base


def _bonus_for(event_type: GameEventType, bonus: float) -> ProbabilityFn:
    def probability(context: GameEventContext, base: float) -> float:
        if context.event_type == event_type:
            return base + bonus
        return base
    return probability


def _disappears_probability(context: GameEventContext, base: float) -> float:
    if context.is_playoff:
        return base + 0.25
    return base


CHOKES_TRIGGER = RevelationTrigger(
    trait=Trait.CHOKES,
    event_types=frozenset({E.CRUCIAL_DROP, E.BIG_GAME_DISAPPEARANCE}),
    base_probability=0.5,
    description="Drops a crucial pass or disappears in big moments",
    condition=_chokes_condition,
    probability=_chokes_probability,
)

INJURY_PRONE_TRIGGER = RevelationTrigger(
    trait=Trait.INJURY_PRONE,
    event_types=frozenset({E.INJURY_OCCURRED}),
    base_probability=0.4,
    description="Misses 4+ games in multiple seasons",
    condition=_injury_prone_condition,
    probability=_injury_prone_probability,
)

HOT_HEAD_TRIGGER = RevelationTrigger(
    trait=Trait.HOT_HEAD,
    event_types=frozenset({E.PRACTICE_ALTERCATION, E.PENALTY_EJECTION}),
    base_probability=0.6,
    description="Fight at practice or ejected from a game",
    condition=_event_in(E.PRACTICE_ALTERCATION, E.PENALTY_EJECTION),
    probability=_bonus_for(E.PRACTICE_ALTERCATION, 0.2),
)

LAZY_TRIGGER = RevelationTrigger(
    trait=Trait.LAZY,
    event_types=frozenset({E.PRACTICE_EFFORT, E.FILM_STUDY_REPORT}),
    base_probability=0.35,
    description="Doesn't give full effort in practice or film study",
    condition=_event_in(E.PRACTICE_EFFORT, E.FILM_STUDY_REPORT),
    probability=_base,
)

LOCKER_ROOM_CANCER_TRIGGER = RevelationTrigger(
    trait=Trait.LOCKER_ROOM_CANCER,
    event_types=frozenset({E.TEAM_MEETING_BEHAVIOR, E.MEDIA_INCIDENT, E.PRACTICE_ALTERCATION}),
    base_probability=0.4,
    description="Hurts team chemistry through behavior",
    condition=_event_in(E.TEAM_MEETING_BEHAVIOR, E.MEDIA_INCIDENT, E.PRACTICE_ALTERCATION),
    probability=_base,
)

GLASS_HANDS_TRIGGER = RevelationTrigger(
    trait=Trait.GLASS_HANDS,
    event_types=frozenset({E.FUMBLE_EVENT, E.DROP_EVENT, E.CRUCIAL_DROP}),
    base_probability=0.35,
    description="High fumble and drop rate",
    condition=_event_in(E.FUMBLE_EVENT, E.DROP_EVENT, E.CRUCIAL_DROP),
    probability=_bonus_for(E.CRUCIAL_DROP, 0.15),
)

DISAPPEARS_TRIGGER = RevelationTrigger(
    trait=Trait.DISAPPEARS,
    event_types=frozenset({E.BIG_GAME_DISAPPEARANCE}),
    base_probability=0.45,
    description="Inconsistent effort in big games",
    condition=lambda context: (
        context.event_type == E.BIG_GAME_DISAPPEARANCE and context.is_high_pressure
    ),
    probability=_disappears_probability,
)

SYSTEM_DEPENDENT_TRIGGER = RevelationTrigger(
    trait=Trait.SYSTEM_DEPENDENT,
    event_types=frozenset({E.SCHEME_CHANGE}),
    base_probability=0.4,
    description="Only succeeds in specific schemes",
    condition=_event_in(E.SCHEME_CHANGE),
    probability=_base,
)

DIVA_TRIGGER = RevelationTrigger(
    trait=Trait.DIVA,
    event_types=frozenset({E.MEDIA_INCIDENT, E.CONTRACT_NEGOTIATION, E.TEAM_MEETING_BEHAVIOR}),
    base_probability=0.45,
    description="Demands attention and creates drama",
    condition=_event_in(E.MEDIA_INCIDENT, E.CONTRACT_NEGOTIATION, E.TEAM_MEETING_BEHAVIOR),
    probability=_bonus_for(E.MEDIA_INCIDENT, 0.2),
)


# =============================================================================
# Registry
# =============================================================================

POSITIVE_TRIGGERS: list[RevelationTrigger] = [
    CLUTCH_TRIGGER,
    IRON_MAN_TRIGGER,
    LEADER_TRIGGER,
    FILM_JUNKIE_TRIGGER,
    COOL_UNDER_PRESSURE_TRIGGER,
    MOTOR_TRIGGER,
    TEAM_FIRST_TRIGGER,
    SCHEME_VERSATILE_TRIGGER,
]

NEGATIVE_TRIGGERS: list[RevelationTrigger] = [
    CHOKES_TRIGGER,
    INJURY_PRONE_TRIGGER,
    HOT_HEAD_TRIGGER,
    LAZY_TRIGGER,
    LOCKER_ROOM_CANCER_TRIGGER,
    GLASS_HANDS_TRIGGER,
    DISAPPEARS_TRIGGER,
    SYSTEM_DEPENDENT_TRIGGER,
    DIVA_TRIGGER,
]

ALL_TRIGGERS: list[RevelationTrigger] = POSITIVE_TRIGGERS + NEGATIVE_TRIGGERS


def get_triggers_for_event(event_type: GameEventType) -> list[RevelationTrigger]:
    """
    Get every trigger that listens for an event type.

    Args:
        event_type: The event that occurred

    Returns:
        Matching triggers in registry order (empty for most events)
    """
    return [t for t in ALL_TRIGGERS if event_type in t.event_types]


def get_trigger_for_trait(trait: Trait) -> RevelationTrigger | None:
    """Get the trigger for a trait, or None if it has none."""
    return next((t for t in ALL_TRIGGERS if t.trait == trait), None)
