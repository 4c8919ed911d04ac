"""
Pydantic models for hidden-trait revelation state.

Players carry boolean traits they never see labelled. Evidence for those
traits accumulates from game events and is tracked here per player.
Designed to serialize to JSON for the external save system.
"""

import math
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid import uuid4


def generate_id() -> str:
    """Generate a short unique ID."""
    return str(uuid4())[:8]


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class Trait(str, Enum):
    """Hidden player traits. The It factor is deliberately not one of them."""
    # Positive
    CLUTCH = "clutch"
    IRON_MAN = "iron_man"
    LEADER = "leader"
    FILM_JUNKIE = "film_junkie"
    COOL_UNDER_PRESSURE = "cool_under_pressure"
    MOTOR = "motor"
    TEAM_FIRST = "team_first"
    SCHEME_VERSATILE = "scheme_versatile"

    # Negative
    CHOKES = "chokes"
    INJURY_PRONE = "injury_prone"
    HOT_HEAD = "hot_head"
    LAZY = "lazy"
    LOCKER_ROOM_CANCER = "locker_room_cancer"
    GLASS_HANDS = "glass_hands"
    DISAPPEARS = "disappears"
    SYSTEM_DEPENDENT = "system_dependent"
    DIVA = "diva"

    @property
    def is_positive(self) -> bool:
        return self in POSITIVE_TRAITS


POSITIVE_TRAITS: frozenset[Trait] = frozenset({
    Trait.CLUTCH,
    Trait.IRON_MAN,
    Trait.LEADER,
    Trait.FILM_JUNKIE,
    Trait.COOL_UNDER_PRESSURE,
    Trait.MOTOR,
    Trait.TEAM_FIRST,
    Trait.SCHEME_VERSATILE,
})

NEGATIVE_TRAITS: frozenset[Trait] = frozenset(set(Trait) - POSITIVE_TRAITS)


# Evidence for one side of a pair is partial evidence against the other
OPPOSITE_TRAITS: list[tuple[Trait, Trait]] = [
    (Trait.CLUTCH, Trait.CHOKES),
    (Trait.IRON_MAN, Trait.INJURY_PRONE),
    (Trait.MOTOR, Trait.LAZY),
    (Trait.LEADER, Trait.LOCKER_ROOM_CANCER),
    (Trait.TEAM_FIRST, Trait.DIVA),
    (Trait.COOL_UNDER_PRESSURE, Trait.HOT_HEAD),
]


def get_opposite_trait(trait: Trait) -> Trait | None:
    """
    Get the declared opposite of a trait.

    Handles bidirectional lookup (order doesn't matter).
    Returns None if the trait has no opposite.
    """
    for a, b in OPPOSITE_TRAITS:
        if trait == a:
            return b
        if trait == b:
            return a
    return None


class GameEventType(str, Enum):
    """Discrete occurrences reported by the simulation loop."""
    GAME_WINNING_PLAY = "game_winning_play"          # Game-winning play in final moments
    PLAYOFF_TOUCHDOWN = "playoff_touchdown"          # Scored TD in playoff game
    CRUCIAL_DROP = "crucial_drop"                    # Dropped important pass
    PRACTICE_ALTERCATION = "practice_altercation"    # Fight or incident at practice
    PENALTY_EJECTION = "penalty_ejection"            # Ejected from game for penalty
    FULL_SEASON_PLAYED = "full_season_played"        # Played every game in a season
    INJURY_OCCURRED = "injury_occurred"
    RETURNED_FROM_INJURY = "returned_from_injury"
    BIG_GAME_PERFORMANCE = "big_game_performance"
    BIG_GAME_DISAPPEARANCE = "big_game_disappearance"
    MEDIA_INCIDENT = "media_incident"
    LEADERSHIP_MOMENT = "leadership_moment"
    FILM_STUDY_REPORT = "film_study_report"          # Coach reports on film habits
    PRACTICE_EFFORT = "practice_effort"
    SCHEME_CHANGE = "scheme_change"
    CONTRACT_NEGOTIATION = "contract_negotiation"
    TEAM_MEETING_BEHAVIOR = "team_meeting_behavior"
    FUMBLE_EVENT = "fumble_event"
    DROP_EVENT = "drop_event"


class ConfidenceLevel(str, Enum):
    """How strongly the evidence points at a trait. Ordered weakest first."""
    HINT = "hint"              # Slight indication
    SUSPECTED = "suspected"    # May have this trait (40-59%)
    MODERATE = "moderate"      # Likely (60-79%)
    STRONG = "strong"          # Very likely (80%+)
    CONFIRMED = "confirmed"    # Definitively established

    @property
    def rank(self) -> int:
        return CONFIDENCE_ORDER.index(self)

    def at_least(self, other: "ConfidenceLevel") -> bool:
        """Whether this level is the same as or stronger than other."""
        return self.rank >= other.rank


CONFIDENCE_ORDER: list[ConfidenceLevel] = [
    ConfidenceLevel.HINT,
    ConfidenceLevel.SUSPECTED,
    ConfidenceLevel.MODERATE,
    ConfidenceLevel.STRONG,
    ConfidenceLevel.CONFIRMED,
]

# Format: (min_probability, level) - first match wins
CONFIDENCE_THRESHOLDS: list[tuple[float, ConfidenceLevel]] = [
    (1.0, ConfidenceLevel.CONFIRMED),
    (0.8, ConfidenceLevel.STRONG),
    (0.6, ConfidenceLevel.MODERATE),
    (0.4, ConfidenceLevel.SUSPECTED),
]


def get_confidence_level(probability: float) -> ConfidenceLevel:
    """Convert a probability to a ConfidenceLevel. Values above 1 are confirmed."""
    for threshold, level in CONFIDENCE_THRESHOLDS:
        if probability >= threshold:
            return level
    return ConfidenceLevel.HINT


class NewsCategory(str, Enum):
    BREAKING = "breaking"
    GAME_RECAP = "game_recap"
    PRACTICE_REPORT = "practice_report"
    INSIDER_SCOOP = "insider_scoop"
    PLAYER_PROFILE = "player_profile"
    RUMOR_MILL = "rumor_mill"
    INJURY_REPORT = "injury_report"
    TRANSACTION = "transaction"


class NewsPriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Display order for the news feed (lower = shown first)
NEWS_PRIORITY_RANK: dict[NewsPriority, int] = {
    NewsPriority.URGENT: 0,
    NewsPriority.HIGH: 1,
    NewsPriority.MEDIUM: 2,
    NewsPriority.LOW: 3,
}


# -----------------------------------------------------------------------------
# Event Context
# -----------------------------------------------------------------------------

class GameEventContext(BaseModel):
    """
    One occurrence reported by the simulation loop.

    Immutable. The engine never constructs these from game state itself.
    """
    model_config = ConfigDict(frozen=True)

    event_type: GameEventType
    is_playoff: bool = False
    season: int
    week: int

    quarter: int | None = None  # 1-4, 5+ for overtime
    time_remaining: int | None = None  # Seconds left in the quarter
    score_differential: int | None = None  # Positive = winning
    is_primetime: bool = False

    # Season-level counters
    games_missed_this_season: int | None = None
    consecutive_full_seasons: int | None = None
    seasons_with_major_injuries: int | None = None

    metadata: dict = Field(default_factory=dict)

    @property
    def is_clutch_time(self) -> bool:
        """4th quarter or overtime, two minutes or less, one-score game."""
        quarter = self.quarter if self.quarter is not None else 0
        time_remaining = self.time_remaining if self.time_remaining is not None else 900
        margin = abs(self.score_differential or 0)
        return quarter >= 4 and time_remaining <= 120 and margin <= 8

    @property
    def is_high_pressure(self) -> bool:
        return self.is_playoff or self.is_primetime or self.is_clutch_time


# -----------------------------------------------------------------------------
# Player Handle
# -----------------------------------------------------------------------------

class HiddenTraits(BaseModel):
    """
    A player's true traits plus the subset the user has been shown.

    Only revealed_to_user may ever be displayed as a label.
    """
    positive: list[Trait] = Field(default_factory=list)
    negative: list[Trait] = Field(default_factory=list)
    revealed_to_user: list[Trait] = Field(default_factory=list)

    def has_trait(self, trait: Trait) -> bool:
        return trait in self.positive or trait in self.negative

    def is_revealed(self, trait: Trait) -> bool:
        return trait in self.revealed_to_user

    def reveal(self, trait: Trait) -> bool:
        """Add a trait to the revealed set. Returns False if already there."""
        if trait in self.revealed_to_user:
            return False
        self.revealed_to_user.append(trait)
        return True


class Player(BaseModel):
    """The slice of a roster player the revelation engine needs."""
    id: str = Field(default_factory=generate_id)
    first_name: str
    last_name: str
    hidden_traits: HiddenTraits = Field(default_factory=HiddenTraits)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


# -----------------------------------------------------------------------------
# Pattern Tracking
# -----------------------------------------------------------------------------

class EventObservation(BaseModel):
    """A recorded, weighted observation of an evidence-bearing event."""
    event_type: GameEventType
    timestamp: datetime = Field(default_factory=datetime.now)
    season: int
    week: int
    is_high_pressure: bool = False
    is_playoff: bool = False
    related_trait: Trait | None = None
    weight: float = 1.0  # Up to 1.5 * 1.25 before trigger scaling


MAX_RECENT_OBSERVATIONS = 5

# Logistic curve: ~3 net weighted observations is a coin flip
EVIDENCE_STEEPNESS = 0.5
EVIDENCE_MIDPOINT = 3.0

# One incident is never enough
MIN_SUPPORTING_OBSERVATIONS = 2
SINGLE_INCIDENT_PROBABILITY_CAP = 0.3


class TraitEvidence(BaseModel):
    """Accumulated evidence for one trait on one player."""
    trait: Trait
    supporting_observations: int = 0
    contradicting_observations: int = 0
    weighted_evidence: float = 0.0  # Positive = supports, negative = contradicts
    probability: float = 0.0
    last_observation: datetime | None = None
    recent_observations: list[str] = Field(default_factory=list)  # Newest first

    @field_validator("recent_observations")
    @classmethod
    def _keep_newest(cls, value: list[str]) -> list[str]:
        return value[:MAX_RECENT_OBSERVATIONS]

    @property
    def confidence(self) -> ConfidenceLevel:
        """Derived from probability. There is no setter."""
        return get_confidence_level(self.probability)

    def recalculate(self) -> float:
        """Recompute probability from weighted evidence and return it."""
        probability = 1 / (
            1 + math.exp(-EVIDENCE_STEEPNESS * (self.weighted_evidence - EVIDENCE_MIDPOINT))
        )
        if self.supporting_observations < MIN_SUPPORTING_OBSERVATIONS:
            probability = min(probability, SINGLE_INCIDENT_PROBABILITY_CAP)
        self.probability = probability
        return probability

    def add_observation(
        self,
        observation: EventObservation,
        description: str,
        supporting: bool,
    ) -> None:
        """
        Apply one observation to this evidence.

        Supporting evidence adds the full weight; contradicting evidence
        subtracts half of it.
        """
        if supporting:
            self.supporting_observations += 1
            self.weighted_evidence += observation.weight
        else:
            self.contradicting_observations += 1
            self.weighted_evidence -= observation.weight * 0.5

        self.last_observation = observation.timestamp
        self.recent_observations.insert(0, description)
        del self.recent_observations[MAX_RECENT_OBSERVATIONS:]

        self.recalculate()

    def decay(self, factor: float) -> None:
        self.weighted_evidence *= factor
        self.recalculate()


class PerformanceStats(BaseModel):
    """Rollup counters used only for trigger-condition evaluation."""
    games_per_season: float = 0
    total_injuries: int = 0
    seasons_with_major_injuries: int = 0
    consecutive_full_seasons: int = 0
    clutch_plays: int = 0
    clutch_failures: int = 0
    penalties: int = 0
    ejections: int = 0
    ball_security_issues: int = 0  # Drops and fumbles


class PlayerPatternData(BaseModel):
    """Everything the engine has learned about one player."""
    player_id: str
    observations: list[EventObservation] = Field(default_factory=list)
    trait_evidence: dict[Trait, TraitEvidence] = Field(default_factory=dict)
    confirmed_traits: list[Trait] = Field(default_factory=list)
    games_tracked: int = 0
    seasons_tracked: int = 0
    stats: PerformanceStats = Field(default_factory=PerformanceStats)

    def get_or_create_evidence(self, trait: Trait) -> TraitEvidence:
        evidence = self.trait_evidence.get(trait)
        if evidence is None:
            evidence = TraitEvidence(trait=trait)
            self.trait_evidence[trait] = evidence
        return evidence


# -----------------------------------------------------------------------------
# Narrative Output
# -----------------------------------------------------------------------------

class NewsEvent(BaseModel):
    """A rendered news story. Never names the trait it hints at."""
    id: str = Field(default_factory=lambda: f"news_{generate_id()}")
    headline: str
    body: str
    category: NewsCategory = NewsCategory.GAME_RECAP
    priority: NewsPriority = NewsPriority.MEDIUM

    related_trait: Trait | None = None
    trait_hint_strength: ConfidenceLevel = ConfidenceLevel.HINT

    player_id: str
    player_name: str
    team_name: str | None = None

    timestamp: datetime = Field(default_factory=datetime.now)
    season: int
    week: int

    confirms_trait_revelation: bool = False

    @property
    def has_trait_hint(self) -> bool:
        return self.related_trait is not None


# -----------------------------------------------------------------------------
# Engine Results
# -----------------------------------------------------------------------------

class ProcessedEvent(BaseModel):
    """Summary of one event passing through the engine."""
    event_type: GameEventType
    triggered_trait_checks: bool = False
    checked_traits: list[Trait] = Field(default_factory=list)
    description: str = ""


class RevealedTrait(BaseModel):
    """A trait that surfaced on this call, with the evidence behind it."""
    trait: Trait
    confidence: ConfidenceLevel
    is_confirmed: bool = False
    evidence: TraitEvidence


class RevelationOptions(BaseModel):
    """Tuning knobs for the revelation engine."""
    min_news_confidence: ConfidenceLevel = ConfidenceLevel.SUSPECTED
    auto_reveal_confirmed: bool = True
    revelation_multiplier: float = 1.0  # Scales the revelation draw (testing, difficulty)


class RevelationResult(BaseModel):
    """Output bundle of a single engine call."""
    player_id: str
    events: list[ProcessedEvent] = Field(default_factory=list)
    revealed_traits: list[RevealedTrait] = Field(default_factory=list)
    news_events: list[NewsEvent] = Field(default_factory=list)
    pattern_data: PlayerPatternData
