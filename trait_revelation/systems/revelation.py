"""
Trait revelation engine.

Drives the per-(player, trait) lifecycle:

    unobserved -> accumulating evidence -> eligible (moderate+) -> confirmed/revealed

Evidence accumulates deterministically for traits a player truly has.
Whether a given event becomes the moment a trait surfaces is a second,
random gate, so identical histories do not always reveal on the same play.
Auto-reveal of a confirmed trait is the only place user-visible state
changes.
"""

import logging

from pydantic import BaseModel, Field

from ..news.generator import NewsGenerator, describe_event
from ..rules.triggers import RevelationTrigger, get_triggers_for_event
from ..state.event_bus import EngineEventType, EventBus
from ..state.schema import (
    ConfidenceLevel,
    GameEventContext,
    GameEventType,
    NewsEvent,
    Player,
    PlayerPatternData,
    ProcessedEvent,
    RevealedTrait,
    RevelationOptions,
    RevelationResult,
    Trait,
    TraitEvidence,
)
from ..state.store import MemoryPatternStore, PatternStore
from ..tools.chance import RandomSource
from .patterns import DEFAULT_DECAY_FACTOR, PatternRecognitionSystem

logger = logging.getLogger(__name__)


DEFAULT_TEAM_NAME = "the team"
END_OF_SEASON_WEEK = 17


class TraitRevelationStatus(BaseModel):
    """Where one trait stands for one player."""
    has_trait: bool
    is_revealed: bool
    confidence: ConfidenceLevel = ConfidenceLevel.HINT
    evidence: TraitEvidence | None = None


class PendingTrait(BaseModel):
    trait: Trait
    confidence: ConfidenceLevel


class RevealedTraitsSummary(BaseModel):
    """Revealed traits plus strong-evidence traits not yet shown to the user."""
    revealed: list[Trait] = Field(default_factory=list)
    pending: list[PendingTrait] = Field(default_factory=list)


OptionsArg = RevelationOptions | dict | None


class TraitRevelationEngine:
    """
    Feeds game events through pattern recognition and surfaces traits.

    Owns its pattern store and event bus unless given shared ones, so
    separate engines never see each other's evidence or notifications.
    """

    def __init__(
        self,
        store: PatternStore | None = None,
        random_source: RandomSource | None = None,
        options: RevelationOptions | None = None,
        bus: EventBus | None = None,
        decay_factor: float = DEFAULT_DECAY_FACTOR,
    ):
        self.store = store if store is not None else MemoryPatternStore()
        self.random = random_source or RandomSource()
        self.options = options or RevelationOptions()
        self.bus = bus if bus is not None else EventBus()
        self.decay_factor = decay_factor

        self.patterns = PatternRecognitionSystem()
        self.news = NewsGenerator(self.random)

    # -------------------------------------------------------------------------
    # Event Processing
    # -------------------------------------------------------------------------

    def process_game_event(
        self,
        player: Player,
        context: GameEventContext,
        team_name: str = DEFAULT_TEAM_NAME,
        options: OptionsArg = None,
    ) -> RevelationResult:
        """
        Process one event for a player and check for revelations.

        Args:
            player: The player involved (revealed_to_user may be mutated)
            context: What happened
            team_name: Used in generated news
            options: Per-call overrides merged over the engine's options

        Returns:
            RevelationResult for this event
        """
        opts = self._resolve_options(options)
        pattern_data = self.store.get_or_create(player.id)
        description = describe_event(context)

        result = RevelationResult(player_id=player.id, pattern_data=pattern_data)

        matching = [
            trigger for trigger in get_triggers_for_event(context.event_type)
            if trigger.check_condition(context)
        ]
        held = [t for t in matching if player.hidden_traits.has_trait(t.trait)]

        if held:
            supported = self.patterns.record_observation(
                pattern_data, context, description,
                traits={t.trait for t in held},
            )
            for trait in supported:
                evidence = pattern_data.trait_evidence[trait]
                self.bus.emit(
                    EngineEventType.EVIDENCE_UPDATED,
                    player_id=player.id,
                    season=context.season,
                    trait=trait.value,
                    probability=evidence.probability,
                    confidence=evidence.confidence.value,
                )

        for trigger in held:
            evidence = self.patterns.get_trait_confidence(pattern_data, trigger.trait)
            if evidence is None:
                continue
            outcome = self._check_for_revelation(
                player, trigger, evidence, context, team_name, opts, pattern_data,
            )
            if outcome is None:
                continue
            revealed, news = outcome
            result.revealed_traits.append(revealed)
            if news is not None:
                result.news_events.append(news)

        result.events.append(ProcessedEvent(
            event_type=context.event_type,
            triggered_trait_checks=bool(matching),
            checked_traits=[t.trait for t in matching],
            description=description,
        ))
        return result

    def process_multiple_events(
        self,
        player: Player,
        events: list[GameEventContext],
        team_name: str = DEFAULT_TEAM_NAME,
        options: OptionsArg = None,
    ) -> RevelationResult:
        """Process events in order, concatenating the per-event results."""
        opts = self._resolve_options(options)
        combined = RevelationResult(
            player_id=player.id,
            pattern_data=self.store.get_or_create(player.id),
        )

        for context in events:
            result = self.process_game_event(player, context, team_name, opts)
            combined.events.extend(result.events)
            combined.revealed_traits.extend(result.revealed_traits)
            combined.news_events.extend(result.news_events)

        return combined

    def process_end_of_season_revelations(
        self,
        player: Player,
        team_name: str = DEFAULT_TEAM_NAME,
        options: OptionsArg = None,
        season: int | None = None,
    ) -> RevelationResult:
        """
        Settle the season: reveal confirmed traits, then decay all evidence.

        Decay runs whether or not anything was revealed. The news for a
        season-end reveal uses a generic big-game context in week 17.

        Args:
            player: The player to settle
            team_name: Used in generated news
            options: Per-call overrides merged over the engine's options
            season: Season for the news items (defaults to seasons tracked)
        """
        opts = self._resolve_options(options)
        pattern_data = self.store.get_or_create(player.id)
        result = RevelationResult(player_id=player.id, pattern_data=pattern_data)

        news_context = GameEventContext(
            event_type=GameEventType.BIG_GAME_PERFORMANCE,
            is_playoff=False,
            season=season if season is not None else pattern_data.seasons_tracked,
            week=END_OF_SEASON_WEEK,
        )

        for evidence in self.patterns.get_high_confidence_traits(pattern_data):
            trait = evidence.trait
            if player.hidden_traits.is_revealed(trait):
                continue
            if not player.hidden_traits.has_trait(trait):
                continue
            if evidence.confidence != ConfidenceLevel.CONFIRMED or not opts.auto_reveal_confirmed:
                continue

            self._reveal(player, pattern_data, trait, news_context.season)
            revealed = RevealedTrait(
                trait=trait,
                confidence=evidence.confidence,
                is_confirmed=True,
                evidence=evidence.model_copy(deep=True),
            )
            result.revealed_traits.append(revealed)
            self.bus.emit(
                EngineEventType.TRAIT_REVEALED,
                player_id=player.id,
                season=news_context.season,
                trait=trait.value,
                confidence=evidence.confidence.value,
                is_confirmed=True,
            )

            news = self.news.generate_trait_news(
                player.id, player.full_name, team_name, evidence, news_context,
            )
            if news is not None:
                result.news_events.append(news)
                self._emit_news(news)

        self.apply_season_end_decay(player.id)
        pattern_data.seasons_tracked += 1

        logger.info(
            f"Season end for {player.id}: {len(result.revealed_traits)} revealed, "
            f"{pattern_data.seasons_tracked} seasons tracked"
        )
        return result

    # -------------------------------------------------------------------------
    # Revelation Check
    # -------------------------------------------------------------------------

    def _check_for_revelation(
        self,
        player: Player,
        trigger: RevelationTrigger,
        evidence: TraitEvidence,
        context: GameEventContext,
        team_name: str,
        opts: RevelationOptions,
        pattern_data: PlayerPatternData,
    ) -> tuple[RevealedTrait, NewsEvent | None] | None:
        """Run the revelation gate for one trigger. None means nothing surfaced."""
        trait = trigger.trait
        if player.hidden_traits.is_revealed(trait):
            return None

        probability = trigger.calculate_probability(context) * opts.revelation_multiplier
        if not self.random.chance(probability):
            logger.debug(f"{player.id}: {trait.value} draw failed (p={probability:.3f})")
            return None

        is_confirmed = self.patterns.should_confirm_trait(pattern_data, trait)
        if is_confirmed and opts.auto_reveal_confirmed:
            self._reveal(player, pattern_data, trait, context.season)

        revealed = RevealedTrait(
            trait=trait,
            confidence=evidence.confidence,
            is_confirmed=is_confirmed,
            evidence=evidence.model_copy(deep=True),
        )
        self.bus.emit(
            EngineEventType.TRAIT_REVEALED,
            player_id=player.id,
            season=context.season,
            trait=trait.value,
            confidence=evidence.confidence.value,
            is_confirmed=is_confirmed,
        )

        news = None
        if evidence.confidence.at_least(opts.min_news_confidence):
            news = self.news.generate_trait_news(
                player.id, player.full_name, team_name, evidence, context,
                metadata=context.metadata,
            )
            if news is not None:
                self._emit_news(news)

        return revealed, news

    def _reveal(
        self,
        player: Player,
        pattern_data: PlayerPatternData,
        trait: Trait,
        season: int,
    ) -> None:
        player.hidden_traits.reveal(trait)
        if self.patterns.confirm_trait(pattern_data, trait):
            logger.info(f"Confirmed {trait.value} for {player.id} (season {season})")
            self.bus.emit(
                EngineEventType.TRAIT_CONFIRMED,
                player_id=player.id,
                season=season,
                trait=trait.value,
            )

    def _emit_news(self, news: NewsEvent) -> None:
        self.bus.emit(
            EngineEventType.NEWS_GENERATED,
            player_id=news.player_id,
            season=news.season,
            news_id=news.id,
            headline=news.headline,
            priority=news.priority.value,
        )

    def _resolve_options(self, options: OptionsArg) -> RevelationOptions:
        """Merge per-call options over the engine's defaults."""
        if options is None:
            return self.options
        if isinstance(options, RevelationOptions):
            overrides = options.model_dump(exclude_unset=True)
        else:
            overrides = RevelationOptions.model_validate(options).model_dump(exclude_unset=True)
        return self.options.model_copy(update=overrides)

    # -------------------------------------------------------------------------
    # Store Access
    # -------------------------------------------------------------------------

    def get_player_pattern_data(self, player_id: str) -> PlayerPatternData:
        """Get pattern data for a player, creating it if absent."""
        return self.store.get_or_create(player_id)

    def set_player_pattern_data(self, player_id: str, data: PlayerPatternData) -> None:
        """Replace a player's pattern data (restoring a save)."""
        self.store.set(player_id, data)

    def clear_all_pattern_data(self) -> None:
        self.store.clear()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_potential_traits(
        self,
        player: Player,
        min_confidence: ConfidenceLevel = ConfidenceLevel.SUSPECTED,
    ) -> list[TraitEvidence]:
        """High-confidence evidence at or above min_confidence, most probable first."""
        pattern_data = self.store.get(player.id)
        if pattern_data is None:
            return []
        return [
            e for e in self.patterns.get_high_confidence_traits(pattern_data)
            if e.confidence.at_least(min_confidence)
        ]

    def get_trait_revelation_status(self, player: Player, trait: Trait) -> TraitRevelationStatus:
        pattern_data = self.store.get(player.id)
        evidence = None
        if pattern_data is not None:
            evidence = self.patterns.get_trait_confidence(pattern_data, trait)

        return TraitRevelationStatus(
            has_trait=player.hidden_traits.has_trait(trait),
            is_revealed=player.hidden_traits.is_revealed(trait),
            confidence=evidence.confidence if evidence else ConfidenceLevel.HINT,
            evidence=evidence,
        )

    def get_revealed_traits_summary(self, player: Player) -> RevealedTraitsSummary:
        """What the user has been shown, and what is close to surfacing."""
        summary = RevealedTraitsSummary(revealed=list(player.hidden_traits.revealed_to_user))

        pattern_data = self.store.get(player.id)
        if pattern_data is None:
            return summary

        for evidence in self.patterns.get_high_confidence_traits(pattern_data):
            if not player.hidden_traits.is_revealed(evidence.trait):
                summary.pending.append(
                    PendingTrait(trait=evidence.trait, confidence=evidence.confidence)
                )
        return summary

    def apply_season_end_decay(self, player_id: str, decay_factor: float | None = None) -> None:
        """Decay a player's evidence. Call once per season."""
        factor = self.decay_factor if decay_factor is None else decay_factor
        pattern_data = self.store.get_or_create(player_id)
        self.patterns.apply_evidence_decay(pattern_data, factor)
        self.bus.emit(
            EngineEventType.SEASON_DECAYED,
            player_id=player_id,
            season=pattern_data.seasons_tracked,
            decay_factor=factor,
        )


def validate_revelation_result(result: RevelationResult) -> bool:
    """Structural check on a result bundle."""
    if not result.player_id or not isinstance(result.player_id, str):
        return False
    if not isinstance(result.events, list):
        return False
    if not isinstance(result.revealed_traits, list):
        return False
    if not isinstance(result.news_events, list):
        return False
    return True
