"""
News event generation.

Turns trait evidence into stories for the news feed without ever naming
the trait, and narrates plain game events for the feed as well.
"""

import re
from typing import Any

from ..state.schema import (
    CONFIDENCE_ORDER,
    NEWS_PRIORITY_RANK,
    ConfidenceLevel,
    GameEventContext,
    GameEventType,
    NewsCategory,
    NewsEvent,
    NewsPriority,
    Trait,
    TraitEvidence,
)
from ..tools.chance import RandomSource
from .templates import TEMPLATE_INDEX, NewsTemplate

SLOT_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


# Event type -> (category, priority) for trait-agnostic narration
GAME_EVENT_NEWS: dict[GameEventType, tuple[NewsCategory, NewsPriority]] = {
    GameEventType.GAME_WINNING_PLAY: (NewsCategory.GAME_RECAP, NewsPriority.HIGH),
    GameEventType.PLAYOFF_TOUCHDOWN: (NewsCategory.BREAKING, NewsPriority.URGENT),
    GameEventType.CRUCIAL_DROP: (NewsCategory.GAME_RECAP, NewsPriority.MEDIUM),
    GameEventType.PRACTICE_ALTERCATION: (NewsCategory.PRACTICE_REPORT, NewsPriority.MEDIUM),
    GameEventType.PENALTY_EJECTION: (NewsCategory.BREAKING, NewsPriority.HIGH),
    GameEventType.INJURY_OCCURRED: (NewsCategory.INJURY_REPORT, NewsPriority.HIGH),
    GameEventType.MEDIA_INCIDENT: (NewsCategory.BREAKING, NewsPriority.HIGH),
}
DEFAULT_GAME_EVENT_NEWS = (NewsCategory.GAME_RECAP, NewsPriority.MEDIUM)


EVENT_DESCRIPTIONS: dict[GameEventType, str] = {
    GameEventType.GAME_WINNING_PLAY: "Made game-winning play",
    GameEventType.PLAYOFF_TOUCHDOWN: "Scored touchdown in playoff game",
    GameEventType.CRUCIAL_DROP: "Dropped crucial pass in late-game moment",
    GameEventType.PRACTICE_ALTERCATION: "Involved in practice altercation",
    GameEventType.PENALTY_EJECTION: "Ejected from game for penalty",
    GameEventType.FULL_SEASON_PLAYED: "Played every game this season",
    GameEventType.INJURY_OCCURRED: "Suffered injury",
    GameEventType.RETURNED_FROM_INJURY: "Returned quickly from injury",
    GameEventType.BIG_GAME_PERFORMANCE: "Outstanding performance in big game",
    GameEventType.BIG_GAME_DISAPPEARANCE: "Quiet game in high-stakes situation",
    GameEventType.MEDIA_INCIDENT: "Involved in media controversy",
    GameEventType.LEADERSHIP_MOMENT: "Rallied teammates",
    GameEventType.FILM_STUDY_REPORT: "Coach report on film study habits",
    GameEventType.PRACTICE_EFFORT: "Practice effort observation",
    GameEventType.SCHEME_CHANGE: "Team scheme change affected performance",
    GameEventType.CONTRACT_NEGOTIATION: "Contract negotiation behavior noted",
    GameEventType.TEAM_MEETING_BEHAVIOR: "Behavior in team meeting observed",
    GameEventType.FUMBLE_EVENT: "Fumbled the ball",
    GameEventType.DROP_EVENT: "Dropped a pass",
}


def describe_event(context: GameEventContext) -> str:
    """One-line description of an event, as kept in recent observations."""
    if context.event_type == GameEventType.GAME_WINNING_PLAY and context.is_playoff:
        return "Made game-winning play in playoff game"
    return EVENT_DESCRIPTIONS.get(context.event_type, f"Event: {context.event_type.value}")


def fill_slots(text: str, slots: dict[str, Any]) -> str:
    """
    Substitute {name} slots from a closed slot map.

    Only names present in slots are replaced; any other brace text is left
    as written.
    """
    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in slots:
            return str(slots[name])
        return match.group(0)

    return SLOT_PATTERN.sub(_replace, text)


def _fillable(lines: tuple[str, ...], slots: dict[str, Any]) -> tuple[str, ...]:
    """Lines whose slots are all available, or every line if none qualify."""
    usable = tuple(
        line for line in lines
        if all(name in slots for name in SLOT_PATTERN.findall(line))
    )
    return usable or lines


def find_template(trait: Trait, confidence: ConfidenceLevel) -> NewsTemplate | None:
    """
    Find the template for a trait at a confidence level.

    Falls back toward stronger levels only (suspected -> moderate -> strong
    -> confirmed). Returns None when nothing at or above the level exists.
    """
    for level in CONFIDENCE_ORDER[confidence.rank:]:
        template = TEMPLATE_INDEX.get((trait, level))
        if template is not None:
            return template
    return None


class NewsGenerator:
    """Renders news events from templates using an injectable random source."""

    def __init__(self, random_source: RandomSource | None = None):
        self.random = random_source or RandomSource()

    def generate_trait_news(
        self,
        player_id: str,
        player_name: str,
        team_name: str,
        evidence: TraitEvidence,
        context: GameEventContext,
        metadata: dict | None = None,
    ) -> NewsEvent | None:
        """
        Generate a story hinting at a trait at the evidence's confidence.

        Returns:
            The news event, or None if no template covers the trait
        """
        confidence = evidence.confidence
        template = find_template(evidence.trait, confidence)
        if template is None:
            return None

        slots = {**(metadata or {}), "player_name": player_name, "team_name": team_name}
        headline = self.random.choice(_fillable(template.headlines, slots))
        body = self.random.choice(_fillable(template.bodies, slots))

        return NewsEvent(
            headline=fill_slots(headline, slots),
            body=fill_slots(body, slots),
            category=template.category,
            priority=template.priority,
            related_trait=evidence.trait,
            trait_hint_strength=confidence,
            player_id=player_id,
            player_name=player_name,
            team_name=team_name,
            season=context.season,
            week=context.week,
            confirms_trait_revelation=confidence == ConfidenceLevel.CONFIRMED,
        )

    def generate_game_event_news(
        self,
        player_id: str,
        player_name: str,
        team_name: str,
        context: GameEventContext,
        headline: str,
        body: str,
        metadata: dict | None = None,
    ) -> NewsEvent:
        """Narrate an event without implying anything hidden about the player."""
        category, priority = GAME_EVENT_NEWS.get(context.event_type, DEFAULT_GAME_EVENT_NEWS)
        slots = {**(metadata or {}), "player_name": player_name, "team_name": team_name}

        return NewsEvent(
            headline=fill_slots(headline, slots),
            body=fill_slots(body, slots),
            category=category,
            priority=priority,
            player_id=player_id,
            player_name=player_name,
            team_name=team_name,
            season=context.season,
            week=context.week,
        )


def sort_news_by_priority(events: list[NewsEvent]) -> list[NewsEvent]:
    """Urgent first, then high, medium, low. Ties go newest first."""
    by_recency = sorted(events, key=lambda e: e.timestamp, reverse=True)
    return sorted(by_recency, key=lambda e: NEWS_PRIORITY_RANK[e.priority])


def filter_news(
    events: list[NewsEvent],
    category: NewsCategory | None = None,
    priority: NewsPriority | None = None,
    has_trait_hint: bool | None = None,
) -> list[NewsEvent]:
    """Filter a feed by category, priority and/or whether items hint at a trait."""
    results = []
    for event in events:
        if category is not None and event.category != category:
            continue
        if priority is not None and event.priority != priority:
            continue
        if has_trait_hint is not None and event.has_trait_hint != has_trait_hint:
            continue
        results.append(event)
    return results


def validate_news_event(event: NewsEvent) -> bool:
    """Check that every required field is present and non-empty."""
    for value in (event.id, event.headline, event.body, event.player_id, event.player_name):
        if not isinstance(value, str) or not value.strip():
            return False
    if not isinstance(event.season, int) or not isinstance(event.week, int):
        return False
    return True
