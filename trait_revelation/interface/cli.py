"""
Developer CLI for replaying event scripts through the revelation engine.

Usage:
    python -m trait_revelation replay script.yaml --seed 7

A script names one player, a team, and an ordered list of events. An entry
with `end_of_season: true` runs the season-end sweep instead of an event.

    team: Chicago
    player:
      id: p1
      first_name: Sam
      last_name: Reyes
      hidden_traits:
        positive: [clutch]
    events:
      - {event_type: game_winning_play, season: 1, week: 3, quarter: 4,
         time_remaining: 40, score_differential: 3}
      - {end_of_season: true, season: 1}
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console
from rich.table import Table

from ..config import DEFAULT_CONFIG, load_config, options_from_config
from ..news.generator import sort_news_by_priority
from ..state.schema import GameEventContext, NewsEvent, Player, RevealedTrait
from ..systems.revelation import DEFAULT_TEAM_NAME, TraitRevelationEngine
from ..tools.chance import RandomSource

logger = logging.getLogger(__name__)

# Shared console instance
console = Console()

PRIORITY_STYLES = {
    "urgent": "bold red",
    "high": "yellow",
    "medium": "cyan",
    "low": "dim",
}


class ScriptStep(BaseModel):
    """One script entry: an event, or a season-end marker."""
    end_of_season: bool = False
    season: int | None = None
    event: GameEventContext | None = None


class ReplayScript(BaseModel):
    team: str = DEFAULT_TEAM_NAME
    player: Player
    steps: list[ScriptStep] = Field(default_factory=list)


class ReplayOutcome(BaseModel):
    revealed: list[RevealedTrait] = Field(default_factory=list)
    news: list[NewsEvent] = Field(default_factory=list)


def parse_script(raw: dict) -> ReplayScript:
    """Build a ReplayScript from a loaded YAML mapping."""
    steps = []
    for entry in raw.get("events") or []:
        entry = dict(entry)
        if entry.pop("end_of_season", False):
            steps.append(ScriptStep(end_of_season=True, season=entry.get("season")))
        else:
            steps.append(ScriptStep(event=GameEventContext.model_validate(entry)))

    return ReplayScript(
        team=raw.get("team") or DEFAULT_TEAM_NAME,
        player=Player.model_validate(raw["player"]),
        steps=steps,
    )


def load_script(path: Path | str) -> ReplayScript:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict) or "player" not in raw:
        raise ValueError(f"{path}: script must be a mapping with a 'player' entry")
    return parse_script(raw)


def run_replay(script: ReplayScript, engine: TraitRevelationEngine) -> ReplayOutcome:
    """Feed every step of a script through the engine, in order."""
    outcome = ReplayOutcome()
    for step in script.steps:
        if step.end_of_season:
            result = engine.process_end_of_season_revelations(
                script.player, script.team, season=step.season,
            )
        else:
            result = engine.process_game_event(script.player, step.event, script.team)
        outcome.revealed.extend(result.revealed_traits)
        outcome.news.extend(result.news_events)
    return outcome


# -----------------------------------------------------------------------------
# Rendering
# -----------------------------------------------------------------------------

def build_evidence_table(engine: TraitRevelationEngine, player: Player) -> Table:
    table = Table(title=f"Evidence: {player.full_name}")
    table.add_column("Trait", style="cyan")
    table.add_column("Confidence")
    table.add_column("Probability", justify="right")
    table.add_column("Weighted", justify="right")
    table.add_column("For / Against", justify="right")
    table.add_column("Revealed")

    pattern_data = engine.get_player_pattern_data(player.id)
    for evidence in engine.patterns.get_all_trait_evidence(pattern_data):
        table.add_row(
            evidence.trait.value,
            evidence.confidence.value,
            f"{evidence.probability * 100:.1f}%",
            f"{evidence.weighted_evidence:.2f}",
            f"{evidence.supporting_observations} / {evidence.contradicting_observations}",
            "yes" if player.hidden_traits.is_revealed(evidence.trait) else "",
        )
    return table


def build_news_table(news: list[NewsEvent]) -> Table:
    table = Table(title="News Feed")
    table.add_column("Priority")
    table.add_column("Category", style="dim")
    table.add_column("When", justify="right")
    table.add_column("Headline")

    for event in sort_news_by_priority(news):
        style = PRIORITY_STYLES.get(event.priority.value, "")
        table.add_row(
            f"[{style}]{event.priority.value}[/{style}]" if style else event.priority.value,
            event.category.value,
            f"S{event.season} W{event.week}",
            event.headline,
        )
    return table


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trait_revelation",
        description="Hidden trait revelation engine - developer tools",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay = subparsers.add_parser("replay", help="Replay an event script")
    replay.add_argument("script", type=Path, help="YAML event script")
    replay.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (overrides config)"
    )
    replay.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Engine config file (JSON or YAML)"
    )
    replay.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-observation detail"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns a process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
    )

    config = load_config(args.config) if args.config else DEFAULT_CONFIG.copy()
    seed = args.seed if args.seed is not None else config.get("seed")

    try:
        script = load_script(args.script)
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        console.print(f"[red]Could not load script:[/red] {e}")
        return 1

    engine = TraitRevelationEngine(
        random_source=RandomSource(seed),
        options=options_from_config(config),
        decay_factor=config.get("decay_factor", DEFAULT_CONFIG["decay_factor"]),
    )

    logger.info(f"Replaying {len(script.steps)} steps for {script.player.full_name}")
    outcome = run_replay(script, engine)

    console.print(build_evidence_table(engine, script.player))
    console.print(build_news_table(outcome.news))
    revealed = ", ".join(t.value for t in script.player.hidden_traits.revealed_to_user) or "none"
    console.print(f"Revealed to user: {revealed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
