"""
Tests for revelation trigger rules.

Triggers are declarative; these tests pin their conditions and odds.
"""

import pytest
from trait_revelation.rules.triggers import (
    ALL_TRIGGERS,
    CHOKES_TRIGGER,
    CLUTCH_TRIGGER,
    GLASS_HANDS_TRIGGER,
    HOT_HEAD_TRIGGER,
    INJURY_PRONE_TRIGGER,
    IRON_MAN_TRIGGER,
    LEADER_TRIGGER,
    SCHEME_VERSATILE_TRIGGER,
    get_trigger_for_trait,
    get_triggers_for_event,
)
from trait_revelation.state.schema import GameEventType, Trait

E = GameEventType


class TestRegistry:
    """Test trigger lookup."""

    def test_every_trait_has_a_trigger(self):
        """Each trait maps to exactly one trigger."""
        assert {t.trait for t in ALL_TRIGGERS} == set(Trait)
        assert len(ALL_TRIGGERS) == len(Trait)

    def test_trigger_for_trait(self):
        assert get_trigger_for_trait(Trait.CLUTCH) is CLUTCH_TRIGGER

    def test_triggers_for_event(self):
        """Game-winning plays can speak to two traits."""
        traits = {t.trait for t in get_triggers_for_event(E.GAME_WINNING_PLAY)}
        assert traits == {Trait.CLUTCH, Trait.COOL_UNDER_PRESSURE}

    def test_no_matching_condition(self, make_context):
        """A listened-for event can still satisfy no trigger."""
        context = make_context(E.FULL_SEASON_PLAYED, consecutive_full_seasons=1)
        triggers = get_triggers_for_event(E.FULL_SEASON_PLAYED)

        assert triggers == [IRON_MAN_TRIGGER]
        assert [t for t in triggers if t.check_condition(context)] == []

    def test_base_probabilities_in_range(self):
        """Bases run from 0.3 to 0.6."""
        for trigger in ALL_TRIGGERS:
            assert 0.3 <= trigger.base_probability <= 0.6


class TestPositiveConditions:
    """Test conditions for positive traits."""

    def test_clutch_requires_clutch_time(self, make_context):
        """A game-winning play early in the game does not count."""
        late = make_context(E.GAME_WINNING_PLAY, quarter=4, time_remaining=90, score_differential=2)
        early = make_context(E.GAME_WINNING_PLAY, quarter=2, time_remaining=90, score_differential=2)

        assert CLUTCH_TRIGGER.check_condition(late)
        assert not CLUTCH_TRIGGER.check_condition(early)

    def test_clutch_on_playoff_touchdown(self, make_context):
        assert CLUTCH_TRIGGER.check_condition(make_context(E.PLAYOFF_TOUCHDOWN, is_playoff=True))
        assert not CLUTCH_TRIGGER.check_condition(make_context(E.PLAYOFF_TOUCHDOWN))

    def test_iron_man_needs_three_full_seasons(self, make_context):
        """Full seasons only count from the third in a row."""
        assert IRON_MAN_TRIGGER.check_condition(
            make_context(E.FULL_SEASON_PLAYED, consecutive_full_seasons=3)
        )
        assert not IRON_MAN_TRIGGER.check_condition(
            make_context(E.FULL_SEASON_PLAYED, consecutive_full_seasons=2)
        )

    def test_iron_man_quick_return(self, make_context):
        """Returning after missing at most one game counts."""
        assert IRON_MAN_TRIGGER.check_condition(
            make_context(E.RETURNED_FROM_INJURY, games_missed_this_season=1)
        )
        assert not IRON_MAN_TRIGGER.check_condition(
            make_context(E.RETURNED_FROM_INJURY, games_missed_this_season=3)
        )

    def test_scheme_versatile_ignores_big_games(self, make_context):
        """Listed for big games, but only a scheme change qualifies."""
        assert SCHEME_VERSATILE_TRIGGER.check_condition(make_context(E.SCHEME_CHANGE))
        assert not SCHEME_VERSATILE_TRIGGER.check_condition(
            make_context(E.BIG_GAME_PERFORMANCE, is_playoff=True)
        )


class TestNegativeConditions:
    """Test conditions for negative traits."""

    def test_injury_prone_thresholds(self, make_context):
        """Four missed games or two bad seasons."""
        assert INJURY_PRONE_TRIGGER.check_condition(
            make_context(E.INJURY_OCCURRED, games_missed_this_season=4)
        )
        assert INJURY_PRONE_TRIGGER.check_condition(
            make_context(E.INJURY_OCCURRED, seasons_with_major_injuries=2)
        )
        assert not INJURY_PRONE_TRIGGER.check_condition(
            make_context(E.INJURY_OCCURRED, games_missed_this_season=1)
        )

    def test_chokes_requires_clutch_drop(self, make_context):
        late = make_context(E.CRUCIAL_DROP, quarter=4, time_remaining=30, score_differential=-4)
        early = make_context(E.CRUCIAL_DROP, quarter=1, time_remaining=30, score_differential=-4)

        assert CHOKES_TRIGGER.check_condition(late)
        assert not CHOKES_TRIGGER.check_condition(early)


class TestProbability:
    """Test revelation odds."""

    def test_clutch_bonuses_stack(self, make_context):
        """Playoff, late and close bonuses add to the base."""
        context = make_context(
            E.GAME_WINNING_PLAY, quarter=4, time_remaining=60, score_differential=3,
        )
        assert CLUTCH_TRIGGER.calculate_probability(context) == pytest.approx(0.8)

    def test_probability_clamped_to_one(self, make_context):
        """Every bonus at once reaches, but never exceeds, certainty."""
        context = make_context(
            E.GAME_WINNING_PLAY, is_playoff=True, quarter=5, time_remaining=10, score_differential=0,
        )
        probability = CLUTCH_TRIGGER.calculate_probability(context)
        assert probability == pytest.approx(1.0)
        assert probability <= 1.0

    def test_iron_man_scales_with_streak(self, make_context):
        odds = [
            IRON_MAN_TRIGGER.calculate_probability(
                make_context(E.FULL_SEASON_PLAYED, consecutive_full_seasons=n)
            )
            for n in (3, 4, 5)
        ]
        assert odds == pytest.approx([0.7, 0.8, 0.9])

    def test_leader_veteran_bonus(self, make_context):
        """Veterans are more likely to be noticed."""
        rookie = LEADER_TRIGGER.calculate_probability(make_context(E.LEADERSHIP_MOMENT, season=1))
        veteran = LEADER_TRIGGER.calculate_probability(make_context(E.LEADERSHIP_MOMENT, season=5))
        assert veteran == pytest.approx(rookie + 0.2)

    def test_event_specific_bonus(self, make_context):
        """Practice fights and crucial drops carry extra weight."""
        assert HOT_HEAD_TRIGGER.calculate_probability(
            make_context(E.PRACTICE_ALTERCATION)
        ) == pytest.approx(0.8)
        assert HOT_HEAD_TRIGGER.calculate_probability(
            make_context(E.PENALTY_EJECTION)
        ) == pytest.approx(0.6)
        assert GLASS_HANDS_TRIGGER.calculate_probability(
            make_context(E.CRUCIAL_DROP)
        ) == pytest.approx(0.5)
