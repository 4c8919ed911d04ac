"""
Tests for the pattern recognition system.

Covers weighting, mirrored evidence for opposite traits, decay and queries.
"""

import pytest
from trait_revelation.state.schema import (
    ConfidenceLevel,
    GameEventType,
    PlayerPatternData,
    Trait,
)
from trait_revelation.systems.patterns import (
    base_observation_weight,
    update_stats,
    validate_player_pattern_data,
)

E = GameEventType


class TestObservationWeight:
    """Test contextual weighting."""

    def test_regular_play(self, make_context):
        assert base_observation_weight(make_context(E.PRACTICE_EFFORT)) == 1.0

    def test_late_game_multiplier(self, make_context):
        """Fourth quarter or later is high pressure."""
        assert base_observation_weight(make_context(quarter=4)) == pytest.approx(1.25)

    def test_playoff_multipliers_stack(self, make_context):
        """Playoffs count as both playoff and high pressure."""
        assert base_observation_weight(make_context(is_playoff=True)) == pytest.approx(1.875)

    def test_primetime_is_not_weighted(self, make_context):
        """Primetime alone does not raise the observation weight."""
        assert base_observation_weight(make_context(is_primetime=True)) == 1.0


class TestRecordObservation:
    """Test recording events as evidence."""

    def test_weight_scaled_by_trigger_probability(self, patterns, pattern_data, clutch_play):
        """Weight is context weight times trigger probability."""
        patterns.record_observation(pattern_data, clutch_play, "Made game-winning play")

        clutch = pattern_data.trait_evidence[Trait.CLUTCH]
        # 1.25 (late) * 0.8 (clutch odds)
        assert clutch.weighted_evidence == pytest.approx(1.0)
        assert clutch.recent_observations == ["Made game-winning play"]

    def test_records_every_matching_trigger(self, patterns, pattern_data, clutch_play):
        """Without a filter, every satisfied trigger posts evidence."""
        supported = patterns.record_observation(pattern_data, clutch_play, "play")

        assert supported == [Trait.CLUTCH, Trait.COOL_UNDER_PRESSURE]
        assert len(pattern_data.observations) == 2

    def test_trait_filter(self, patterns, pattern_data, clutch_play):
        """A trait filter restricts which triggers post evidence."""
        supported = patterns.record_observation(
            pattern_data, clutch_play, "play", traits={Trait.CLUTCH},
        )

        assert supported == [Trait.CLUTCH]
        assert Trait.COOL_UNDER_PRESSURE not in pattern_data.trait_evidence

    def test_opposite_mirroring(self, patterns, pattern_data, clutch_play):
        """Support for one side posts exactly one contradiction to the other."""
        patterns.record_observation(pattern_data, clutch_play, "play", traits={Trait.CLUTCH})

        clutch = pattern_data.trait_evidence[Trait.CLUTCH]
        chokes = pattern_data.trait_evidence[Trait.CHOKES]
        assert clutch.supporting_observations == 1
        assert clutch.contradicting_observations == 0
        assert chokes.supporting_observations == 0
        assert chokes.contradicting_observations == 1
        assert chokes.weighted_evidence == pytest.approx(-0.5)

    def test_no_early_confirmation(self, patterns, pattern_data, make_context):
        """One huge playoff moment is still capped at 0.3."""
        context = make_context(
            E.GAME_WINNING_PLAY, is_playoff=True, quarter=4, time_remaining=5, score_differential=1,
        )
        patterns.record_observation(pattern_data, context, "play", traits={Trait.CLUTCH})

        assert pattern_data.trait_evidence[Trait.CLUTCH].probability <= 0.3

    def test_condition_not_met(self, patterns, pattern_data, make_context):
        """An early-game winner posts nothing."""
        context = make_context(E.GAME_WINNING_PLAY, quarter=1)
        supported = patterns.record_observation(pattern_data, context, "play")

        assert supported == []
        assert pattern_data.trait_evidence == {}
        assert pattern_data.games_tracked == 0

    def test_playoff_outweighs_regular_season(
        self, patterns, clutch_play, playoff_clutch_play
    ):
        """Five playoff winners beat five regular-season winners."""
        regular = PlayerPatternData(player_id="a")
        playoff = PlayerPatternData(player_id="b")
        for _ in range(5):
            patterns.record_observation(regular, clutch_play, "play", traits={Trait.CLUTCH})
            patterns.record_observation(playoff, playoff_clutch_play, "play", traits={Trait.CLUTCH})

        regular_evidence = regular.trait_evidence[Trait.CLUTCH]
        playoff_evidence = playoff.trait_evidence[Trait.CLUTCH]
        assert playoff_evidence.weighted_evidence > regular_evidence.weighted_evidence
        assert regular_evidence.confidence == ConfidenceLevel.MODERATE
        assert playoff_evidence.confidence == ConfidenceLevel.STRONG

    def test_games_tracked_once_per_week(self, patterns, pattern_data, make_context):
        """Several observations in one week count as one game."""
        week_one = make_context(E.PRACTICE_EFFORT, week=1)
        week_two = make_context(E.PRACTICE_EFFORT, week=2)

        patterns.record_observation(pattern_data, week_one, "effort")
        patterns.record_observation(pattern_data, week_one, "effort")
        patterns.record_observation(pattern_data, week_two, "effort")

        assert pattern_data.games_tracked == 2


class TestStats:
    """Test performance counters."""

    def test_major_injury_resets_full_seasons(self, make_context):
        data = PlayerPatternData(player_id="p1")
        data.stats.consecutive_full_seasons = 3

        update_stats(data.stats, make_context(E.INJURY_OCCURRED, games_missed_this_season=5))

        assert data.stats.total_injuries == 1
        assert data.stats.seasons_with_major_injuries == 1
        assert data.stats.consecutive_full_seasons == 0

    def test_ejection_counts_as_penalty(self, make_context):
        data = PlayerPatternData(player_id="p1")
        update_stats(data.stats, make_context(E.PENALTY_EJECTION))

        assert data.stats.ejections == 1
        assert data.stats.penalties == 1

    def test_ball_security(self, make_context):
        data = PlayerPatternData(player_id="p1")
        update_stats(data.stats, make_context(E.FUMBLE_EVENT))
        update_stats(data.stats, make_context(E.DROP_EVENT))

        assert data.stats.ball_security_issues == 2


class TestDecay:
    """Test end-of-season decay."""

    def test_decay_all_traits(self, patterns, pattern_data):
        """Every trait's evidence shrinks by the factor."""
        pattern_data.get_or_create_evidence(Trait.CLUTCH).weighted_evidence = 5.0
        pattern_data.get_or_create_evidence(Trait.CHOKES).weighted_evidence = -2.0

        patterns.apply_evidence_decay(pattern_data)

        assert pattern_data.trait_evidence[Trait.CLUTCH].weighted_evidence == pytest.approx(4.0)
        assert pattern_data.trait_evidence[Trait.CHOKES].weighted_evidence == pytest.approx(-1.6)

    def test_decay_recomputes_probability(self, patterns, pattern_data):
        evidence = pattern_data.get_or_create_evidence(Trait.CLUTCH)
        evidence.supporting_observations = 4
        evidence.weighted_evidence = 6.0
        before = evidence.recalculate()

        patterns.apply_evidence_decay(pattern_data, 0.5)

        assert evidence.probability < before
        assert evidence.probability == pytest.approx(0.5)


class TestQueries:
    """Test evidence queries and confirmation."""

    def _seed(self, pattern_data, trait, weighted, supporting):
        evidence = pattern_data.get_or_create_evidence(trait)
        evidence.weighted_evidence = weighted
        evidence.supporting_observations = supporting
        evidence.recalculate()
        return evidence

    def test_high_confidence_sorted(self, patterns, pattern_data):
        """Moderate and above, most probable first."""
        self._seed(pattern_data, Trait.CLUTCH, 5.0, 3)   # moderate
        self._seed(pattern_data, Trait.MOTOR, 8.0, 4)    # strong
        self._seed(pattern_data, Trait.LEADER, 3.0, 2)   # suspected

        traits = [e.trait for e in patterns.get_high_confidence_traits(pattern_data)]

        assert traits == [Trait.MOTOR, Trait.CLUTCH]

    def test_all_evidence_needs_support(self, patterns, pattern_data):
        """Contradiction-only entries are not listed."""
        self._seed(pattern_data, Trait.CLUTCH, 2.0, 2)
        self._seed(pattern_data, Trait.CHOKES, -1.0, 0)

        traits = [e.trait for e in patterns.get_all_trait_evidence(pattern_data)]

        assert traits == [Trait.CLUTCH]

    def test_unknown_trait_confidence(self, patterns, pattern_data):
        assert patterns.get_trait_confidence(pattern_data, Trait.DIVA) is None

    def test_confirm_is_idempotent(self, patterns, pattern_data):
        """Re-confirming returns False and keeps one entry."""
        self._seed(pattern_data, Trait.CLUTCH, 100.0, 5)

        assert patterns.should_confirm_trait(pattern_data, Trait.CLUTCH)
        assert patterns.confirm_trait(pattern_data, Trait.CLUTCH) is True
        assert patterns.confirm_trait(pattern_data, Trait.CLUTCH) is False
        assert pattern_data.confirmed_traits == [Trait.CLUTCH]

    def test_should_not_confirm_strong(self, patterns, pattern_data):
        self._seed(pattern_data, Trait.CLUTCH, 8.0, 4)
        assert not patterns.should_confirm_trait(pattern_data, Trait.CLUTCH)
        assert not patterns.should_confirm_trait(pattern_data, Trait.DIVA)

    def test_pattern_summary(self, patterns, pattern_data):
        self._seed(pattern_data, Trait.CLUTCH, 5.0, 3)
        summary = patterns.get_pattern_summary(pattern_data)

        assert "Confirmed Traits: None" in summary
        assert "clutch: moderate" in summary


class TestValidation:
    def test_valid(self, pattern_data):
        assert validate_player_pattern_data(pattern_data)

    def test_missing_player_id(self):
        assert not validate_player_pattern_data(PlayerPatternData(player_id=""))

    def test_negative_counters(self):
        data = PlayerPatternData(player_id="p1", games_tracked=-1)
        assert not validate_player_pattern_data(data)
