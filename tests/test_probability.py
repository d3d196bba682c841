"""Tests for the injury-after-weather probability estimates."""

import pytest

from conftest import injury, player
from core.exceptions import InvalidParameterError
from services.probability import compute_injury_probability
from services.window_associator import AdverseWeekIndex


def index(weeks):
    return AdverseWeekIndex.from_weeks(weeks)


class TestComputeInjuryProbability:
    def test_reinjured_in_later_season(self):
        result = compute_injury_probability(
            [player("A", "QB")],
            [injury("A", 2020, 5), injury("A", 2021, 5)],
            index({2020: [5]}),
            window_half_width=0,
        )
        assert result.player_number == 1
        assert result.injured_number == 1
        assert result.injured_again == 1
        assert result.injury_prob == 1.0
        assert result.another_injury_prob == 1.0

    def test_empty_population_is_undefined(self):
        result = compute_injury_probability([], [], index({}), window_half_width=2)
        assert result.player_number == 0
        assert result.injury_prob is None
        assert result.another_injury_prob is None

    def test_no_linked_injuries_leaves_recurrence_undefined(self):
        result = compute_injury_probability(
            [player("A", "QB"), player("B", "RB")],
            [injury("A", 2020, 10)],
            index({2020: [5]}),
            window_half_width=1,
        )
        assert result.injury_prob == 0.0
        assert result.another_injury_prob is None

    def test_only_out_status_qualifies(self):
        result = compute_injury_probability(
            [player("A", "QB")],
            [injury("A", 2020, 5, status="Questionable"), injury("A", 2020, 8, status="Doubtful")],
            index({2020: [5]}),
            window_half_width=0,
        )
        assert result.injured_number == 0

    def test_duplicate_reports_do_not_count_as_reinjury(self):
        result = compute_injury_probability(
            [player("A", "QB")],
            [injury("A", 2020, 5), injury("A", 2020, 5)],
            index({2020: [5]}),
            window_half_width=0,
        )
        assert result.injured_number == 1
        assert result.injured_again == 0

    def test_earlier_injury_is_not_a_recurrence(self):
        result = compute_injury_probability(
            [player("A", "QB")],
            [injury("A", 2020, 2), injury("A", 2020, 9)],
            index({2020: [9]}),
            window_half_width=0,
        )
        assert result.injured_number == 1
        assert result.injured_again == 0

    def test_population_counts_distinct_names(self):
        result = compute_injury_probability(
            [player("A", "QB"), player("A", "QB"), player("B", "WR")],
            [injury("A", 2020, 5)],
            index({2020: [5]}),
            window_half_width=0,
        )
        assert result.player_number == 2
        assert result.injury_prob == 0.5

    def test_min_seasons(self):
        injuries = [injury("A", 2020, 5), injury("A", 2021, 5), injury("B", 2020, 5)]
        weeks = index({2020: [5], 2021: [5]})
        players = [player("A", "QB"), player("B", "RB")]

        result = compute_injury_probability(players, injuries, weeks, 0, min_seasons=2)
        assert result.injured_number == 1

    def test_season_restricts_linked_injuries_only(self):
        result = compute_injury_probability(
            [player("A", "QB")],
            [injury("A", 2020, 5), injury("A", 2021, 12)],
            index({2020: [5], 2021: [12]}),
            window_half_width=0,
            season=2020,
        )
        assert result.injured_number == 1
        assert result.injured_again == 1

    @pytest.mark.parametrize("kwargs", [{"window_half_width": -1}, {"window_half_width": 2, "min_seasons": 0}])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(InvalidParameterError):
            compute_injury_probability([], [], index({}), **kwargs)
