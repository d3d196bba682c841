"""Tests for associating injury weeks with adverse-weather weeks."""

import pytest

from conftest import game
from core.exceptions import InvalidParameterError
from services.window_associator import AdverseWeekIndex, window_offsets
from services.weather_classifier import FOGGY, RAINY


class TestWindowOffsets:
    def test_symmetric_range(self):
        assert list(window_offsets(2)) == [-2, -1, 0, 1, 2]

    def test_zero_width_is_exact_week(self):
        assert list(window_offsets(0)) == [0]

    def test_negative_width_rejected(self):
        with pytest.raises(InvalidParameterError):
            window_offsets(-1)


class TestAdverseWeekIndex:
    def test_zero_width_checks_only_the_exact_week(self):
        index = AdverseWeekIndex.from_weeks({2020: [5]})
        assert index.is_associated(2020, 5, 0)
        assert not index.is_associated(2020, 4, 0)

    def test_window_covers_neighbouring_weeks(self):
        index = AdverseWeekIndex.from_weeks({2020: [5]})
        assert index.is_associated(2020, 3, 2)
        assert index.is_associated(2020, 7, 2)
        assert not index.is_associated(2020, 8, 2)

    def test_other_seasons_never_match(self):
        index = AdverseWeekIndex.from_weeks({2020: [5]})
        assert not index.is_associated(2021, 5, 3)

    def test_offsets_outside_week_domain_are_skipped(self):
        index = AdverseWeekIndex.from_weeks({2020: [1, 18]})
        assert index.is_associated(2020, 2, 1)
        assert index.is_associated(2020, 17, 3)
        assert not AdverseWeekIndex.from_weeks({2020: [4]}).is_associated(2020, 1, 2)

    def test_first_week_window_reaches_only_forward(self):
        # Offsets -3..-1 from week 1 are skipped; weeks 1..4 are checked
        assert AdverseWeekIndex.from_weeks({2020: [4]}).is_associated(2020, 1, 3)
        assert not AdverseWeekIndex.from_weeks({2020: [5]}).is_associated(2020, 1, 3)

    def test_event_outside_week_domain_is_never_associated(self):
        index = AdverseWeekIndex.from_weeks({2020: [18]})
        assert not index.is_associated(2020, 19, 1)
        assert not index.is_associated(None, 18, 1)

    def test_wider_window_never_loses_a_match(self):
        index = AdverseWeekIndex.from_weeks({2020: [9]})
        for week in range(1, 19):
            matched = [index.is_associated(2020, week, w) for w in range(0, 6)]
            # Once associated, every wider window stays associated
            assert matched == sorted(matched)

    def test_negative_width_rejected_even_without_adverse_weeks(self):
        with pytest.raises(InvalidParameterError):
            AdverseWeekIndex.from_weeks({}).is_associated(2020, 5, -1)

    def test_from_weather_uses_requested_categories(self):
        records = [
            game(2020, 3, weather="Morning fog"),
            game(2020, 6, weather="Rain"),
            game(2020, 22, weather="Fog"),
        ]
        foggy = AdverseWeekIndex.from_weather(records)
        assert foggy.weeks(2020) == frozenset({3})

        both = AdverseWeekIndex.from_weather(records, categories=(FOGGY, RAINY))
        assert both.weeks(2020) == frozenset({3, 6})
        assert len(both) == 2
