"""Tests for weather description and temperature/wind classification."""

import pytest

from services.weather_classifier import (
    CLEAR,
    CLOUDY,
    COLD,
    FOGGY,
    NORMAL,
    OTHER,
    RAIN_SNOW,
    RAINY,
    SNOWY,
    WINDY,
    classify_conditions,
    classify_game_conditions,
    classify_weather,
    parse_temperature,
    parse_wind_speed,
)


class TestClassifyWeather:
    @pytest.mark.parametrize(
        "description, expected",
        [
            ("Light Rain", RAINY),
            ("scattered showers", RAINY),
            ("DRIZZLE", RAINY),
            ("light Drizzle", RAINY),
            ("Snow flurries", SNOWY),
            ("Dense FOG", FOGGY),
            ("Overcast", CLOUDY),
            ("Sunny and clear", CLEAR),
            ("Breezy", WINDY),
            ("Dome", OTHER),
        ],
    )
    def test_keyword_categories(self, description, expected):
        assert classify_weather(description) == expected

    def test_first_matching_category_wins(self):
        # "rain" and "snow" both match; Rainy comes first
        assert classify_weather("Rain and snow mix") == RAINY
        # "cloud" and "wind" both match; Cloudy comes before Windy
        assert classify_weather("Cloudy, windy") == CLOUDY

    @pytest.mark.parametrize("description", [None, ""])
    def test_empty_description_is_other(self, description):
        assert classify_weather(description) == OTHER


class TestNumericParsing:
    @pytest.mark.parametrize("text, expected", [("45", 45), ("45 F", 45), ("28°F", 28), ("0 F", 0)])
    def test_parse_temperature(self, text, expected):
        assert parse_temperature(text) == expected

    @pytest.mark.parametrize("text", [None, "", "DOME", "n/a", "45 degrees", "-3F", "-5 F"])
    def test_malformed_temperature_is_none(self, text):
        assert parse_temperature(text) is None

    @pytest.mark.parametrize("text, expected", [("12", 12), ("25 mph", 25)])
    def test_parse_wind_speed(self, text, expected):
        assert parse_wind_speed(text) == expected

    @pytest.mark.parametrize("text", [None, "calm", "NW 10"])
    def test_malformed_wind_is_none(self, text):
        assert parse_wind_speed(text) is None


class TestClassifyConditions:
    def test_cold_below_forty(self):
        assert classify_conditions("39", "30") == COLD

    def test_forty_is_not_cold(self):
        assert classify_conditions("40", "5") == NORMAL

    def test_windy_above_twenty(self):
        assert classify_conditions("60", "21") == WINDY
        assert classify_conditions("60", "20") == NORMAL

    def test_malformed_fields_are_not_coerced_to_zero(self):
        # A zero temperature would read as Cold
        assert classify_conditions("DOME", "5") == NORMAL
        assert classify_conditions("DOME", "25") == WINDY

    def test_game_conditions_rain_or_snow(self):
        assert classify_game_conditions("Rain", "30 F", "25") == RAIN_SNOW
        assert classify_game_conditions(" snow ", "50 F", "5") == RAIN_SNOW
        assert classify_game_conditions("Light rain", "30 F", "5") == COLD
        assert classify_game_conditions("Clear", "70 F", "25") == WINDY

    def test_game_conditions_need_every_field(self):
        assert classify_game_conditions("Rain", "N/A", None) == NORMAL
        assert classify_game_conditions("Snow", "20 F", None) == NORMAL
        assert classify_game_conditions(None, "20 F", "30") == NORMAL
        assert classify_game_conditions("", "20 F", "30") == NORMAL
