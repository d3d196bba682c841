"""
Weather classification for game-weeks.

Free-text weather descriptions map onto one category by ordered keyword
rules; temperature and wind strings map onto Cold/Windy/Normal by numeric
thresholds. Text that doesn't parse as a number never takes part in a
numeric rule.
"""

import re
from typing import Optional

RAINY = "Rainy"
SNOWY = "Snowy"
FOGGY = "Foggy"
CLOUDY = "Cloudy"
CLEAR = "Clear/Sunny"
WINDY = "Windy"
COLD = "Cold"
OTHER = "Other"
NORMAL = "Normal"
RAIN_SNOW = "Rain/Snow"

# First match wins
WEATHER_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (RAINY, ("rain", "shower", "drizzle", "wet")),
    (SNOWY, ("snow", "wintry", "freezing", "blizzard", "flurries")),
    (FOGGY, ("fog", "mist", "haze")),
    (CLOUDY, ("overcast", "cloud", "humid")),
    (CLEAR, ("clear", "fair", "sun")),
    (WINDY, ("wind", "breezy")),
)

WEATHER_CATEGORIES = tuple(label for label, _ in WEATHER_KEYWORDS) + (OTHER,)

COLD_THRESHOLD_F = 40
WIND_THRESHOLD_MPH = 20

# "45 F", "45F", "45°F", "45"; signed readings do not parse
_TEMPERATURE_RE = re.compile(r"^\s*(\d+)\s*(?:°\s*)?(?:F)?\s*$", re.IGNORECASE)
# "12", "12 mph"
_WIND_RE = re.compile(r"^\s*(\d+)\s*(?:mph)?\s*$", re.IGNORECASE)


def classify_weather(description: Optional[str]) -> str:
    """Map a weather description to its category; empty -> Other."""
    if not description:
        return OTHER
    text = description.lower()
    for label, keywords in WEATHER_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return label
    return OTHER


def parse_temperature(text: Optional[str]) -> Optional[int]:
    """Degrees Fahrenheit, or None when the text isn't a plain reading."""
    if text is None:
        return None
    match = _TEMPERATURE_RE.match(text)
    return int(match.group(1)) if match else None


def parse_wind_speed(text: Optional[str]) -> Optional[int]:
    """Wind speed in mph, or None when the text isn't numeric."""
    if text is None:
        return None
    match = _WIND_RE.match(text)
    return int(match.group(1)) if match else None


def classify_conditions(
    temperature_text: Optional[str],
    wind_text: Optional[str],
) -> str:
    """Cold below 40F, else Windy above 20 mph, else Normal."""
    temperature = parse_temperature(temperature_text)
    if temperature is not None and temperature < COLD_THRESHOLD_F:
        return COLD
    wind = parse_wind_speed(wind_text)
    if wind is not None and wind > WIND_THRESHOLD_MPH:
        return WINDY
    return NORMAL


def classify_game_conditions(
    weather_text: Optional[str],
    temperature_text: Optional[str],
    wind_text: Optional[str],
) -> str:
    """
    Game-level label used by team comparisons: Rain/Snow, Cold, Windy or Normal.

    A game is only labelled adverse when its weather, temperature and wind
    are all recorded; anything else counts as Normal.
    """
    if (
        not weather_text
        or parse_temperature(temperature_text) is None
        or parse_wind_speed(wind_text) is None
    ):
        return NORMAL
    if weather_text.strip().lower() in ("rain", "snow"):
        return RAIN_SNOW
    return classify_conditions(temperature_text, wind_text)
