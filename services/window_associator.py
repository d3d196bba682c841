"""
Windowed association of injury events with adverse-weather weeks.

Adverse weeks are indexed by season once per request, so each injury costs
one set lookup per offset in [-W, +W].
"""

from collections import defaultdict
from typing import Iterable, Optional

from core.exceptions import InvalidParameterError
from services.dataset import WeatherRecord, is_regular_week
from services.weather_classifier import FOGGY, classify_weather


def window_offsets(half_width: int) -> range:
    """Integer offsets -W..+W inclusive."""
    if half_width is None or half_width < 0:
        raise InvalidParameterError("window_half_width", "must be a non-negative integer")
    return range(-half_width, half_width + 1)


class AdverseWeekIndex:
    """Season -> set of weeks that had at least one adverse-weather game."""

    def __init__(self, weeks_by_season: dict[int, frozenset[int]]):
        self._weeks = weeks_by_season

    @classmethod
    def from_weather(
        cls,
        records: Iterable[WeatherRecord],
        categories: Iterable[str] = (FOGGY,),
    ) -> "AdverseWeekIndex":
        categories = frozenset(categories)
        weeks: dict[int, set[int]] = defaultdict(set)
        for record in records:
            if not is_regular_week(record.week):
                continue
            if classify_weather(record.weather_text) in categories:
                weeks[record.season].add(record.week)
        return cls({season: frozenset(ws) for season, ws in weeks.items()})

    @classmethod
    def from_weeks(cls, weeks_by_season: dict[int, Iterable[int]]) -> "AdverseWeekIndex":
        return cls({
            season: frozenset(w for w in ws if is_regular_week(w))
            for season, ws in weeks_by_season.items()
        })

    def weeks(self, season: int) -> frozenset[int]:
        return self._weeks.get(season, frozenset())

    def is_associated(self, season: Optional[int], week: Optional[int], half_width: int) -> bool:
        """
        True when an adverse week of the same season lies in [week - W, week + W].

        Offsets landing outside the regular-season weeks are skipped; an event
        whose own week is outside them is never associated.
        """
        offsets = window_offsets(half_width)
        if season is None or not is_regular_week(week):
            return False

        adverse = self._weeks.get(season)
        if not adverse:
            return False

        for offset in offsets:
            candidate = week + offset
            if not is_regular_week(candidate):
                continue
            if candidate in adverse:
                return True
        return False

    def __len__(self) -> int:
        return sum(len(ws) for ws in self._weeks.values())
