"""
Injury-after-weather probability estimates.

Two chained ratios over the roster population N:

    injury_prob         = injured_number / N
    another_injury_prob = injured_again / injured_number

where `injured_number` counts players with a qualifying ("Out") injury
inside the weather window, and `injured_again` counts those players who
missed another game strictly later than their first such injury.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from core.exceptions import InvalidParameterError
from services.aggregation import safe_ratio
from services.dataset import InjuryRecord, PlayerRecord, is_regular_week
from services.window_associator import AdverseWeekIndex, window_offsets

QUALIFYING_STATUS = "Out"


@dataclass(frozen=True)
class InjuryProbability:
    player_number: int
    injured_number: int
    injured_again: int
    injury_prob: Optional[float]
    another_injury_prob: Optional[float]


def is_qualifying(injury: InjuryRecord) -> bool:
    return (
        injury.game_status == QUALIFYING_STATUS
        and injury.season is not None
        and is_regular_week(injury.week)
    )


def compute_injury_probability(
    players: Iterable[PlayerRecord],
    injuries: Iterable[InjuryRecord],
    adverse_weeks: AdverseWeekIndex,
    window_half_width: int,
    min_seasons: int = 1,
    season: Optional[int] = None,
) -> InjuryProbability:
    """
    Estimate injury and recurrence probabilities.

    Args:
        players: Roster; N is the number of distinct names
        injuries: Full injury history
        adverse_weeks: Adverse-weather weeks indexed by season
        window_half_width: W for the [-W, +W] week window
        min_seasons: Distinct seasons of weather-linked injuries a player needs
        season: Only count weather-linked injuries from this season

    Raises:
        InvalidParameterError: For a negative window or min_seasons < 1
    """
    window_offsets(window_half_width)
    if min_seasons is None or min_seasons < 1:
        raise InvalidParameterError("min_seasons", "must be a positive integer")

    player_number = len({p.name for p in players})

    # (season, week) keys deduplicate repeated report rows for the same game
    qualifying: dict[str, set[tuple[int, int]]] = {}
    for injury in injuries:
        if is_qualifying(injury):
            qualifying.setdefault(injury.player, set()).add((injury.season, injury.week))

    injured: dict[str, tuple[int, int]] = {}
    for player, keys in qualifying.items():
        linked = sorted(
            key for key in keys
            if (season is None or key[0] == season)
            and adverse_weeks.is_associated(key[0], key[1], window_half_width)
        )
        if not linked:
            continue
        if len({s for s, _ in linked}) < min_seasons:
            continue
        injured[player] = linked[0]

    injured_again = sum(
        1 for player, first in injured.items()
        if any(key > first for key in qualifying[player])
    )

    injured_number = len(injured)
    return InjuryProbability(
        player_number=player_number,
        injured_number=injured_number,
        injured_again=injured_again,
        injury_prob=safe_ratio(injured_number, player_number),
        another_injury_prob=safe_ratio(injured_again, injured_number),
    )
