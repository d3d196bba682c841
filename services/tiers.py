"""
Position-based performance scoring and tiers.
"""

from typing import Callable, Optional

from services.dataset import (
    PositionStatRecord,
    QuarterbackStatRecord,
    RunningbackStatRecord,
    WideoutStatRecord,
)

ELITE = "Elite"
ABOVE_AVERAGE = "Above Average"
AVERAGE = "Average"
BELOW_AVERAGE = "Below Average"

TIER_ORDER = (ELITE, ABOVE_AVERAGE, AVERAGE, BELOW_AVERAGE)

# Exclusive lower bounds for Elite, Above Average, Average
TIER_BREAKPOINTS: dict[str, tuple[float, float, float]] = {
    "QB": (24, 20, 15),
    "RB": (18, 14, 10),
    "WR": (15, 12, 8),
}

TIERED_POSITIONS = frozenset(TIER_BREAKPOINTS)


def _qb_score(stat: QuarterbackStatRecord) -> float:
    return (
        0.04 * stat.passing_yards
        + 4 * stat.passing_tds
        + 0.1 * stat.rushing_yards
        + 6 * stat.rushing_tds
        - 2 * stat.interceptions
    )


def _rb_score(stat: RunningbackStatRecord) -> float:
    return (
        0.1 * stat.rushing_yards
        + 6 * stat.rushing_tds
        + 0.1 * stat.receiving_yards
        + 6 * stat.receiving_tds
    )


def _wr_score(stat: WideoutStatRecord) -> float:
    return 0.1 * stat.receiving_yards + 6 * stat.receiving_tds


_SCORERS: dict[type, Callable] = {
    QuarterbackStatRecord: _qb_score,
    RunningbackStatRecord: _rb_score,
    WideoutStatRecord: _wr_score,
}


def performance_score(stat: PositionStatRecord) -> float:
    """Weighted single-game score for a QB, RB or WR stat line."""
    try:
        scorer = _SCORERS[type(stat)]
    except KeyError:
        raise TypeError(f"No scoring formula for {type(stat).__name__}") from None
    return scorer(stat)


def classify_tier(position: Optional[str], avg_performance: Optional[float]) -> Optional[str]:
    """
    Tier label for an average performance score.

    A value equal to a breakpoint falls into the lower tier. Positions
    without breakpoints (anything but QB, RB, WR) have no tier and return None.
    """
    if avg_performance is None:
        return None
    breakpoints = TIER_BREAKPOINTS.get((position or "").upper())
    if breakpoints is None:
        return None

    for label, bound in zip(TIER_ORDER, breakpoints):
        if avg_performance > bound:
            return label
    return BELOW_AVERAGE


def tier_rank(tier: str) -> int:
    return TIER_ORDER.index(tier) + 1 if tier in TIER_ORDER else len(TIER_ORDER) + 1
