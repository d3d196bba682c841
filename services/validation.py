"""
Parameter checks run before a view touches the database.
"""

from numbers import Real
from typing import Iterable, Optional

from core.exceptions import InvalidParameterError

SEASON_MIN = 1920
SEASON_MAX = 2100


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_positive_int(name: str, value) -> int:
    if not _is_int(value) or value < 1:
        raise InvalidParameterError(name, "must be a positive integer")
    return value


def require_non_negative_int(name: str, value) -> int:
    if not _is_int(value) or value < 0:
        raise InvalidParameterError(name, "must be a non-negative integer")
    return value


def require_non_negative_number(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or value != value or value < 0:
        raise InvalidParameterError(name, "must be a non-negative number")
    return float(value)


def require_non_empty(name: str, value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameterError(name, "must be a non-empty string")
    return value.strip()


def optional_non_empty(name: str, value) -> Optional[str]:
    if value is None:
        return None
    return require_non_empty(name, value)


def require_season(name: str, value) -> int:
    if not _is_int(value) or not SEASON_MIN <= value <= SEASON_MAX:
        raise InvalidParameterError(name, f"must be a season between {SEASON_MIN} and {SEASON_MAX}")
    return value


def optional_season(name: str, value) -> Optional[int]:
    if value is None:
        return None
    return require_season(name, value)


def require_codes(name: str, values: Iterable[str]) -> frozenset[str]:
    """Upper-cased, de-duplicated non-empty codes."""
    if values is None or isinstance(values, str):
        raise InvalidParameterError(name, "must be a collection of codes")
    codes = frozenset(v.strip().upper() for v in values if isinstance(v, str) and v.strip())
    if not codes:
        raise InvalidParameterError(name, "must contain at least one code")
    return codes
