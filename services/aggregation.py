"""
Grouped aggregation with HAVING-style post filters.

Rows are grouped by a key function, reduced column by column, filtered on
group size and reduced values, then ordered by explicit sort keys. Absent
(None) inputs are skipped by each reducer the way SQL aggregates skip NULL.
"""

import math
import statistics
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, Optional, Sequence

Getter = Callable[[Any], Any]


def _count(values: list) -> int:
    return len(values)


def _sum(values: list) -> Optional[float]:
    return math.fsum(values) if values else None


def _avg(values: list) -> Optional[float]:
    return statistics.fmean(values) if values else None


def _stddev(values: list) -> Optional[float]:
    # Population stddev: a single value has zero spread
    return statistics.pstdev(values) if values else None


def _min(values: list):
    return min(values) if values else None


def _max(values: list):
    return max(values) if values else None


def _count_distinct(values: list) -> int:
    return len(set(values))


_REDUCERS: dict[str, Callable[[list], Any]] = {
    "count": _count,
    "sum": _sum,
    "avg": _avg,
    "stddev": _stddev,
    "min": _min,
    "max": _max,
    "count_distinct": _count_distinct,
}


@dataclass(frozen=True)
class Reducer:
    func: str
    value: Optional[Getter] = None

    def __post_init__(self):
        if self.func not in _REDUCERS:
            raise ValueError(f"Unknown reducer '{self.func}'")
        if self.func != "count" and self.value is None:
            raise ValueError(f"Reducer '{self.func}' needs a value getter")

    def reduce(self, rows: list) -> Any:
        if self.func == "count" and self.value is None:
            return len(rows)
        values = [v for v in (self.value(row) for row in rows) if v is not None]
        return _REDUCERS[self.func](values)


def count(value: Optional[Getter] = None) -> Reducer:
    return Reducer("count", value)


def total(value: Getter) -> Reducer:
    return Reducer("sum", value)


def avg(value: Getter) -> Reducer:
    return Reducer("avg", value)


def stddev(value: Getter) -> Reducer:
    return Reducer("stddev", value)


def minimum(value: Getter) -> Reducer:
    return Reducer("min", value)


def maximum(value: Getter) -> Reducer:
    return Reducer("max", value)


def count_distinct(value: Getter) -> Reducer:
    return Reducer("count_distinct", value)


@dataclass(frozen=True)
class Having:
    """Post-aggregation filter; thresholds are inclusive lower bounds."""

    min_count: Optional[int] = None
    min_values: dict[str, float] = field(default_factory=dict)

    def accepts(self, group: "Group") -> bool:
        if self.min_count is not None and group.size < self.min_count:
            return False
        for column, threshold in self.min_values.items():
            value = group.values.get(column)
            if value is None or value < threshold:
                return False
        return True


@dataclass(frozen=True)
class Group:
    key: tuple
    size: int
    values: dict[str, Any]
    rows: tuple = ()

    def __getitem__(self, column: str) -> Any:
        return self.values[column]


def group_rows(rows: Iterable, key: Callable[[Any], tuple]) -> dict[tuple, list]:
    """Bucket rows by key, dropping rows whose key has an absent part."""
    groups: dict[tuple, list] = {}
    for row in rows:
        group_key = key(row)
        if any(part is None for part in group_key):
            continue
        groups.setdefault(group_key, []).append(row)
    return groups


def aggregate(
    rows: Iterable,
    key: Callable[[Any], tuple],
    reducers: dict[str, Reducer],
    having: Optional[Having] = None,
    keep_rows: bool = False,
) -> list[Group]:
    """
    Group `rows` by `key` and apply `reducers` to each group.

    Groups rejected by `having` are dropped entirely. Output order is
    first-seen group order; callers sort with `sort_rows`.
    """
    result = []
    for group_key, members in group_rows(rows, key).items():
        values = {column: reducer.reduce(members) for column, reducer in reducers.items()}
        group = Group(
            key=group_key,
            size=len(members),
            values=values,
            rows=tuple(members) if keep_rows else (),
        )
        if having is None or having.accepts(group):
            result.append(group)
    return result


@dataclass(frozen=True)
class SortKey:
    value: Getter
    descending: bool = False


def asc(value: Getter) -> SortKey:
    return SortKey(value, descending=False)


def desc(value: Getter) -> SortKey:
    return SortKey(value, descending=True)


def sort_rows(rows: Iterable, keys: Sequence[SortKey]) -> list:
    """Stable multi-key sort; absent values sort last in either direction."""
    ordered = list(rows)
    for sort_key in reversed(keys):
        present = [r for r in ordered if sort_key.value(r) is not None]
        missing = [r for r in ordered if sort_key.value(r) is None]
        present.sort(key=sort_key.value, reverse=sort_key.descending)
        ordered = present + missing
    return ordered


def safe_ratio(numerator, denominator) -> Optional[float]:
    """numerator / denominator, or None (undefined) for a zero or absent denominator."""
    if numerator is None or denominator is None or denominator == 0:
        return None
    return numerator / denominator


def round_or_none(value: Optional[float], digits: int) -> Optional[float]:
    return round(value, digits) if value is not None else None
