"""
Bucket aggregation: occurrence counts per (weekday, hour) and the normalized
intensities the renderer colors with. Everything derived is recomputed on demand.
"""
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple

# Monday = 0, matching datetime.weekday()
WEEKDAYS: tuple[int, ...] = tuple(range(7))
HOURS: tuple[int, ...] = tuple(range(24))
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class When(NamedTuple):
    """Bucket key: weekday (0=Monday .. 6=Sunday) and hour of day (0..23)."""
    day: int
    hour: int


def _ratio(value: float, denominator: float) -> float:
    return value / denominator if denominator > 0 else 0.0


@dataclass
class Buckets:
    """Counts per When key. Missing keys count as 0."""
    counts: dict[When, int] = field(default_factory=dict)

    def increment(self, key: When | tuple[int, int], n: int = 1) -> None:
        day, hour = key
        if day not in WEEKDAYS or hour not in HOURS:
            raise ValueError(f"Bucket key out of range: day={day}, hour={hour}")
        key = When(day, hour)
        self.counts[key] = self.counts.get(key, 0) + n

    def update(self, keys: Iterable[When | tuple[int, int]]) -> None:
        for key in keys:
            self.increment(key)

    def count(self, key: When | tuple[int, int]) -> int:
        return self.counts.get(When(*key), 0)

    def __len__(self) -> int:
        return sum(1 for v in self.counts.values() if v)

    def sum(self) -> int:
        return sum(self.counts.values())

    def max(self) -> int:
        return max(self.counts.values(), default=0)

    def avg(self) -> float:
        """Mean count over non-empty buckets; 0.0 when nothing was recorded."""
        return _ratio(self.sum(), len(self))

    def normalized(self) -> dict[When, float]:
        """count / max() for every recorded key. All zeros when max() is 0."""
        peak = self.max()
        return {k: _ratio(v, peak) for k, v in self.counts.items()}

    def intensity(self, key: When | tuple[int, int]) -> float:
        return _ratio(self.count(key), self.max())

    def weekday_totals(self) -> dict[int, int]:
        totals = {day: 0 for day in WEEKDAYS}
        for (day, _), v in self.counts.items():
            totals[day] += v
        return totals

    def hour_totals(self) -> dict[int, int]:
        totals = {hour: 0 for hour in HOURS}
        for (_, hour), v in self.counts.items():
            totals[hour] += v
        return totals

    def weekday_margin(self) -> dict[int, float]:
        """
        Per-weekday total divided by the largest weekday total. This is relative
        to the other weekdays, not to the busiest single cell.
        """
        totals = self.weekday_totals()
        peak = max(totals.values())
        return {day: _ratio(v, peak) for day, v in totals.items()}

    def hour_margin(self) -> dict[int, float]:
        """Per-hour total across the week divided by the largest hour total."""
        totals = self.hour_totals()
        peak = max(totals.values())
        return {hour: _ratio(v, peak) for hour, v in totals.items()}
