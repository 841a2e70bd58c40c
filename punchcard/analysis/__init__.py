# Aggregation: occurrence counts per weekday/hour, normalization and margins

from .buckets import HOURS, WEEKDAY_NAMES, WEEKDAYS, Buckets, When

__all__ = ["Buckets", "When", "WEEKDAYS", "HOURS", "WEEKDAY_NAMES"]
