"""
Ingestion: timestamp lines -> bucket keys.
A line holds one timestamp (one occurrence) or a start/stop pair separated by the
delimiter (one occurrence per whole hour from start, stop exclusive).
"""
import logging
from datetime import datetime, timedelta
from typing import Iterable, Iterator

from .analysis import Buckets, When
from .config import DEFAULT_DELIMITER, DEFAULT_LAYOUT

logger = logging.getLogger(__name__)

_HOUR = timedelta(hours=1)


class LineParseError(ValueError):
    """A line could not be turned into occurrences."""


def parse_timestamp(value: str, layout: str = DEFAULT_LAYOUT) -> datetime:
    try:
        return datetime.strptime(value.strip(), layout)
    except ValueError as e:
        raise LineParseError(f"cannot parse {value.strip()!r} with layout {layout!r}: {e}") from e


def bucket_key(ts: datetime) -> When:
    """Weekday and hour in the timestamp's own offset."""
    return When(ts.weekday(), ts.hour)


def expand_range(start: datetime, stop: datetime) -> Iterator[datetime]:
    """
    Every whole hour from the one containing `start` while before `stop`: each hour
    slot the interval touches, stop exclusive. Empty when stop <= start.
    """
    if stop <= start:
        return
    t = start.replace(minute=0, second=0, microsecond=0)
    while t < stop:
        yield t
        t += _HOUR


def parse_line(
    line: str,
    *,
    layout: str = DEFAULT_LAYOUT,
    delimiter: str = DEFAULT_DELIMITER,
) -> list[When]:
    """Bucket keys recorded by one input line. Blank lines record nothing."""
    line = line.strip()
    if not line:
        return []
    fields = line.split(delimiter)
    if len(fields) == 1:
        return [bucket_key(parse_timestamp(fields[0], layout))]
    if len(fields) == 2:
        start = parse_timestamp(fields[0], layout)
        stop = parse_timestamp(fields[1], layout)
        try:
            return [bucket_key(t) for t in expand_range(start, stop)]
        except TypeError as e:
            # naive vs aware timestamps cannot be compared
            raise LineParseError(f"cannot compare {fields[0]!r} and {fields[1]!r}: {e}") from e
    raise LineParseError(f"expected 1 or 2 fields, got {len(fields)}")


def ingest_lines(
    lines: Iterable[str],
    buckets: Buckets | None = None,
    *,
    layout: str = DEFAULT_LAYOUT,
    delimiter: str = DEFAULT_DELIMITER,
) -> Buckets:
    """
    Count every line into `buckets` (a new one if None). Unparseable lines are logged
    and skipped; read errors from `lines` propagate.
    """
    if buckets is None:
        buckets = Buckets()
    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        try:
            keys = parse_line(line, layout=layout, delimiter=delimiter)
        except LineParseError as e:
            skipped += 1
            logger.warning("line %d: %s", lineno, e)
            continue
        buckets.update(keys)
    logger.debug("Ingested %d occurrences (%d lines skipped)", buckets.sum(), skipped)
    return buckets
