"""Schedule normalisation: raw schedule input -> canonical interval tables."""

from __future__ import annotations

from datetime import time
from typing import Iterable, Mapping, Sequence, Union

from openings.keys import KeyFormat, expand_key
from openings.types import InvalidFormatError, TimeInterval

TIME_PATTERN = "HH:MM"
TIME_RANGE_PATTERN = f"{TIME_PATTERN}-{TIME_PATTERN}"

RawTimes = Union[str, Sequence[str], None]
RawSchedule = Mapping[str, RawTimes]


def is_valid_time(s: str) -> bool:
    """True for a zero-padded 24-hour 'HH:MM' string."""
    if not isinstance(s, str) or len(s) != 5 or s[2] != ":":
        return False
    if not (s[:2].isdigit() and s[3:].isdigit()):
        return False
    try:
        time.fromisoformat(s)
    except ValueError:
        return False
    return True


def parse_time_range(s: str) -> TimeInterval:
    """Parse 'HH:MM-HH:MM' into a TimeInterval.

    Surrounding whitespace is ignored. The string is split on its first
    '-' and both halves must be valid times.
    """
    if not isinstance(s, str):
        raise InvalidFormatError(repr(s), TIME_RANGE_PATTERN, kind="time string")
    text = s.strip()
    start, _, end = text.partition("-")
    if not (is_valid_time(start) and is_valid_time(end)):
        raise InvalidFormatError(text, TIME_RANGE_PATTERN, kind="time string")
    return TimeInterval(start, end)


def normalize_times(times: RawTimes) -> list[TimeInterval]:
    """Normalise a raw value: falsy is closed, a string is a single range.

    Anything that is not a list or tuple is treated as a single range too,
    so it fails time parsing rather than iteration.
    """
    if not times:
        return []
    if not isinstance(times, (list, tuple)):
        times = [times]
    return [parse_time_range(t) for t in times]


def normalize_entry(
    key: str, times: RawTimes, key_format: KeyFormat
) -> dict[str, list[TimeInterval]]:
    """Expand one raw key and fan its intervals out to every atomic key."""
    atomic_keys = expand_key(key, key_format)
    intervals = normalize_times(times)
    return {k: list(intervals) for k in atomic_keys}


def normalize(
    raw: RawSchedule,
    key_format: KeyFormat,
    defaults: Mapping[str, Iterable[TimeInterval]] | None = None,
) -> dict[str, list[TimeInterval]]:
    """Build a canonical table from raw schedule input.

    Entries are merged in input order (a later entry wins on key
    collision), then laid over defaults so caller data always wins.

    Raises InvalidFormatError on a malformed key range or time range.
    """
    entries: dict[str, list[TimeInterval]] = {}
    for key, times in raw.items():
        entries.update(normalize_entry(key, times, key_format))

    table: dict[str, list[TimeInterval]] = {
        k: list(v) for k, v in (defaults or {}).items()
    }
    table.update(entries)
    return table
