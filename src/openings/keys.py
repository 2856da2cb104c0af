"""Schedule key grammars and compound key expansion.

Two grammars exist: weekday abbreviations ('Mon'..'Sun') for the regular
week and 'YYYY/MM/DD' dates for exceptions. Both map onto dates so that a
single forward day-by-day walk expands ranges for either grammar.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Iterator

from openings.types import InvalidFormatError

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Any Monday works; weekday keys are placed in the week starting here.
_WEEK_ANCHOR = date(2024, 1, 1)

RANGE_SEPARATOR = "-"
LIST_SEPARATOR = ","


@dataclass(frozen=True)
class KeyFormat:
    """A key grammar: how atomic keys parse to and render from dates."""

    name: str
    pattern: str
    parse: Callable[[str], date]
    render: Callable[[date], str]

    def is_valid(self, key: str) -> bool:
        try:
            self.parse(key)
        except ValueError:
            return False
        return True


def _parse_weekday(s: str) -> date:
    try:
        index = WEEKDAYS.index(s)
    except ValueError:
        raise ValueError(f"unknown weekday {s!r}") from None
    return _WEEK_ANCHOR + timedelta(days=index)


def _render_weekday(d: date) -> str:
    return WEEKDAYS[d.weekday()]


def _parse_date(s: str) -> date:
    return datetime.strptime(s, "%Y/%m/%d").date()


def format_date(d: date) -> str:
    """Render a date as a 'YYYY/MM/DD' key (always zero-padded)."""
    return f"{d.year:04d}/{d.month:02d}/{d.day:02d}"


WEEKDAY = KeyFormat("weekday", "D", _parse_weekday, _render_weekday)
DATE = KeyFormat("date", "YYYY/MM/DD", _parse_date, format_date)


def iter_range(start: date, end: date, key_format: KeyFormat) -> Iterator[str]:
    """Yield rendered keys from start to end inclusive, always walking forward.

    An end before the start is pushed one week later, which turns
    'Fri-Mon' into Fri, Sat, Sun, Mon. A date range that is still
    reversed after that yields nothing.
    """
    if end < start:
        end += timedelta(weeks=1)

    current = start
    while current <= end:
        yield key_format.render(current)
        current += timedelta(days=1)


def expand_key(key: str, key_format: KeyFormat) -> list[str]:
    """Expand a raw schedule key into its atomic keys.

    'A-B' is an inclusive range whose endpoints must parse under
    key_format. 'A,B,C' is an explicit list; its atoms are taken as-is.
    Anything else is a single atomic key, also taken as-is.

    Raises InvalidFormatError if a range endpoint does not parse.
    """
    if RANGE_SEPARATOR in key:
        first, last = key.split(RANGE_SEPARATOR, 1)
        try:
            start = key_format.parse(first)
            end = key_format.parse(last)
        except ValueError as exc:
            raise InvalidFormatError(
                key,
                f"{key_format.pattern}{RANGE_SEPARATOR}{key_format.pattern}",
                kind="key range",
            ) from exc
        return list(iter_range(start, end, key_format))

    if LIST_SEPARATOR in key:
        return key.split(LIST_SEPARATOR)

    return [key]
