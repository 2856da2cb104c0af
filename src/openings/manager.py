"""OpeningsManager — answers "is it open?" from a week plus date exceptions."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable

from openings.keys import DATE, WEEKDAY, WEEKDAYS, format_date
from openings.normalize import RawSchedule, normalize
from openings.types import TimeInterval

logger = logging.getLogger(__name__)

Schedule = dict[str, list[TimeInterval]]


def _date_key(d: date | str) -> str:
    if isinstance(d, str):
        return d
    return format_date(d)


def _time_key(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}"


class OpeningsManager:
    """Weekly opening hours with date-specific exceptions.

    Openings are keyed by weekday ('Mon'..'Sun'), exceptions by date
    ('YYYY/MM/DD'). An exception present for a date replaces that day's
    weekly openings entirely, and an empty exception means closed all day.
    All times are naive local wall-clock 'HH:MM' strings.

    Each set_* call rebuilds its table from scratch and only swaps it in
    once the whole input has parsed. Instances are meant to be configured
    and then shared read-only; there is no internal locking.
    """

    def __init__(
        self,
        openings: RawSchedule | None = None,
        exceptions: RawSchedule | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._clock = clock
        self._openings: Schedule = {}
        self._exceptions: Schedule = {}
        self.set_openings(openings or {})
        self.set_exceptions(exceptions or {})

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_openings(self, openings: RawSchedule | None) -> None:
        """Replace the weekly openings. Unlisted days are closed.

        Raises InvalidFormatError on a malformed day range or time range.
        """
        defaults: Schedule = {day: [] for day in WEEKDAYS}
        self._openings = normalize(openings or {}, WEEKDAY, defaults)
        logger.debug(
            "Openings replaced: %d of %d days open",
            sum(1 for v in self._openings.values() if v),
            len(self._openings),
        )

    def set_exceptions(self, exceptions: RawSchedule | None = None) -> None:
        """Replace the date exceptions.

        Raises InvalidFormatError on a malformed date range or time range.
        """
        self._exceptions = normalize(exceptions or {}, DATE)
        logger.debug("Exceptions replaced: %d dates", len(self._exceptions))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_openings(self) -> Schedule:
        return {day: list(v) for day, v in self._openings.items()}

    def get_opening(self, day: str) -> list[TimeInterval]:
        """Openings for a weekday. Raises KeyError for an unknown day."""
        try:
            return list(self._openings[day])
        except KeyError:
            raise KeyError(
                f"Unknown weekday {day!r}, expected one of {', '.join(WEEKDAYS)}"
            ) from None

    def get_exceptions(self) -> Schedule:
        return {d: list(v) for d, v in self._exceptions.items()}

    def get_exception(self, d: date | str) -> list[TimeInterval] | None:
        """Exception for a date, or None if the date has no exception.

        An empty list is an exception too: closed all day.
        """
        intervals = self._exceptions.get(_date_key(d))
        if intervals is None:
            return None
        return list(intervals)

    def openings_for_date(self, d: date | str) -> list[TimeInterval]:
        """The intervals that apply on a date.

        The exception list wins whenever one exists for the date, even
        if it is empty. Otherwise the weekday's regular openings apply.
        """
        exception = self.get_exception(d)
        if exception is not None:
            return exception

        if isinstance(d, str):
            d = DATE.parse(d)
        return self.get_opening(WEEKDAYS[d.weekday()])

    def is_open(self, at: datetime | None = None) -> bool:
        """Whether any applicable interval contains the instant's 'HH:MM'.

        Both interval ends are inclusive. Without an instant the
        manager's clock supplies "now".
        """
        if at is None:
            at = self._clock()

        hhmm = _time_key(at)
        return any(iv.contains(hhmm) for iv in self.openings_for_date(at))
