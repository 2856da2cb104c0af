"""Input validation for raw openings and exceptions.

Unlike normalisation, validation never raises: every problem found is
reported. It is also stricter, checking each atomic key (including the
atoms of a comma list) against the key grammar.
"""

from __future__ import annotations

from openings.keys import DATE, LIST_SEPARATOR, RANGE_SEPARATOR, WEEKDAY, KeyFormat
from openings.normalize import TIME_RANGE_PATTERN, RawSchedule, parse_time_range
from openings.types import InvalidFormatError


def _validate_key(key: object, key_format: KeyFormat) -> list[str]:
    if not isinstance(key, str):
        return [f"Key {key!r}: must be a string"]

    if RANGE_SEPARATOR in key:
        parts = key.split(RANGE_SEPARATOR, 1)
    else:
        parts = key.split(LIST_SEPARATOR)

    return [
        f"Key {key!r}: {part!r} is not a valid {key_format.name} "
        f"(expected {key_format.pattern})"
        for part in parts
        if not key_format.is_valid(part)
    ]


def _validate_times(key: str, times: object) -> list[str]:
    if not times:
        return []
    if isinstance(times, str):
        times = [times]
    if not isinstance(times, (list, tuple)):
        return [
            f"Key {key!r}: times must be a string or a list of strings "
            f"(expected {TIME_RANGE_PATTERN})"
        ]

    errors: list[str] = []
    for i, t in enumerate(times):
        if not isinstance(t, str):
            errors.append(
                f"Key {key!r}, time {i}: expected a string, got {t!r} "
                f"(expected {TIME_RANGE_PATTERN})"
            )
            continue
        try:
            parse_time_range(t)
        except InvalidFormatError as e:
            errors.append(
                f"Key {key!r}, time {i}: {e.value!r} "
                f"(expected {TIME_RANGE_PATTERN})"
            )
    return errors


def _validate(raw: object, key_format: KeyFormat) -> list[str]:
    if not isinstance(raw, dict):
        return [f"{key_format.name} schedule must be an object, got {type(raw).__name__}"]

    errors: list[str] = []
    for key, times in raw.items():
        errors.extend(_validate_key(key, key_format))
        errors.extend(_validate_times(str(key), times))
    return errors


def validate_openings(openings: RawSchedule) -> list[str]:
    """Validate weekly openings. Returns list of error messages (empty = valid).

    Checks:
    - Keys are weekdays, weekday ranges or comma lists of weekdays
    - Times are 'HH:MM-HH:MM' strings
    """
    return _validate(openings, WEEKDAY)


def validate_exceptions(exceptions: RawSchedule) -> list[str]:
    """Validate date exceptions. Returns list of error messages.

    Checks:
    - Keys are 'YYYY/MM/DD' dates, date ranges or comma lists of dates
    - Times are 'HH:MM-HH:MM' strings
    """
    return _validate(exceptions, DATE)
