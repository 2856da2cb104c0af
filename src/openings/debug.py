"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from datetime import date, timedelta

from openings.keys import WEEKDAYS


def _minutes(hhmm: str) -> int:
    return int(hhmm[:2]) * 60 + int(hhmm[3:])


def show_week(
    manager: "OpeningsManager",  # noqa: F821 — avoid circular import
    start: date,
    end: date,
) -> str:
    """Print ASCII view showing open periods for a date range.

    Each row is one day, each char is 30 minutes. '#' = open, '.' = closed.
    Dates governed by an exception are flagged with '*'.
    Returns the string and also prints to stdout.

    Args:
        manager: OpeningsManager instance
        start: First date to show (inclusive)
        end: Last date to show (exclusive)
    """
    lines: list[str] = []

    # 24-hour timeline, each char = 30 minutes (48 chars per day)
    chars_per_day = 48
    minutes_per_char = 30

    header_hours = "".join(f"{h:02d}" if h % 3 == 0 else "  " for h in range(24))
    lines.append(f"{'':>16s}  {header_hours}")

    current = start
    while current < end:
        flag = "*" if manager.get_exception(current) is not None else " "
        label = f"{flag}{WEEKDAYS[current.weekday()]} {current.strftime('%d %b')}"

        row = list("." * chars_per_day)
        for iv in manager.openings_for_date(current):
            # Inclusive end: a slot is open if any minute in it is
            first = _minutes(iv.start) // minutes_per_char
            last = _minutes(iv.end) // minutes_per_char
            for i in range(first, min(last + 1, chars_per_day)):
                row[i] = "#"

        lines.append(f"{label:>16s}  {''.join(row)}")
        current += timedelta(days=1)

    result = "\n".join(lines)
    print(result)
    return result
