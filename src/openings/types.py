"""Shared types: TimeInterval and InvalidFormatError."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeInterval:
    """Immutable open window on a single day.

    Invariants:
        - start and end are zero-padded 24-hour 'HH:MM' strings
        - Both ends are inclusive

    Because the format is fixed-width, plain string comparison orders
    times correctly and no time objects are needed at query time.
    """

    start: str
    end: str

    def contains(self, hhmm: str) -> bool:
        """Whether 'HH:MM' lies within [start, end]."""
        return self.start <= hhmm <= self.end

    def to_dict(self) -> dict[str, str]:
        return {"from": self.start, "to": self.end}

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class InvalidFormatError(ValueError):
    """Raised when a schedule key range or time range is malformed."""

    def __init__(self, value: str, expected: str, kind: str = "value") -> None:
        self.value = value
        self.expected = expected
        self.kind = kind
        super().__init__(
            f"Supplied {kind} {value!r} does not match "
            f"required format {expected!r}"
        )
