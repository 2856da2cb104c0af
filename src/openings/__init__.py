"""openings: Weekly opening hours with date exceptions."""

from openings.keys import DATE, WEEKDAY, WEEKDAYS, KeyFormat, expand_key
from openings.loaders import load_multi_openings_json, load_openings_json
from openings.manager import OpeningsManager
from openings.normalize import normalize, parse_time_range
from openings.schema import validate_exceptions, validate_openings
from openings.types import InvalidFormatError, TimeInterval

__all__ = [
    "DATE",
    "InvalidFormatError",
    "KeyFormat",
    "OpeningsManager",
    "TimeInterval",
    "WEEKDAY",
    "WEEKDAYS",
    "expand_key",
    "load_multi_openings_json",
    "load_openings_json",
    "normalize",
    "parse_time_range",
    "validate_exceptions",
    "validate_openings",
]
