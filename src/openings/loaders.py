"""Loading opening-hours definitions from JSON files."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from openings.manager import OpeningsManager
from openings.schema import validate_exceptions, validate_openings

logger = logging.getLogger(__name__)


def load_openings_json(
    path: str | Path,
    clock: Callable[[], datetime] | None = None,
) -> OpeningsManager:
    """Load an OpeningsManager from a JSON file.

    The JSON file has the format:
    {
        "id": "...",
        "openings": { "Mon-Fri": ["10:00-12:00", "14:00-19:00"], ... },
        "exceptions": { "2019/12/24": [], ... }
    }

    "id" is informational and both tables are optional.
    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    openings = data.get("openings", {})
    exceptions = data.get("exceptions", {})

    errors = validate_openings(openings)
    errors.extend(validate_exceptions(exceptions))
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    logger.debug("Loaded openings %r from %s", data.get("id", path.stem), path)
    if clock is None:
        return OpeningsManager(openings, exceptions)
    return OpeningsManager(openings, exceptions, clock=clock)


def load_multi_openings_json(
    path: str | Path,
    clock: Callable[[], datetime] | None = None,
) -> dict[str, OpeningsManager]:
    """Load several OpeningsManagers from one JSON file.

    The JSON must have the format:
    {
        "locations": {
            "shop-1": { "openings": {...}, "exceptions": {...} },
            ...
        }
    }
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    managers: dict[str, OpeningsManager] = {}
    for location_id, loc_data in data["locations"].items():
        openings = loc_data.get("openings", {})
        exceptions = loc_data.get("exceptions", {})

        errors = validate_openings(openings)
        errors.extend(validate_exceptions(exceptions))
        if errors:
            raise ValueError(
                f"Validation errors for {location_id} in {path.name}:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )

        if clock is None:
            managers[location_id] = OpeningsManager(openings, exceptions)
        else:
            managers[location_id] = OpeningsManager(openings, exceptions, clock=clock)

    logger.debug("Loaded %d locations from %s", len(managers), path)
    return managers
