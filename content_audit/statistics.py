"""
Content Statistics

Breakdowns of each content type by country, level, category and duration,
as shown in the statistics section of the quality report.
"""

import math
from collections import Counter
from typing import Any, Dict, Optional, Sequence, Tuple

from content_audit.schemas import CONTENT_COLS, CONTENT_PLANS, CONTENT_RECIPES, CONTENT_TRAINING


UNKNOWN = "unknown"

Entry = Tuple[str, Dict[str, Any]]
Breakdowns = Dict[str, Dict[str, int]]


def _label(value: Any) -> str:
    if value is None or value == "":
        return UNKNOWN
    return str(value)


def to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _is_number_text(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _difficulty_label(value: Any) -> str:
    """Integer difficulty level, or the label itself for text levels such as "hard"."""
    number = to_number(value)
    if number is not None:
        return str(int(number))
    if isinstance(value, str) and not _is_number_text(value):
        return _label(value)
    return UNKNOWN


def location_value(record: Dict[str, Any], key: str) -> Any:
    value = record.get(key)
    if value is None and isinstance(record.get("location"), dict):
        value = record["location"].get(key)
    return value


def recipe_total_minutes(duration: Any) -> Optional[float]:
    """Total preparation time of a recipe in minutes.

    Accepts a plain number or a mapping with ``total`` or ``prep``/``cook``.
    """
    if isinstance(duration, dict):
        total = to_number(duration.get("total"))
        if total:
            return total
        prep = to_number(duration.get("prep"))
        cook = to_number(duration.get("cook"))
        if prep is None and cook is None:
            return None
        return (prep or 0) + (cook or 0)
    return to_number(duration)


def _cols_breakdowns(entries: Sequence[Entry]) -> Breakdowns:
    by_country, by_region, by_difficulty = Counter(), Counter(), Counter()
    for _, record in entries:
        by_country[_label(location_value(record, "country"))] += 1
        by_region[_label(location_value(record, "region"))] += 1
        by_difficulty[_difficulty_label(record.get("difficulty"))] += 1
    return {
        "by_country": dict(by_country),
        "by_region": dict(by_region),
        "by_difficulty": dict(by_difficulty),
    }


def _training_breakdowns(entries: Sequence[Entry]) -> Breakdowns:
    by_type, by_level = Counter(), Counter()
    by_duration = Counter({"short": 0, "medium": 0, "long": 0})
    for _, record in entries:
        by_type[_label(record.get("type"))] += 1
        by_level[_label(record.get("level"))] += 1
        weeks = to_number(record.get("duration"))
        if weeks is None:
            by_duration[UNKNOWN] += 1
        elif weeks <= 4:
            by_duration["short"] += 1
        elif weeks <= 8:
            by_duration["medium"] += 1
        else:
            by_duration["long"] += 1
    return {
        "by_type": dict(by_type),
        "by_level": dict(by_level),
        "by_duration": dict(by_duration),
    }


def _recipes_breakdowns(entries: Sequence[Entry]) -> Breakdowns:
    by_category = Counter()
    by_duration = Counter({"quick": 0, "medium": 0, "long": 0})
    for _, record in entries:
        by_category[_label(record.get("category"))] += 1
        minutes = recipe_total_minutes(record.get("duration"))
        if minutes is None:
            by_duration[UNKNOWN] += 1
        elif minutes < 30:
            by_duration["quick"] += 1
        elif minutes <= 60:
            by_duration["medium"] += 1
        else:
            by_duration["long"] += 1
    return {"by_category": dict(by_category), "by_duration": dict(by_duration)}


def _plans_breakdowns(entries: Sequence[Entry]) -> Breakdowns:
    by_category = Counter(_label(record.get("category")) for _, record in entries)
    return {"by_category": dict(by_category)}


_BREAKDOWNS = {
    CONTENT_COLS: _cols_breakdowns,
    CONTENT_TRAINING: _training_breakdowns,
    CONTENT_RECIPES: _recipes_breakdowns,
    CONTENT_PLANS: _plans_breakdowns,
}


def compute_statistics(content_type: str, entries: Sequence[Entry]) -> Breakdowns:
    """Compute the breakdowns reported for a content type."""
    builder = _BREAKDOWNS.get(content_type)
    if builder is None:
        return {}
    return builder(entries)
