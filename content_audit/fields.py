"""
Field Presence and Completeness

Checks content records against the expected field list of their type.
A record is a plain dict parsed from JSON; nested fields are addressed
with dotted paths such as ``description.fr``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence


COMPLETENESS_BUCKETS = ("excellent", "good", "partial", "minimal")


@dataclass
class StructureResult:
    """Outcome of comparing a record to its expected structure.

    Attributes:
        missing: Expected fields absent or empty in the record
        present: Expected fields with a value
        unexpected: Top-level keys the schema does not list
        completeness: Share of expected fields present, 0-100
    """
    missing: List[str] = field(default_factory=list)
    present: List[str] = field(default_factory=list)
    unexpected: List[str] = field(default_factory=list)
    completeness: int = 0

    @property
    def is_complete(self) -> bool:
        return not self.missing


def has_field(record: Any, path: str) -> bool:
    """Return True if the dotted path resolves to a non-empty value.

    None, empty strings and empty lists count as absent. Zero and False
    are real values.
    """
    current = record
    for part in path.split("."):
        if not isinstance(current, dict):
            return False
        current = current.get(part)

    if isinstance(current, list):
        return len(current) > 0
    return current is not None and current != ""


def validate_structure(record: Dict[str, Any], expected: Sequence[str]) -> StructureResult:
    """Compare a record to the expected fields of its content type."""
    result = StructureResult()
    for name in expected:
        if has_field(record, name):
            result.present.append(name)
        else:
            result.missing.append(name)

    top_level = {name.split(".")[0] for name in expected}
    if isinstance(record, dict):
        result.unexpected = [k for k in record if k not in top_level]

    if expected:
        result.completeness = round(len(result.present) / len(expected) * 100)
    return result


def check_critical_fields(record: Dict[str, Any], critical: Sequence[str]) -> List[str]:
    """Return the critical fields missing from a record, in declaration order."""
    return [name for name in critical if not has_field(record, name)]


def completeness_bucket(completeness: float) -> str:
    """Map a completeness percentage to its reporting bucket."""
    if completeness >= 90:
        return "excellent"
    if completeness >= 70:
        return "good"
    if completeness >= 40:
        return "partial"
    return "minimal"
