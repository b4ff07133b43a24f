"""
Cross-Reference Validator

Validates relationships between content types:
- training programs must target existing cols
- nutrition plans must point at existing training programs and recipes
- recipes, plans and cols must only relate to existing cols
- a col must not list itself among its related cols
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from content_audit.analyzer import record_name
from content_audit.loader import ContentStore
from content_audit.schemas import (
    CONTENT_COLS,
    CONTENT_PLANS,
    CONTENT_RECIPES,
    CONTENT_TRAINING,
)


logger = logging.getLogger(__name__)

# Report groups
GROUP_COLS = "cols"
GROUP_TRAINING = "training"
GROUP_NUTRITION = "nutrition"


@dataclass(frozen=True)
class ReferenceRule:
    """A list field of one content type that holds slugs of another."""
    source_type: str
    field: str
    target_type: str

    @property
    def group(self) -> str:
        if self.target_type == CONTENT_COLS:
            return GROUP_COLS
        if self.target_type == CONTENT_TRAINING:
            return GROUP_TRAINING
        return GROUP_NUTRITION


REFERENCE_RULES = [
    ReferenceRule(CONTENT_TRAINING, "target_cols", CONTENT_COLS),
    ReferenceRule(CONTENT_PLANS, "related_training", CONTENT_TRAINING),
    ReferenceRule(CONTENT_PLANS, "recipes", CONTENT_RECIPES),
    ReferenceRule(CONTENT_RECIPES, "related_cols", CONTENT_COLS),
    ReferenceRule(CONTENT_RECIPES, "related_training", CONTENT_TRAINING),
    ReferenceRule(CONTENT_PLANS, "related_cols", CONTENT_COLS),
    ReferenceRule(CONTENT_COLS, "related_cols", CONTENT_COLS),
    ReferenceRule(CONTENT_TRAINING, "related_nutrition", CONTENT_PLANS),
]


@dataclass
class InvalidReference:
    """Slugs in one record that point at no existing content."""
    source: str
    name: str
    field: str
    target_type: str
    invalid_refs: List[str]
    self_reference: bool = False
    source_type: str = ""

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "source_type": self.source_type,
            "name": self.name,
            "field": self.field,
            "target_type": self.target_type,
            "invalid_refs": list(self.invalid_refs),
            "self_reference": self.self_reference,
        }


@dataclass
class ReferenceResults:
    """Invalid references grouped by the kind of content they target."""
    invalid_col_references: List[InvalidReference] = field(default_factory=list)
    invalid_training_references: List[InvalidReference] = field(default_factory=list)
    invalid_nutrition_references: List[InvalidReference] = field(default_factory=list)

    def add(self, group: str, ref: InvalidReference) -> None:
        if group == GROUP_COLS:
            self.invalid_col_references.append(ref)
        elif group == GROUP_TRAINING:
            self.invalid_training_references.append(ref)
        else:
            self.invalid_nutrition_references.append(ref)

    @property
    def all(self) -> List[InvalidReference]:
        return (
            self.invalid_col_references
            + self.invalid_training_references
            + self.invalid_nutrition_references
        )

    def to_dict(self) -> dict:
        return {
            "invalid_col_references": [r.to_dict() for r in self.invalid_col_references],
            "invalid_training_references": [r.to_dict() for r in self.invalid_training_references],
            "invalid_nutrition_references": [r.to_dict() for r in self.invalid_nutrition_references],
        }


def reference_slug(value: Any):
    """Extract the slug of a reference, which may be a string or a mapping."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("slug"), str):
        return value["slug"]
    return None


def find_invalid_references(values: Any, known: Set[str]) -> List[str]:
    """Return the references of a list field that are not in ``known``.

    Non-list values are ignored. Entries with no usable slug are reported
    by their string form.
    """
    if not isinstance(values, list):
        return []
    invalid = []
    for value in values:
        slug = reference_slug(value)
        if slug is None:
            invalid.append(str(value))
        elif slug not in known:
            invalid.append(slug)
    return invalid


def validate_cross_references(
    store: ContentStore,
    rules: List[ReferenceRule] = REFERENCE_RULES,
) -> ReferenceResults:
    """Check every reference rule against the loaded content.

    Args:
        store: Content of all types, fully loaded.
        rules: Reference rules to apply.

    Returns:
        ReferenceResults listing each record with dangling references.
    """
    logger.info("Checking cross references")
    results = ReferenceResults()
    known: Dict[str, Set[str]] = {}

    for rule in rules:
        source = store.get(rule.source_type)
        if not source.records:
            continue
        if rule.target_type not in known:
            known[rule.target_type] = store.slugs(rule.target_type)
        targets = known[rule.target_type]

        for file_name, record in source.records:
            values = record.get(rule.field)
            invalid = find_invalid_references(values, targets)
            if invalid:
                results.add(rule.group, InvalidReference(
                    source=store.source_path(rule.source_type, file_name),
                    name=record_name(record),
                    field=rule.field,
                    target_type=rule.target_type,
                    invalid_refs=invalid,
                    source_type=rule.source_type,
                ))

            own_slug = record.get("slug")
            if (
                rule.source_type == rule.target_type
                and own_slug
                and isinstance(values, list)
                and own_slug in (reference_slug(v) for v in values)
            ):
                results.add(rule.group, InvalidReference(
                    source=store.source_path(rule.source_type, file_name),
                    name=record_name(record),
                    field=rule.field,
                    target_type=rule.target_type,
                    invalid_refs=[own_slug],
                    self_reference=True,
                    source_type=rule.source_type,
                ))

    logger.info(f"Found {len(results.all)} records with invalid references")
    return results
