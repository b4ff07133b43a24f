"""
Collection Analyzer

Runs the per-record checks (structure, critical fields, slug coherence)
and the per-collection checks (duplicates, statistics) for one content
type.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from content_audit.duplicates import (
    DEFAULT_SIMILARITY_THRESHOLD,
    DuplicateKey,
    SimilarName,
    find_duplicate_keys,
    find_similar_names,
)
from content_audit.fields import (
    COMPLETENESS_BUCKETS,
    check_critical_fields,
    completeness_bucket,
    validate_structure,
)
from content_audit.loader import LoadError, LoadResult
from content_audit.schemas import get_schema
from content_audit.slugs import expected_slug, is_slug_coherent
from content_audit.statistics import compute_statistics


logger = logging.getLogger(__name__)

UNNAMED = "Unnamed"


@dataclass
class RecordFinding:
    """A record and the fields a check flagged on it."""
    file: str
    name: str
    fields: List[str]

    def to_dict(self) -> dict:
        return {"file": self.file, "name": self.name, "fields": list(self.fields)}


@dataclass
class IncoherentSlug:
    """A record whose slug does not follow from its name."""
    file: str
    name: str
    current_slug: str
    expected_slug: str

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "name": self.name,
            "current_slug": self.current_slug,
            "expected_slug": self.expected_slug,
        }


@dataclass
class RecordCheck:
    """Checks that only need the record itself."""
    name: str
    completeness: int
    missing_fields: List[str]
    missing_critical: List[str]
    unexpected_fields: List[str]
    incoherent_slug: Optional[str] = None


@dataclass
class CollectionResult:
    """Analysis of every record of one content type."""
    content_type: str
    directory: str = ""
    directory_exists: bool = True
    total: int = 0
    valid_structure: int = 0
    invalid_structure: List[RecordFinding] = field(default_factory=list)
    missing_critical: List[RecordFinding] = field(default_factory=list)
    unexpected_fields: List[RecordFinding] = field(default_factory=list)
    completeness: Dict[str, int] = field(
        default_factory=lambda: {bucket: 0 for bucket in COMPLETENESS_BUCKETS}
    )
    similar_names: List[SimilarName] = field(default_factory=list)
    duplicate_keys: List[DuplicateKey] = field(default_factory=list)
    incoherent_slugs: List[IncoherentSlug] = field(default_factory=list)
    load_errors: List[LoadError] = field(default_factory=list)
    statistics: Dict[str, Dict[str, int]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "content_type": self.content_type,
            "directory": self.directory,
            "directory_exists": self.directory_exists,
            "total": self.total,
            "valid_structure": self.valid_structure,
            "invalid_structure": [f.to_dict() for f in self.invalid_structure],
            "missing_critical": [f.to_dict() for f in self.missing_critical],
            "unexpected_fields": [f.to_dict() for f in self.unexpected_fields],
            "completeness": dict(self.completeness),
            "similar_names": [s.to_dict() for s in self.similar_names],
            "duplicate_keys": [d.to_dict() for d in self.duplicate_keys],
            "incoherent_slugs": [s.to_dict() for s in self.incoherent_slugs],
            "load_errors": [e.to_dict() for e in self.load_errors],
            "statistics": self.statistics,
        }


def record_name(record: dict) -> str:
    name = record.get("name")
    return name if isinstance(name, str) and name.strip() else UNNAMED


def check_record(record: dict, content_type: str) -> RecordCheck:
    """Run the structure, critical field and slug checks on one record."""
    schema = get_schema(content_type)
    structure = validate_structure(record, schema.expected_fields)
    check = RecordCheck(
        name=record_name(record),
        completeness=structure.completeness,
        missing_fields=structure.missing,
        missing_critical=check_critical_fields(record, schema.critical_fields),
        unexpected_fields=structure.unexpected,
    )

    name, slug = record.get("name"), record.get("slug")
    if isinstance(name, str) and name and isinstance(slug, str) and slug:
        wanted = expected_slug(name)
        if not is_slug_coherent(slug, name, wanted):
            check.incoherent_slug = wanted
    return check


def analyze_collection(
    content_type: str,
    loaded: LoadResult,
    similarity_threshold: Optional[float] = DEFAULT_SIMILARITY_THRESHOLD,
) -> CollectionResult:
    """Analyze the loaded records of one content type."""
    result = CollectionResult(
        content_type=content_type,
        directory=loaded.directory,
        directory_exists=loaded.exists,
        total=loaded.total,
        load_errors=list(loaded.errors),
    )

    for file_name, record in loaded.records:
        check = check_record(record, content_type)

        if check.missing_fields:
            result.invalid_structure.append(
                RecordFinding(file_name, check.name, check.missing_fields)
            )
        else:
            result.valid_structure += 1

        if check.missing_critical:
            result.missing_critical.append(
                RecordFinding(file_name, check.name, check.missing_critical)
            )

        if check.unexpected_fields:
            result.unexpected_fields.append(
                RecordFinding(file_name, check.name, check.unexpected_fields)
            )

        result.completeness[completeness_bucket(check.completeness)] += 1

        if check.incoherent_slug is not None:
            result.incoherent_slugs.append(IncoherentSlug(
                file=file_name,
                name=check.name,
                current_slug=record["slug"],
                expected_slug=check.incoherent_slug,
            ))

    result.similar_names = find_similar_names(loaded.records, similarity_threshold)
    result.duplicate_keys = (
        find_duplicate_keys(loaded.records, "id")
        + find_duplicate_keys(loaded.records, "slug")
    )
    result.statistics = compute_statistics(content_type, loaded.records)

    logger.info(
        f"Analyzed {result.total} {content_type} files: "
        f"{result.valid_structure} complete, "
        f"{len(result.missing_critical)} missing critical data"
    )
    return result
