"""
Audit Report Data Models

Defines ValidationIssue and AuditReport, the structured result of a
content audit, plus the mapping from analysis findings to issues.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional

from content_audit.analyzer import CollectionResult
from content_audit.cross_reference import ReferenceResults
from content_audit.schemas import CONTENT_TYPES


@dataclass
class ValidationIssue:
    """A single problem found during the audit.

    Attributes:
        level: Severity level (error, warning, info)
        content_type: Content type of the offending record
        file: File the issue was found in
        field: The field or path concerned
        message: Human-readable description of the issue
        suggestion: Optional suggestion for fixing the issue
    """
    level: Literal["error", "warning", "info"]
    content_type: str
    file: str
    field: str
    message: str
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "level": self.level,
            "content_type": self.content_type,
            "file": self.file,
            "field": self.field,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        return d


def collection_issues(result: CollectionResult) -> List[ValidationIssue]:
    """Turn the findings of one collection into issues."""
    ct = result.content_type
    issues: List[ValidationIssue] = []

    for err in result.load_errors:
        issues.append(ValidationIssue(
            level="error", content_type=ct, file=err.file, field="root",
            message=err.message,
            suggestion="Check that the file contains a valid JSON object.",
        ))

    for finding in result.missing_critical:
        issues.append(ValidationIssue(
            level="error", content_type=ct, file=finding.file,
            field=", ".join(finding.fields),
            message=f"{finding.name}: missing critical data: {', '.join(finding.fields)}",
            suggestion="Fill in the critical fields before publishing.",
        ))

    for dup in result.duplicate_keys:
        issues.append(ValidationIssue(
            level="error", content_type=ct, file=", ".join(dup.files),
            field=dup.field,
            message=f"Duplicate {dup.field} '{dup.value}' shared by {len(dup.files)} files",
            suggestion=f"Give every record a unique {dup.field}.",
        ))

    for finding in result.invalid_structure:
        issues.append(ValidationIssue(
            level="warning", content_type=ct, file=finding.file,
            field=", ".join(finding.fields),
            message=f"{finding.name}: incomplete structure, missing {len(finding.fields)} field(s)",
        ))

    for slug in result.incoherent_slugs:
        issues.append(ValidationIssue(
            level="warning", content_type=ct, file=slug.file, field="slug",
            message=f"{slug.name}: slug '{slug.current_slug}' does not match name",
            suggestion=f"Use '{slug.expected_slug}'.",
        ))

    for sim in result.similar_names:
        qualifier = "Duplicate" if sim.kind == "exact" else f"Similar ({sim.score:.0%})"
        issues.append(ValidationIssue(
            level="warning", content_type=ct, file=", ".join(sim.files),
            field="name",
            message=f"{qualifier} names: '{sim.original_name}' and '{sim.similar_name}'",
            suggestion="Merge the records if they describe the same content.",
        ))

    for finding in result.unexpected_fields:
        issues.append(ValidationIssue(
            level="info", content_type=ct, file=finding.file,
            field=", ".join(finding.fields),
            message=f"{finding.name}: fields outside the expected structure",
        ))

    return issues


def reference_issues(references: ReferenceResults) -> List[ValidationIssue]:
    issues = []
    for ref in references.all:
        file_name = ref.source.rpartition("/")[2]
        if ref.self_reference:
            message = f"{ref.name}: {ref.field} references the record itself"
        else:
            message = (
                f"{ref.name}: unknown {ref.target_type} in {ref.field}: "
                f"{', '.join(ref.invalid_refs)}"
            )
        issues.append(ValidationIssue(
            level="error",
            content_type=ref.source_type,
            file=file_name,
            field=ref.field,
            message=message,
            suggestion=f"Reference existing {ref.target_type} slugs only.",
        ))
    return issues


@dataclass
class AuditReport:
    """Structured result of a content audit run.

    Attributes:
        data_root: Root of the content tree that was audited
        collections: Analysis per content type
        references: Cross-reference findings
        strict: Whether warnings make the report invalid
        timestamp: When the audit was performed (UTC)
        duration_ms: How long the audit took in milliseconds
    """
    data_root: str
    collections: Dict[str, CollectionResult] = field(default_factory=dict)
    references: ReferenceResults = field(default_factory=ReferenceResults)
    strict: bool = False
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0
    issues: List[ValidationIssue] = field(default_factory=list)

    def __post_init__(self):
        if not self.issues:
            self.issues = self.build_issues()

    def build_issues(self) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        for content_type in CONTENT_TYPES:
            if content_type in self.collections:
                issues.extend(collection_issues(self.collections[content_type]))
        issues.extend(reference_issues(self.references))
        return issues

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def infos(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == "info"]

    @property
    def is_valid(self) -> bool:
        return not self.errors and (not self.strict or not self.warnings)

    @property
    def total_records(self) -> int:
        return sum(c.total for c in self.collections.values())

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "data_root": self.data_root,
            "is_valid": self.is_valid,
            "strict": self.strict,
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
            "collections": {k: v.to_dict() for k, v in self.collections.items()},
            "references": self.references.to_dict(),
            "issues": [i.to_dict() for i in self.issues],
            "summary": {
                "records": self.total_records,
                "errors": len(self.errors),
                "warnings": len(self.warnings),
                "infos": len(self.infos),
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def format_human(self, show_infos: bool = False) -> str:
        """Format report for human-readable console output."""
        if self.is_valid and not self.warnings:
            icon, status = "✅", "Valid"
        elif self.is_valid:
            icon, status = "✅", "Valid (with warnings)"
        else:
            icon, status = "❌", "Failed"

        lines = [f"{icon} {self.data_root}: {status} ({self.total_records} records)"]
        for issue in self.issues:
            if issue.level == "info" and not show_infos:
                continue
            if issue.level == "error":
                prefix = "  ❌"
            elif issue.level == "warning":
                prefix = "  ⚠"
            else:
                prefix = "  ℹ"
            lines.append(f"{prefix} [{issue.content_type}/{issue.file}] {issue.message}")
            if issue.suggestion:
                lines.append(f"      → {issue.suggestion}")

        lines.append(
            f"\n  {len(self.errors)} error(s), {len(self.warnings)} warning(s), "
            f"{len(self.infos)} info"
        )
        return "\n".join(lines)
