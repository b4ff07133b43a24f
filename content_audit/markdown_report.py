"""
Markdown Quality Report

Renders an AuditReport as the content quality report kept in the docs
folder: summary table, one section per kind of problem, statistics,
recommendations and an action plan.
"""

from datetime import datetime
from typing import Callable, List

from content_audit.analyzer import CollectionResult
from content_audit.cross_reference import InvalidReference
from content_audit.duplicates import DuplicateKey
from content_audit.report import AuditReport
from content_audit.schemas import CONTENT_TYPES, get_schema


DEFAULT_MAX_EXAMPLES = 10


def _priority(count: int, level: str = "High") -> str:
    return level if count > 0 else "Low"


def _collections(report: AuditReport) -> List[CollectionResult]:
    return [report.collections[ct] for ct in CONTENT_TYPES if ct in report.collections]


def _section(
    lines: List[str],
    title: str,
    items: list,
    ok_message: str,
    render: Callable,
    max_examples: int = 0,
    noun: str = "items",
) -> None:
    lines.append(f"#### {title}")
    lines.append("")
    if not items:
        lines.append(f"✓ {ok_message}")
        lines.append("")
        return
    shown = items[:max_examples] if max_examples else items
    for item in shown:
        lines.append(f"- {render(item)}")
    if max_examples and len(items) > max_examples:
        lines.append(f"- ... and {len(items) - max_examples} more {noun}")
    lines.append("")


def _render_reference(ref: InvalidReference) -> str:
    if ref.self_reference:
        return f"In **{ref.name}** ({ref.source}): `{ref.field}` lists the record itself"
    return f"In **{ref.name}** ({ref.source}, `{ref.field}`): {', '.join(ref.invalid_refs)}"


def _render_duplicate(item) -> str:
    if isinstance(item, DuplicateKey):
        return f"Duplicate {item.field} `{item.value}` in files: {', '.join(item.files)}"
    score = "" if item.kind == "exact" else f" ({item.score:.0%} similar)"
    return (
        f"**{item.original_name}** and **{item.similar_name}**{score} "
        f"in files: {', '.join(item.files)}"
    )


def _summary_table(report: AuditReport) -> List[str]:
    lines = [
        "| Type | Count | Valid structure | Completeness >90% | Completeness <40% | Potential duplicates |",
        "|------|-------|-----------------|-------------------|-------------------|----------------------|",
    ]
    for result in _collections(report):
        label = get_schema(result.content_type).label
        duplicates = len(result.similar_names) + len(result.duplicate_keys)
        lines.append(
            f"| {label} | {result.total} | {result.valid_structure} | "
            f"{result.completeness['excellent']} | {result.completeness['minimal']} | "
            f"{duplicates} |"
        )
    return lines


def _statistics(report: AuditReport) -> List[str]:
    lines = ["## Statistics", ""]
    for result in _collections(report):
        if not result.statistics or not result.total:
            continue
        lines.append(f"### {get_schema(result.content_type).label}")
        lines.append("")
        for breakdown, counts in result.statistics.items():
            title = breakdown.replace("_", " ").capitalize()
            values = ", ".join(
                f"{key}: {count}" for key, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
            )
            lines.append(f"- **{title}**: {values or 'none'}")
        lines.append("")
    return lines


def render_markdown(report: AuditReport, max_examples: int = DEFAULT_MAX_EXAMPLES) -> str:
    """Render the content quality report as Markdown."""
    generated = datetime.fromisoformat(report.timestamp).strftime("%Y-%m-%d")
    collections = _collections(report)

    lines = [
        "# Velo-Altitude Content Quality Report",
        "",
        f"*Generated: {generated}*",
        "",
        "This report details the quality and consistency of the content, lists the",
        "problems found and gives recommendations to standardize it.",
        "",
        "## Summary",
        "",
    ]
    lines.extend(_summary_table(report))
    lines.append("")

    missing_dirs = [r for r in collections if not r.directory_exists]
    if missing_dirs:
        for result in missing_dirs:
            lines.append(f"> Directory not found for {result.content_type}: `{result.directory}`")
        lines.append("")

    lines.extend(["## Problems found", "", "### 1. Potential duplicates", ""])
    for result in collections:
        label = get_schema(result.content_type).label
        items = list(result.similar_names) + list(result.duplicate_keys)
        _section(
            lines, label, items, "No duplicates detected",
            _render_duplicate,
        )

    lines.extend(["### 2. Missing critical data", ""])
    for result in collections:
        _section(
            lines, get_schema(result.content_type).label, result.missing_critical,
            "All records contain the required critical data",
            lambda f: f"**{f.name}** ({f.file}): missing fields: {', '.join(f.fields)}",
        )

    lines.extend(["### 3. Name and slug inconsistencies", ""])
    for result in collections:
        _section(
            lines, get_schema(result.content_type).label, result.incoherent_slugs,
            "All slugs match their names",
            lambda s: f"**{s.name}**: current slug `{s.current_slug}`, expected `{s.expected_slug}`",
        )

    lines.extend(["### 4. Invalid references between content", ""])
    refs = report.references
    _section(lines, "References to cols", refs.invalid_col_references,
             "All col references are valid", _render_reference)
    _section(lines, "References to training programs", refs.invalid_training_references,
             "All training program references are valid", _render_reference)
    _section(lines, "References to nutrition content", refs.invalid_nutrition_references,
             "All nutrition references are valid", _render_reference)

    lines.extend(["### 5. Incomplete structures", ""])
    for result in collections:
        _section(
            lines, get_schema(result.content_type).label, result.invalid_structure,
            "All records have a complete structure",
            lambda f: f"**{f.name}** ({f.file}): missing fields: {', '.join(f.fields)}",
            max_examples=max_examples,
            noun="records with an incomplete structure",
        )

    unreadable = [r for r in collections if r.load_errors]
    if unreadable:
        lines.extend(["### 6. Unreadable files", ""])
        for result in unreadable:
            _section(
                lines, get_schema(result.content_type).label, result.load_errors,
                "", lambda e: f"{e.file}: {e.message}",
            )

    lines.extend(_statistics(report))

    duplicates = sum(len(r.similar_names) + len(r.duplicate_keys) for r in collections)
    critical = sum(len(r.missing_critical) for r in collections)
    slugs = sum(len(r.incoherent_slugs) for r in collections)
    invalid_refs = len(refs.all)
    minimal = sum(r.completeness["minimal"] for r in collections)

    lines.extend([
        "## Recommendations",
        "",
        "Based on the problems found, the following actions will improve content quality:",
        "",
        "1. **Resolve the duplicates** by merging the matching files",
        f"   - Priority: {_priority(duplicates)}",
        "",
        f"2. **Fill in the missing critical data** for the {critical} records concerned",
        f"   - Priority: {_priority(critical)}",
        "",
        f"3. **Standardize the slugs** of the {slugs} records whose slug does not match the name",
        f"   - Priority: {_priority(slugs, 'Medium')}",
        "",
        f"4. **Fix the {invalid_refs} invalid references** between content types",
        f"   - Priority: {_priority(invalid_refs)}",
        "",
        f"5. **Enrich the low completeness content** ({minimal} in total)",
        f"   - Priority: {_priority(minimal, 'Medium')}",
        "",
        "## Action plan",
        "",
        "1. Merge the duplicates listed above",
        "2. Complete the records missing critical data",
        "3. Standardize inconsistent slugs",
        "4. Check and fix cross references",
        "5. Progressively enrich incomplete content",
        "",
    ])
    return "\n".join(lines)
