"""
Duplicate Detection

Finds records of one content type that probably describe the same thing:
- identical names once case and accents are folded
- near-identical names (difflib ratio above a threshold)
- repeated ids or slugs
"""

from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import Any, Dict, List, Optional, Sequence, Tuple

from content_audit.slugs import normalize_name


DEFAULT_SIMILARITY_THRESHOLD = 0.9

# (file name, record) pairs as produced by the loader
Entry = Tuple[str, Dict[str, Any]]


@dataclass
class SimilarName:
    """Two records with the same or nearly the same name."""
    original_name: str
    similar_name: str
    files: List[str]
    kind: str = "exact"
    score: float = 1.0

    def to_dict(self) -> dict:
        return {
            "original_name": self.original_name,
            "similar_name": self.similar_name,
            "files": list(self.files),
            "kind": self.kind,
            "score": round(self.score, 3),
        }


@dataclass
class DuplicateKey:
    """An id or slug value shared by several records."""
    field: str
    value: str
    files: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"field": self.field, "value": self.value, "files": list(self.files)}


def find_similar_names(
    entries: Sequence[Entry],
    threshold: Optional[float] = DEFAULT_SIMILARITY_THRESHOLD,
) -> List[SimilarName]:
    """Report exact and near duplicate names.

    Exact matches pair every later record with the first one carrying the
    normalized name. Near matches compare each pair of distinct normalized
    names once; pass ``threshold=None`` to skip them.
    """
    results: List[SimilarName] = []
    seen: Dict[str, Tuple[str, str]] = {}
    reported = set()

    for file_name, record in entries:
        name = record.get("name") if isinstance(record, dict) else None
        if not isinstance(name, str) or not name.strip():
            continue
        normalized = normalize_name(name)
        if normalized in seen:
            first_file, first_name = seen[normalized]
            pair = frozenset((first_file, file_name))
            if pair not in reported:
                reported.add(pair)
                results.append(SimilarName(
                    original_name=first_name,
                    similar_name=name,
                    files=[first_file, file_name],
                ))
        else:
            seen[normalized] = (file_name, name)

    if threshold is None:
        return results

    distinct = list(seen.items())
    for i, (norm_a, (file_a, name_a)) in enumerate(distinct):
        for norm_b, (file_b, name_b) in distinct[i + 1:]:
            matcher = SequenceMatcher(None, norm_a, norm_b)
            if matcher.quick_ratio() < threshold:
                continue
            score = matcher.ratio()
            if score >= threshold:
                results.append(SimilarName(
                    original_name=name_a,
                    similar_name=name_b,
                    files=[file_a, file_b],
                    kind="near",
                    score=score,
                ))

    return results


def find_duplicate_keys(entries: Sequence[Entry], key: str) -> List[DuplicateKey]:
    """Report values of ``key`` (id or slug) carried by more than one record."""
    by_value: Dict[str, List[str]] = {}
    for file_name, record in entries:
        value = record.get(key) if isinstance(record, dict) else None
        if value is None or value == "":
            continue
        by_value.setdefault(str(value), []).append(file_name)

    return [
        DuplicateKey(field=key, value=value, files=files)
        for value, files in by_value.items()
        if len(files) > 1
    ]
