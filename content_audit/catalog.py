"""
Col Catalog

Read-only queries over the loaded col records: lookup by slug, filters
on country, region, difficulty and altitude, and name search.
"""

from typing import Any, Dict, Iterable, List, Optional

from content_audit.slugs import normalize_name
from content_audit.statistics import location_value, to_number


def _location(record: Dict[str, Any], key: str) -> Optional[str]:
    value = location_value(record, key)
    return value if isinstance(value, str) else None


def _matches_difficulty(record: Dict[str, Any], wanted: str) -> bool:
    value = record.get("difficulty")
    if value is None:
        return False
    if isinstance(value, str) and value.lower() == wanted.lower():
        return True
    number, wanted_value = to_number(value), to_number(wanted)
    return number is not None and wanted_value is not None and int(number) == int(wanted_value)


class ColCatalog:
    """Col records indexed by slug."""

    def __init__(self, records: Iterable[Dict[str, Any]]):
        self._cols: Dict[str, Dict[str, Any]] = {}
        for record in records:
            slug = record.get("slug")
            if isinstance(slug, str) and slug and slug not in self._cols:
                self._cols[slug] = record

    def __len__(self) -> int:
        return len(self._cols)

    def all(self) -> List[Dict[str, Any]]:
        return sorted(self._cols.values(), key=lambda c: normalize_name(str(c.get("name", ""))))

    def get(self, slug: str) -> Optional[Dict[str, Any]]:
        return self._cols.get(slug)

    def filter(
        self,
        country: Optional[str] = None,
        region: Optional[str] = None,
        difficulty: Optional[str] = None,
        min_altitude: Optional[float] = None,
        max_altitude: Optional[float] = None,
    ) -> List[Dict[str, Any]]:
        """Return the cols matching every given criterion.

        Country and region comparisons ignore case and accents.
        """
        results = []
        for col in self.all():
            if country and normalize_name(_location(col, "country") or "") != normalize_name(country):
                continue
            if region and normalize_name(_location(col, "region") or "") != normalize_name(region):
                continue
            if difficulty and not _matches_difficulty(col, difficulty):
                continue
            if min_altitude is not None or max_altitude is not None:
                altitude = to_number(col.get("altitude"))
                if altitude is None:
                    continue
                if min_altitude is not None and altitude < min_altitude:
                    continue
                if max_altitude is not None and altitude > max_altitude:
                    continue
            results.append(col)
        return results

    def search(self, text: str) -> List[Dict[str, Any]]:
        """Return the cols whose name contains ``text``, ignoring case and accents."""
        needle = normalize_name(text)
        return [
            col for col in self.all()
            if needle in normalize_name(str(col.get("name", "")))
        ]

    def countries(self) -> List[str]:
        return sorted({c for c in (_location(col, "country") for col in self._cols.values()) if c})

    def regions(self) -> List[str]:
        return sorted({r for r in (_location(col, "region") for col in self._cols.values()) if r})
