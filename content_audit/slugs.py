"""
Name normalization and slug coherence checks.
"""

import re
import unicodedata
from typing import Optional


_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_name(name: str) -> str:
    """Lower-case a name and fold accented letters to plain ASCII ones."""
    return _strip_accents(name.lower()).strip()


def expected_slug(name: str) -> str:
    """Build the slug a record with this name should carry.

    Example:
        >>> expected_slug("Col de l'Iséran")
        'col-de-l-iseran'
    """
    slug = _NON_SLUG_CHARS.sub("-", normalize_name(name))
    return slug.strip("-")


def is_slug_coherent(slug: str, name: str, expected: Optional[str] = None) -> bool:
    """Check that a slug matches its name.

    A slug that contains the expected slug, or is contained by it, is
    accepted so that prefixes such as ``col-du-`` may be dropped or added.
    """
    if expected is None:
        expected = expected_slug(name)
    if not slug or not expected:
        return slug == expected
    return slug == expected or slug in expected or expected in slug
