"""
Content Type Schemas

Expected field lists, critical fields and default storage directories for
each content type of the site. These are conventions rather than enforced
schemas: the audit reports deviations, it never rejects records.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from content_audit.errors import UnknownContentTypeError


# Content type constants
CONTENT_COLS = "cols"
CONTENT_TRAINING = "training"
CONTENT_RECIPES = "recipes"
CONTENT_PLANS = "plans"

CONTENT_TYPES = [CONTENT_COLS, CONTENT_TRAINING, CONTENT_RECIPES, CONTENT_PLANS]


@dataclass(frozen=True)
class ContentTypeSchema:
    """Conventions for one content type.

    Attributes:
        name: Content type key (cols, training, recipes, plans)
        label: Human-readable plural label used in reports
        directory: Default directory relative to the data root
        expected_fields: Fields every complete record should carry
        critical_fields: Fields (dotted paths allowed) that must be filled
    """
    name: str
    label: str
    directory: str
    expected_fields: Tuple[str, ...]
    critical_fields: Tuple[str, ...]


SCHEMAS: Dict[str, ContentTypeSchema] = {
    CONTENT_COLS: ContentTypeSchema(
        name=CONTENT_COLS,
        label="Cols",
        directory="cols/enriched",
        expected_fields=(
            "id", "name", "slug", "country", "region", "altitude", "length",
            "gradient", "difficulty", "description", "coordinates",
            "elevation_profile", "images", "videos", "three_d_model",
            "weather", "services", "testimonials", "related_cols", "status",
            "completeness", "last_updated",
        ),
        critical_fields=(
            "name", "slug", "country", "altitude", "coordinates", "description.fr",
        ),
    ),
    CONTENT_TRAINING: ContentTypeSchema(
        name=CONTENT_TRAINING,
        label="Training programs",
        directory="training",
        expected_fields=(
            "id", "name", "slug", "type", "level", "duration", "description",
            "weeks", "variations", "target_cols", "related_nutrition",
            "videos", "status", "completeness", "last_updated",
        ),
        critical_fields=("name", "slug", "level", "weeks", "description.fr"),
    ),
    CONTENT_RECIPES: ContentTypeSchema(
        name=CONTENT_RECIPES,
        label="Recipes",
        directory="nutrition/recipes",
        expected_fields=(
            "id", "name", "slug", "category", "duration", "description",
            "ingredients", "instructions", "nutrition_facts", "benefits",
            "image", "videos", "related_cols", "related_training", "status",
            "completeness", "last_updated",
        ),
        critical_fields=(
            "name", "slug", "category", "ingredients", "instructions", "description.fr",
        ),
    ),
    CONTENT_PLANS: ContentTypeSchema(
        name=CONTENT_PLANS,
        label="Nutrition plans",
        directory="nutrition/plans",
        expected_fields=(
            "id", "name", "slug", "category", "description", "days", "recipes",
            "supplements", "hydration", "variations", "related_cols",
            "related_training", "status", "completeness", "last_updated",
        ),
        critical_fields=("name", "slug", "category", "days", "description.fr"),
    ),
}


def get_schema(content_type: str) -> ContentTypeSchema:
    """Look up the schema of a content type.

    Raises:
        UnknownContentTypeError: If content_type is not a known type.
    """
    try:
        return SCHEMAS[content_type]
    except KeyError:
        raise UnknownContentTypeError(
            f"Unknown content type: {content_type}. "
            f"Valid types: {CONTENT_TYPES}"
        ) from None


def default_directories() -> Dict[str, str]:
    """Map each content type to its default directory."""
    return {name: schema.directory for name, schema in SCHEMAS.items()}


def expected_fields(content_type: str) -> List[str]:
    return list(get_schema(content_type).expected_fields)
