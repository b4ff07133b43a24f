"""
Pytest configuration and shared fixtures.

Provides record builders and a small content tree with known problems:
- cols: one complete col, one incomplete col with a tolerated slug, one
  col with an incoherent slug and no French description, an exact
  duplicate of it sharing its id, an unreadable file and an index.json
- training: one program targeting an unknown col
- recipes: one recipe
- plans: one plan pointing at an unknown program and an unknown recipe
"""

import copy
import json
import os
from pathlib import Path

import pytest

from content_audit.logging_config import logging_config
from content_audit.schemas import get_schema
from content_audit.slugs import expected_slug


SAMPLE_VALUES = {
    "country": "France",
    "region": "Alpes",
    "altitude": 2000,
    "length": 10.0,
    "gradient": {"avg": 7.0, "max": 10.0},
    "difficulty": 7,
    "description": {"fr": "Une belle ascension.", "en": "A beautiful climb."},
    "coordinates": {"start": {"lat": 45.0, "lng": 6.0}, "summit": {"lat": 45.1, "lng": 6.1}},
    "elevation_profile": [{"km": 0, "altitude": 1000}],
    "images": ["image.jpg"],
    "videos": ["https://videos.example/climb"],
    "three_d_model": "model.glb",
    "weather": {"station": "local"},
    "services": ["water"],
    "testimonials": [{"author": "Anne"}],
    "status": "published",
    "completeness": 100,
    "last_updated": "2025-04-01",
    "type": "endurance",
    "level": "intermediate",
    "duration": 8,
    "weeks": [{"week": 1}],
    "variations": [{"name": "short"}],
    "category": "performance",
    "ingredients": ["oats"],
    "instructions": ["mix"],
    "nutrition_facts": {"calories": 350},
    "benefits": ["energy"],
    "image": "recipe.jpg",
    "days": [{"day": 1}],
    "supplements": ["magnesium"],
    "hydration": {"liters": 2},
}

REFERENCE_FIELDS = {
    "related_cols", "target_cols", "related_nutrition", "related_training", "recipes",
}


def make_record(content_type, name, slug=None, **fields):
    """Build a record carrying every expected field of its content type.

    Reference fields default to a placeholder slug; override them when the
    references matter.
    """
    slug = slug or expected_slug(name)
    record = {}
    for field_name in get_schema(content_type).expected_fields:
        if field_name == "id":
            record["id"] = slug
        elif field_name == "name":
            record["name"] = name
        elif field_name == "slug":
            record["slug"] = slug
        elif field_name in REFERENCE_FIELDS:
            record[field_name] = ["placeholder-slug"]
        else:
            record[field_name] = copy.deepcopy(SAMPLE_VALUES[field_name])
    record.update(fields)
    return record


def write_record(directory, file_name, record):
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name
    if isinstance(record, str):
        path.write_text(record, encoding="utf-8")
    else:
        path.write_text(json.dumps(record, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging handlers installed by CLI runs."""
    yield
    logging_config.reset()


@pytest.fixture
def content_tree(tmp_path):
    """Write the sample content tree and return its root."""
    root = tmp_path / "data"
    cols = root / "cols" / "enriched"
    training = root / "training"
    recipes = root / "nutrition" / "recipes"
    plans = root / "nutrition" / "plans"

    write_record(cols, "col-du-galibier.json", make_record(
        "cols", "Col du Galibier",
        altitude=2642, country="France", region="Alpes", difficulty=9,
        related_cols=["alpe-d-huez"],
    ))
    alpe = make_record(
        "cols", "L'Alpe d'Huez", slug="alpe-d-huez",
        altitude=1860, country="France", region="Alpes", difficulty=8,
        related_cols=["col-du-galibier"],
    )
    for missing in ("videos", "three_d_model", "weather", "services", "testimonials"):
        del alpe[missing]
    write_record(cols, "alpe-d-huez.json", alpe)

    tourmalet = make_record(
        "cols", "Col du Tourmalet", slug="tourmalet-pass",
        altitude=2115, country="France", region="Pyrénées", difficulty=8.5,
        related_cols=["col-du-galibier"], description={"en": "Pyrenean giant"},
    )
    tourmalet["id"] = "col-du-tourmalet"
    write_record(cols, "col-du-tourmalet.json", tourmalet)
    write_record(cols, "tourmalet-copy.json", make_record(
        "cols", "Col du TOURMALET", slug="col-du-tourmalet",
        altitude=2115, country="France", region="Pyrénées", difficulty=8,
        related_cols=["col-du-galibier"],
    ))
    write_record(cols, "broken.json", "{not valid json")
    write_record(cols, "index.json", {"cols": ["col-du-galibier"]})

    write_record(training, "galibier-prep.json", make_record(
        "training", "Galibier Prep",
        target_cols=["col-du-galibier", "mont-ventoux"],
        related_nutrition=["plan-montagne"],
    ))
    write_record(recipes, "energy-bars.json", make_record(
        "recipes", "Energy Bars",
        related_cols=["col-du-galibier"],
        related_training=["galibier-prep"],
    ))
    write_record(plans, "plan-montagne.json", make_record(
        "plans", "Plan Montagne",
        related_training=["galibier-prep", "unknown-program"],
        recipes=["energy-bars", "missing-recipe"],
        related_cols=["alpe-d-huez"],
    ))
    return root


@pytest.fixture
def record_factory():
    """Expose make_record to tests."""
    return make_record


@pytest.fixture
def record_writer():
    """Expose write_record to tests."""
    return write_record
