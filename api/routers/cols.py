"""Col catalog endpoints."""

import math
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException

from api.config import get_audit_config
from api.models import ColListResponse, ColSummary
from content_audit.catalog import ColCatalog
from content_audit.config import AuditConfig
from content_audit.engine import ContentAuditEngine
from content_audit.statistics import location_value, to_number

router = APIRouter()


def get_catalog(config: AuditConfig = Depends(get_audit_config)) -> ColCatalog:
    return ContentAuditEngine(config).catalog()


def _text(value) -> Optional[str]:
    return None if value is None else str(value)


def _finite(value: Any) -> Any:
    """Replace NaN and infinite floats, which JSON cannot carry, with None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


def _summary(col: dict) -> ColSummary:
    return ColSummary(
        slug=col["slug"],
        name=str(col.get("name") or col["slug"]),
        country=_text(location_value(col, "country")),
        region=_text(location_value(col, "region")),
        altitude=to_number(col.get("altitude")),
        length=to_number(col.get("length")),
        difficulty=_finite(col.get("difficulty")),
    )


@router.get("/cols", response_model=ColListResponse)
def list_cols(
    country: Optional[str] = None,
    region: Optional[str] = None,
    difficulty: Optional[str] = None,
    min_altitude: Optional[float] = None,
    max_altitude: Optional[float] = None,
    q: Optional[str] = None,
    catalog: ColCatalog = Depends(get_catalog),
):
    """List cols, optionally filtered."""
    matches = catalog.filter(
        country=country,
        region=region,
        difficulty=difficulty,
        min_altitude=min_altitude,
        max_altitude=max_altitude,
    )
    if q:
        found = {col["slug"] for col in catalog.search(q)}
        matches = [col for col in matches if col["slug"] in found]
    return ColListResponse(
        total=len(catalog),
        count=len(matches),
        cols=[_summary(col) for col in matches],
    )


@router.get("/cols/{slug}")
def get_col(slug: str, catalog: ColCatalog = Depends(get_catalog)):
    """Return the full record of one col."""
    col = catalog.get(slug)
    if col is None:
        raise HTTPException(status_code=404, detail=f"Col not found: {slug}")
    return _finite(col)
