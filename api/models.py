"""Pydantic response models for the REST API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    content_types: List[str]


class ColSummary(BaseModel):
    """Catalog entry for one col."""
    slug: str
    name: str
    country: Optional[str] = None
    region: Optional[str] = None
    altitude: Optional[float] = None
    length: Optional[float] = None
    difficulty: Optional[Any] = None


class ColListResponse(BaseModel):
    total: int = Field(..., description="Number of cols in the catalog")
    count: int = Field(..., description="Number of cols matching the filters")
    cols: List[ColSummary]


class AuditSummary(BaseModel):
    records: int
    errors: int
    warnings: int
    infos: int


class AuditResponse(BaseModel):
    """Audit report as returned by the API."""
    data_root: str
    is_valid: bool
    strict: bool
    timestamp: str
    duration_ms: int
    summary: AuditSummary
    collections: Dict[str, Dict[str, Any]]
    references: Dict[str, List[Dict[str, Any]]]
    issues: List[Dict[str, Any]]
