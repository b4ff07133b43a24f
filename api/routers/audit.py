"""Audit endpoint."""

from fastapi import APIRouter, Depends

from api.config import get_audit_config
from api.models import AuditResponse
from content_audit.config import AuditConfig
from content_audit.engine import ContentAuditEngine

router = APIRouter()


@router.get("/audit", response_model=AuditResponse)
def audit(config: AuditConfig = Depends(get_audit_config)):
    """Run a content audit and return the report. Nothing is written to disk."""
    report = ContentAuditEngine(config).run()
    return report.to_dict()
