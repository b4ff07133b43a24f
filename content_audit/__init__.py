"""
Content audit for the Velo-Altitude content catalog.

Checks cols, training programs, recipes and nutrition plans for
completeness, critical data, duplicates, slug coherence and broken
cross references, and renders a Markdown quality report.
"""

from content_audit.report import AuditReport, ValidationIssue
from content_audit.engine import ContentAuditEngine

__all__ = [
    "AuditReport",
    "ValidationIssue",
    "ContentAuditEngine",
]
