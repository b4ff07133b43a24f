"""
Audit configuration schema.

Pydantic model holding every setting of a content audit run, with field
level validation so bad values from YAML or the environment fail early.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from content_audit.schemas import CONTENT_TYPES, default_directories


class LogLevel(str, Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditConfig(BaseModel):
    """Settings for a content audit run."""

    data_root: str = Field(
        default="./server/data",
        description="Root directory of the content tree",
    )
    directories: Dict[str, str] = Field(
        default_factory=default_directories,
        description="Directory of each content type, relative to data_root or absolute",
    )
    report_path: str = Field(
        default="./docs/CONTENT_QUALITY_REPORT.md",
        description="Where the Markdown quality report is written",
    )
    json_report_path: Optional[str] = Field(
        default=None,
        description="Optional path for a JSON copy of the report",
    )
    similarity_threshold: Optional[float] = Field(
        default=0.9,
        gt=0,
        le=1,
        description="Minimum name similarity for near duplicates; null disables them",
    )
    max_examples: int = Field(
        default=10,
        ge=1,
        description="Maximum incomplete structures listed per content type",
    )
    strict: bool = Field(
        default=False,
        description="Treat warnings as errors",
    )
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_file: Optional[str] = None

    @field_validator("directories")
    @classmethod
    def _known_content_types(cls, value: Dict[str, str]) -> Dict[str, str]:
        unknown = sorted(set(value) - set(CONTENT_TYPES))
        if unknown:
            raise ValueError(
                f"Unknown content types: {unknown}. Valid types: {CONTENT_TYPES}"
            )
        merged = default_directories()
        merged.update(value)
        return merged

    def directory_for(self, content_type: str) -> Path:
        """Resolve the directory of a content type against data_root."""
        directory = Path(self.directories[content_type])
        if directory.is_absolute():
            return directory
        return Path(self.data_root) / directory
