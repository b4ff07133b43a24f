"""
Content Audit Error Hierarchy

Defines the custom exceptions used by the content audit system.
Per-file problems are reported as issues, not raised; these errors are
reserved for conditions that stop a run.
"""

from pathlib import Path
from typing import Optional


class ContentAuditError(Exception):
    """Base exception for all content audit errors."""
    pass


class ConfigurationError(ContentAuditError):
    """Configuration could not be loaded or is invalid.

    Attributes:
        file_path: Configuration file involved, if any
        line_number: 1-based line of a YAML syntax error, if known
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[Path] = None,
        line_number: Optional[int] = None,
    ):
        self.file_path = file_path
        self.line_number = line_number

        parts = [message]
        if file_path:
            parts.append(f"File: {file_path}")
        if line_number is not None:
            parts.append(f"Line {line_number}")
        super().__init__(" | ".join(parts))


class ContentLoadError(ContentAuditError):
    """A content file could not be read or parsed.

    Raised by the loader for a single file and converted into a load error
    entry by the caller, so the rest of the directory is still processed.
    """

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        self.message = message
        super().__init__(f"{file_name}: {message}")


class UnknownContentTypeError(ContentAuditError, ValueError):
    """Requested content type is not one of cols, training, recipes, plans."""
    pass
