"""
Environment variable integration.

Centralizes the environment variable names the audit reads and converts
them into configuration overrides.
"""

import os
from typing import Any, Dict


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    DATA_ROOT = "VELO_CONTENT_DATA_ROOT"
    REPORT_PATH = "VELO_CONTENT_REPORT_PATH"
    LOG_LEVEL = "VELO_CONTENT_LOG_LEVEL"
    SIMILARITY_THRESHOLD = "VELO_CONTENT_SIMILARITY_THRESHOLD"

    _FIELDS = {
        DATA_ROOT: "data_root",
        REPORT_PATH: "report_path",
        LOG_LEVEL: "log_level",
        SIMILARITY_THRESHOLD: "similarity_threshold",
    }

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.DATA_ROOT: "Root directory of the content tree",
            cls.REPORT_PATH: "Path of the Markdown quality report",
            cls.LOG_LEVEL: "Logging level (debug, info, warning, error)",
            cls.SIMILARITY_THRESHOLD: "Name similarity for near duplicates (0-1]",
        }

    @classmethod
    def load_overrides(cls) -> Dict[str, Any]:
        """Read the configuration overrides set in the environment."""
        overrides = {}
        for variable, field_name in cls._FIELDS.items():
            value = os.environ.get(variable)
            if value:
                overrides[field_name] = value.lower() if variable == cls.LOG_LEVEL else value
        return overrides
