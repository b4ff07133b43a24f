"""
Configuration for the content audit: pydantic schema, environment
variables and the layered configuration manager.
"""

from content_audit.config.schema import AuditConfig, LogLevel
from content_audit.config.manager import ConfigurationManager

__all__ = ["AuditConfig", "LogLevel", "ConfigurationManager"]
