"""
Configuration Manager for the content audit.

Loads, validates and merges configuration from multiple sources:
- System defaults
- Project configuration (./.velo-content/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from content_audit.config.environment import EnvironmentVariables
from content_audit.config.schema import AuditConfig
from content_audit.errors import ConfigurationError


logger = logging.getLogger(__name__)

_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_config_path = (project_dir or Path.cwd()) / ".velo-content" / "config.yaml"

    def load_configuration(
        self,
        config_file: Optional[str] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
    ) -> AuditConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides, None values ignored)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.velo-content/config.yaml)
        5. System defaults

        Raises:
            ConfigurationError: If a file is unreadable or a value is invalid
        """
        config_dict: Dict[str, Any] = {}

        if self.project_config_path.exists():
            logger.debug(f"Loading project configuration {self.project_config_path}")
            config_dict = self._merge_configs(
                config_dict, self._load_yaml_file(self.project_config_path)
            )

        if config_file:
            path = Path(config_file)
            if not path.exists():
                raise ConfigurationError("Configuration file not found", file_path=path)
            logger.debug(f"Loading configuration {path}")
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(path))

        config_dict = self._merge_configs(config_dict, EnvironmentVariables.load_overrides())

        if cli_overrides:
            cli_values = {k: v for k, v in cli_overrides.items() if v is not None}
            config_dict = self._merge_configs(config_dict, cli_values)

        config_dict = self.substitute_environment_variables(config_dict)

        try:
            return AuditConfig(**config_dict)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'root'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {details}") from e

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.

        Raises:
            ConfigurationError: If a referenced variable without default is not set
        """
        def replace_var(match):
            var_expr = match.group(1)
            if ":-" in var_expr:
                var_name, default_value = var_expr.split(":-", 1)
                return os.environ.get(var_name, default_value)
            if var_expr not in os.environ:
                raise ConfigurationError(
                    f"Required environment variable '{var_expr}' is not set"
                )
            return os.environ[var_expr]

        def substitute_recursive(obj):
            if isinstance(obj, dict):
                return {k: substitute_recursive(v) for k, v in obj.items()}
            if isinstance(obj, list):
                return [substitute_recursive(item) for item in obj]
            if isinstance(obj, str):
                return _VAR_PATTERN.sub(replace_var, obj)
            return obj

        return substitute_recursive(config_dict)

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse a YAML configuration file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            line_number = None
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                line_number = mark.line + 1
            problem = getattr(e, "problem", None) or str(e)
            raise ConfigurationError(
                f"YAML parsing error: {problem}",
                file_path=file_path,
                line_number=line_number,
            ) from e
        except IOError as e:
            raise ConfigurationError(f"Cannot read configuration: {e}", file_path=file_path) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", file_path=file_path
            )
        return content

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result
