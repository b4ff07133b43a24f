"""
Configuration loading shared by the subcommands.

Builds the AuditConfig from config files, environment and CLI flags, and
configures logging from it. Configuration errors end the command with
exit code 2.
"""

import sys
from typing import Any, Dict, Optional

import click

from content_audit.config import AuditConfig, ConfigurationManager, LogLevel
from content_audit.errors import ConfigurationError
from content_audit.logging_config import configure_logging, logging_config


def load_config(
    config_file: Optional[str],
    overrides: Dict[str, Any],
    default_log_level: Optional[str] = None,
) -> AuditConfig:
    """Load the configuration or exit with a configuration error.

    ``default_log_level`` replaces the configured default level only when
    no config file, environment variable or flag sets one.
    """
    if overrides.get('log_level'):
        overrides['log_level'] = overrides['log_level'].lower()
    try:
        config = ConfigurationManager().load_configuration(config_file, overrides)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if default_log_level and "log_level" not in config.model_fields_set:
        config = config.model_copy(update={"log_level": LogLevel(default_log_level.lower())})

    configure_logging(config.log_level.value, config.log_file, force=True)
    logging_config.log_configuration_details(config.model_dump(mode='json'))
    return config
