"""
Shared CLI Option Decorators

Reusable Click decorators for options common to several subcommands.
"""

import click


def data_root_option(help=None):
    """Decorator for the content tree root option."""
    def decorator(f):
        return click.option(
            '--data-root', '-d',
            type=click.Path(file_okay=False),
            default=None,
            help=help or 'Root directory of the content tree (overrides config)'
        )(f)
    return decorator


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            type=click.Path(dir_okay=False),
            default=None,
            help=help or 'Path to configuration file'
        )(f)
    return decorator


def strict_option(help=None):
    """Decorator for strict mode."""
    def decorator(f):
        return click.option(
            '--strict',
            is_flag=True,
            default=None,
            help=help or 'Fail on warnings in addition to errors'
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level'
        )(f)
    return decorator


def log_file_option(help=None):
    """Decorator for log file output."""
    def decorator(f):
        return click.option(
            '--log-file',
            type=click.Path(dir_okay=False),
            default=None,
            help=help or 'Also write logs to this file (rotated)'
        )(f)
    return decorator
