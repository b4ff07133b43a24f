"""
CLI Package for the Velo-Altitude content audit

This package provides a modular CLI built from Click groups and subcommands.
Each subcommand is implemented in its own module.

The main entry point is the main() function which creates a Click group and
registers all available subcommands. The cli() function serves as the
console script entry point for setup.py.
"""

import os

import click
from dotenv import load_dotenv

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from content_audit.config.environment import EnvironmentVariables
from .audit import audit
from .validate import validate
from .cols import cols

VERSION = '1.0.0'


def _environment_help():
    """List the environment variables the commands read, for --help."""
    lines = ["\b", "Environment variables:"]
    for name, description in EnvironmentVariables.get_variable_documentation().items():
        lines.append(f"  {name:<36} {description}")
    return "\n".join(lines)


@click.group(epilog=_environment_help())
@click.version_option(version=VERSION, prog_name='velo-content')
def main():
    """Velo-Altitude content CLI - audit cols, training programs and nutrition content.

    Checks completeness, critical data, duplicates, slug coherence and cross
    references of the content catalog, and writes a Markdown quality report.
    """
    pass


# Register subcommands
main.add_command(audit)
main.add_command(validate)
main.add_command(cols)


# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the velo-content command is executed
    from the command line after installation via pip.
    """
    main()
