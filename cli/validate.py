"""
Validate Subcommand Module

Validates a single content record file: structure, critical fields and
slug coherence. Cross references need the whole tree and are left to
the audit command.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from content_audit.engine import ContentAuditEngine
from content_audit.schemas import CONTENT_TYPES
from .config_loader import load_config
from .shared_options import config_option, log_level_option, strict_option


logger = logging.getLogger(__name__)


@click.command(help="Validate a single content record file")
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(),
    help="Record file to validate",
)
@click.option(
    "--type", "-t",
    "content_type",
    required=True,
    type=click.Choice(CONTENT_TYPES, case_sensitive=False),
    help="Content type of the record",
)
@click.option(
    "--report", "-r",
    "report_path",
    type=click.Path(dir_okay=False),
    help="Output JSON report to this path",
)
@config_option()
@strict_option()
@log_level_option()
def validate(
    input_path: str,
    content_type: str,
    report_path: Optional[str],
    config: Optional[str],
    strict: Optional[bool],
    log_level: Optional[str],
):
    """Validate a single content record file.

    Examples:
        velo-content validate --input server/data/cols/enriched/galibier.json --type cols

        velo-content validate -i plan.json -t plans --strict --report plan_validation.json
    """
    audit_config = load_config(config, {"strict": strict or None, "log_level": log_level})
    engine = ContentAuditEngine(audit_config)
    report = engine.validate_record_file(input_path, content_type.lower())

    click.echo(report.format_human(show_infos=True))

    if report_path:
        Path(report_path).parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
        click.echo(f"\nReport saved: {report_path}")

    if not report.is_valid:
        sys.exit(1)
