"""
Audit Subcommand Module

Audits the whole content tree: completeness, critical data, duplicates,
slug coherence and cross references. Writes the Markdown quality report
and optionally a JSON report.
"""

import logging
import sys
from typing import Optional

import click

from content_audit.engine import ContentAuditEngine
from .config_loader import load_config
from .shared_options import (
    config_option,
    data_root_option,
    log_file_option,
    log_level_option,
    strict_option,
)


logger = logging.getLogger(__name__)


@click.command(help="Audit the content tree and write the quality report")
@data_root_option()
@config_option()
@click.option(
    "--report", "-r",
    "report_path",
    type=click.Path(dir_okay=False),
    help="Markdown report path (default: docs/CONTENT_QUALITY_REPORT.md)",
)
@click.option(
    "--json-report",
    "json_report_path",
    type=click.Path(dir_okay=False),
    help="Also write the report as JSON to this path",
)
@click.option(
    "--similarity-threshold",
    type=click.FloatRange(0, 1, min_open=True),
    help="Name similarity above which records are flagged as near duplicates",
)
@click.option(
    "--max-examples",
    type=click.IntRange(min=1),
    help="Incomplete structures listed per content type in the report",
)
@click.option(
    "--show-infos",
    is_flag=True,
    help="Also print informational issues",
)
@strict_option()
@log_level_option()
@log_file_option()
def audit(
    data_root: Optional[str],
    config: Optional[str],
    report_path: Optional[str],
    json_report_path: Optional[str],
    similarity_threshold: Optional[float],
    max_examples: Optional[int],
    show_infos: bool,
    strict: Optional[bool],
    log_level: Optional[str],
    log_file: Optional[str],
):
    """Audit the content tree and write the quality report.

    Examples:
        # Audit the default tree (server/data) and write the report
        velo-content audit

        # Audit another tree, write a JSON report too
        velo-content audit --data-root ./data --json-report audit.json

        # Strict mode (fail on warnings)
        velo-content audit --strict
    """
    audit_config = load_config(config, {
        "data_root": data_root,
        "report_path": report_path,
        "json_report_path": json_report_path,
        "similarity_threshold": similarity_threshold,
        "max_examples": max_examples,
        "strict": strict or None,
        "log_level": log_level,
        "log_file": log_file,
    })

    engine = ContentAuditEngine(audit_config)
    report = engine.run()

    click.echo(report.format_human(show_infos=show_infos))
    for path in engine.write_reports(report):
        click.echo(f"Report saved: {path}")

    if not report.is_valid:
        sys.exit(1)
