"""
Cols Subcommand Module

Lists the cols of the catalog, filtered by country, region, difficulty,
altitude or name.
"""

import json
from typing import Optional

import click

from content_audit.engine import ContentAuditEngine
from .config_loader import load_config
from .shared_options import config_option, data_root_option, log_level_option


@click.command(help="List cols of the catalog with optional filters")
@data_root_option()
@config_option()
@click.option("--country", help="Keep cols of this country")
@click.option("--region", help="Keep cols of this region")
@click.option("--difficulty", help="Keep cols of this difficulty (level or label)")
@click.option("--min-altitude", type=float, help="Minimum summit altitude in meters")
@click.option("--max-altitude", type=float, help="Maximum summit altitude in meters")
@click.option("--search", "-q", help="Keep cols whose name contains this text")
@click.option("--json", "as_json", is_flag=True, help="Print the matching records as JSON")
@log_level_option()
def cols(
    data_root: Optional[str],
    config: Optional[str],
    country: Optional[str],
    region: Optional[str],
    difficulty: Optional[str],
    min_altitude: Optional[float],
    max_altitude: Optional[float],
    search: Optional[str],
    as_json: bool,
    log_level: Optional[str],
):
    """List cols of the catalog.

    Examples:
        velo-content cols --country France --min-altitude 2000

        velo-content cols --search galibier --json
    """
    audit_config = load_config(
        config,
        {"data_root": data_root, "log_level": log_level},
        default_log_level="warning",
    )
    catalog = ContentAuditEngine(audit_config).catalog()

    matches = catalog.filter(
        country=country,
        region=region,
        difficulty=difficulty,
        min_altitude=min_altitude,
        max_altitude=max_altitude,
    )
    if search:
        found = {col["slug"] for col in catalog.search(search)}
        matches = [col for col in matches if col["slug"] in found]

    if as_json:
        click.echo(json.dumps(matches, indent=2, ensure_ascii=False))
        return

    for col in matches:
        altitude = col.get("altitude")
        altitude_text = f"{altitude} m" if altitude is not None else "? m"
        click.echo(f"{col['slug']:<40} {col.get('name', '')} ({altitude_text})")
    click.echo(f"\n{len(matches)} col(s) of {len(catalog)}")
