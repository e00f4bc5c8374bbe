#!/usr/bin/env python3
"""Command-line interface for the traffic dashboard."""

import click
import json
import sys
from tabulate import tabulate

from ..dashboard.app import main as run_dashboard, check_endpoint
from ..metrics_client.exceptions import ConfigurationError, MetricsError
from ..utils.formatting import format_bytes
from ..utils.logger import get_logger
from config.settings import settings

logger = get_logger(__name__)


@click.command()
@click.option('--endpoint', help='Metrics endpoint URL (overrides config)')
@click.option('--interval', type=float, help='Poll interval in seconds (overrides config)')
@click.option('--timeout', type=float, help='Request timeout in seconds (default: transport default)')
@click.option('--check', is_flag=True, help='Fetch one snapshot, print it and exit')
@click.option('--output', '-o', type=click.Choice(['json', 'table']), default='table', help='Output format for --check')
def cli(endpoint, interval, timeout, check, output):
    """Live network traffic dashboard (per-client volumes with protocol drill-down)."""
    try:
        settings.validate()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    endpoint = endpoint or settings.endpoint
    if interval is None:
        interval = settings.poll_interval

    if interval <= 0:
        click.echo("Error: poll interval must be positive", err=True)
        sys.exit(2)

    if timeout is not None and timeout <= 0:
        click.echo("Error: request timeout must be positive", err=True)
        sys.exit(2)

    if not check:
        logger.info(f"Starting dashboard for {endpoint} every {interval}s")
        run_dashboard(endpoint=endpoint, poll_interval=interval, timeout=timeout)
        return

    try:
        series = check_endpoint(endpoint=endpoint, timeout=timeout)
    except MetricsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    rows = list(zip(series.labels, series.inbound, series.outbound))

    if output == 'json':
        click.echo(json.dumps(
            [{'client': client, 'inbound': inbound, 'outbound': outbound} for client, inbound, outbound in rows],
            indent=2
        ))
    elif rows:
        rows = [[client, format_bytes(inbound), format_bytes(outbound)] for client, inbound, outbound in rows]
        click.echo(tabulate(rows, headers=['Client', 'Inbound', 'Outbound'], tablefmt='grid'))
    else:
        click.echo("No clients reported")


if __name__ == '__main__':
    cli()
