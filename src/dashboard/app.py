"""
Main application class and entry points for the Traffic Dashboard.

Contains:
- TrafficDashboardApp: Main Textual application class
- main: Main entry point function
- check_endpoint: One-shot fetch of the aggregate series
"""

import sys
from typing import Optional

from textual.app import App

from src.utils.logger import get_logger, suppress_console_logging
from src.metrics_client.client import MetricsClient
from src.metrics_client.exceptions import MetricsError
from config.settings import settings

from .constants import APP_TITLE
from .poller import DashboardCoordinator
from .projector import ChartSeries, project_aggregate
from .styles import get_css
from .screens import DashboardScreen

logger = get_logger(__name__)


class TrafficDashboardApp(App):
    """Live traffic dashboard: aggregate chart with per-client drill-down."""

    TITLE = APP_TITLE
    ENABLE_COMMAND_PALETTE = False

    CSS = get_css()

    SCREENS = {
        "dashboard": DashboardScreen,
    }

    def __init__(self, client: Optional[MetricsClient] = None, poll_interval: Optional[float] = None):
        super().__init__()
        # Shared state across screens, constructed once
        self.coordinator = DashboardCoordinator(
            client or MetricsClient(),
            poll_interval=poll_interval or settings.poll_interval,
        )

    def on_mount(self) -> None:
        """Called when app is mounted - go straight to the dashboard."""
        self.push_screen("dashboard")


def main(endpoint: str = None, poll_interval: float = None, timeout: float = None):
    """Main entry point."""
    try:
        client = MetricsClient(endpoint=endpoint, timeout=timeout)
        app = TrafficDashboardApp(client=client, poll_interval=poll_interval)

        # Logs still go to file while the TUI owns the terminal
        suppress_console_logging()
        app.run()

    except KeyboardInterrupt:
        # Clean exit on Ctrl+C
        pass
    except Exception as e:
        from rich.console import Console
        console = Console()
        console.print(f"[red]Error: {e}[/red]")
        logger.exception("Fatal error")
        sys.exit(1)


def check_endpoint(endpoint: str = None, timeout: float = None) -> ChartSeries:
    """Fetch one snapshot and return its aggregate series.

    Raises MetricsError when the cycle fails.
    """
    client = MetricsClient(endpoint=endpoint, timeout=timeout)
    try:
        snapshot = client.fetch_snapshot()
    except MetricsError:
        logger.exception(f"Endpoint check failed for {client.endpoint}")
        raise

    return project_aggregate(snapshot)
