"""
Screen classes for the Traffic Dashboard.

Contains:
- DashboardScreen: Live bar chart with drill-down, back control and status footer
"""

from typing import Optional

from rich.markup import escape
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Button, Footer, Static

from src.metrics_client.exceptions import MetricsError
from src.utils.logger import get_logger

from .constants import APP_TITLE, INBOUND_LABEL, OUTBOUND_LABEL
from .models import THEME, Snapshot
from .poller import DashboardCoordinator, RenderCommand
from .status import ConnectionState
from .widgets import TrafficBarChart

logger = get_logger(__name__)


class DashboardScreen(Screen):
    """Screen showing the live traffic chart."""

    BINDINGS = [
        Binding("q", "quit_app", "Quit"),
        Binding("b", "go_back", "Back"),
        Binding("escape", "go_back", "Back", show=False),
    ]

    def __init__(self):
        super().__init__()
        self.poll_timer: Optional[Timer] = None

    @property
    def coordinator(self) -> DashboardCoordinator:
        """Dashboard state lives on the app, constructed once at startup."""
        return self.app.coordinator

    def compose(self) -> ComposeResult:
        """Compose the dashboard UI."""
        with Container(id="dashboard-container"):
            with Horizontal(id="header-bar"):
                with Vertical(id="titles"):
                    yield Static(APP_TITLE, id="main-title")
                    yield Static("", id="subtitle")
                yield Button("◀ Back", id="back-btn", disabled=True, classes="-hidden")

            yield Static(
                f"[{THEME.inbound}]█ {INBOUND_LABEL}[/{THEME.inbound}]  │  "
                f"[{THEME.outbound}]█ {OUTBOUND_LABEL}[/{THEME.outbound}]",
                id="legend"
            )

            with VerticalScroll(id="chart-container"):
                yield TrafficBarChart(id="traffic-chart")

            with Horizontal(id="status-footer"):
                yield Static(self.coordinator.status.indicator, id="status-indicator")
                yield Static(f"[dim]{escape(self.coordinator.status.text)}[/dim]", id="status-text")

        yield Footer()

    def on_mount(self) -> None:
        """Draw the current state, then start polling."""
        self._apply(self.coordinator.render())
        self.query_one("#traffic-chart", TrafficBarChart).focus()
        self._start_polling()

    def _start_polling(self) -> None:
        """Poll once now, then on every interval tick."""
        if self.poll_timer:
            self.poll_timer.stop()
            self.poll_timer = None

        self._poll_data()
        self.poll_timer = self.set_interval(self.coordinator.poll_interval, self._poll_data)
        logger.info(f"Polling started: interval={self.coordinator.poll_interval}s")

    def on_unmount(self) -> None:
        if self.poll_timer:
            self.poll_timer.stop()
            self.poll_timer = None

    def _poll_data(self) -> None:
        """Start one fetch in a worker thread.

        Earlier fetches are not cancelled; whichever result is applied last
        wins.
        """
        self.run_worker(self._fetch_snapshot, thread=True, group="poll")

    def _fetch_snapshot(self) -> None:
        """Worker body: blocking fetch, result handed back to the UI thread."""
        try:
            snapshot = self.coordinator.fetch()
        except MetricsError as e:
            self.app.call_from_thread(self._handle_poll_error, e)
            return
        except Exception as e:
            logger.exception("Unexpected error polling metrics endpoint")
            self.app.call_from_thread(self._handle_poll_error, e)
            return
        self.app.call_from_thread(self._handle_snapshot, snapshot)

    def _handle_snapshot(self, snapshot: Snapshot) -> None:
        self._apply(self.coordinator.on_snapshot(snapshot))
        self._update_status()

    def _handle_poll_error(self, error: Exception) -> None:
        self.coordinator.on_poll_error(error)
        self._update_status()

    def _apply(self, command: Optional[RenderCommand]) -> None:
        """Push a render command into the widgets. None leaves them as they are."""
        if command is None:
            return

        chart = self.query_one("#traffic-chart", TrafficBarChart)
        chart.update_series(command.series, command.placeholder)

        self.query_one("#main-title", Static).update(command.title)
        self.query_one("#subtitle", Static).update(escape(command.subtitle))

        back = self.query_one("#back-btn", Button)
        back.disabled = not command.back_enabled
        back.set_class(not command.back_enabled, "-hidden")

    def _update_status(self) -> None:
        """Update the status footer."""
        status = self.coordinator.status
        self.query_one("#status-indicator", Static).update(status.indicator)
        if status.state is ConnectionState.ERROR:
            self.query_one("#status-text", Static).update(f"[bold red]{escape(status.text)}[/bold red]")
        else:
            self.query_one("#status-text", Static).update(escape(status.text))

    @on(TrafficBarChart.BarSelected)
    def on_bar_selected(self, event: TrafficBarChart.BarSelected) -> None:
        """Drill into the clicked client (main view only)."""
        command = self.coordinator.on_user_select(event.index)
        if command is not None:
            self._apply(command)
            self.notify(escape(command.subtitle), severity="information")

    @on(Button.Pressed, "#back-btn")
    def on_back_pressed(self, event: Button.Pressed) -> None:
        self.action_go_back()

    def action_go_back(self) -> None:
        """Return to the aggregate view."""
        command = self.coordinator.on_back()
        if command is not None:
            self._apply(command)
            self.query_one("#traffic-chart", TrafficBarChart).focus()

    def action_quit_app(self) -> None:
        """Quit the application."""
        if self.poll_timer:
            self.poll_timer.stop()
            self.poll_timer = None

        self.app.exit()
