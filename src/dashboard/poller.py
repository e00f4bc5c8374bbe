"""
Poll coordinator for the Traffic Dashboard.

DashboardCoordinator owns the cached Snapshot, the view state machine and
the status reporter. Every event (poll result, bar selection, back) goes
through one handler that updates that state and returns the RenderCommand
the screen should apply, or None when the chart must stay as it is.

Fetching is split from applying: a screen can run ``fetch()`` in a worker
thread and hand the outcome to ``on_snapshot``/``on_poll_error`` on the UI
thread. ``on_tick()`` does both in one call.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.metrics_client.exceptions import MetricsError
from src.utils.logger import get_logger

from .constants import (
    APP_TITLE, DEFAULT_POLL_INTERVAL, MAIN_SUBTITLE, DRILLDOWN_SUBTITLE,
    WAITING_PLACEHOLDER, NO_CLIENTS_PLACEHOLDER, NO_BREAKDOWN_PLACEHOLDER,
)
from .models import DrilldownView, Snapshot, ViewState
from .projector import EMPTY_SERIES, ChartSeries, project_aggregate, project_drilldown
from .status import StatusReporter
from .view_state import ViewStateMachine

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderCommand:
    """Everything the screen needs to redraw the chart area."""
    view: ViewState
    series: ChartSeries
    title: str
    subtitle: str
    placeholder: Optional[str] = None

    @property
    def back_enabled(self) -> bool:
        return isinstance(self.view, DrilldownView)


class DashboardCoordinator:
    """Single owner of the dashboard state (snapshot, view, connection status)."""

    def __init__(self, client, poll_interval: float = DEFAULT_POLL_INTERVAL):
        self.client = client
        self.poll_interval = poll_interval
        self.snapshot: Optional[Snapshot] = None
        self.view = ViewStateMachine()
        self.status = StatusReporter(endpoint=getattr(client, "endpoint", ""))
        # Series currently on screen; bar selections index into its labels
        self.rendered: ChartSeries = EMPTY_SERIES
        self.poll_count = 0

    def fetch(self) -> Snapshot:
        """Fetch one snapshot. Blocking; may raise MetricsError."""
        return self.client.fetch_snapshot()

    def on_tick(self) -> Optional[RenderCommand]:
        """Run a full poll cycle synchronously."""
        try:
            snapshot = self.fetch()
        except MetricsError as e:
            return self.on_poll_error(e)
        return self.on_snapshot(snapshot)

    def on_snapshot(self, snapshot: Snapshot, at: Optional[datetime] = None) -> RenderCommand:
        """Replace the cached snapshot and re-render the active view."""
        self.snapshot = snapshot
        self.poll_count += 1

        self.view.reconcile(snapshot)
        self.status.mark_success(at)
        return self.render()

    def on_poll_error(self, error: Exception) -> Optional[RenderCommand]:
        """Record a failed cycle; snapshot, view and chart are left untouched."""
        logger.warning(f"Poll failed ({type(error).__name__}): {error}")
        self.status.mark_error(error)
        return None

    def on_user_select(self, index: Optional[int]) -> Optional[RenderCommand]:
        """Handle a bar selection on the rendered chart."""
        if not self.view.select(self.rendered.labels, index):
            return None
        return self.render()

    def on_back(self) -> Optional[RenderCommand]:
        """Handle the back control."""
        if not self.view.back():
            return None
        return self.render()

    def render(self) -> RenderCommand:
        """Project the cached snapshot for the current view."""
        state = self.view.state
        snapshot = self.snapshot if self.snapshot is not None else Snapshot()

        if isinstance(state, DrilldownView):
            series = project_drilldown(snapshot, state.client_id)
            placeholder = None
            if series is None:
                series = EMPTY_SERIES
                placeholder = NO_BREAKDOWN_PLACEHOLDER.format(client_id=state.client_id)
            subtitle = DRILLDOWN_SUBTITLE.format(client_id=state.client_id)
        else:
            series = project_aggregate(snapshot)
            placeholder = None
            if series.is_empty:
                placeholder = WAITING_PLACEHOLDER if self.snapshot is None else NO_CLIENTS_PLACEHOLDER
            subtitle = MAIN_SUBTITLE.format(interval=self.poll_interval)

        self.rendered = series
        return RenderCommand(
            view=state,
            series=series,
            title=APP_TITLE,
            subtitle=subtitle,
            placeholder=placeholder,
        )
