"""
Traffic Dashboard - Live per-client network traffic chart with protocol drill-down.

Uses Textual TUI framework; polls a JSON metrics endpoint on a fixed interval.
"""

from .app import TrafficDashboardApp, main, check_endpoint
from .models import (
    ColorTheme,
    THEME,
    ProtocolStats,
    ClientStats,
    Snapshot,
    SnapshotFormatError,
    MainView,
    DrilldownView,
    MAIN_VIEW,
)
from .projector import ChartSeries, project_aggregate, project_drilldown
from .view_state import ViewStateMachine
from .status import ConnectionState, StatusReporter
from .poller import DashboardCoordinator, RenderCommand

__all__ = [
    # Main app and entry points
    "TrafficDashboardApp",
    "main",
    "check_endpoint",
    # Models
    "ColorTheme",
    "THEME",
    "ProtocolStats",
    "ClientStats",
    "Snapshot",
    "SnapshotFormatError",
    "MainView",
    "DrilldownView",
    "MAIN_VIEW",
    # Core
    "ChartSeries",
    "project_aggregate",
    "project_drilldown",
    "ViewStateMachine",
    "ConnectionState",
    "StatusReporter",
    "DashboardCoordinator",
    "RenderCommand",
]
