"""
Data models for the Traffic Dashboard.

Contains all dataclasses used across the application:
- ColorTheme: Centralized color theme management
- MainView / DrilldownView: The two view states of the dashboard

Snapshot types come from the metrics client and are re-exported here.
"""

from dataclasses import dataclass
from typing import Union

from src.metrics_client.models import (
    ClientStats,
    ProtocolStats,
    Snapshot,
    SnapshotFormatError,
)


@dataclass
class ColorTheme:
    """Centralized color theme management."""

    # Primary colors
    primary: str = "#58a6ff"
    primary_dark: str = "#388bfd"
    primary_light: str = "#79c0ff"

    # Status colors
    success: str = "#56d364"
    warning: str = "#d29922"
    error: str = "#f85149"

    # Data colors: inbound bars blue, outbound bars red
    inbound: str = "#36a2eb"
    inbound_dim: str = "#1f6feb"
    outbound: str = "#ff6384"
    outbound_dim: str = "#da3633"

    # UI colors
    background: str = "#0d1117"
    surface: str = "#161b22"
    surface_dark: str = "#0d1117"
    surface_light: str = "#21262d"

    text: str = "#c9d1d9"
    text_dim: str = "#8b949e"
    text_muted: str = "#656d76"

    border: str = "#30363d"
    border_light: str = "#454c54"


# Global theme instance
THEME = ColorTheme()


@dataclass(frozen=True)
class MainView:
    """Aggregate view: one bar pair per client."""


@dataclass(frozen=True)
class DrilldownView:
    """Per-protocol view of a single client."""
    client_id: str


ViewState = Union[MainView, DrilldownView]

MAIN_VIEW = MainView()
