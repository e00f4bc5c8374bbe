"""
Connection status reporting for the dashboard footer.

The status is a function of the most recent poll outcome only:
CONNECTING until the first cycle completes, then CONNECTED or ERROR.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from .models import THEME, ColorTheme

ERROR_HINT = "Connection error - check that the metrics backend is running"


class ConnectionState(Enum):
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


class StatusReporter:
    """Tri-state connection indicator driven by poll outcomes."""

    def __init__(self, endpoint: str = "", theme: ColorTheme = THEME):
        self.endpoint = endpoint
        self.theme = theme
        self.state = ConnectionState.CONNECTING
        self.last_success: Optional[datetime] = None
        self.last_error: Optional[Exception] = None

    def mark_success(self, at: Optional[datetime] = None) -> None:
        """Record a completed cycle."""
        self.state = ConnectionState.CONNECTED
        self.last_success = at or datetime.now()

    def mark_error(self, error: Exception) -> None:
        """Record a failed cycle. The last success time is kept."""
        self.state = ConnectionState.ERROR
        self.last_error = error

    @property
    def text(self) -> str:
        """Plain status line."""
        if self.state is ConnectionState.CONNECTED:
            return f"Connected. Last update: {self.last_success.strftime('%H:%M:%S')}"
        if self.state is ConnectionState.ERROR:
            return ERROR_HINT
        return f"Connecting to {self.endpoint}..." if self.endpoint else "Connecting..."

    @property
    def indicator(self) -> str:
        """Rich markup for the coloured status dot."""
        if self.state is ConnectionState.CONNECTED:
            color, symbol = self.theme.success, "●"
        elif self.state is ConnectionState.ERROR:
            color, symbol = self.theme.error, "✗"
        else:
            color, symbol = self.theme.warning, "●"
        return f"[dim]Poll[/dim] [bold {color}]{symbol}[/bold {color}]"
