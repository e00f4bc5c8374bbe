"""
Constants for the Traffic Dashboard.
"""

from config.settings import DEFAULT_ENDPOINT, DEFAULT_POLL_INTERVAL

APP_TITLE = "Network Traffic Dashboard"

# Subtitles; the main one names the poll window in seconds
MAIN_SUBTITLE = "Data volume per client ({interval:g}s window)"
DRILLDOWN_SUBTITLE = "Traffic breakdown by protocol for {client_id}"

# Chart placeholders
WAITING_PLACEHOLDER = "Waiting for the first snapshot..."
NO_CLIENTS_PLACEHOLDER = "No clients reported in the latest snapshot"
NO_BREAKDOWN_PLACEHOLDER = "No protocol breakdown available for {client_id}"

# Dataset labels shown in the chart legend
INBOUND_LABEL = "Inbound traffic"
OUTBOUND_LABEL = "Outbound traffic"

# Width of the label column and of the longest bar, in cells
CHART_LABEL_WIDTH = 18
CHART_MIN_BAR_WIDTH = 10
