"""
View state machine for the dashboard.

States are MainView (aggregate chart) and DrilldownView(client_id)
(protocol chart of one client). Transitions:

- select: Main -> Drilldown, only for a click that hit a rendered bar
- back: Drilldown -> Main, always
- reconcile: Drilldown -> Main, when a fresh snapshot lost the client
"""

from typing import Sequence

from src.utils.logger import get_logger

from .models import MAIN_VIEW, DrilldownView, MainView, Snapshot, ViewState

logger = get_logger(__name__)


class ViewStateMachine:
    """Holds the current ViewState and applies the transition rules."""

    def __init__(self):
        self._state: ViewState = MAIN_VIEW

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def is_main(self) -> bool:
        return isinstance(self._state, MainView)

    @property
    def drilldown_client(self):
        """Client id of the active drill-down, None in the main view."""
        if isinstance(self._state, DrilldownView):
            return self._state.client_id
        return None

    def select(self, labels: Sequence[str], index: int) -> bool:
        """Drill into ``labels[index]``.

        Ignored outside the main view and for indexes that do not hit a
        rendered label. Returns True when the state changed.
        """
        if not self.is_main:
            logger.debug(f"Ignoring selection of index {index}: already in drill-down")
            return False
        if index is None or not 0 <= index < len(labels):
            logger.debug(f"Ignoring selection of index {index}: {len(labels)} labels rendered")
            return False

        self._state = DrilldownView(client_id=labels[index])
        logger.info(f"Drilling down into {labels[index]}")
        return True

    def back(self) -> bool:
        """Return to the main view. Returns True when the state changed."""
        if self.is_main:
            return False

        logger.info(f"Leaving drill-down for {self.drilldown_client}")
        self._state = MAIN_VIEW
        return True

    def reconcile(self, snapshot: Snapshot) -> bool:
        """Fall back to the main view if the drilled-down client disappeared.

        Returns True when the state changed.
        """
        client_id = self.drilldown_client
        if client_id is None or client_id in snapshot:
            return False

        logger.info(f"Client {client_id} missing from latest snapshot, returning to main view")
        self._state = MAIN_VIEW
        return True
