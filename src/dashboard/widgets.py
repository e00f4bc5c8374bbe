"""
Custom widgets for the Traffic Dashboard.

Contains:
- TrafficBarChart: Horizontal grouped bar chart (inbound/outbound per label)
"""

from typing import Optional

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static

from src.utils.formatting import format_bytes

from .constants import CHART_LABEL_WIDTH, CHART_MIN_BAR_WIDTH
from .models import THEME
from .projector import EMPTY_SERIES, ChartSeries

# Each label takes an inbound row, an outbound row and a spacer row
ROWS_PER_LABEL = 3
VALUE_COLUMN_WIDTH = 14
BAR_CHAR = "█"


class TrafficBarChart(Static):
    """Two bars (inbound above outbound) for every label of a ChartSeries.

    Clicking either bar of a label, or pressing enter on the highlighted
    label, posts BarSelected with the label index. Clicks on spacer rows or
    outside the bars post nothing.
    """

    can_focus = True

    BINDINGS = [
        Binding("up", "cursor_up", "Up", show=False),
        Binding("down", "cursor_down", "Down", show=False),
        Binding("enter", "select_cursor", "Drill down"),
    ]

    class BarSelected(Message):
        """Message sent when a label's bars are selected."""
        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(self, id: str = None, classes: str = None):
        super().__init__("", id=id, classes=classes)
        self.series: ChartSeries = EMPTY_SERIES
        self.placeholder: Optional[str] = None
        self.cursor_index: int = 0

    def update_series(self, series: ChartSeries, placeholder: Optional[str] = None) -> None:
        """Replace the drawn data and redraw."""
        self.series = series
        self.placeholder = placeholder
        if self.cursor_index >= len(series.labels):
            self.cursor_index = 0
        self._redraw()

    def on_mount(self) -> None:
        self._redraw()

    def on_resize(self, event: events.Resize) -> None:
        self._redraw()

    def hit_test(self, x: int, y: int) -> Optional[int]:
        """Label index whose bar covers content cell (x, y), None for misses.

        Only the drawn bar counts: the label column, the padding after a bar
        and the value text are misses.
        """
        index = self.index_at(y)
        if index is None:
            return None
        if y % ROWS_PER_LABEL == 0:
            value = self.series.inbound[index]
        else:
            value = self.series.outbound[index]
        start = CHART_LABEL_WIDTH + 1
        length = self._bar_length(value, self._scale_max(), self._bar_width())
        if start <= x < start + length:
            return index
        return None

    def index_at(self, row: int) -> Optional[int]:
        """Label index drawn on content row ``row``, None for misses."""
        if row < 0 or row % ROWS_PER_LABEL == ROWS_PER_LABEL - 1:
            return None
        index = row // ROWS_PER_LABEL
        if index >= len(self.series.labels):
            return None
        return index

    def on_click(self, event: events.Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        index = self.hit_test(offset.x, offset.y)
        if index is None:
            return
        self.cursor_index = index
        self.post_message(self.BarSelected(index))

    def action_cursor_up(self) -> None:
        if self.series.labels and self.cursor_index > 0:
            self.cursor_index -= 1
            self._redraw()

    def action_cursor_down(self) -> None:
        if self.cursor_index < len(self.series.labels) - 1:
            self.cursor_index += 1
            self._redraw()

    def action_select_cursor(self) -> None:
        if self.series.labels:
            self.post_message(self.BarSelected(self.cursor_index))

    def _bar_width(self) -> int:
        width = self.content_size.width if self.is_mounted else 0
        return max(CHART_MIN_BAR_WIDTH, width - CHART_LABEL_WIDTH - VALUE_COLUMN_WIDTH - 2)

    def _redraw(self) -> None:
        if self.series.is_empty:
            self.update(Text(self.placeholder or "", style=f"italic {THEME.text_dim}"))
            return
        self.update(self._build_chart())

    def _build_chart(self) -> Text:
        """Render the bars as rich Text, scaled to the largest value."""
        bar_width = self._bar_width()
        scale_max = self._scale_max()

        text = Text()
        rows = zip(self.series.labels, self.series.inbound, self.series.outbound)
        for index, (label, inbound, outbound) in enumerate(rows):
            highlighted = self.has_focus and index == self.cursor_index
            label_style = f"bold {THEME.primary_light}" if highlighted else f"bold {THEME.text}"

            text.append(f"{label[:CHART_LABEL_WIDTH]:<{CHART_LABEL_WIDTH}} ", style=label_style)
            self._append_bar(text, inbound, scale_max, bar_width, THEME.inbound)
            text.append(f"{' ' * CHART_LABEL_WIDTH} ")
            self._append_bar(text, outbound, scale_max, bar_width, THEME.outbound)
            text.append("\n")

        return text

    def _scale_max(self) -> int:
        return max(max(self.series.inbound, default=0), max(self.series.outbound, default=0))

    @staticmethod
    def _bar_length(value: int, scale_max: int, bar_width: int) -> int:
        length = round(value / scale_max * bar_width) if scale_max > 0 else 0
        # Any traffic at all gets a visible sliver
        if value > 0:
            length = max(1, length)
        return length

    @classmethod
    def _append_bar(cls, text: Text, value: int, scale_max: int, bar_width: int, color: str) -> None:
        length = cls._bar_length(value, scale_max, bar_width)
        text.append(BAR_CHAR * length, style=color)
        text.append(" " * (bar_width - length))
        text.append(f" {format_bytes(value):>{VALUE_COLUMN_WIDTH - 1}}\n", style=THEME.text_dim)

    def on_focus(self, event: events.Focus) -> None:
        self._redraw()

    def on_blur(self, event: events.Blur) -> None:
        self._redraw()
