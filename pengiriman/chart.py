"""Bar chart model with the layout of a simple statistics view."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

MARGIN = 40
BAR_GAP = 10
LABEL_HEIGHT = 20


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class Bar:
    """A bar's rectangle and its label."""

    label: str
    value: int
    left: int
    top: int
    right: int
    bottom: int

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass
class BarChart:
    """Titled bar chart data and its geometry."""

    title: str = ""
    labels: list[str] = field(default_factory=list)
    values: list[int] = field(default_factory=list)

    def set_data(self, labels: Sequence[str], values: Sequence[int]) -> None:
        """Replace the chart data; labels and values must pair up."""
        if len(labels) != len(values):
            raise ValueError("labels and values must have the same length")
        self.labels = list(labels)
        self.values = [int(value) for value in values]

    def set_title(self, title: str) -> None:
        self.title = title

    def clear(self) -> None:
        """Remove the data, keeping the title."""
        self.labels.clear()
        self.values.clear()

    def layout(self, width: int, height: int) -> list[Bar]:
        """Return the bars drawn in an area of the given size."""
        if not self.values:
            return []
        top, bottom = MARGIN, height - MARGIN
        left, right = MARGIN, width - MARGIN
        max_value = max(self.values)
        if max_value == 0:
            raise ValueError("the largest value must not be zero")
        bar_width = _trunc_div(right - left, max(1, len(self.values)))
        bars = []
        for index, (label, value) in enumerate(zip(self.labels, self.values)):
            bar_height = int(value / max_value * (bottom - top))
            x1 = left + index * bar_width
            bars.append(
                Bar(label, value, x1, bottom - bar_height, x1 + bar_width - BAR_GAP, bottom)
            )
        return bars