"""Text-mode area chart."""

from collections.abc import Sequence
from dataclasses import dataclass

POINT = "●"
FILL = "│"
BLANK = " "


@dataclass(frozen=True)
class ChartGrid:
    """Rows are ordered top (row == height) to bottom (row == 0)."""

    rows: list[str]
    axis: list[float]  # y value at each row, same order as rows
    width: int
    height: int
    min_value: float
    max_value: float
    count: int

    def lines(self) -> list[str]:
        out = [f"{y:8.2f} │{row}" for y, row in zip(self.axis, self.rows)]
        out.append(" " * 9 + "└" + "─" * self.width)
        return out

    def render(self) -> str:
        return "\n".join(self.lines())


def _quantize(value: float, low: float, value_range: float, height: int) -> int:
    return int((value - low) / value_range * height + 0.5)


def _nearest_columns(values: Sequence[float], width: int) -> list[tuple[float, float]]:
    count = len(values)
    ncols = min(width, count)
    cols = []
    for col in range(ncols):
        idx = min(col * count // ncols, count - 1)
        cols.append((values[idx], values[idx]))
    return cols


def _minmax_columns(values: Sequence[float], width: int) -> list[tuple[float, float]]:
    count = len(values)
    ncols = min(width, count)
    cols = []
    for col in range(ncols):
        start = col * count // ncols
        end = max(start + 1, (col + 1) * count // ncols)
        bucket = values[start:end]
        cols.append((min(bucket), max(bucket)))
    return cols


def render_chart(
    values: Sequence[float], width: int = 60, height: int = 20, mode: str = "nearest"
) -> ChartGrid:
    """
    Map the series onto a (height + 1) x min(width, count) glyph grid.

    ``nearest`` samples one value per column and fills below it.
    ``minmax`` draws each column's bucket extent, marking the maximum with a
    point and the span down to the bucket minimum with fill glyphs.
    """
    if not values:
        raise ValueError("cannot chart an empty series")
    if width < 1 or height < 1:
        raise ValueError("chart width and height must be >= 1")

    low, high = min(values), max(values)
    value_range = high - low
    if value_range == 0:
        value_range = 1.0

    if mode == "nearest":
        columns = _nearest_columns(values, width)
    elif mode == "minmax":
        columns = _minmax_columns(values, width)
    else:
        raise ValueError(f"unknown chart mode: {mode}")

    quantized = [
        (_quantize(lo, low, value_range, height), _quantize(hi, low, value_range, height))
        for lo, hi in columns
    ]

    rows = []
    axis = []
    for row in range(height, -1, -1):
        axis.append(low + value_range * row / height)
        cells = []
        for row_lo, row_hi in quantized:
            floor = 0 if mode == "nearest" else row_lo
            if row == row_hi:
                cells.append(POINT)
            elif floor <= row < row_hi:
                cells.append(FILL)
            else:
                cells.append(BLANK)
        rows.append("".join(cells))

    return ChartGrid(
        rows=rows,
        axis=axis,
        width=width,
        height=height,
        min_value=low,
        max_value=high,
        count=len(values),
    )
