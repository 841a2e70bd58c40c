"""
Punchcard renderer: buckets + gradient -> colored terminal grid.
Rows are weekdays Monday..Sunday, columns hours 0..23; each cell is a two-column
block whose background is the palette color nearest to gradient(intensity).
"""
from rich.console import Console
from rich.text import Text

from .analysis import HOURS, WEEKDAY_NAMES, WEEKDAYS, Buckets, When
from .color import XTERM256, Palette
from .config import RenderOptions
from .gradient import GradientTable

LABEL_WIDTH = 9
CELL = "  "
SCALE_STEPS = 48

# One row of a rendered grid: terminal color numbers, None for a blank cell
Row = list[int | None]


def make_console(**kwargs) -> Console:
    """Console that always emits 256-color escapes, even when piped."""
    kwargs.setdefault("force_terminal", True)
    kwargs.setdefault("color_system", "256")
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("no_color", False)
    return Console(**kwargs)


class Renderer:
    def __init__(
        self,
        gradient: GradientTable,
        palette: Palette = XTERM256,
        options: RenderOptions | None = None,
        console: Console | None = None,
    ) -> None:
        self.gradient = gradient
        self.palette = palette
        self.options = options or RenderOptions()
        self.console = console or make_console()
        self._index_cache: dict[float, int] = {}

    def color_index(self, t: float) -> int:
        """Terminal color number for intensity t."""
        if t not in self._index_cache:
            self._index_cache[t] = self.palette.terminal_index(self.gradient.interpolate(t))
        return self._index_cache[t]

    def _cell(self, value: float, raw: int) -> int | None:
        if raw == 0 and self.options.transparent_zero:
            return None
        return self.color_index(value)

    def grid(self, buckets: Buckets) -> list[Row]:
        """7 rows of 24 cells (plus the weekday margin cell when margins are on)."""
        normalized = buckets.normalized()
        margin = buckets.weekday_margin() if self.options.show_margins else {}
        totals = buckets.weekday_totals() if self.options.show_margins else {}
        rows = []
        for day in WEEKDAYS:
            row: Row = []
            for hour in HOURS:
                key = When(day, hour)
                row.append(self._cell(normalized.get(key, 0.0), buckets.count(key)))
            if self.options.show_margins:
                row.append(self._cell(margin[day], totals[day]))
            rows.append(row)
        return rows

    def hour_margin_row(self, buckets: Buckets) -> Row:
        margin = buckets.hour_margin()
        totals = buckets.hour_totals()
        return [self._cell(margin[hour], totals[hour]) for hour in HOURS]

    def scale(self) -> list[int]:
        """Legend colors for t = 0, 1/48, ..., 47/48."""
        return [self.color_index(i / SCALE_STEPS) for i in range(SCALE_STEPS)]

    @staticmethod
    def _blocks(text: Text, cells: Row, width: str = CELL) -> Text:
        for index in cells:
            if index is None:
                text.append(" " * len(width))
            else:
                text.append(width, style=f"on color({index})")
        return text

    def lines(self, buckets: Buckets) -> list[Text]:
        """Every output line, in order, as rich Text."""
        out = []
        for day, row in zip(WEEKDAYS, self.grid(buckets)):
            text = Text(f"{WEEKDAY_NAMES[day]:>{LABEL_WIDTH}} ")
            if self.options.show_margins:
                self._blocks(text, row[:-1])
                text.append(" ")
                self._blocks(text, row[-1:])
            else:
                self._blocks(text, row)
            out.append(text)
        if self.options.show_margins:
            out.append(Text())
            out.append(self._blocks(Text(" " * (LABEL_WIDTH + 1)), self.hour_margin_row(buckets)))
        if self.options.show_scale:
            out.append(Text())
            out.append(self._blocks(Text(" " * (LABEL_WIDTH + 1)), list(self.scale()), width=" "))
        return out

    def render(self, buckets: Buckets) -> None:
        for line in self.lines(buckets):
            self.console.print(line, soft_wrap=True)
