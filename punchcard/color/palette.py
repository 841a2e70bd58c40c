"""
Terminal palette and color quantization.
The palette is the xterm 256-color table without its 16 system slots (those are
themeable, so their actual RGB is unknown). Lookup uses colorspacious' deltaE,
the Euclidean distance in CAM02-UCS.
"""
from typing import Iterator, Sequence

import numpy as np
from colorspacious import deltaE

from .color import Color

# Channel levels of the xterm 6x6x6 color cube (indices 16..231)
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

# Number of reserved system colors at the start of the real terminal palette
SYSTEM_COLORS = 16


def xterm_colors() -> list[Color]:
    """xterm indices 16..255: the color cube followed by the 24-step grayscale ramp."""
    colors = [
        Color.from_rgb255(r, g, b)
        for r in _CUBE_LEVELS
        for g in _CUBE_LEVELS
        for b in _CUBE_LEVELS
    ]
    colors.extend(Color.from_rgb255(v, v, v) for v in range(8, 248, 10))
    return colors


class Palette:
    """
    Fixed, ordered set of reference colors. `offset` is added by terminal_index()
    to turn a palette position into the escape-code color number.
    """

    def __init__(self, colors: Sequence[Color], *, offset: int = 0) -> None:
        if not colors:
            raise ValueError("Palette needs at least one color")
        self._colors = tuple(colors)
        self.offset = offset
        self._rgb = np.array([c.rgb() for c in self._colors], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, i: int) -> Color:
        return self._colors[i]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def distances(self, color: Color) -> np.ndarray:
        """Perceptual distance from `color` to every entry, in palette order."""
        return deltaE(self._rgb, np.asarray(color.rgb(), dtype=np.float64), input_space="sRGB1")

    def index(self, color: Color) -> int:
        """Position of the closest entry; ties go to the lowest index."""
        return int(np.argmin(self.distances(color)))

    def terminal_index(self, color: Color) -> int:
        return self.offset + self.index(color)


def nearest_index(color: Color, palette: Palette) -> int:
    """Index (within `palette`) of the entry perceptually closest to `color`."""
    return palette.index(color)


XTERM256 = Palette(xterm_colors(), offset=SYSTEM_COLORS)
