# Color model: sRGB values, HCL blending, terminal palette quantization

from .color import Color
from .palette import Palette, XTERM256, nearest_index, xterm_colors

__all__ = ["Color", "Palette", "XTERM256", "nearest_index", "xterm_colors"]
