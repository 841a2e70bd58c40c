# Punchcard: weekday x hour heatmaps of timestamps, rendered with terminal colors

from .analysis import Buckets, When
from .color import XTERM256, Color, Palette, nearest_index
from .config import PunchcardConfig, RenderOptions
from .gradient import GradientTable, get_gradient, gradient_names
from .pipeline import render_punchcard
from .renderer import Renderer

__all__ = [
    "Buckets",
    "When",
    "Color",
    "Palette",
    "XTERM256",
    "nearest_index",
    "GradientTable",
    "get_gradient",
    "gradient_names",
    "PunchcardConfig",
    "RenderOptions",
    "Renderer",
    "render_punchcard",
]
