"""
Pipeline: timestamp stream -> buckets -> rendered punchcard.
The gradient is resolved before any input is read so a bad name fails fast.
"""
import logging
from typing import TextIO

from rich.console import Console

from .analysis import Buckets
from .color import XTERM256, Palette
from .config import PunchcardConfig
from .gradient import get_gradient
from .ingest import ingest_lines
from .renderer import Renderer

logger = logging.getLogger(__name__)


def render_punchcard(
    stream: TextIO,
    config: PunchcardConfig,
    *,
    console: Console | None = None,
    palette: Palette = XTERM256,
) -> Buckets:
    """
    Read `stream` to completion, then print the punchcard. Returns the buckets.
    Raises UnknownGradientError before touching the stream; read errors propagate
    and nothing is rendered.
    """
    gradient = get_gradient(config.gradient)
    buckets = ingest_lines(stream, layout=config.layout, delimiter=config.delimiter)
    logger.info(
        "%d occurrences in %d buckets (max %d, avg %.2f)",
        buckets.sum(), len(buckets), buckets.max(), buckets.avg(),
    )
    Renderer(gradient, palette, config.render, console).render(buckets)
    return buckets
