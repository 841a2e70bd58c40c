"""
Catalog lookup: gradient name -> GradientTable. Tables are built once and cached.
"""
from functools import lru_cache

from .data.gradients import DEFAULT_GRADIENT, GRADIENTS
from .table import GradientTable, UnknownGradientError


def gradient_names() -> list[str]:
    return sorted(GRADIENTS)


@lru_cache(maxsize=None)
def _build(name: str) -> GradientTable:
    return GradientTable.from_hex(GRADIENTS[name])


def get_gradient(name: str | None = None) -> GradientTable:
    """Table for `name`; empty or None selects the default. Raises UnknownGradientError."""
    name = (name or "").strip() or DEFAULT_GRADIENT
    if name not in GRADIENTS:
        raise UnknownGradientError(name, gradient_names())
    return _build(name)
