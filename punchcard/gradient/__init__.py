# Gradients: keypoint tables, HCL interpolation, built-in named catalog

from .catalog import get_gradient, gradient_names
from .data.gradients import DEFAULT_GRADIENT, GRADIENTS
from .table import GradientError, GradientTable, Keypoint, UnknownGradientError

__all__ = [
    "DEFAULT_GRADIENT",
    "GRADIENTS",
    "GradientError",
    "GradientTable",
    "Keypoint",
    "UnknownGradientError",
    "get_gradient",
    "gradient_names",
]
