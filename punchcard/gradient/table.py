"""
Gradient tables: ordered color keypoints with HCL interpolation between them.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from ..color import Color


class GradientError(ValueError):
    """Invalid gradient definition or lookup."""


class UnknownGradientError(GradientError):
    """Requested gradient name is not in the catalog."""

    def __init__(self, name: str, valid: Sequence[str]) -> None:
        self.name = name
        self.valid = list(valid)
        super().__init__(f"Unknown gradient {name!r}; valid: {', '.join(self.valid)}")


@dataclass(frozen=True)
class Keypoint:
    color: Color
    pos: float


class GradientTable:
    """
    Keypoints of a color gradient. Positions live in [0, 1] and must already be
    sorted ascending; the table does not re-sort.
    """

    def __init__(self, keypoints: Iterable[Keypoint]) -> None:
        self._keypoints = tuple(keypoints)
        if not self._keypoints:
            raise GradientError("Gradient needs at least one keypoint")

    @classmethod
    def from_hex(cls, pairs: Iterable[tuple[str, float]]) -> "GradientTable":
        """Build from (hex color, position) pairs."""
        return cls(Keypoint(Color.from_hex(h), float(p)) for h, p in pairs)

    def __len__(self) -> int:
        return len(self._keypoints)

    def __iter__(self) -> Iterator[Keypoint]:
        return iter(self._keypoints)

    @property
    def keypoints(self) -> tuple[Keypoint, ...]:
        return self._keypoints

    def interpolate(self, t: float) -> Color:
        """
        HCL blend between the two keypoints around `t`, clamped to the sRGB gamut.
        Past the last keypoint (or for a single-keypoint table) the last color is
        returned as-is. A `t` below the first keypoint matches no pair and also
        yields the last color.
        """
        for c1, c2 in zip(self._keypoints, self._keypoints[1:]):
            if c1.pos <= t <= c2.pos:
                span = c2.pos - c1.pos
                u = (t - c1.pos) / span if span > 0 else 0.0
                return c1.color.blend_hcl(c2.color, u).clamped()
        return self._keypoints[-1].color
