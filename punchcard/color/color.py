"""
Color: an sRGB value with hex conversion, HCL blending and gamut clamping.
Channels are floats in [0, 1]; blending happens in CIE LCh (D65) via colorspacious.
"""
import re
from dataclasses import dataclass

import numpy as np
from colorspacious import cspace_convert

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Below this chroma a color is treated as achromatic and its hue is ignored when blending
_ACHROMATIC_CHROMA = 0.015

_EPSILON = 1e-9


def _interp_angle(a0: float, a1: float, t: float) -> float:
    """Interpolate between two hue angles (degrees) along the shortest arc."""
    delta = ((a1 - a0) % 360.0 + 540.0) % 360.0 - 180.0
    return (a0 + t * delta + 360.0) % 360.0


@dataclass(frozen=True)
class Color:
    """sRGB color. Channels may leave [0, 1] after blending until clamped()."""
    r: float
    g: float
    b: float

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse "#rrggbb" or "#rgb" (leading # optional). Raises ValueError on anything else."""
        m = _HEX_RE.match((value or "").strip())
        if not m:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_lch(cls, lightness: float, chroma: float, hue: float) -> "Color":
        """Build a color from CIE LCh (L in 0-100, hue in degrees). Result may be out of gamut."""
        r, g, b = cspace_convert([lightness, chroma, hue], "CIELCh", "sRGB1")
        return cls(float(r), float(g), float(b))

    def rgb(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def rgb255(self) -> tuple[int, int, int]:
        """Channels as 0-255 ints (clamped, rounded half up)."""
        c = self.clamped()
        return (
            int(c.r * 255.0 + 0.5),
            int(c.g * 255.0 + 0.5),
            int(c.b * 255.0 + 0.5),
        )

    def hex(self) -> str:
        r, g, b = self.rgb255()
        return f"#{r:02x}{g:02x}{b:02x}"

    def lch(self) -> tuple[float, float, float]:
        lightness, chroma, hue = cspace_convert(np.asarray(self.rgb(), dtype=np.float64), "sRGB1", "CIELCh")
        return (float(lightness), float(chroma), float(hue))

    def is_valid(self) -> bool:
        """True when every channel lies in [0, 1] (within float noise)."""
        return all(-_EPSILON <= c <= 1.0 + _EPSILON for c in self.rgb())

    def clamped(self) -> "Color":
        """Clip every channel into [0, 1]."""
        return Color(*(min(1.0, max(0.0, c)) for c in self.rgb()))

    def blend_hcl(self, other: "Color", t: float) -> "Color":
        """
        Blend towards `other` in hue-chroma-luminance space.
        t=0 gives self, t=1 gives other. Hue travels the shortest arc; an achromatic
        endpoint borrows the other endpoint's hue so grays don't sweep through the wheel.
        The result can fall outside the sRGB gamut; call clamped() afterwards.
        """
        l1, c1, h1 = self.lch()
        l2, c2, h2 = other.lch()
        if c1 <= _ACHROMATIC_CHROMA and c2 > _ACHROMATIC_CHROMA:
            h1 = h2
        elif c2 <= _ACHROMATIC_CHROMA and c1 > _ACHROMATIC_CHROMA:
            h2 = h1
        return Color.from_lch(
            l1 + t * (l2 - l1),
            c1 + t * (c2 - c1),
            _interp_angle(h1, h2, t),
        )
