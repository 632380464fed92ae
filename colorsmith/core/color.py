"""Colour space conversion: hex strings, RGB and HSL triples, relative luminance.

All functions are pure. HSL components stay fractional so a hex -> HSL -> hex
round trip is exact; only RGB channels are rounded, half-up, so results match
browser `Math.round` output for the same inputs.
"""

import colorsys
import math
import re

from colorsmith.core.types import HSL, RGB, InvalidColorFormat

_HEX_RE = re.compile(r'#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})')


def _round(x: float) -> int:
    """Round half-up."""
    return math.floor(x + 0.5)


def is_valid_hex(value: object) -> bool:
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def hex_to_rgb(value: str) -> RGB:
    """'#rrggbb' or '#rgb' -> RGB. Raises InvalidColorFormat for anything else."""
    if not is_valid_hex(value):
        raise InvalidColorFormat(value)
    digits = value[1:]
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def normalize_hex(value: str) -> str:
    """Canonical lowercase 7-character form of a hex colour."""
    return rgb_to_hex(hex_to_rgb(value))


def rgb_to_hsl(rgb: tuple[int, int, int]) -> HSL:
    # Achromatic input comes back with hue and saturation 0
    h, light, sat = colorsys.rgb_to_hls(*(c / 255 for c in rgb))
    return HSL(h * 360, sat * 100, light * 100)


def hsl_to_rgb(hsl: tuple[float, float, float]) -> RGB:
    h, s, l = hsl  # noqa: E741
    r, g, b = colorsys.hls_to_rgb(h / 360, l / 100, s / 100)
    return RGB(_round(r * 255), _round(g * 255), _round(b * 255))


def hex_to_hsl(value: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(value))


def hsl_to_hex(hsl: tuple[float, float, float]) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))

def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: tuple[int, int, int]) -> float:
    """sRGB relative luminance in [0, 1] (WCAG 2.x definition)."""
    r, g, b = (_linearize(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b
