"""WCAG contrast ratios and compliance thresholds.

`contrast_ratio` is the scalar path used by the generator and resolver.
`contrast_matrix` computes a whole grid at once with numpy, for audits over
every step of a palette against a set of backgrounds.
"""

from collections.abc import Sequence

import numpy as np

from colorsmith.core.color import hex_to_rgb, relative_luminance

# Minimum contrast ratio per accessibility level
CONTRAST_RATIOS: dict[str, float] = {
    'AA': 4.5,
    'AAA': 7,
    'AA-large': 3,
    'AAA-large': 4.5,
}

_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def threshold_for(level: str) -> float:
    """Required contrast ratio for an accessibility level."""
    if level not in CONTRAST_RATIOS:
        raise ValueError(f'Unknown accessibility level: {level}. Available: {", ".join(CONTRAST_RATIOS)}')
    return CONTRAST_RATIOS[level]


def contrast_ratio(color_a: str, color_b: str) -> float:
    """(lighter + 0.05) / (darker + 0.05). Symmetric, ranges 1..21."""
    lum_a = relative_luminance(hex_to_rgb(color_a))
    lum_b = relative_luminance(hex_to_rgb(color_b))
    return (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)


def meets_level(ratio: float, level: str) -> bool:
    return ratio >= threshold_for(level)


def meets_contrast_requirement(foreground: str, background: str, large_text: bool = False) -> bool:
    """WCAG AA check: 3:1 for large text, 4.5:1 otherwise."""
    level = 'AA-large' if large_text else 'AA'
    return meets_level(contrast_ratio(foreground, background), level)


def relative_luminances(colors: Sequence[str]) -> np.ndarray:
    """Vectorised relative luminance for a sequence of hex colours."""
    if not colors:
        return np.zeros(0)
    # Use int, not uint8, so the arithmetic below never wraps
    arr = np.array([hex_to_rgb(c) for c in colors], dtype=int) / 255.0
    linear = np.where(arr <= 0.03928, arr / 12.92, ((arr + 0.055) / 1.055) ** 2.4)
    return linear @ _WEIGHTS


def contrast_matrix(foregrounds: Sequence[str], backgrounds: Sequence[str]) -> np.ndarray:
    """Contrast ratio grid of shape (len(foregrounds), len(backgrounds))."""
    fg = relative_luminances(foregrounds)[:, np.newaxis]
    bg = relative_luminances(backgrounds)[np.newaxis, :]
    return (np.maximum(fg, bg) + 0.05) / (np.minimum(fg, bg) + 0.05)
