"""Accessibility enforcement and the standalone text-colour resolver.

`ensure_accessibility` checks every step of every scale against white and
black. A step that reaches the level's ratio against neither is replaced by
`adjust_color_for_contrast(step, WHITE, ratio)`:

  1. Keep hue and saturation, sweep lightness 0, 5, ..., 100.
  2. Sweep saturation down from the original in steps of 10, repeating the
     lightness sweep for each.
  3. Fall back to black or white, whichever contrasts more with the
     background.

Scales are always corrected against white, even where the step failed
against black as well.
"""

from dataclasses import replace

from colorsmith.core.color import hex_to_hsl, hex_to_rgb, hsl_to_hex
from colorsmith.core.contrast import contrast_ratio, threshold_for
from colorsmith.core.types import HSL, ColorScale, InvalidColorFormat, Palette

WHITE = '#ffffff'
BLACK = '#000000'

LIGHTNESS_STEP = 5
SATURATION_STEP = 10


def _sweep_lightness(h: float, s: float, background: str, target_ratio: float) -> str | None:
    for lightness in range(0, 101, LIGHTNESS_STEP):
        candidate = hsl_to_hex(HSL(h, s, lightness))
        if contrast_ratio(candidate, background) >= target_ratio:
            return candidate
    return None


def adjust_color_for_contrast(color: str, background: str, target_ratio: float) -> str:
    """Closest colour in `color`'s hue family reaching `target_ratio` against `background`."""
    h, s, _l = hex_to_hsl(color)

    found = _sweep_lightness(h, s, background, target_ratio)
    if found is not None:
        return found

    saturation = s
    while saturation >= 0:
        found = _sweep_lightness(h, saturation, background, target_ratio)
        if found is not None:
            return found
        saturation -= SATURATION_STEP

    if contrast_ratio(BLACK, background) > contrast_ratio(WHITE, background):
        return BLACK
    return WHITE


def adjust_scale_for_accessibility(scale: ColorScale, required_ratio: float) -> ColorScale:
    """Return a corrected copy of `scale`."""
    adjusted = dict(scale)
    for step, color in scale.items():
        with_white = contrast_ratio(color, WHITE)
        with_black = contrast_ratio(color, BLACK)
        if with_white < required_ratio and with_black < required_ratio:
            adjusted[step] = adjust_color_for_contrast(color, WHITE, required_ratio)
    return adjusted


def ensure_accessibility(palette: Palette, level: str = 'AA') -> Palette:
    """New palette where every step meets `level` against white or black."""
    ratio = threshold_for(level)

    def fix(scale: ColorScale | None) -> ColorScale | None:
        return None if scale is None else adjust_scale_for_accessibility(scale, ratio)

    return replace(
        palette,
        primary=fix(palette.primary),
        secondary=fix(palette.secondary),
        accent=fix(palette.accent),
        neutral=fix(palette.neutral),
        semantic={name: fix(scale) for name, scale in palette.semantic.items()},
    )


def resolve_text_color(background: str, original_text: str, threshold: float = 4.5) -> str:
    """Pick black or white text for `background`.

    Returns `original_text` untouched if the background can't be parsed.
    White wins whenever it reaches the threshold, even if black is higher.
    """
    try:
        hex_to_rgb(background)
    except InvalidColorFormat:
        return original_text

    with_black = contrast_ratio(background, BLACK)
    with_white = contrast_ratio(background, WHITE)

    if with_white >= threshold or (with_white > with_black and with_black < threshold):
        return WHITE
    if with_black >= threshold or (with_black > with_white and with_white < threshold):
        return BLACK
    return WHITE if with_white > with_black else BLACK
