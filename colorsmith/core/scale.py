"""Scale synthesis: 11-step tonal scales, the fixed neutral scale, harmony hues.

A scale walks lightness down from 95 in steps of 15 for the five light
steps, uses the base lightness at step 500, then darkens by 10 per step.
Very light steps (> 90) and very dark steps (< 20) are desaturated.
"""

from colorsmith.core.color import hex_to_hsl, hsl_to_hex
from colorsmith.core.types import HARMONY_SCHEMES, HSL, STEP_KEYS, ColorScale

BASE_INDEX = 5

NEUTRAL_HUE = 220
NEUTRAL_SATURATION = 14
NEUTRAL_LIGHTNESS = (98, 96, 91, 83, 64, 50, 42, 33, 18, 9, 4)

# Hue offsets in degrees, in output order (secondary first, then accent)
HARMONY_OFFSETS: dict[str, tuple[int, ...]] = {
    'complementary': (180,),
    'triadic': (120, 240),
    'analogous': (30, -30),
}


def _clamp(value: float) -> float:
    return max(0, min(100, value))


def step_keys(steps: int = 11) -> list[int]:
    """Step keys for a scale of `steps` entries.

    Shorter scales take a prefix of the standard keys; longer ones continue
    past 950 in increments of 50.
    """
    if steps < 1:
        raise ValueError(f'steps must be >= 1, got {steps}')
    keys = list(STEP_KEYS[:steps])
    while len(keys) < steps:
        keys.append(keys[-1] + 50)
    return keys


def step_lightness(index: int, base_lightness: float) -> float:
    if index < BASE_INDEX:
        return 95 - index * 15
    if index == BASE_INDEX:
        return base_lightness
    return base_lightness - (index - BASE_INDEX) * 10


def step_saturation(lightness: float, base_saturation: float) -> float:
    if lightness > 90:
        return max(base_saturation * 0.3, 10)
    if lightness < 20:
        return max(base_saturation * 0.7, 20)
    return base_saturation


def generate_color_scale(base: str, steps: int = 11) -> ColorScale:
    """Expand one colour into a scale keyed 50..950."""
    h, s, l = hex_to_hsl(base)  # noqa: E741
    scale: ColorScale = {}
    for i, key in enumerate(step_keys(steps)):
        lightness = step_lightness(i, l)
        saturation = step_saturation(lightness, s)
        scale[key] = hsl_to_hex(HSL(h, _clamp(saturation), _clamp(lightness)))
    return scale


def generate_neutral_scale() -> ColorScale:
    """Cool grey scale. Never depends on the palette's base colour."""
    return {
        key: hsl_to_hex(HSL(NEUTRAL_HUE, NEUTRAL_SATURATION, lightness))
        for key, lightness in zip(STEP_KEYS, NEUTRAL_LIGHTNESS)
    }


def harmony_hues(hue: float, scheme: str) -> list[float]:
    if scheme not in HARMONY_OFFSETS:
        raise ValueError(f'Unknown harmony scheme: {scheme}. Available: {", ".join(HARMONY_SCHEMES)}')
    return [(hue + offset + 360) % 360 for offset in HARMONY_OFFSETS[scheme]]


def harmony_colors(base: str, scheme: str) -> list[str]:
    """Colours derived from `base` by rotating its hue; saturation and lightness kept."""
    h, s, l = hex_to_hsl(base)  # noqa: E741
    return [hsl_to_hex(HSL(hue, s, l)) for hue in harmony_hues(h, scheme)]


def complementary_color(base: str) -> str:
    return harmony_colors(base, 'complementary')[0]


def triadic_colors(base: str) -> list[str]:
    return harmony_colors(base, 'triadic')


def analogous_colors(base: str) -> list[str]:
    return harmony_colors(base, 'analogous')
