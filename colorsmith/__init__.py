"""colorsmith — accessible colour-system generator.

Given one base colour, derives a WCAG-compliant design-token palette
(brand scale, harmony scales, semantic scales, neutral scale) and resolves
readable text colours for arbitrary backgrounds. Everything here is a
stateless function; import what you need.
"""

from colorsmith.core.color import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from colorsmith.core.contrast import CONTRAST_RATIOS, contrast_ratio, meets_contrast_requirement, meets_level
from colorsmith.core.enforce import adjust_color_for_contrast, ensure_accessibility, resolve_text_color
from colorsmith.core.palette import build_palette, css_var, generate_css_variables, generate_palette
from colorsmith.core.scale import generate_color_scale, generate_neutral_scale, harmony_colors, harmony_hues
from colorsmith.core.types import HSL, RGB, STEP_KEYS, InvalidColorFormat, Palette, PaletteOptions

__all__ = [
    'CONTRAST_RATIOS',
    'HSL',
    'RGB',
    'STEP_KEYS',
    'InvalidColorFormat',
    'Palette',
    'PaletteOptions',
    'adjust_color_for_contrast',
    'build_palette',
    'contrast_ratio',
    'css_var',
    'ensure_accessibility',
    'generate_color_scale',
    'generate_css_variables',
    'generate_neutral_scale',
    'generate_palette',
    'harmony_colors',
    'harmony_hues',
    'hex_to_hsl',
    'hex_to_rgb',
    'hsl_to_hex',
    'hsl_to_rgb',
    'is_valid_hex',
    'meets_contrast_requirement',
    'meets_level',
    'normalize_hex',
    'relative_luminance',
    'resolve_text_color',
    'rgb_to_hex',
    'rgb_to_hsl',
]
