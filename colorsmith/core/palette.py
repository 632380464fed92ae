"""Palette assembly and CSS custom-property output."""

from colorsmith.core.color import normalize_hex
from colorsmith.core.enforce import ensure_accessibility
from colorsmith.core.scale import generate_color_scale, generate_neutral_scale, harmony_colors
from colorsmith.core.types import Palette, PaletteOptions

# Fixed seeds for semantic scales. 'info' follows the base colour.
SEMANTIC_SEEDS: dict[str, str] = {
    'success': '#10b981',
    'warning': '#f59e0b',
    'error': '#ef4444',
}

DEFAULT_PREFIX = 'color'
DEFAULT_SELECTOR = ':root'


def build_palette(base: str, options: PaletteOptions | None = None) -> Palette:
    """Assemble the uncorrected palette for `base`."""
    options = options or PaletteOptions()
    base = normalize_hex(base)
    steps = options.steps

    harmony = [generate_color_scale(c, steps) for c in harmony_colors(base, options.harmony)]
    palette = Palette(
        primary=generate_color_scale(base, steps),
        neutral=generate_neutral_scale(),
        secondary=harmony[0] if harmony else None,
        accent=harmony[1] if len(harmony) > 1 else None,
    )

    if options.include_semantics:
        palette.semantic = {name: generate_color_scale(seed, steps) for name, seed in SEMANTIC_SEEDS.items()}
        palette.semantic['info'] = generate_color_scale(base, steps)

    return palette


def generate_palette(base: str, options: PaletteOptions | None = None) -> Palette:
    """Full accessible palette for `base`.

    Raises InvalidColorFormat if `base` is not a hex colour.
    """
    options = options or PaletteOptions()
    return ensure_accessibility(build_palette(base, options), options.accessibility)


def css_var(name: str) -> str:
    return f'--{name}'


def generate_css_variables(palette: Palette, prefix: str = DEFAULT_PREFIX, selector: str = DEFAULT_SELECTOR) -> str:
    """One custom property per (scale, step), scales in palette order, steps ascending."""
    lines = [f'{selector} {{']
    for scale_name, scale in palette.scales():
        for step in sorted(scale):
            name = f'{prefix}-{scale_name}-{step}' if prefix else f'{scale_name}-{step}'
            lines.append(f'  {css_var(name)}: {scale[step]};')
    lines.append('}')
    return '\n'.join(lines)
