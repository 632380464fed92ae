"""Tests for colorsmith.core.palette — palette assembly and CSS variables."""

import pytest
from colorsmith.core.color import hex_to_hsl, hsl_to_hex
from colorsmith.core.contrast import CONTRAST_RATIOS, contrast_ratio
from colorsmith.core.enforce import BLACK, WHITE
from colorsmith.core.palette import (
    DEFAULT_PREFIX,
    SEMANTIC_SEEDS,
    build_palette,
    css_var,
    generate_css_variables,
    generate_palette,
)
from colorsmith.core.scale import generate_color_scale, generate_neutral_scale
from colorsmith.core.types import STEP_KEYS, InvalidColorFormat, Palette, PaletteOptions

SKY = '#0ea5e9'
BASES = ['#0ea5e9', '#ef4444', '#777777', '#fde047', '#1e3a8a', '#ffffff', '#000000']


class TestPaletteOptions:
    def test_defaults(self):
        opts = PaletteOptions()
        assert (opts.accessibility, opts.harmony, opts.steps, opts.include_semantics) == (
            'AA',
            'complementary',
            11,
            True,
        )

    def test_unknown_level(self):
        with pytest.raises(ValueError, match='accessibility level'):
            PaletteOptions(accessibility='A')

    def test_unknown_harmony(self):
        with pytest.raises(ValueError, match='harmony scheme'):
            PaletteOptions(harmony='split')

    def test_bad_steps(self):
        with pytest.raises(ValueError):
            PaletteOptions(steps=0)


class TestBuildPalette:
    def test_complementary_keys(self):
        palette = build_palette(SKY)
        assert palette.names() == ['primary', 'secondary', 'neutral', 'semantic']
        assert palette.accent is None

    @pytest.mark.parametrize('harmony', ['triadic', 'analogous'])
    def test_two_harmony_scales(self, harmony):
        palette = build_palette(SKY, PaletteOptions(harmony=harmony))
        assert palette.names() == ['primary', 'secondary', 'accent', 'neutral', 'semantic']

    def test_primary_base_step(self):
        assert build_palette(SKY).primary[500] == hsl_to_hex(hex_to_hsl(SKY))

    def test_secondary_is_complementary(self):
        secondary = build_palette(SKY).secondary
        assert abs(hex_to_hsl(secondary[500]).h - (hex_to_hsl(SKY).h + 180) % 360) <= 1

    def test_semantic_scales(self):
        palette = build_palette(SKY)
        assert list(palette.semantic) == ['success', 'warning', 'error', 'info']
        for name, seed in SEMANTIC_SEEDS.items():
            assert palette.semantic[name] == generate_color_scale(seed)

    def test_info_follows_base(self):
        palette = build_palette('#ef4444')
        assert palette.semantic['info'] == palette.primary

    def test_no_semantics(self):
        palette = build_palette(SKY, PaletteOptions(include_semantics=False))
        assert palette.semantic == {}
        assert 'semantic' not in palette.names()

    def test_steps_option(self):
        palette = build_palette(SKY, PaletteOptions(steps=7))
        assert list(palette.primary) == list(STEP_KEYS[:7])
        assert list(palette.semantic['success']) == list(STEP_KEYS[:7])
        # neutral is always the full fixed scale
        assert list(palette.neutral) == list(STEP_KEYS)

    def test_base_normalised(self):
        assert build_palette('#0EA5E9') == build_palette(SKY)


class TestGeneratePalette:
    def test_end_to_end(self):
        palette = generate_palette(SKY, PaletteOptions(harmony='complementary', accessibility='AA'))
        assert set(palette.to_dict()) == {'primary', 'secondary', 'neutral', 'semantic'}
        assert palette.primary[500] == '#0ea5e9'

    @pytest.mark.parametrize('level', list(CONTRAST_RATIOS))
    @pytest.mark.parametrize('base', BASES)
    def test_every_step_meets_level(self, base, level):
        threshold = CONTRAST_RATIOS[level]
        palette = generate_palette(base, PaletteOptions(accessibility=level, harmony='triadic'))
        for name, scale in palette.scales():
            for step, color in scale.items():
                best = max(contrast_ratio(color, WHITE), contrast_ratio(color, BLACK))
                assert best >= threshold or color in (BLACK, WHITE), f'{name}[{step}] = {color}'

    def test_aaa_replaces_mid_neutral(self):
        assert generate_palette(SKY, PaletteOptions(accessibility='AAA')).neutral[500] == BLACK

    def test_neutral_independent_of_base(self):
        a = generate_palette('#ff0000').neutral
        b = generate_palette('#00ff00').neutral
        assert a == b
        assert build_palette('#ff0000').neutral == generate_neutral_scale()

    def test_invalid_base(self):
        with pytest.raises(InvalidColorFormat):
            generate_palette('sky-blue')

    def test_deterministic(self):
        assert generate_palette(SKY) == generate_palette(SKY)

    def test_enforcement_leaves_raw_palette_alone(self):
        raw = build_palette(SKY)
        before = raw.to_dict()
        generate_palette(SKY, PaletteOptions(accessibility='AAA'))
        assert raw.to_dict() == before


class TestCssVariables:
    def _palette(self) -> Palette:
        return Palette(
            primary={500: '#777777', 50: '#eeeeee'},
            neutral={50: '#f9fafb'},
            secondary={500: '#123456'},
            semantic={'success': {500: '#10b981'}},
        )

    def test_exact_output(self):
        assert generate_css_variables(self._palette()) == (
            ':root {\n'
            '  --color-primary-50: #eeeeee;\n'
            '  --color-primary-500: #777777;\n'
            '  --color-secondary-500: #123456;\n'
            '  --color-neutral-50: #f9fafb;\n'
            '  --color-success-500: #10b981;\n'
            '}'
        )

    def test_prefix_and_selector(self):
        css = generate_css_variables(self._palette(), prefix='brand', selector='.theme-ocean')
        assert css.startswith('.theme-ocean {\n')
        assert '  --brand-primary-500: #777777;' in css

    def test_default_prefix(self):
        assert DEFAULT_PREFIX == 'color'

    def test_byte_prefix_names(self):
        css = generate_css_variables(self._palette(), prefix='byte')
        assert '  --byte-primary-500: #777777;' in css
        assert '  --byte-success-500: #10b981;' in css

    def test_empty_prefix(self):
        css = generate_css_variables(self._palette(), prefix='')
        assert '  --primary-500: #777777;' in css

    def test_full_palette_line_count(self):
        css = generate_css_variables(generate_palette(SKY))
        # primary, secondary, neutral + 4 semantic scales, 11 steps each, plus braces
        assert len(css.splitlines()) == 7 * 11 + 2

    def test_stable(self):
        assert generate_css_variables(generate_palette(SKY)) == generate_css_variables(generate_palette(SKY))

    def test_css_var(self):
        assert css_var('color-primary-500') == '--color-primary-500'
