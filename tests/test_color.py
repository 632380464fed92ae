"""Tests for colorsmith.core.color — hex/RGB/HSL conversion and luminance."""

import pytest
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
from colorsmith.core.types import HSL, RGB, InvalidColorFormat


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_blue600(self):
        assert hex_to_rgb('#2563eb') == (37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == (255, 255, 255)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)
        assert hex_to_rgb('#0a3') == (0, 170, 51)

    def test_returns_named_tuple(self):
        rgb = hex_to_rgb('#0ea5e9')
        assert isinstance(rgb, RGB)
        assert (rgb.r, rgb.g, rgb.b) == (14, 165, 233)

    @pytest.mark.parametrize(
        'value', ['invalid', '#ff', '#ffffffff', 'ff0000', '#gggggg', '', '#12345', '#ffffff\n', '#fff\n', None, 123]
    )
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(value)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb('#zz')


class TestValidation:
    def test_is_valid_hex(self):
        assert is_valid_hex('#abc')
        assert is_valid_hex('#AbCdEf')
        assert not is_valid_hex('abc')
        assert not is_valid_hex(None)

    def test_trailing_newline_rejected(self):
        assert not is_valid_hex('#abc\n')
        assert not is_valid_hex('#aabbcc\n')
        assert not is_valid_hex(' #aabbcc')

    def test_normalize_hex(self):
        assert normalize_hex('#ABC') == '#aabbcc'
        assert normalize_hex('#0EA5E9') == '#0ea5e9'

    def test_rgb_to_hex_pads(self):
        assert rgb_to_hex((1, 2, 3)) == '#010203'


class TestRgbToHsl:
    def test_red(self):
        assert rgb_to_hsl((255, 0, 0)) == (0, 100, 50)

    def test_white(self):
        assert rgb_to_hsl((255, 255, 255)) == (0, 0, 100)

    def test_black(self):
        assert rgb_to_hsl((0, 0, 0)) == (0, 0, 0)

    def test_grey_has_no_hue(self):
        h, s, l = rgb_to_hsl((128, 128, 128))
        assert (h, s) == (0, 0)
        assert l == pytest.approx(50.196, abs=1e-3)

    def test_sky(self):
        hsl = hex_to_hsl('#0ea5e9')
        assert isinstance(hsl, HSL)
        assert hsl == pytest.approx((198.63, 88.66, 48.43), abs=0.01)


class TestHslToRgb:
    def test_red(self):
        assert hsl_to_hex((0, 100, 50)) == '#ff0000'

    def test_green(self):
        assert hsl_to_hex((120, 100, 50)) == '#00ff00'

    def test_blue(self):
        assert hsl_to_rgb((240, 100, 50)) == (0, 0, 255)

    def test_navy_rounds_half_up(self):
        # blue channel is exactly 127.5
        assert hsl_to_hex((240, 100, 25)) == '#000080'

    def test_white(self):
        assert hsl_to_hex((0, 0, 100)) == '#ffffff'

    def test_accepts_fractional_saturation(self):
        assert hsl_to_hex(HSL(0, 0.0, 0.0)) == '#000000'


class TestRoundTrip:
    @pytest.mark.parametrize(
        'color', ['#ff0000', '#00ff00', '#0000ff', '#ffff00', '#00ffff', '#ff00ff', '#ffffff', '#000000']
    )
    def test_primaries_exact(self, color):
        assert hsl_to_hex(hex_to_hsl(color)) == color

    def test_greys_within_one(self):
        for v in range(256):
            back = hex_to_rgb(hsl_to_hex(hex_to_hsl(rgb_to_hex((v, v, v)))))
            assert all(abs(c - v) <= 1 for c in back), f'grey {v} came back as {back}'

    def test_sky_exact(self):
        assert hsl_to_hex(hex_to_hsl('#0ea5e9')) == '#0ea5e9'

    def test_colour_grid_within_one(self):
        for r in range(0, 256, 17):
            for g in range(0, 256, 17):
                for b in range(0, 256, 17):
                    rgb = (r, g, b)
                    back = hex_to_rgb(hsl_to_hex(hex_to_hsl(rgb_to_hex(rgb))))
                    assert all(abs(x - y) <= 1 for x, y in zip(back, rgb)), f'{rgb} came back as {back}'

    @pytest.mark.parametrize('color', ['#0ea5e9', '#10b981', '#f59e0b', '#ef4444', '#1e3a8a', '#fe0102', '#01fe80'])
    def test_saturated_within_one(self, color):
        back = hex_to_rgb(hsl_to_hex(hex_to_hsl(color)))
        assert all(abs(x - y) <= 1 for x, y in zip(back, hex_to_rgb(color)))

    def test_lightness_within_one(self):
        for color in ['#0ea5e9', '#10b981', '#f59e0b', '#ef4444', '#1e3a8a', '#6e7a91']:
            h, s, l = hex_to_hsl(color)
            assert abs(hex_to_hsl(hsl_to_hex((h, s, l))).l - l) <= 1


class TestRelativeLuminance:
    def test_white(self):
        assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)

    def test_black(self):
        assert relative_luminance((0, 0, 0)) == 0.0

    def test_mid_grey(self):
        assert relative_luminance((128, 128, 128)) == pytest.approx(0.2159, abs=1e-3)

    def test_linear_segment(self):
        # 10/255 is below the 0.03928 knee, so it is divided by 12.92
        assert relative_luminance((10, 10, 10)) == pytest.approx(10 / 255 / 12.92)

    def test_green_weighs_most(self):
        assert relative_luminance((0, 255, 0)) > relative_luminance((255, 0, 0)) > relative_luminance((0, 0, 255))
