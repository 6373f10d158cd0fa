"""Tests for uikit_css.core.colour — hex expansion, kebab-case, alpha detection."""

import pytest
from uikit_css.core.colour import (
    camel_to_kebab,
    color_function,
    has_alpha,
    hex_to_rgb,
    parse_channels,
)


class TestHexToRgb:
    def test_red(self):
        assert hex_to_rgb('#ff0000') == '255 0 0'

    def test_no_hash(self):
        assert hex_to_rgb('007aff') == '0 122 255'

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == '255 255 255'

    def test_channel_string_unchanged(self):
        assert hex_to_rgb('255 0 0') == '255 0 0'

    def test_alpha_channel_string_unchanged(self):
        assert hex_to_rgb('84 84 86 / 0.34') == '84 84 86 / 0.34'

    def test_short_hex_unchanged(self):
        assert hex_to_rgb('#fff') == '#fff'

    def test_eight_digit_hex_unchanged(self):
        assert hex_to_rgb('#ff000080') == '#ff000080'

    def test_trailing_newline_unchanged(self):
        assert hex_to_rgb('#ff0000\n') == '#ff0000\n'

    def test_non_ascii_digits_unchanged(self):
        value = '#\u0661\u0662ff00'
        assert hex_to_rgb(value) == value


class TestCamelToKebab:
    def test_two_words(self):
        assert camel_to_kebab('placeholderText') == 'placeholder-text'

    def test_many_words(self):
        assert camel_to_kebab('secondarySystemGroupedBackground') == 'secondary-system-grouped-background'

    def test_single_word(self):
        assert camel_to_kebab('red') == 'red'

    def test_digit_then_upper(self):
        assert camel_to_kebab('gray2Dark') == 'gray2-dark'

    def test_trailing_digit_untouched(self):
        assert camel_to_kebab('gray6') == 'gray6'

    def test_already_kebab(self):
        assert camel_to_kebab('placeholder-text') == 'placeholder-text'

    @pytest.mark.parametrize(
        'name',
        ['placeholderText', 'nonOpaqueSeparator', 'gray2', 'label', 'systemFill', 'URLText', 'a-b-c', 'XYZ'],
    )
    def test_idempotent(self, name):
        once = camel_to_kebab(name)
        assert camel_to_kebab(once) == once


class TestHasAlpha:
    def test_slash(self):
        assert has_alpha('120 120 128 / 0.2') is True

    def test_opaque_triple(self):
        assert has_alpha('0 0 0') is False

    def test_hex(self):
        assert has_alpha('#ff0000') is False

    def test_rgba_function(self):
        assert has_alpha('rgba(0, 0, 0, 0.5)') is True

    def test_hsla_function(self):
        assert has_alpha('hsla(0, 0%, 0%, 0.5)') is True

    def test_textual_only(self):
        # '/ 1' is fully opaque but still counts as alpha-bearing
        assert has_alpha('0 0 0 / 1') is True


class TestColorFunction:
    def test_opaque(self):
        assert color_function('255 59 48', '255 69 58') == 'rgb'

    def test_either_side_alpha(self):
        assert color_function('84 84 86 / 0.34', '56 56 58') == 'rgba'
        assert color_function('56 56 58', '84 84 86 / 0.6') == 'rgba'

    def test_no_values(self):
        assert color_function() == 'rgb'


class TestParseChannels:
    def test_triple(self):
        assert parse_channels('255 59 48') == (255, 59, 48, 1.0)

    def test_with_alpha(self):
        assert parse_channels('84 84 86 / 0.34') == (84, 84, 86, 0.34)

    def test_hex(self):
        assert parse_channels('#007aff') == (0, 122, 255, 1.0)

    def test_leading_dot_alpha(self):
        assert parse_channels('0 0 0 / .5') == (0, 0, 0, 0.5)

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_channels('not a colour')

    def test_channel_out_of_range(self):
        with pytest.raises(ValueError):
            parse_channels('256 0 0')

    def test_alpha_out_of_range(self):
        with pytest.raises(ValueError):
            parse_channels('0 0 0 / 1.5')
