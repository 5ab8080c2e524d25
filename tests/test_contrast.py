"""Tests for palette_engine.core.contrast: WCAG luminance, ratios and ratings."""

import numpy as np
import pytest
from palette_engine.core.contrast import (
    adjacent_contrasts,
    contrast_level,
    contrast_matrix,
    contrast_ratio,
    describe_contrast,
    meets_aa,
    meets_aaa,
    relative_luminance,
)
from palette_engine.core.types import HSL, RGB, Color, Palette
from palette_engine.core.url_state import decode_palette

BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)


class TestRelativeLuminance:
    def test_black(self):
        assert relative_luminance(BLACK) == 0.0

    def test_white(self):
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_channel_weights(self):
        assert relative_luminance(RGB(255, 0, 0)) == pytest.approx(0.2126)
        assert relative_luminance(RGB(0, 255, 0)) == pytest.approx(0.7152)
        assert relative_luminance(RGB(0, 0, 255)) == pytest.approx(0.0722)

    def test_linear_segment_for_dark_channels(self):
        # 10/255 = 0.0392 is below the 0.03928 threshold
        assert relative_luminance(RGB(10, 10, 10)) == pytest.approx((10 / 255) / 12.92)


    def test_out_of_range_channels_are_clamped(self):
        assert relative_luminance(RGB(300, 300, 300)) == relative_luminance(WHITE)
        assert relative_luminance(RGB(-255, -10, -1)) == 0.0

class TestContrastRatio:
    def test_black_white_is_21(self):
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_identical_is_1(self):
        assert contrast_ratio(RGB(100, 150, 200), RGB(100, 150, 200)) == pytest.approx(1.0)

    def test_red_on_white(self):
        assert contrast_ratio(RGB(255, 0, 0), WHITE) == pytest.approx(3.998, abs=1e-3)

    def test_symmetry_and_range(self):
        rng = np.random.default_rng(11)
        for _ in range(300):
            a = RGB(*(int(c) for c in rng.integers(0, 256, size=3)))
            b = RGB(*(int(c) for c in rng.integers(0, 256, size=3)))
            ratio = contrast_ratio(a, b)
            assert ratio == contrast_ratio(b, a)
            assert 1.0 <= ratio <= 21.0


    def test_out_of_range_channels_stay_in_range(self):
        assert contrast_ratio(RGB(-255, -255, -255), BLACK) == pytest.approx(1.0)
        assert contrast_ratio(RGB(300, 300, 300), RGB(-5, -5, -5)) == pytest.approx(21.0)

class TestThresholds:
    def test_aa_boundary(self):
        assert meets_aa(4.5) is True
        assert meets_aa(4.49) is False

    def test_aaa_boundary(self):
        assert meets_aaa(7.0) is True
        assert meets_aaa(6.99) is False

    def test_aaa_implies_aa(self):
        for ratio in np.linspace(1.0, 21.0, 401):
            if meets_aaa(ratio):
                assert meets_aa(ratio)

    def test_levels(self):
        assert contrast_level(21.0) == 'AAA'
        assert contrast_level(5.0) == 'AA'
        assert contrast_level(3.0) == 'fail'

    def test_descriptions(self):
        assert describe_contrast(21.0) == 'Excellent contrast: 21.00 to 1 ratio. Meets WCAG AAA standards.'
        assert describe_contrast(4.5) == 'Good contrast: 4.50 to 1 ratio. Meets WCAG AA standards.'
        assert describe_contrast(1.234).startswith('Warning: Low contrast of 1.23 to 1 ratio.')


class TestPaletteContrast:
    @pytest.fixture()
    def palette(self):
        return decode_palette('colors=000000,FFFFFF,FFFFFF,FF0000,0000FF')

    def test_adjacent_pairs(self, palette):
        results = adjacent_contrasts(palette)
        assert [(r.left, r.right) for r in results] == [(0, 1), (1, 2), (2, 3), (3, 4)]
        assert results[0].ratio == pytest.approx(21.0)
        assert results[0].aaa is True
        assert results[1].ratio == pytest.approx(1.0)
        assert results[1].aa is False
        assert results[1].level == 'fail'

    def test_matrix_matches_pairwise(self, palette):
        matrix = contrast_matrix(palette)
        assert matrix.shape == (5, 5)
        assert np.allclose(np.diag(matrix), 1.0)
        assert np.allclose(matrix, matrix.T)
        for i in range(5):
            for j in range(5):
                expected = contrast_ratio(palette.colors[i].rgb, palette.colors[j].rgb)
                assert matrix[i, j] == pytest.approx(expected)

    def test_matrix_clamps_channels(self):
        hot = Color(hex='#FFFFFF', rgb=RGB(300, 300, 300), hsl=HSL(0, 0, 100))
        cold = Color(hex='#000000', rgb=RGB(-20, -20, -20), hsl=HSL(0, 0, 0))
        matrix = contrast_matrix(Palette([hot, cold, hot, cold, hot]))
        assert matrix[0, 1] == pytest.approx(21.0)
        assert np.all((matrix >= 1.0 - 1e-9) & (matrix <= 21.0 + 1e-9))
