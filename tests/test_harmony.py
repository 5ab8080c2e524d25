"""Tests for palette_engine.core.harmony: the five harmony rules."""

import numpy as np
import pytest
from palette_engine.core.convert import color_from_hsl, hsl_to_hex
from palette_engine.core.harmony import (
    ALL_RULES,
    analogous,
    complementary,
    generate_harmony,
    monochromatic,
    normalize_hue,
    tetradic,
    triadic,
)
from palette_engine.core.types import HSL, HarmonyRule

SEED = color_from_hsl(HSL(200, 60, 50))


def _hues(colors):
    return [c.hsl.h for c in colors]


def _lightness(colors):
    return [c.hsl.l for c in colors]


def _circular_span(hues: list[int], anchor: int) -> int:
    """Spread of hues measured as signed offsets from anchor."""
    offsets = [(h - anchor + 180) % 360 - 180 for h in hues]
    return max(offsets) - min(offsets)


class TestNormalizeHue:
    def test_in_range(self):
        assert normalize_hue(200) == 200

    def test_wraps_above(self):
        assert normalize_hue(380) == 20
        assert normalize_hue(360) == 0

    def test_wraps_negative(self):
        assert normalize_hue(-30) == 330
        assert normalize_hue(-390) == 330


class TestRules:
    def test_analogous(self):
        colors = analogous(SEED)
        assert _hues(colors) == [170, 185, 200, 215, 230]
        assert all(c.hsl.s == 60 and c.hsl.l == 50 for c in colors)

    def test_analogous_wraps_past_zero(self):
        colors = analogous(color_from_hsl(HSL(10, 60, 50)))
        assert _hues(colors) == [340, 355, 10, 25, 40]
        assert _circular_span(_hues(colors), 10) == 60

    def test_complementary(self):
        colors = complementary(SEED)
        assert _hues(colors) == [200, 200, 200, 20, 20]
        assert _lightness(colors) == [30, 50, 70, 50, 65]

    def test_triadic(self):
        colors = triadic(SEED)
        assert _hues(colors) == [200, 200, 320, 80, 320]
        assert _lightness(colors) == [50, 65, 50, 50, 35]

    def test_tetradic(self):
        colors = tetradic(SEED)
        assert _hues(colors) == [200, 290, 20, 110, 200]
        assert _lightness(colors) == [50, 50, 50, 50, 65]

    def test_monochromatic(self):
        colors = monochromatic(SEED)
        assert [(c.hsl.s, c.hsl.l) for c in colors] == [(40, 30), (60, 40), (60, 50), (60, 60), (80, 70)]
        assert set(_hues(colors)) == {200}

    def test_lightness_bands_for_light_seed(self):
        seed = color_from_hsl(HSL(0, 50, 90))
        assert _lightness(complementary(seed)) == [70, 90, 80, 90, 80]
        assert _lightness(triadic(seed)) == [90, 80, 90, 90, 75]

    def test_lightness_bands_for_dark_seed(self):
        seed = color_from_hsl(HSL(0, 50, 10))
        assert _lightness(complementary(seed))[0] == 20
        assert _lightness(triadic(seed))[4] == 20

    def test_monochromatic_clamps(self):
        colors = monochromatic(color_from_hsl(HSL(30, 5, 95)))
        assert [(c.hsl.s, c.hsl.l) for c in colors] == [(10, 75), (5, 85), (5, 95), (5, 70), (25, 80)]


class TestGenerateHarmony:
    @pytest.mark.parametrize('rule', list(HarmonyRule))
    def test_five_unlocked_consistent_colours(self, rule):
        colors = generate_harmony(SEED.with_lock(True), rule)
        assert len(colors) == 5
        for c in colors:
            assert c.locked is False
            assert c.hex == hsl_to_hex(c.hsl)
            assert 0 <= c.hsl.h < 360

    def test_dispatch(self):
        assert generate_harmony(SEED, HarmonyRule.ANALOGOUS) == analogous(SEED)
        assert generate_harmony(SEED, HarmonyRule.COMPLEMENTARY) == complementary(SEED)
        assert generate_harmony(SEED, HarmonyRule.TRIADIC) == triadic(SEED)
        assert generate_harmony(SEED, HarmonyRule.TETRADIC) == tetradic(SEED)
        assert generate_harmony(SEED, HarmonyRule.MONOCHROMATIC) == monochromatic(SEED)

    def test_all_rules_listed(self):
        assert {r.value for r in ALL_RULES} == {'analogous', 'complementary', 'triadic', 'tetradic', 'monochromatic'}

    def test_random_seeds(self):
        rng = np.random.default_rng(5)
        for _ in range(100):
            seed = color_from_hsl(HSL(int(rng.integers(0, 360)), int(rng.integers(0, 101)), int(rng.integers(0, 101))))
            assert _circular_span(_hues(analogous(seed)), seed.hsl.h) <= 60
            mono = _hues(monochromatic(seed))
            assert all(abs(h - mono[0]) <= 5 for h in mono)
