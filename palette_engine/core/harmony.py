"""Harmony rules: five ways to derive a 5-colour palette from one seed colour.

Each rule offsets the seed's hue and/or nudges its lightness and saturation.
Lightness is kept inside [20, 80] and saturation inside [10, 90] wherever a
rule moves them, so variants never collapse to near-black, near-white or grey.
All returned colours are unlocked.
"""

from palette_engine.core.convert import color_from_hsl
from palette_engine.core.types import HSL, Color, HarmonyRule

ALL_RULES: tuple[HarmonyRule, ...] = tuple(HarmonyRule)


def normalize_hue(hue: int) -> int:
    """Wrap any hue (negative included) into [0, 360)."""
    return hue % 360


def _hsl(h: int, s: int, l: int) -> Color:  # noqa: E741
    return color_from_hsl(HSL(normalize_hue(h), s, l))


def analogous(seed: Color) -> list[Color]:
    """Neighbouring hues, -30 to +30 degrees in 15 degree steps."""
    h, s, l = seed.hsl.h, seed.hsl.s, seed.hsl.l  # noqa: E741
    return [_hsl(h + offset, s, l) for offset in (-30, -15, 0, 15, 30)]


def complementary(seed: Color) -> list[Color]:
    """Three lightness variants of the seed hue, two of its opposite."""
    h, s, l = seed.hsl.h, seed.hsl.s, seed.hsl.l  # noqa: E741
    return [
        _hsl(h, s, max(20, l - 20)),
        _hsl(h, s, l),
        _hsl(h, s, min(80, l + 20)),
        _hsl(h + 180, s, l),
        _hsl(h + 180, s, min(80, l + 15)),
    ]


def triadic(seed: Color) -> list[Color]:
    h, s, l = seed.hsl.h, seed.hsl.s, seed.hsl.l  # noqa: E741
    return [
        _hsl(h, s, l),
        _hsl(h, s, min(80, l + 15)),
        _hsl(h + 120, s, l),
        _hsl(h + 240, s, l),
        _hsl(h + 120, s, max(20, l - 15)),
    ]


def tetradic(seed: Color) -> list[Color]:
    h, s, l = seed.hsl.h, seed.hsl.s, seed.hsl.l  # noqa: E741
    return [
        _hsl(h, s, l),
        _hsl(h + 90, s, l),
        _hsl(h + 180, s, l),
        _hsl(h + 270, s, l),
        _hsl(h, s, min(80, l + 15)),
    ]


def monochromatic(seed: Color) -> list[Color]:
    """Seed hue throughout, darker and greyer on the left to lighter and richer on the right."""
    h, s, l = seed.hsl.h, seed.hsl.s, seed.hsl.l  # noqa: E741
    return [
        _hsl(h, max(10, s - 20), max(20, l - 20)),
        _hsl(h, s, max(30, l - 10)),
        _hsl(h, s, l),
        _hsl(h, s, min(70, l + 10)),
        _hsl(h, min(90, s + 20), min(80, l + 20)),
    ]


def generate_harmony(seed: Color, rule: HarmonyRule) -> list[Color]:
    """Five colours derived from seed under rule."""
    match rule:
        case HarmonyRule.ANALOGOUS:
            return analogous(seed)
        case HarmonyRule.COMPLEMENTARY:
            return complementary(seed)
        case HarmonyRule.TRIADIC:
            return triadic(seed)
        case HarmonyRule.TETRADIC:
            return tetradic(seed)
        case HarmonyRule.MONOCHROMATIC:
            return monochromatic(seed)
    raise ValueError(f'Unknown harmony rule: {rule!r}')
