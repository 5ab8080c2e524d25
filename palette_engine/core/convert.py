"""Colour conversions between hex, RGB and HSL.

Every function is total: out-of-range input is clamped, never rejected.
RGB <-> HSL is lossy under integer rounding: a round trip keeps lightness within 1
and each channel within a few units. hex <-> RGB is exact for 0-255 integers.

Rounding is half-up so that e.g. 127.5 always becomes 128.
"""

import math

from palette_engine.core.types import HSL, RGB, Color


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_channel(digits: str) -> int:
    try:
        value = int(digits, 16)
    except ValueError:
        return 0
    return int(_clamp(value, 0, 255))


def hex_to_rgb(hex_colour: str) -> RGB:
    """'#FF0000' or 'ff0000' -> RGB(255, 0, 0).

    A group holding any non-hex character reads as 0, partly valid ones such as
    'fz' included. Groups missing from a short string also read as 0.
    """
    digits = hex_colour[1:] if hex_colour.startswith('#') else hex_colour
    return RGB(
        _parse_channel(digits[0:2]),
        _parse_channel(digits[2:4]),
        _parse_channel(digits[4:6]),
    )


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = (int(_clamp(_round(c), 0, 255)) for c in (rgb.r, rgb.g, rgb.b))
    return f'#{r:02X}{g:02X}{b:02X}'


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Standard min/max/delta conversion. Hue in [0, 360), s and l in percent."""
    r = _clamp(rgb.r, 0, 255) / 255
    g = _clamp(rgb.g, 0, 255) / 255
    b = _clamp(rgb.b, 0, 255) / 255

    hi = max(r, g, b)
    lo = min(r, g, b)
    delta = hi - lo
    lightness = (hi + lo) / 2

    hue = 0.0
    saturation = 0.0
    if delta != 0:
        saturation = delta / (2 - hi - lo) if lightness > 0.5 else delta / (hi + lo)
        if hi == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif hi == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return HSL(
        _round(hue * 360) % 360,
        int(_clamp(_round(saturation * 100), 0, 100)),
        int(_clamp(_round(lightness * 100), 0, 100)),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Map a position around the hue circle (0-1) onto one channel value."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    h = _clamp(hsl.h, 0, 360) / 360
    s = _clamp(hsl.s, 0, 100) / 100
    lightness = _clamp(hsl.l, 0, 100) / 100

    if s == 0:
        # achromatic
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(*(int(_clamp(_round(c * 255), 0, 255)) for c in (r, g, b)))


def hex_to_hsl(hex_colour: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(hex_colour))


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def color_from_hex(hex_colour: str, locked: bool = False) -> Color:
    """Build a Color whose rgb and hsl are derived from the hex value."""
    rgb = hex_to_rgb(hex_colour)
    return Color(hex=rgb_to_hex(rgb), rgb=rgb, hsl=rgb_to_hsl(rgb), locked=locked)


def normalize_hsl(hsl: HSL) -> HSL:
    """Round to integers, wrap hue into [0, 360) and clamp s and l to [0, 100]."""
    return HSL(
        _round(hsl.h) % 360,
        int(_clamp(_round(hsl.s), 0, 100)),
        int(_clamp(_round(hsl.l), 0, 100)),
    )


def color_from_hsl(hsl: HSL, locked: bool = False) -> Color:
    """Build a Color that keeps the requested HSL (normalised); hex and rgb follow from it."""
    hsl = normalize_hsl(hsl)
    hex_colour = hsl_to_hex(hsl)
    return Color(hex=hex_colour, rgb=hex_to_rgb(hex_colour), hsl=hsl, locked=locked)
