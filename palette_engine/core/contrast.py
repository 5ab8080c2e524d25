"""WCAG 2.x relative luminance and contrast ratio.

Thresholds: AA needs 4.5:1, AAA needs 7:1 (normal-size text).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from palette_engine.core.types import RGB, Palette

AA_THRESHOLD = 4.5
AAA_THRESHOLD = 7.0

_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


@dataclass(frozen=True)
class ContrastResult:
    """Contrast between two palette slots."""

    left: int
    right: int
    ratio: float
    aa: bool
    aaa: bool

    @property
    def level(self) -> str:
        return contrast_level(self.ratio)


def _linearize(channel: float) -> float:
    c = min(max(channel, 0), 255) / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    r, g, b = (_linearize(c) for c in (rgb.r, rgb.g, rgb.b))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: RGB, b: RGB) -> float:
    """(L_lighter + 0.05) / (L_darker + 0.05). Symmetric, always in [1, 21]."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def meets_aa(ratio: float) -> bool:
    return ratio >= AA_THRESHOLD


def meets_aaa(ratio: float) -> bool:
    return ratio >= AAA_THRESHOLD


def contrast_level(ratio: float) -> str:
    """'AAA', 'AA' or 'fail'."""
    if meets_aaa(ratio):
        return 'AAA'
    if meets_aa(ratio):
        return 'AA'
    return 'fail'


def describe_contrast(ratio: float) -> str:
    """Screen-reader style sentence for a ratio."""
    if meets_aaa(ratio):
        return f'Excellent contrast: {ratio:.2f} to 1 ratio. Meets WCAG AAA standards.'
    if meets_aa(ratio):
        return f'Good contrast: {ratio:.2f} to 1 ratio. Meets WCAG AA standards.'
    return f'Warning: Low contrast of {ratio:.2f} to 1 ratio. Does not meet WCAG accessibility standards.'


def adjacent_contrasts(palette: Palette) -> list[ContrastResult]:
    """Contrast of each neighbouring pair of slots (0-1, 1-2, 2-3, 3-4)."""
    results = []
    for i in range(len(palette.colors) - 1):
        ratio = contrast_ratio(palette.colors[i].rgb, palette.colors[i + 1].rgb)
        results.append(ContrastResult(left=i, right=i + 1, ratio=ratio, aa=meets_aa(ratio), aaa=meets_aaa(ratio)))
    return results


def contrast_matrix(palette: Palette) -> np.ndarray:
    """All pairwise contrast ratios as a symmetric 5x5 array (diagonal 1.0)."""
    channels = np.clip(np.array([c.rgb.as_tuple() for c in palette.colors], dtype=float), 0, 255) / 255
    linear = np.where(channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4)
    lum = linear @ _LUMA_WEIGHTS
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + 0.05) / (darker + 0.05)
