"""Palette regeneration and single-slot edits.

regenerate_palette() keeps every locked colour at its index and fills the
unlocked slots from a harmony generated around the first locked colour.
With nothing locked it starts over from a random seed; with everything locked
only the harmony label changes.

All functions return a new Palette. Randomness comes from an explicit
numpy Generator so callers can make results reproducible.
"""

from __future__ import annotations

import numpy as np

from palette_engine.core.convert import color_from_hex, color_from_hsl, rgb_to_hex
from palette_engine.core.harmony import ALL_RULES, generate_harmony
from palette_engine.core.types import HSL, PALETTE_SIZE, RGB, Color, HarmonyRule, Palette


def random_color(rng: np.random.Generator) -> Color:
    """Uniformly random RGB colour, unlocked."""
    r, g, b = (int(c) for c in rng.integers(0, 256, size=3))
    return color_from_hex(rgb_to_hex(RGB(r, g, b)))


def select_harmony_rule(rng: np.random.Generator) -> HarmonyRule:
    return ALL_RULES[int(rng.integers(0, len(ALL_RULES)))]


def regenerate_palette(
    current: Palette | None = None,
    rng: np.random.Generator | None = None,
    rule: HarmonyRule | None = None,
) -> Palette:
    """Produce the next palette, preserving locked colours (value and position)."""
    if rng is None:
        rng = np.random.default_rng()
    # One draw for the rule even when it is forced
    chosen = select_harmony_rule(rng)
    if rule is not None:
        chosen = rule

    locked = current.locked_colors if current is not None else []
    if not locked:
        return Palette(generate_harmony(random_color(rng), chosen), chosen)

    if len(locked) >= PALETTE_SIZE:
        return current.with_rule(chosen)

    generated = generate_harmony(locked[0], chosen)
    locked_hexes = {c.hex for c in locked}

    colors: list[Color] = []
    next_generated = 0
    for slot in current.colors:
        if slot.locked:
            colors.append(slot)
            continue
        picked = None
        while next_generated < len(generated):
            candidate = generated[next_generated]
            next_generated += 1
            if candidate.hex not in locked_hexes:
                picked = candidate.with_lock(False)
                break
        colors.append(picked if picked is not None else random_color(rng))

    return Palette(colors, chosen)


def toggle_lock(palette: Palette, index: int) -> Palette:
    """Flip the lock on one slot. Out-of-range index leaves the palette unchanged."""
    if index < 0 or index >= len(palette.colors):
        return palette
    color = palette.colors[index]
    return palette.replace_at(index, color.with_lock(not color.locked))


def update_color(palette: Palette, index: int, color: Color) -> Palette:
    return palette.replace_at(index, color)


def set_color_hsl(palette: Palette, index: int, hsl: HSL) -> Palette:
    """Slider edit: replace one slot from HSL values and lock it."""
    return update_color(palette, index, color_from_hsl(hsl, locked=True))
