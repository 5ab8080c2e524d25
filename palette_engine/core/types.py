"""Shared types for palette-tool: RGB, HSL, Color, Palette, Command, Session, Report."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

import numpy as np

PALETTE_SIZE = 5


class HarmonyRule(str, Enum):
    """Named strategy for deriving 5 related colours from one seed."""

    ANALOGOUS = 'analogous'
    COMPLEMENTARY = 'complementary'
    TRIADIC = 'triadic'
    TETRADIC = 'tetradic'
    MONOCHROMATIC = 'monochromatic'


class ColorFormat(str, Enum):
    """Display format for a single colour value."""

    HEX = 'HEX'
    RGB = 'RGB'
    HSL = 'HSL'


@dataclass(frozen=True)
class RGB:
    r: int  # 0-255
    g: int  # 0-255
    b: int  # 0-255

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HSL:
    h: int  # 0-360 degrees
    s: int  # 0-100 percent
    l: int  # noqa: E741  0-100 percent


@dataclass(frozen=True)
class Color:
    """One palette slot. hex, rgb and hsl describe the same colour; locked is slot state."""

    hex: str  # '#RRGGBB', uppercase
    rgb: RGB
    hsl: HSL
    locked: bool = False

    def with_lock(self, locked: bool) -> Color:
        return replace(self, locked=locked)


@dataclass(frozen=True)
class Palette:
    """Exactly five colours in slot order, plus the harmony rule that produced them."""

    colors: tuple[Color, ...]
    harmony_rule: HarmonyRule | None = None

    def __init__(self, colors: Iterable[Color], harmony_rule: HarmonyRule | None = None):
        colors = tuple(colors)
        if len(colors) != PALETTE_SIZE:
            raise ValueError(f'A palette needs exactly {PALETTE_SIZE} colours, got {len(colors)}')
        object.__setattr__(self, 'colors', colors)
        object.__setattr__(self, 'harmony_rule', harmony_rule)

    @property
    def locked_colors(self) -> list[Color]:
        return [c for c in self.colors if c.locked]

    @property
    def hexes(self) -> list[str]:
        return [c.hex for c in self.colors]

    @property
    def locks(self) -> list[bool]:
        return [c.locked for c in self.colors]

    def replace_at(self, index: int, color: Color) -> Palette:
        """Return a copy with one slot replaced. Out-of-range index returns self."""
        if index < 0 or index >= len(self.colors):
            return self
        colors = list(self.colors)
        colors[index] = color
        return Palette(colors, self.harmony_rule)

    def with_rule(self, rule: HarmonyRule | None) -> Palette:
        return Palette(self.colors, rule)


@dataclass
class Session:
    """State a command works on: the current palette and the CLI settings around it."""

    palette: Palette
    rng: np.random.Generator
    display_format: ColorFormat = ColorFormat.HEX
    base_url: str = ''
    out_dir: str = '.'


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='generate', help='Generate a new palette')

        @command.run
        def run(session, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', doc: str | None = None, configure: Callable | None = None):
        self.name = name
        self.help = help
        self.doc = (doc or '').strip()  # module docstring, shown by `help <command>`
        self.configure = configure  # adds command-specific argparse options
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, session: Session, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(session, report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str = ''
    palette: Palette | None = None
    fragment: str = ''
    display_format: ColorFormat = ColorFormat.HEX
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add (or merge into) a named output section."""
        self.sections.setdefault(section, {}).update(data)
