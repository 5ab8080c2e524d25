"""Render the palette as a PNG swatch sheet.

Five vertical swatches, left to right in slot order. Each is labelled with
its value in the display format (--format), in black or white, whichever
contrasts more with the swatch. Locked slots get a small marker in the
top-left corner.

A band along the bottom shows the contrast of each adjacent pair:
  green  AAA (>= 7:1)
  blue   AA  (>= 4.5:1)
  red    below AA

Saves to <out-dir>/palette.png.

Example:
    uv run palette-tool swatch --state '...' --out-dir ./tmp --format RGB
"""

import os

import numpy as np
from PIL import Image, ImageDraw

from palette_engine.core.contrast import adjacent_contrasts, contrast_ratio
from palette_engine.core.report import format_color_value
from palette_engine.core.types import RGB, ColorFormat, Command, Palette, Report, Session

command = Command(
    name='swatch',
    help='Render the palette to palette.png with contrast bands.',
    doc=__doc__,
)

SWATCH_WIDTH = 160
SWATCH_HEIGHT = 240
BAND_HEIGHT = 24
LOCK_MARKER = 14

LEVEL_COLOURS = {
    'AAA': (0x22, 0xC5, 0x5E),
    'AA': (0x3B, 0x82, 0xF6),
    'fail': (0xEF, 0x44, 0x44),
}

_BLACK = RGB(0, 0, 0)
_WHITE = RGB(255, 255, 255)


def _ink_for(rgb: RGB) -> RGB:
    """Black or white, whichever reads better on rgb."""
    return _BLACK if contrast_ratio(rgb, _BLACK) >= contrast_ratio(rgb, _WHITE) else _WHITE


def render_swatch(palette: Palette, fmt: ColorFormat = ColorFormat.HEX) -> Image.Image:
    n = len(palette.colors)
    width = n * SWATCH_WIDTH
    arr = np.zeros((SWATCH_HEIGHT + BAND_HEIGHT, width, 3), dtype=np.uint8)

    for i, color in enumerate(palette.colors):
        x = i * SWATCH_WIDTH
        arr[:SWATCH_HEIGHT, x : x + SWATCH_WIDTH] = color.rgb.as_tuple()
        if color.locked:
            arr[4 : 4 + LOCK_MARKER, x + 4 : x + 4 + LOCK_MARKER] = _ink_for(color.rgb).as_tuple()

    # Each pair's band runs from the centre of the left swatch to the centre of the right one
    arr[SWATCH_HEIGHT:] = 255
    for result in adjacent_contrasts(palette):
        x1 = result.left * SWATCH_WIDTH + SWATCH_WIDTH // 2
        x2 = result.right * SWATCH_WIDTH + SWATCH_WIDTH // 2
        arr[SWATCH_HEIGHT + 4 : SWATCH_HEIGHT + BAND_HEIGHT - 4, x1 + 2 : x2 - 2] = LEVEL_COLOURS[result.level]

    image = Image.fromarray(arr)
    draw = ImageDraw.Draw(image)
    for i, color in enumerate(palette.colors):
        label = format_color_value(color, fmt)
        draw.text((i * SWATCH_WIDTH + 8, SWATCH_HEIGHT - 20), label, fill=_ink_for(color.rgb).as_tuple())
    return image


@command.run
def run(session: Session, report: Report, args) -> None:
    os.makedirs(session.out_dir, exist_ok=True)
    path = os.path.join(session.out_dir, 'palette.png')
    image = render_swatch(session.palette, session.display_format)
    image.save(path)
    report.add('swatch', {'file': path, 'width': image.width, 'height': image.height})
