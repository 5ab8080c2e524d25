"""Replace one slot with a colour given as hex or HSL. The slot becomes locked.

This is the command-line counterpart of dragging a colour's H/S/L sliders:
an edited colour is one the user cares about, so it is locked against the
next `generate`.

--hsl takes three integers, H,S,L (hue 0-360, saturation and lightness 0-100).
Hue wraps around the colour circle; saturation and lightness outside 0-100
are clamped.

Example:
    uv run palette-tool set --state 'colors=...' --index 0 --hex '#1E90FF'
    uv run palette-tool set --state 'colors=...' --index 4 --hsl 210,80,40
"""

import re

from palette_engine.commands.lock import check_index
from palette_engine.core.convert import color_from_hex
from palette_engine.core.generator import set_color_hsl, update_color
from palette_engine.core.types import HSL, Command, Report, Session

_HEX = re.compile(r'#?[0-9A-Fa-f]{6}')
_HSL = re.compile(r'\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*')


def _configure(parser) -> None:
    parser.add_argument('-i', '--index', type=int, required=True, help='Slot to replace (0-4)')
    value = parser.add_mutually_exclusive_group(required=True)
    value.add_argument('--hex', help='New colour as #RRGGBB')
    value.add_argument('--hsl', help='New colour as H,S,L')


command = Command(
    name='set',
    help='Replace one slot from --hex or --hsl and lock it.',
    doc=__doc__,
    configure=_configure,
)


def parse_hsl(text: str) -> HSL:
    m = _HSL.fullmatch(text)
    if not m:
        raise ValueError(f'--hsl expects H,S,L integers, got {text!r}')
    h, s, l = (int(g) for g in m.groups())  # noqa: E741
    return HSL(h, s, l)


@command.run
def run(session: Session, report: Report, args) -> None:
    index = check_index(args.index)
    if args.hex is not None:
        if not _HEX.fullmatch(args.hex):
            raise ValueError(f'--hex expects 6 hex digits, got {args.hex!r}')
        session.palette = update_color(session.palette, index, color_from_hex(args.hex, locked=True))
    else:
        session.palette = set_color_hsl(session.palette, index, parse_hsl(args.hsl))
    report.add('set', {'index': index, 'hex': session.palette.colors[index].hex})
