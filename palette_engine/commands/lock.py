"""Toggle the lock on one palette slot.

Locked slots survive `generate` unchanged. Slots are numbered 0-4 from left
to right.

Example:
    uv run palette-tool lock --state 'colors=...&locks=00000' --index 2
"""

from palette_engine.core.generator import toggle_lock
from palette_engine.core.types import PALETTE_SIZE, Command, Report, Session


def _configure(parser) -> None:
    parser.add_argument('-i', '--index', type=int, required=True, help='Slot to toggle (0-4)')


command = Command(
    name='lock',
    help='Toggle the lock on one slot (0-4).',
    doc=__doc__,
    configure=_configure,
)


def check_index(index: int) -> int:
    if not 0 <= index < PALETTE_SIZE:
        raise ValueError(f'index must be between 0 and {PALETTE_SIZE - 1}, got {index}')
    return index


@command.run
def run(session: Session, report: Report, args) -> None:
    index = check_index(args.index)
    session.palette = toggle_lock(session.palette, index)
    state = 'locked' if session.palette.colors[index].locked else 'unlocked'
    report.add('lock', {'index': index, 'state': state})
