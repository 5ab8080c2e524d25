"""Print a shareable link for the palette.

The palette, its locks and its harmony rule are encoded into the URL
fragment. Opening the link (or passing the fragment back via --state)
restores exactly the same palette.

The base URL comes from --base-url or PALETTE_BASE_URL; without one only
'#<fragment>' is printed.

Example:
    uv run palette-tool share --state '...' --base-url https://example.com/palettes
"""

from palette_engine.core.types import Command, Report, Session
from palette_engine.core.url_state import share_url


def _configure(parser) -> None:
    parser.add_argument('--base-url', default=None, help='Page URL the link points at')


command = Command(
    name='share',
    help='Print a shareable URL with the palette in its fragment.',
    doc=__doc__,
    configure=_configure,
)


@command.run
def run(session: Session, report: Report, args) -> None:
    base_url = getattr(args, 'base_url', None) or session.base_url
    report.add('share', {'url': share_url(session.palette, base_url)})
