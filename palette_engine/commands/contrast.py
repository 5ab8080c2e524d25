"""WCAG contrast between neighbouring swatches.

For each adjacent pair (0-1, 1-2, 2-3, 3-4) reports the contrast ratio and
whether it passes AA (4.5:1) or AAA (7:1). Pairs below AA are flagged as
low contrast.

--matrix adds the full 5x5 table of pairwise ratios.

Example:
    uv run palette-tool contrast --state 'colors=000000,FFFFFF,777777,FF0000,0000FF'
    uv run palette-tool contrast --state '...' --matrix --json
"""

from palette_engine.core.contrast import adjacent_contrasts, contrast_matrix, describe_contrast
from palette_engine.core.types import Command, Report, Session


def _configure(parser) -> None:
    parser.add_argument('--matrix', action='store_true', help='Include all pairwise ratios')


command = Command(
    name='contrast',
    help='WCAG contrast ratio and AA/AAA rating for each adjacent pair.',
    doc=__doc__,
    configure=_configure,
)


@command.run
def run(session: Session, report: Report, args) -> None:
    pairs = [
        {
            'left': result.left,
            'right': result.right,
            'ratio': round(result.ratio, 2),
            'aa': result.aa,
            'aaa': result.aaa,
            'level': result.level,
            'description': describe_contrast(result.ratio),
        }
        for result in adjacent_contrasts(session.palette)
    ]
    data: dict = {'pairs': pairs}
    if getattr(args, 'matrix', False):
        data['matrix'] = contrast_matrix(session.palette).round(2).tolist()
    report.add('contrast', data)
