"""Write the palette as JSON: each colour in hex, rgb() and hsl() form.

The file is named palette-<UTC timestamp>.json and written to --out-dir
(or PALETTE_OUT_DIR, default the current directory). harmonyRule is left
out when the palette has no rule.

Example:
    uv run palette-tool export --state '...' --out-dir ./exports
"""

import os

from palette_engine.core.report import export_filename, format_palette_json
from palette_engine.core.types import Command, Report, Session

command = Command(
    name='export',
    help='Write the palette to palette-<timestamp>.json.',
    doc=__doc__,
)


@command.run
def run(session: Session, report: Report, args) -> None:
    os.makedirs(session.out_dir, exist_ok=True)
    path = os.path.join(session.out_dir, export_filename())
    with open(path, 'w', encoding='utf-8') as f:
        f.write(format_palette_json(session.palette))
        f.write('\n')
    report.add('export', {'file': path})
