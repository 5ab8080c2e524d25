"""Generate the next palette, keeping locked colours where they are.

With no --state (or nothing locked) a fresh random palette is produced.
Locked colours keep their value and slot; the unlocked slots are filled
from a harmony built around the first locked colour. When all five are
locked only the harmony label changes.

The harmony rule is picked at random unless --rule forces one of:
analogous, complementary, triadic, tetradic, monochromatic.

Example:
    uv run palette-tool generate
    uv run palette-tool generate --state 'colors=...&locks=10000' --rule triadic
    uv run palette-tool generate --seed 7 --format HSL --json
"""

from palette_engine.core.generator import regenerate_palette
from palette_engine.core.types import Command, HarmonyRule, Report, Session


def _configure(parser) -> None:
    parser.add_argument(
        '--rule',
        choices=[r.value for r in HarmonyRule],
        default=None,
        help='Force a harmony rule instead of picking one at random',
    )


command = Command(
    name='generate',
    help='Generate a new palette. Locked colours are preserved.',
    doc=__doc__,
    configure=_configure,
)


@command.run
def run(session: Session, report: Report, args) -> None:
    rule = HarmonyRule(args.rule) if getattr(args, 'rule', None) else None
    session.palette = regenerate_palette(session.palette, rng=session.rng, rule=rule)
