"""palette-tool: generate, lock, inspect and share harmonious 5-colour palettes.

Usage: uv run palette-tool <command> [--state FRAGMENT] [options]

The current palette travels as a URL fragment (the text after '#' in a share
link). Pass it with --state; every command prints the resulting fragment on
its last line so the output of one call can feed the next. Without --state,
or if it cannot be decoded, a fresh random palette is used.

Commands are auto-discovered from palette_engine/commands/.
Each command module's docstring is its documentation.
Run `palette-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

import numpy as np

from palette_engine import registry
from palette_engine.core.env import Settings, load_env, load_settings
from palette_engine.core.generator import regenerate_palette
from palette_engine.core.report import format_json, format_text
from palette_engine.core.types import ColorFormat, Palette, Report, Session
from palette_engine.core.url_state import decode_palette, encode_palette


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  palette-tool generate\n'
        "  palette-tool generate --state 'colors=264653,2A9D8F,E9C46A,F4A261,E76F51&locks=10000'\n"
        "  palette-tool lock --state '...' --index 3\n"
        "  palette-tool set --state '...' --index 0 --hsl 200,70,45\n"
        "  palette-tool contrast --state '...' --matrix\n"
        "  palette-tool export --state '...' --out-dir ./exports\n"
        "  palette-tool swatch --state '...' --format HSL\n"
        '  palette-tool help generate\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  PALETTE_SEED      integer seed for reproducible output\n'
        '  PALETTE_FORMAT    HEX | RGB | HSL\n'
        '  PALETTE_BASE_URL  base of share links\n'
        '  PALETTE_OUT_DIR   directory for export/swatch files\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-tool',
        description='Generate, lock, inspect and share harmonious 5-colour palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        short_help = cmd.doc.splitlines()[0] if cmd.doc else cmd.help

        p = sub.add_parser(name, help=short_help)
        p.add_argument('-s', '--state', default=None, help="Current palette as a URL fragment ('#' optional)")
        p.add_argument(
            '-f',
            '--format',
            type=str.upper,
            choices=[f.value for f in ColorFormat],
            default=None,
            help='Display format (default: PALETTE_FORMAT or HEX)',
        )
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('--seed', type=int, default=None, help='Random seed (overrides PALETTE_SEED)')
        p.add_argument('-o', '--out-dir', default=None, help='Directory for written files (default: PALETTE_OUT_DIR or .)')
        if cmd.configure is not None:
            cmd.configure(p)

    # `help` subcommand prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            short = cmd.doc.splitlines()[0] if cmd.doc else cmd.help
            print(f'  {name:<10} {short}')
        print('\nRun: palette-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = commands[topic].doc
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _initial_palette(state: str | None, rng: np.random.Generator) -> Palette:
    """Decoded --state, or a fresh palette when there is none or it is unreadable."""
    if state:
        palette = decode_palette(state)
        if palette is not None:
            return palette
        print('palette-tool: could not decode state, generating a fresh palette', file=sys.stderr)
    return regenerate_palette(None, rng=rng)


def _build_session(args: argparse.Namespace, settings: Settings) -> Session:
    seed = args.seed if args.seed is not None else settings.seed
    rng = np.random.default_rng(seed)
    display_format = ColorFormat(args.format) if args.format else settings.display_format
    return Session(
        palette=_initial_palette(args.state, rng),
        rng=rng,
        display_format=display_format,
        base_url=settings.base_url,
        out_dir=args.out_dir or settings.out_dir,
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'palette-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    try:
        session = _build_session(args, load_settings())
        report = Report(command=args.command, display_format=session.display_format)
        registry.get(args.command).execute(session, report, args)
    except (KeyError, ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    report.palette = session.palette
    report.fragment = encode_palette(session.palette)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
