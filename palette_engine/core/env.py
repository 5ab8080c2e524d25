"""Settings and .env loading for palette-tool.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  PALETTE_SEED      integer seed for reproducible palettes (default: random)
  PALETTE_FORMAT    HEX, RGB or HSL display format (default: HEX)
  PALETTE_BASE_URL  page URL that share links point at (default: empty)
  PALETTE_OUT_DIR   where export/swatch write files (default: .)

Unparseable values fall back to the defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from palette_engine.core.types import ColorFormat


@dataclass(frozen=True)
class Settings:
    seed: int | None = None
    display_format: ColorFormat = ColorFormat.HEX
    base_url: str = ''
    out_dir: str = '.'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; optional `export ` prefix and surrounding quotes are dropped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables."""
    env = os.environ if environ is None else environ

    seed = None
    raw_seed = env.get('PALETTE_SEED', '').strip()
    if raw_seed:
        try:
            seed = int(raw_seed)
            if seed < 0:
                seed = None
        except ValueError:
            seed = None

    raw_format = env.get('PALETTE_FORMAT', '').strip().upper()
    display_format = ColorFormat(raw_format) if raw_format in ColorFormat.__members__ else ColorFormat.HEX

    return Settings(
        seed=seed,
        display_format=display_format,
        base_url=env.get('PALETTE_BASE_URL', '').strip(),
        out_dir=env.get('PALETTE_OUT_DIR', '').strip() or '.',
    )
