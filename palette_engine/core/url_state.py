"""Encode/decode a palette as a URL fragment.

Format:
    colors=FF0000,00FF00,0000FF,FFFF00,FF00FF&locks=10101&harmony=triadic

`colors` and its five 6-digit hex tokens are required; anything else wrong
with them makes decode_palette() return None. `locks` and `harmony` are
optional and degrade to "all unlocked" / "no rule" when malformed.
"""

import re
from urllib.parse import parse_qs, urlencode

from palette_engine.core.convert import color_from_hex
from palette_engine.core.types import PALETTE_SIZE, HarmonyRule, Palette

_HEX_TOKEN = re.compile(r'[0-9A-Fa-f]{6}')
_LOCKS = re.compile(r'[01]{5}')


def encode_palette(palette: Palette) -> str:
    """Fragment text for palette, without the leading '#'."""
    params = {
        'colors': ','.join(c.hex.replace('#', '') for c in palette.colors),
        'locks': ''.join('1' if c.locked else '0' for c in palette.colors),
    }
    if palette.harmony_rule is not None:
        params['harmony'] = palette.harmony_rule.value
    return urlencode(params, safe=',')


def _first(params: dict[str, list[str]], key: str) -> str | None:
    values = params.get(key)
    return values[0] if values else None


def _decode(text: str) -> Palette | None:
    text = text[1:] if text.startswith('#') else text
    if not text:
        return None

    params = parse_qs(text, keep_blank_values=True)

    colors_param = _first(params, 'colors')
    if not colors_param:
        return None
    tokens = colors_param.split(',')
    if len(tokens) != PALETTE_SIZE:
        return None
    if not all(_HEX_TOKEN.fullmatch(t) for t in tokens):
        return None

    locks_param = _first(params, 'locks')
    if locks_param and _LOCKS.fullmatch(locks_param):
        locks = [ch == '1' for ch in locks_param]
    else:
        locks = [False] * PALETTE_SIZE

    harmony_rule = None
    harmony_param = _first(params, 'harmony')
    if harmony_param in {r.value for r in HarmonyRule}:
        harmony_rule = HarmonyRule(harmony_param)

    colors = [color_from_hex(f'#{t.upper()}', locked=lk) for t, lk in zip(tokens, locks)]
    return Palette(colors, harmony_rule)


def decode_palette(text: str) -> Palette | None:
    """Palette from fragment text ('#' optional), or None when it cannot be read."""
    try:
        return _decode(text)
    except Exception:  # noqa: BLE001  malformed input of any kind means "no palette"
        return None


def share_url(palette: Palette, base_url: str = '') -> str:
    """Shareable link: base_url with the encoded palette as its fragment."""
    return f'{base_url}#{encode_palette(palette)}'
