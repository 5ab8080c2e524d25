"""Report builder: colour formatting, JSON export, and text/JSON CLI output."""

import json
from datetime import datetime, timezone
from typing import Any

from palette_engine.core.types import Color, ColorFormat, Palette, Report


def format_color_value(color: Color, fmt: ColorFormat) -> str:
    """'#FF0000', 'rgb(255, 0, 0)' or 'hsl(0, 100%, 50%)'."""
    if fmt == ColorFormat.RGB:
        return f'rgb({color.rgb.r}, {color.rgb.g}, {color.rgb.b})'
    if fmt == ColorFormat.HSL:
        return f'hsl({color.hsl.h}, {color.hsl.s}%, {color.hsl.l}%)'
    return color.hex


def palette_to_export(palette: Palette) -> dict[str, Any]:
    """Export structure: every colour in all three formats, plus the rule when known."""
    obj: dict[str, Any] = {
        'colors': [
            {
                'hex': format_color_value(c, ColorFormat.HEX),
                'rgb': format_color_value(c, ColorFormat.RGB),
                'hsl': format_color_value(c, ColorFormat.HSL),
            }
            for c in palette.colors
        ]
    }
    if palette.harmony_rule is not None:
        obj['harmonyRule'] = palette.harmony_rule.value
    return obj


def format_palette_json(palette: Palette) -> str:
    return json.dumps(palette_to_export(palette), indent=2)


def export_filename(now: datetime | None = None) -> str:
    """palette-2024-05-01T09-30-00.json (UTC, second precision)."""
    if now is None:
        now = datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).strftime('%Y-%m-%dT%H-%M-%S')
    return f'palette-{stamp}.json'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    palette = report.palette
    if palette is not None:
        rule = palette.harmony_rule.value if palette.harmony_rule else 'custom'
        lines.append(f'palette-tool {report.command}: {rule}')
        lines.append('')
        for i, color in enumerate(palette.colors):
            value = format_color_value(color, report.display_format)
            lock = '\U0001f512 locked' if color.locked else ''
            lines.append(f'  {i}  {value:<22} {lock}'.rstrip())
        lines.append('')

    for section, data in report.sections.items():
        if section == 'contrast' and 'pairs' in data:
            lines.append('── contrast')
            for pair in data['pairs']:
                mark = pair['level'] if pair['level'] != 'fail' else '⚠ low'
                lines.append(f'  {pair["left"]}→{pair["right"]}  {pair["ratio"]:>5.2f}:1  {mark}')
            if 'matrix' in data:
                lines.append('')
                for row in data['matrix']:
                    lines.append('  ' + ' '.join(f'{v:>5.2f}' for v in row))
        else:
            # Generic fallback
            lines.append(f'── {section}')
            for k, v in data.items():
                lines.append(f'  {k}: {v}')
        lines.append('')

    if report.fragment:
        lines.append(f'state: {report.fragment}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    if report.palette is not None:
        obj['palette'] = {
            'colors': [
                {
                    'hex': c.hex,
                    'rgb': c.rgb.as_tuple(),
                    'hsl': [c.hsl.h, c.hsl.s, c.hsl.l],
                    'locked': c.locked,
                    'display': format_color_value(c, report.display_format),
                }
                for c in report.palette.colors
            ],
            'harmonyRule': report.palette.harmony_rule.value if report.palette.harmony_rule else None,
        }
    obj.update(report.sections)
    obj['state'] = report.fragment
    return json.dumps(obj, indent=2)
