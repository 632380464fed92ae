"""Report builder: text and JSON output for palettes and contrast audits."""

import json
from dataclasses import asdict
from typing import Any

from colorsmith.core.contrast import contrast_ratio
from colorsmith.core.enforce import BLACK, WHITE
from colorsmith.core.types import AuditReport, ColorScale, Palette, PaletteOptions


def _header(base: str, options: PaletteOptions) -> str:
    return f'colorsmith: {base} — {options.harmony}, {options.accessibility}, {options.steps} steps'


def format_scale_text(name: str, scale: ColorScale) -> list[str]:
    lines = [f'── {name}']
    for step, color in scale.items():
        with_white = contrast_ratio(color, WHITE)
        with_black = contrast_ratio(color, BLACK)
        lines.append(f'  {step:>4}  {color}  white {with_white:5.2f}  black {with_black:5.2f}')
    return lines


def format_palette_text(palette: Palette, base: str, options: PaletteOptions) -> str:
    """Format a palette as human-readable text, one block per scale."""
    lines = [_header(base, options), '']
    for name, scale in palette.scales():
        lines.extend(format_scale_text(name, scale))
        lines.append('')
    return '\n'.join(lines).rstrip('\n')


def format_palette_json(palette: Palette, base: str, options: PaletteOptions) -> str:
    obj: dict[str, Any] = {
        'base': base,
        'options': asdict(options),
        'palette': palette.to_dict(),
    }
    return json.dumps(obj, indent=2)


def format_audit_text(report: AuditReport) -> str:
    """Format an audit as text with a PASS/FAIL summary line."""
    lines = [f'colorsmith audit: {report.base} — {report.level} (≥ {report.threshold}:1)', '']
    for scale_name, steps in report.scales.items():
        lines.append(f'── {scale_name}')
        for step, data in steps.items():
            mark = '✓' if data['pass'] else '✗'
            lines.append(
                f'  {step:>4}  {data["color"]}  white {data["white"]:5.2f}  black {data["black"]:5.2f}  {mark}'
            )
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} steps  FAIL {report.fail_count}/{total} steps')
    return '\n'.join(lines)


def format_audit_json(report: AuditReport) -> str:
    obj: dict[str, Any] = {
        'base': report.base,
        'level': report.level,
        'threshold': report.threshold,
        'scales': {
            scale_name: {str(step): data for step, data in steps.items()}
            for scale_name, steps in report.scales.items()
        },
        'summary': {
            'total': report.pass_count + report.fail_count,
            'pass': report.pass_count,
            'fail': report.fail_count,
        },
    }
    return json.dumps(obj, indent=2)
