"""Contrast audit of every step in a generated palette.

Computes each step's contrast against white and black in one vectorised
pass and marks it ✓ if either reaches the level's ratio. By default audits
the corrected palette; --raw audits the palette before correction, to see
which steps the enforcer had to replace.

Use --strict for CI gating: exit 1 if any step fails.

Example:
    colorsmith audit '#0ea5e9' --level AAA
    colorsmith audit '#0ea5e9' --level AAA --raw --strict
"""

from colorsmith.commands._options import add_palette_arguments, options_from_args
from colorsmith.core.color import normalize_hex
from colorsmith.core.contrast import contrast_matrix, threshold_for
from colorsmith.core.enforce import BLACK, WHITE
from colorsmith.core.palette import build_palette, generate_palette
from colorsmith.core.report import format_audit_json, format_audit_text
from colorsmith.core.types import AuditReport, Command, Palette

command = Command(
    name='audit',
    help='Contrast audit of every palette step against white and black.',
)


def audit_palette(palette: Palette, level: str, base: str = '') -> AuditReport:
    threshold = threshold_for(level)
    report = AuditReport(base=base, level=level, threshold=threshold)

    entries = [(name, step, color) for name, scale in palette.scales() for step, color in scale.items()]
    grid = contrast_matrix([color for _name, _step, color in entries], [WHITE, BLACK])

    for (name, step, color), (with_white, with_black) in zip(entries, grid):
        passed = bool(max(with_white, with_black) >= threshold)
        report.add(
            name,
            step,
            {
                'color': color,
                'white': round(float(with_white), 2),
                'black': round(float(with_black), 2),
                'pass': passed,
            },
        )
        if passed:
            report.record_pass(name)
        else:
            report.record_fail(name)
    return report


@command.arguments
def arguments(parser) -> None:
    add_palette_arguments(parser)
    parser.add_argument('--raw', action='store_true', help='Audit the palette before accessibility correction')
    parser.add_argument('--strict', action='store_true', help='Exit 1 if any step fails (CI gating)')


@command.run
def run(args) -> int:
    options = options_from_args(args)
    base = normalize_hex(args.base)
    palette = build_palette(base, options) if args.raw else generate_palette(base, options)
    report = audit_palette(palette, options.accessibility, base)

    if args.json:
        print(format_audit_json(report))
    else:
        print(format_audit_text(report))

    # CI gate — after output so the report is visible even on failure
    if args.strict and report.fail_count:
        return 1
    return 0
