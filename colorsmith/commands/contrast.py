"""WCAG contrast ratio between two colours, with the levels it satisfies.

Example:
    colorsmith contrast '#0ea5e9' '#ffffff'
    colorsmith contrast '#333' '#fff' --json
"""

import json

from colorsmith.core.color import normalize_hex
from colorsmith.core.contrast import CONTRAST_RATIOS, contrast_ratio, meets_level
from colorsmith.core.types import Command

command = Command(
    name='contrast',
    help='Contrast ratio between two colours and the WCAG levels it passes.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('foreground', help='First colour')
    parser.add_argument('background', help='Second colour')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args) -> None:
    fg = normalize_hex(args.foreground)
    bg = normalize_hex(args.background)
    ratio = contrast_ratio(fg, bg)
    levels = {level: meets_level(ratio, level) for level in CONTRAST_RATIOS}

    if args.json:
        print(json.dumps({'foreground': fg, 'background': bg, 'ratio': round(ratio, 2), 'levels': levels}, indent=2))
        return

    print(f'{fg} on {bg}: {ratio:.2f}:1')
    for level, passed in levels.items():
        mark = '✓' if passed else '✗'
        print(f'  {level:<10} ≥ {CONTRAST_RATIOS[level]}:1  {mark}')
