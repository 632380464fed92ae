"""Expand one colour into a raw tonal scale, without accessibility correction.

Steps 50–400 walk lightness down from 95 by 15; step 500 is the input
colour; 600–950 darken by 10 per step. Use --neutral for the fixed
cool-grey scale instead.

Example:
    colorsmith scale '#0ea5e9'
    colorsmith scale '#0ea5e9' --steps 7 --json
    colorsmith scale --neutral
"""

import json
import sys

from colorsmith.core.color import normalize_hex
from colorsmith.core.report import format_scale_text
from colorsmith.core.scale import generate_color_scale, generate_neutral_scale
from colorsmith.core.types import Command

command = Command(
    name='scale',
    help='Print one raw colour scale (no accessibility correction).',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('base', nargs='?', help="Base colour, '#rrggbb' or '#rgb'")
    parser.add_argument('-s', '--steps', type=int, default=11, help='Number of steps (default: 11)')
    parser.add_argument('-n', '--neutral', action='store_true', help='Print the neutral scale')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args) -> int:
    if args.neutral:
        name, scale = 'neutral', generate_neutral_scale()
    elif args.base:
        name = normalize_hex(args.base)
        scale = generate_color_scale(name, args.steps)
    else:
        print('colorsmith: scale needs a base colour or --neutral', file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({str(step): color for step, color in scale.items()}, indent=2))
    else:
        print('\n'.join(format_scale_text(name, scale)))
    return 0
