"""Resolve a readable text colour (black or white) for a background.

White is chosen whenever it reaches the threshold, even if black would
contrast more; black otherwise, falling back to whichever is higher.
An unparseable background leaves --text unchanged.

Example:
    colorsmith text-color '#0ea5e9'
    colorsmith text-color '#777777' --threshold 3 --text '#333333'
"""

from colorsmith.core.enforce import BLACK, resolve_text_color
from colorsmith.core.types import Command

command = Command(
    name='text-color',
    help='Pick black or white text for a background colour.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('background', help='Background colour')
    parser.add_argument('-t', '--text', default=BLACK, help='Original text colour (default: #000000)')
    parser.add_argument('-r', '--threshold', type=float, default=4.5, help='Minimum contrast ratio (default: 4.5)')


@command.run
def run(args) -> None:
    print(resolve_text_color(args.background, args.text, args.threshold))
