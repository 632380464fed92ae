"""Generate an accessible palette from one base colour.

Builds the primary scale from the base, secondary (and accent, for triadic
and analogous harmony) scales from rotated hues, the fixed neutral scale,
and success/warning/error/info semantic scales. Every step is then
corrected so it reaches the accessibility level against white or black.

Each step is printed with its contrast against white and black.

Example:
    colorsmith palette '#0ea5e9'
    colorsmith palette '#0ea5e9' --harmony triadic --level AAA --json
"""

from colorsmith.commands._options import add_palette_arguments, options_from_args
from colorsmith.core.color import normalize_hex
from colorsmith.core.palette import generate_palette
from colorsmith.core.report import format_palette_json, format_palette_text
from colorsmith.core.types import Command

command = Command(
    name='palette',
    help='Generate an accessible palette (primary, harmony, neutral, semantic scales).',
)


@command.arguments
def arguments(parser) -> None:
    add_palette_arguments(parser)


@command.run
def run(args) -> None:
    options = options_from_args(args)
    base = normalize_hex(args.base)
    palette = generate_palette(base, options)
    if args.json:
        print(format_palette_json(palette, base, options))
    else:
        print(format_palette_text(palette, base, options))
