"""Print a generated palette as CSS custom properties.

One property per scale step, named --<prefix>-<scale>-<step>. Scales come
in palette order (primary, secondary, accent, neutral, then semantic
scales by their own names), steps in ascending order. Output is stable
for the same input.

Prefix and selector default to COLORSMITH_PREFIX / COLORSMITH_SELECTOR,
then 'color' and ':root'.

Example:
    colorsmith css '#0ea5e9' > tokens.css
    colorsmith css '#0ea5e9' --prefix brand --selector '.theme-ocean'
"""

from colorsmith.commands._options import add_palette_arguments, options_from_args
from colorsmith.core.env import Settings
from colorsmith.core.palette import generate_css_variables, generate_palette
from colorsmith.core.types import Command

command = Command(
    name='css',
    help='Print the palette as CSS custom properties.',
)


@command.arguments
def arguments(parser) -> None:
    add_palette_arguments(parser)
    parser.add_argument('-p', '--prefix', help='Custom property prefix (default: color)')
    parser.add_argument('-S', '--selector', help="Selector wrapping the properties (default: ':root')")


@command.run
def run(args) -> None:
    settings: Settings = getattr(args, 'settings', None) or Settings()
    palette = generate_palette(args.base, options_from_args(args))
    prefix = args.prefix if args.prefix is not None else settings.prefix
    selector = args.selector or settings.selector
    print(generate_css_variables(palette, prefix=prefix, selector=selector))
