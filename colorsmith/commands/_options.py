"""Arguments shared by every palette-producing command."""

import argparse

from colorsmith.core.env import Settings
from colorsmith.core.types import ACCESSIBILITY_LEVELS, HARMONY_SCHEMES, PaletteOptions


def add_palette_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('base', help="Base colour, '#rrggbb' or '#rgb'")
    parser.add_argument('-H', '--harmony', choices=HARMONY_SCHEMES, help='Harmony scheme (default: complementary)')
    parser.add_argument('-l', '--level', choices=ACCESSIBILITY_LEVELS, help='Accessibility level (default: AA)')
    parser.add_argument('-s', '--steps', type=int, help='Steps per scale (default: 11)')
    parser.add_argument('--no-semantics', action='store_true', help='Skip success/warning/error/info scales')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


def options_from_args(args: argparse.Namespace) -> PaletteOptions:
    """Explicit flags win over COLORSMITH_* defaults."""
    settings: Settings = getattr(args, 'settings', None) or Settings()
    defaults = settings.options
    return PaletteOptions(
        accessibility=args.level or defaults.accessibility,
        harmony=args.harmony or defaults.harmony,
        steps=args.steps if args.steps is not None else defaults.steps,
        include_semantics=defaults.include_semantics and not args.no_semantics,
    )
