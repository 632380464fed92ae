"""colorsmith — accessible colour-system generator.

Usage: colorsmith <command> [options]

Commands are auto-discovered from colorsmith/commands/.
Each command module's docstring is its documentation.
Run `colorsmith help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colorsmith looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  COLORSMITH_LEVEL, COLORSMITH_HARMONY, COLORSMITH_STEPS, COLORSMITH_SEMANTICS,
  COLORSMITH_PREFIX and COLORSMITH_SELECTOR set defaults for the flags.
"""

import argparse
import sys

from colorsmith import registry
from colorsmith.core.env import load_env, settings_from_env


def _short_doc(name: str, fallback: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colorsmith palette '#0ea5e9'\n"
        "  colorsmith palette '#0ea5e9' --harmony triadic --level AAA --json\n"
        "  colorsmith css '#0ea5e9' --prefix brand > tokens.css\n"
        "  colorsmith audit '#0ea5e9' --level AAA --raw --strict\n"
        "  colorsmith contrast '#0ea5e9' '#ffffff'\n"
        "  colorsmith text-color '#1e3a8a'\n"
        '  colorsmith help css\n'
    )
    parser = argparse.ArgumentParser(
        prog='colorsmith',
        description='Generate accessible colour palettes from one base colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help), description=cmd.help)
        cmd.configure(p)

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<12} {_short_doc(name, cmd.help)}')
        print('\nRun: colorsmith help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    doc = (registry.module_for(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'colorsmith: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(args.topic)

    try:
        args.settings = settings_from_env()
        return registry.get(args.command).execute(args)
    except ValueError as e:
        # InvalidColorFormat and bad option values
        print(f'colorsmith: error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
