"""Command auto-discovery and registration.

Scans colorsmith/commands/ with pkgutil for modules that define a `command`
object of type Command and collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from colorsmith.core.types import Command

_registry: dict[str, Command] = {}


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import colorsmith.commands as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'colorsmith.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()


def module_for(name: str) -> object:
    """The module defining command `name` (for docstring access)."""
    return importlib.import_module(f'colorsmith.commands.{name.replace("-", "_")}')
