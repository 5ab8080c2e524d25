"""Command auto-discovery and registration.

Scans palette_engine/commands/ for modules that define a `command` object
of type Command. Collects them into a dict keyed by name.

Falls back to the explicit module list below when pkgutil.iter_modules finds
nothing (zipped or frozen installs).
"""

import importlib
import pkgutil

from palette_engine.core.types import Command

_registry: dict[str, Command] = {}

# Known command module names, used when pkgutil cannot list the package
_COMMAND_MODULES = [
    'contrast',
    'export',
    'generate',
    'lock',
    'set_color',
    'share',
    'swatch',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import palette_engine.commands as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _COMMAND_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'palette_engine.commands.{modname}')
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

