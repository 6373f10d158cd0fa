"""Generator auto-discovery and registration.

Scans uikit_css/generators/ for modules that define a `generator` object
of type Generator. Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from uikit_css.core.types import Generator

_registry: dict[str, Generator] = {}


def discover() -> dict[str, Generator]:
    """Import all generator modules and return the registry."""
    if _registry:
        return _registry

    import uikit_css.generators as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'uikit_css.generators.{modname}')
        gen = getattr(module, 'generator', None)
        if isinstance(gen, Generator):
            _registry[gen.name] = gen

    return _registry


def get(name: str) -> Generator:
    """Get a generator by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown generator: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_generators() -> dict[str, Generator]:
    """Return all registered generators."""
    return discover()


def module_for(name: str) -> object:
    """Return the module that defines generator `name` (for docstring access).

    Generator names need not match module names ('css' lives in legacy_css).
    """
    gen = get(name)
    if gen._run_fn is None:
        raise RuntimeError(f'Generator {name} has no run function')
    return importlib.import_module(gen._run_fn.__module__)
