"""Hue sweep auto-discovery and registration.

Scans wheel_picker/sweeps/ for modules that define a `sweep` object
of type HueSweep. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing — falls back to explicit
imports from sweeps/__init__.py).
"""

import importlib
import pkgutil

from wheel_picker.core.types import HueSweep

_registry: dict[str, HueSweep] = {}

# Known sweep module names — fallback for frozen binaries
_SWEEP_MODULES = [
    'cursor',
    'hsv',
]


def discover() -> dict[str, HueSweep]:
    """Import all sweep modules and return the registry."""
    if _registry:
        return _registry

    import wheel_picker.sweeps as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    # Frozen binary fallback: pkgutil finds nothing, use known list
    if not found_modules:
        found_modules = _SWEEP_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'wheel_picker.sweeps.{modname}')
        found = getattr(module, 'sweep', None)
        if isinstance(found, HueSweep):
            _registry[found.name] = found

    return _registry


def get(name: str) -> HueSweep:
    """Get a sweep by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown sweep: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_sweeps() -> dict[str, HueSweep]:
    """Return all registered sweeps."""
    return discover()
