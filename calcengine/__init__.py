"""
calcengine - calculation engine configuration

This package provides:
- CalculationRules, the immutable aggregate of the rules driving calculations
- A fluent builder with defaults, name-based and text-based setters
- The pricing, market data, reporting and market data build rule types
- Name-based property metadata for generic tooling
"""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from . import calculation_rules as calculation_rules
    from . import errors as errors
    from . import interfaces as interfaces
    from . import logging as logging
    from . import rules as rules

__version__ = '0.1.0'
__all__ = [
    'calculation_rules',
    'errors',
    'interfaces',
    'logging',
    'rules',
]


def __getattr__(name: str) -> ModuleType:  # pragma: no cover
    """Lazy-load submodules on first attribute access."""
    if name in __all__:
        module = importlib.import_module(f'{__name__}.{name}')
        globals()[name] = module
        return module
    raise AttributeError(f'module {__name__!r} has no attribute {name!r}')


def __dir__() -> list[str]:  # pragma: no cover
    return sorted(set(list(globals()) + __all__))
