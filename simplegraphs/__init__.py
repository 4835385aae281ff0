# simplegraphs/__init__.py
"""simplegraphs: in-memory graphs with built-in search algorithms."""

from __future__ import annotations

import logging
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "simplegraphs.core",
    "algorithms": "simplegraphs.algorithms",
    "graph": "simplegraphs.core.graph",
    "engine": "simplegraphs.algorithms.engine",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("simplegraphs.core.graph", "Graph"),
    "DirectedGraph": ("simplegraphs.core.graph", "DirectedGraph"),
    "UndirectedGraph": ("simplegraphs.core.graph", "UndirectedGraph"),
    "Connection": ("simplegraphs.core._Connection", "Connection"),
    "EdgeType": ("simplegraphs.core._helpers", "EdgeType"),
    # Errors
    "GraphError": ("simplegraphs.core._helpers", "GraphError"),
    "InvalidArgumentError": ("simplegraphs.core._helpers", "InvalidArgumentError"),
    "UnsupportedOperationError": ("simplegraphs.core._helpers", "UnsupportedOperationError"),
    # Algorithms
    "Algorithms": ("simplegraphs.algorithms.engine", "Algorithms"),
    "zero_heuristic": ("simplegraphs.algorithms.paths", "zero_heuristic"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("simplegraphs")
except PackageNotFoundError:
    __version__ = "0.0.0"
