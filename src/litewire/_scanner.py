from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from typing import TYPE_CHECKING

from ._markers import is_component


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from types import ModuleType


def discover_types(
    package: str | ModuleType,
    predicate: Callable[[type], bool] = is_component,
) -> set[type]:
    """Collect the classes defined under ``package`` that satisfy ``predicate``.

    ``package`` is a dotted name or an imported module. Packages are walked
    recursively; classes merely imported into a module are ignored so that each
    class is found once, in the module that defines it.
    """
    root = importlib.import_module(package) if isinstance(package, str) else package

    found: set[type] = set()
    for module in _iter_modules(root):
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if obj.__module__ != module.__name__:
                continue
            if predicate(obj):
                found.add(obj)

    logger.debug("Discovered %d component type(s) under %s", len(found), root.__name__)
    return found


def _iter_modules(root: ModuleType) -> Iterator[ModuleType]:
    yield root

    path = getattr(root, "__path__", None)
    if path is None:
        return

    for info in pkgutil.walk_packages(path, prefix=f"{root.__name__}."):
        yield importlib.import_module(info.name)
