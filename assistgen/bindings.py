"""Per-element record of generated instance names."""

from __future__ import annotations

import logging
from typing import Any
from weakref import WeakKeyDictionary


logger = logging.getLogger(__name__)


class BindingRegistry:
    """Maps design elements to the variable names generated for them.

    Names are kept in generation order and never deduplicated. Elements are
    held weakly, so a registry never keeps a deleted element alive.
    """

    def __init__(self) -> None:
        self._bindings: WeakKeyDictionary[Any, list[str]] = WeakKeyDictionary()

    def record_binding(self, element: Any, name: str) -> None:
        self._bindings.setdefault(element, []).append(name)
        logger.debug("Bound %r to %r", name, element)

    def bindings_for(self, element: Any) -> list[str]:
        try:
            return list(self._bindings.get(element, ()))
        except TypeError:
            return []

    def __contains__(self, element: Any) -> bool:
        try:
            return element in self._bindings
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._bindings)
