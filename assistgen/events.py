"""Notification channel shared with the editor shell."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable


Listener = Callable[[Any], None]


class EVENTS:
    REPLACE_CODE_VIEW = "ReplaceCodeView"
    EXTERNAL_RESOURCES_LOADED = "ExternalResourcesLoaded"


class EventEmitter:
    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def on(self, event: str, listener: Listener) -> Listener:
        self._listeners[event].append(listener)
        return listener

    def once(self, event: str, listener: Listener) -> Listener:
        def wrapper(payload: Any) -> None:
            self.off(event, wrapper)
            listener(payload)

        return self.on(event, wrapper)

    def off(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: str, payload: Any = None) -> int:
        """Call every listener of ``event`` in subscription order."""
        listeners = list(self._listeners.get(event, ()))
        for listener in listeners:
            listener(payload)
        return len(listeners)
