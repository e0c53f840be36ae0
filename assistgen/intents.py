"""Wizard intents describing the statement a caller wants generated."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from .errors import IntentError


_INTENT_KEYS = {
    "name": "name",
    "useExist": "use_exist",
    "use_exist": "use_exist",
    "type": "type",
    "content": "content",
    "url": "url",
    "transition": "transition",
    "widgetInfo": "widget_info",
    "widget_info": "widget_info",
}

_WIDGET_KEYS = {
    "constructorName": "constructor_name",
    "constructor_name": "constructor_name",
    "name": "name",
    "options": "options",
}


def _rename(payload: Mapping[str, Any], keys: dict[str, str]) -> dict[str, Any]:
    return {keys[key]: value for key, value in payload.items() if key in keys}


def _option_pairs(options: Iterable[Any] | Mapping[str, Any] | None) -> list[tuple[str, Any]]:
    if not options:
        return []
    if isinstance(options, Mapping):
        return [(str(key), value) for key, value in options.items()]
    pairs: list[tuple[str, Any]] = []
    for option in options:
        try:
            key, value = option
        except (TypeError, ValueError) as exc:
            raise IntentError(f"Widget option must be a (key, value) pair, got {option!r}") from exc
        pairs.append((str(key), value))
    return pairs


class WidgetInfo:
    def __init__(
        self,
        *,
        constructor_name: str | None = None,
        name: str | None = None,
        options: Iterable[Any] | Mapping[str, Any] | None = None,
    ) -> None:
        self.constructor_name = constructor_name
        self.name = name
        self.options = _option_pairs(options)

    @classmethod
    def coerce(cls, value: Any) -> "WidgetInfo | None":
        if value is None or isinstance(value, WidgetInfo):
            return value
        if isinstance(value, Mapping):
            return cls(**_rename(value, _WIDGET_KEYS))
        raise IntentError(f"widgetInfo must be a mapping, got {type(value).__name__}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "constructorName": self.constructor_name,
            "name": self.name,
            "options": [list(pair) for pair in self.options],
        }


class Intent:
    """Request descriptor sent by the assistant wizard.

    ``name`` and ``use_exist`` apply to every statement kind; ``type`` and
    ``content`` to listeners; ``url`` and ``transition`` to page transitions;
    ``widget_info`` to widget constructors.
    """

    def __init__(
        self,
        *,
        name: str | None = None,
        use_exist: bool = False,
        type: str | None = None,
        content: str | None = None,
        url: str | None = None,
        transition: str | None = None,
        widget_info: WidgetInfo | Mapping[str, Any] | None = None,
    ) -> None:
        self.name = name
        self.use_exist = bool(use_exist)
        self.type = type
        self.content = content
        self.url = url
        self.transition = transition
        self.widget_info = WidgetInfo.coerce(widget_info)

    @classmethod
    def coerce(cls, value: Any) -> "Intent":
        """Build an intent from ``None``, an ``Intent`` or a wizard mapping."""
        if value is None:
            return cls()
        if isinstance(value, Intent):
            return value
        if isinstance(value, Mapping):
            return cls(**_rename(value, _INTENT_KEYS))
        raise IntentError(f"Intent must be a mapping, got {type(value).__name__}")

    def replace(self, **changes: Any) -> "Intent":
        fields = {
            "name": self.name,
            "use_exist": self.use_exist,
            "type": self.type,
            "content": self.content,
            "url": self.url,
            "transition": self.transition,
            "widget_info": self.widget_info,
        }
        fields.update(changes)
        return Intent(**fields)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "useExist": self.use_exist,
            "type": self.type,
            "content": self.content,
            "url": self.url,
            "transition": self.transition,
        }
        if self.widget_info is not None:
            payload["widgetInfo"] = self.widget_info.to_dict()
        return payload
