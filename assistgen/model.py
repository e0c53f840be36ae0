"""Document model interface consumed by the generators."""

from __future__ import annotations

from typing import Protocol


class DocumentModel(Protocol):
    def update_attribute(self, data_id: str | None, attribute_name: str, value: str) -> None:
        ...


class InMemoryDocumentModel:
    """Attribute store standing in for the design surface's document model."""

    def __init__(self) -> None:
        self._attributes: dict[str | None, dict[str, str]] = {}
        self.calls: list[tuple[str | None, str, str]] = []

    def update_attribute(self, data_id: str | None, attribute_name: str, value: str) -> None:
        self.calls.append((data_id, attribute_name, value))
        self._attributes.setdefault(data_id, {})[attribute_name] = value

    def attributes(self, data_id: str | None) -> dict[str, str]:
        return dict(self._attributes.get(data_id, {}))
