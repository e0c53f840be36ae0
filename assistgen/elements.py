"""Design surface element handles."""

from __future__ import annotations

from typing import Any


def _attribute_name(name: str) -> str:
    return name.replace("_", "-")


class DesignElement:
    """Handle for a node on the design surface.

    Elements compare by identity so they can key the binding registry, and
    carry only the attributes the generator reads: ``id`` for the stable
    identifier and ``data-id`` for addressing the node in the document model.
    """

    def __init__(self, tag: str = "div", *, data_id: str | None = None, **attributes: Any) -> None:
        self.tag = tag
        self.attributes: dict[str, str] = {
            _attribute_name(key): str(value) for key, value in attributes.items()
        }
        if data_id is not None:
            self.attributes["data-id"] = str(data_id)

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = str(value)

    def has_attribute(self, name: str) -> bool:
        return bool(self.attributes.get(name))

    @property
    def data_id(self) -> str | None:
        return self.attributes.get("data-id")

    @property
    def element_id(self) -> str | None:
        return self.attributes.get("id") or None

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag, "attributes": dict(self.attributes)}

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.tag} data-id={self.data_id!r} id={self.element_id!r}>"
