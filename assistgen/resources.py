"""Tracking of external scripts and stylesheets loaded into the host document."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Protocol

from .events import EVENTS, EventEmitter


logger = logging.getLogger(__name__)


class ResourceNode:
    def __init__(self, tag: str, attributes: Mapping[str, str]) -> None:
        self.tag = tag
        self.attributes = dict(attributes)

    @property
    def src(self) -> str | None:
        return self.attributes.get("src") or self.attributes.get("href")

    def __repr__(self) -> str:
        return f"<ResourceNode {self.tag} {self.src!r}>"


class HostHead(Protocol):
    def has_resource(self, kind: str, src: str) -> bool:
        ...

    def append(self, node: ResourceNode) -> None:
        ...


def _extension(src: str) -> str:
    return src.rsplit(".", 1)[-1].lower() if "." in src else ""


def _resource_node(src: str) -> ResourceNode | None:
    kind = _extension(src)
    if kind == "js":
        return ResourceNode("script", {"type": "text/javascript", "src": src})
    if kind == "css":
        return ResourceNode("link", {"type": "text/css", "rel": "stylesheet", "href": src})
    return None


class ExternalResourcesManager:
    """Appends resources to the host head and reports when a batch has loaded.

    Every appended node stays pending under its batch name until the host
    calls :meth:`resource_loaded` for it; the last one emits
    ``EVENTS.EXTERNAL_RESOURCES_LOADED`` with ``{"name": name}``.
    """

    def __init__(self, head: HostHead, emitter: EventEmitter | None = None) -> None:
        self.head = head
        self.emitter = emitter if emitter is not None else EventEmitter()
        self._loading_progress: dict[str, list[ResourceNode]] = {}

    def load_external_resources(self, name: str, resources: Iterable[Any]) -> list[ResourceNode]:
        appended: list[ResourceNode] = []
        for resource in resources:
            if isinstance(resource, str):
                resource = {"src": resource}
            src = resource["src"]
            node = _resource_node(src)
            if node is None:
                logger.warning("Skipping resource %s with unsupported extension", src)
                continue
            if self.head.has_resource(node.tag, src):
                logger.debug("Resource %s already present in host document", src)
                continue
            for key, value in (resource.get("attributes") or {}).items():
                node.attributes[key] = value

            self._loading_progress.setdefault(name, []).append(node)
            self.head.append(node)
            appended.append(node)
        return appended

    def resource_loaded(self, name: str, node: ResourceNode) -> None:
        pending = self._loading_progress[name]
        try:
            pending.remove(node)
        except ValueError as exc:
            raise KeyError(f"{node!r} is not pending for {name!r}") from exc
        if not pending:
            del self._loading_progress[name]
            logger.info("External resources loaded for %s", name)
            self.emitter.emit(EVENTS.EXTERNAL_RESOURCES_LOADED, {"name": name})

    def pending(self, name: str) -> list[ResourceNode]:
        return list(self._loading_progress.get(name, ()))
