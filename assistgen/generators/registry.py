"""Generator registry."""

from __future__ import annotations

from typing import Any

from .base import SnippetGeneratorBase


_GENERATORS: dict[str, type[SnippetGeneratorBase]] = {}


def register_generator(generator: type[SnippetGeneratorBase], *, replace: bool = False) -> None:
    key = generator.key
    if not key:
        raise ValueError("Generator key must be a non-empty string")
    if key in _GENERATORS and not replace:
        raise KeyError(f"Generator '{key}' is already registered")
    _GENERATORS[key] = generator


def get_generator(key: str) -> type[SnippetGeneratorBase]:
    try:
        return _GENERATORS[key]
    except KeyError as exc:
        raise KeyError(key) from exc


def create_generator(key: str, **options: Any) -> SnippetGeneratorBase:
    return get_generator(key)(**options)


def list_generators() -> list[str]:
    return sorted(_GENERATORS)
