"""Errors raised while generating assistant code."""

from __future__ import annotations

from typing import Sequence


class AssistantCodeError(Exception):
    """Base class for errors surfaced to assistant wizard callers."""


class IntentError(AssistantCodeError, ValueError):
    """Raised when an intent is missing fields a statement needs."""


class InvalidReuseRequest(AssistantCodeError, LookupError):
    """Raised when ``use_exist`` names a binding the element never had."""

    def __init__(self, name: str | None, available: Sequence[str]) -> None:
        self.name = name
        self.available = list(available)
        choices = ", ".join(self.available) or "none"
        super().__init__(f"Cannot reuse instance {name!r}; known instances: {choices}")


class TemplateError(AssistantCodeError):
    """Raised when a statement template cannot be compiled."""
