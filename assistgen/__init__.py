"""assistgen public API."""

from .bindings import BindingRegistry
from .elements import DesignElement
from .errors import AssistantCodeError, IntentError, InvalidReuseRequest, TemplateError
from .events import EVENTS, EventEmitter
from .generators.base import SnippetGeneratorBase
from .generators.registry import create_generator, get_generator, list_generators, register_generator
from .generators.tau import TAUSnippetGenerator
from .intents import Intent, WidgetInfo
from .model import InMemoryDocumentModel
from .resources import ExternalResourcesManager, ResourceNode
from .templating import JinjaRenderer

# Ensure built-in generators register on import.
from . import generators as _builtin_generators  # noqa: F401

__all__ = [
    "AssistantCodeError",
    "BindingRegistry",
    "DesignElement",
    "EVENTS",
    "EventEmitter",
    "ExternalResourcesManager",
    "InMemoryDocumentModel",
    "Intent",
    "IntentError",
    "InvalidReuseRequest",
    "JinjaRenderer",
    "ResourceNode",
    "SnippetGeneratorBase",
    "TAUSnippetGenerator",
    "TemplateError",
    "WidgetInfo",
    "create_generator",
    "get_generator",
    "list_generators",
    "register_generator",
]
