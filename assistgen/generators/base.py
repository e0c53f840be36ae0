"""Base classes for generators."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping

from ..bindings import BindingRegistry
from ..errors import IntentError, InvalidReuseRequest
from ..events import EVENTS, EventEmitter
from ..intents import Intent
from ..templating import LINE_ENDINGS, JinjaRenderer, Renderer


logger = logging.getLogger(__name__)

DEFAULT_ID_KEYWORD = "closet-component"


class SnippetGeneratorBase:
    """Identifier minting, binding bookkeeping and DOM statements.

    Subclasses provide ``templates``, a closed mapping of statement names to
    template text. At minimum ``variable``, ``query_selector`` and
    ``listener`` are required by the operations defined here.
    """

    key = ""
    templates: dict[str, str] = {}

    def __init__(
        self,
        *,
        line_ending: str = "\n",
        id_keyword: str = DEFAULT_ID_KEYWORD,
        emitter: EventEmitter | None = None,
        renderer: Renderer | None = None,
        bindings: BindingRegistry | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if line_ending not in LINE_ENDINGS:
            raise ValueError(f"Unsupported line ending {line_ending!r}")
        self.line_ending = line_ending
        self.id_keyword = id_keyword
        self.emitter = emitter if emitter is not None else EventEmitter()
        self.renderer = renderer if renderer is not None else JinjaRenderer(line_ending)
        self.bindings = bindings if bindings is not None else BindingRegistry()
        self._clock = clock

    def _render(self, template_name: str, variables: Mapping[str, Any] | None = None) -> str:
        return self.renderer.render(self.templates[template_name], variables or {})

    def _complete_sentence(self, body: str) -> str:
        return f"{body};{self.line_ending}"

    def _generate_id(self) -> str:
        return f"{self.id_keyword}-{int(self._clock() * 1000)}"

    def ensure_identifier(self, element: Any, model: Any) -> str:
        """Return the element's ``id``, minting ``<keyword>-<ms>`` when it has none.

        The model always receives the resolved id, and a freshly minted id
        also triggers a code view refresh.
        """
        element_id = element.get_attribute("id")
        if not element_id:
            element_id = self._generate_id()
            element.set_attribute("id", element_id)
            logger.info("Minted id %s for element %s", element_id, element.get_attribute("data-id"))
            self.emitter.emit(EVENTS.REPLACE_CODE_VIEW)
        model.update_attribute(element.get_attribute("data-id"), "id", element_id)
        return element_id

    def selector_expression(self, element: Any, model: Any) -> str:
        return self._render("query_selector", {"id": self.ensure_identifier(element, model)})

    def variable_binding(self, name: str, element: Any, model: Any) -> str:
        selector = self.selector_expression(element, model)
        return f"{self._render('variable', {'varName': name})}{selector}"

    def _reused_name(self, element: Any, intent: Intent) -> str | None:
        """Name to reuse for ``element``, or None when a fresh statement is due."""
        existing = self.bindings.bindings_for(element)
        if not (existing and intent.use_exist):
            return None
        if intent.name in existing:
            return intent.name
        raise InvalidReuseRequest(intent.name, existing)

    def get_instance(self, element: Any, intent: Intent | Mapping[str, Any] | None, model: Any) -> str:
        intent = Intent.coerce(intent)
        result = self._reused_name(element, intent)
        if result is None:
            if intent.name:
                result = self.variable_binding(intent.name, element, model)
                self.bindings.record_binding(element, intent.name)
            else:
                result = self.selector_expression(element, model)
        return self._complete_sentence(result)

    def get_event_listener(self, element: Any, intent: Intent | Mapping[str, Any], model: Any) -> str:
        intent = Intent.coerce(intent)
        if not intent.type:
            raise IntentError("Event listener intent requires an event `type`")
        instance = self._reused_name(element, intent)
        if instance is None:
            instance = self.selector_expression(element, model)
        listener = self._render("listener", {"type": intent.type, "content": intent.content or ""})
        return self._complete_sentence(instance + listener)

    def get_instance_list_from_map(self, element: Any) -> list[str]:
        return self.bindings.bindings_for(element)
