"""TAU web widget toolkit generator."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..errors import IntentError
from ..intents import Intent
from .base import SnippetGeneratorBase


_SENTENCES = {
    "variable": "var {{ varName }} = ",
    "query_selector": "document.getElementById('{{ id }}')",
    "listener": (
        ".addEventListener('{{ type }}', function(event) {\n"
        "        {{ content|safe }}\n"
        "        //::write down your own handler in here::\n"
        "        })"
    ),
    "page_transition": "tau.changePage('{{ url }}', {transition: '{{ transition }}'});",
    "popup_open": "tau.openPopup('{{ url }}');",
    "tau_widget": "var {{ varName }} = {{ constructorName }}({{ targetElement }});",
    "tau_widget_with_options": (
        "var {{ varName }} = {{ constructorName }}({{ targetElement }}, {\n"
        "{{ options|safe }}});"
    ),
    "widget_option": "\t{{ key|safe }}: {{ value|safe }}",
}

_ESCAPED_APOSTROPHE = "&#39;"


def _js_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


class TAUSnippetGenerator(SnippetGeneratorBase):
    """Generates the snippets offered by the TAU assistant wizard."""

    key = "tau"
    templates = _SENTENCES

    def _widget_option_sentence(self, options: Sequence[tuple[str, Any]]) -> str:
        return "".join(
            self._render("widget_option", {"key": key, "value": _js_value(value)}) + self.line_ending
            for key, value in options
        )

    def get_tau_widget(self, element: Any, intent: Intent | Mapping[str, Any], model: Any) -> str:
        """Render ``var <name> = <constructor>(<target>[, {options}]);``.

        The widget templates already end in ``;`` so only the line ending is
        appended. The target element's bindings are read for reuse but the
        widget variable itself is not recorded.
        """
        intent = Intent.coerce(intent)
        widget = intent.widget_info
        if widget is None:
            raise IntentError("TAU widget intent requires `widgetInfo`")
        if not widget.constructor_name:
            raise IntentError("TAU widget intent requires `widgetInfo.constructorName`")
        if not widget.name:
            raise IntentError("TAU widget intent requires `widgetInfo.name`")

        target = self._reused_name(element, intent)
        if target is None:
            target = self.selector_expression(element, model)

        template = "tau_widget_with_options" if widget.options else "tau_widget"
        code = self._render(
            template,
            {
                "varName": widget.name,
                "constructorName": widget.constructor_name,
                "targetElement": target,
                "options": self._widget_option_sentence(widget.options),
            },
        )
        return code.replace(_ESCAPED_APOSTROPHE, "'") + self.line_ending

    def get_page_transition(self, element: Any, intent: Intent | Mapping[str, Any], model: Any) -> str:
        intent = Intent.coerce(intent)
        if not intent.url:
            raise IntentError("Page transition intent requires a target `url`")
        content = self._render(
            "page_transition", {"url": intent.url, "transition": intent.transition or ""}
        )
        return self.get_event_listener(element, intent.replace(content=content), model)

    def get_popup_open(self, element: Any, intent: Intent | Mapping[str, Any], model: Any) -> str:
        intent = Intent.coerce(intent)
        content = self._render("popup_open", {"url": intent.url or ""})
        return self.get_event_listener(element, intent.replace(content=content), model)
