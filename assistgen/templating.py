"""Template rendering for statement templates."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from jinja2 import Environment, Template, TemplateSyntaxError

from .errors import TemplateError


logger = logging.getLogger(__name__)

LINE_ENDINGS = ("\n", "\r\n", "\r")


class Renderer(Protocol):
    def render(self, template: str, variables: Mapping[str, Any] | None = None) -> str:
        ...


class JinjaRenderer:
    """Renders double-brace templates with jinja2.

    Output is HTML-escaped like a mustache renderer would do it, so an
    apostrophe comes back as ``&#39;``. Unknown variables render empty.
    """

    def __init__(self, line_ending: str = "\n") -> None:
        if line_ending not in LINE_ENDINGS:
            raise ValueError(f"Unsupported line ending {line_ending!r}")
        self.env = Environment(
            autoescape=True,
            newline_sequence=line_ending,
            keep_trailing_newline=True,
        )
        self._compiled: dict[str, Template] = {}

    def _template(self, source: str) -> Template:
        template = self._compiled.get(source)
        if template is None:
            try:
                template = self.env.from_string(source)
            except TemplateSyntaxError as exc:
                raise TemplateError(f"Invalid statement template: {exc}") from exc
            logger.debug("Compiled statement template %r", source)
            self._compiled[source] = template
        return template

    def render(self, template: str, variables: Mapping[str, Any] | None = None) -> str:
        return self._template(template).render(**dict(variables or {}))
