"""HandlerDefinition — renderer registered for a template file extension."""

from __future__ import annotations

import importlib.util
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .engines.string import StringFormatTemplate

if TYPE_CHECKING:
    from collections.abc import Callable

    from .factory import TemplateFactory
    from .template.base import Template


def _default_options() -> dict[str, Any]:
    return {}


@dataclass
class HandlerDefinition:
    """Descriptor for a template handler.

    *renderer* is a Template subclass or any callable with the same
    constructor signature ``(source_path, factory, options)``.
    """

    renderer: Callable[..., Template]
    options: dict[str, Any] = field(default_factory=_default_options)

    @property
    def name(self) -> str:
        return getattr(self.renderer, "__name__", repr(self.renderer))

    def build(self, source_path: str, factory: TemplateFactory) -> Template:
        """Construct the template instance bound to *source_path*."""
        return self.renderer(source_path, factory, dict(self.options))


def default_handlers() -> dict[str, HandlerDefinition]:
    """Return the handler table a factory starts with.

    ``txt`` files use the string-format engine; ``j2`` files are handled by
    Jinja2 when it is installed.
    """
    handlers = {"txt": HandlerDefinition(StringFormatTemplate)}

    if importlib.util.find_spec("jinja2") is not None:
        from .engines.jinja import JinjaTemplate

        handlers["j2"] = HandlerDefinition(JinjaTemplate)

    return handlers
