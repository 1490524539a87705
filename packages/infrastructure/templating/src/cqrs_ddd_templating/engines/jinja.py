"""Jinja2 template engine."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Any

from ..sources import read_source
from ..template.base import Template
from ..template.partials import PartialRenderingMixin

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..factory import TemplateFactory

logger = logging.getLogger(__name__)

_JinjaEnvironmentClass: type[Any] | None = None
try:
    from jinja2 import Environment, StrictUndefined

    _JinjaEnvironmentClass = Environment
    _JINJA2_AVAILABLE = True
except ImportError:
    _JINJA2_AVAILABLE = False

_ENGINE_OPTIONS = frozenset({"encoding"})


class JinjaTemplate(PartialRenderingMixin, Template):
    """
    Template rendered with the Jinja2 engine.

    Template bodies can call ``render_partial`` and
    ``render_partial_collection``. Variables assigned at the top level with
    ``{% set %}`` are passed on to the layout together with
    ``content_for_layout``.

    Options other than ``encoding`` are passed to the Jinja2 ``Environment``;
    ``undefined`` defaults to ``StrictUndefined``.
    """

    def __init__(
        self,
        source_path: str,
        factory: TemplateFactory,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        if not _JINJA2_AVAILABLE or _JinjaEnvironmentClass is None:
            raise ImportError(
                "Jinja2 is required. Install with: pip install 'cqrs-ddd-templating[jinja2]'"
            )
        super().__init__(source_path, factory, options)

    def _render(self) -> str:
        assert _JinjaEnvironmentClass is not None  # ensured by __init__
        scope: dict[str, Any] = dict(self._attributes)

        with io.StringIO() as buffer:
            try:
                compiled = self._environment().from_string(self._load_body())
                module = compiled.make_module(
                    {
                        **scope,
                        "render_partial": self.render_partial,
                        "render_partial_collection": self.render_partial_collection,
                    }
                )
                buffer.write(str(module))
            except Exception as e:
                logger.error(f"Jinja2 rendering failed for {self.source_path}: {e}")
                raise
            content_for_layout = buffer.getvalue()

        if self._layout is not None:
            exported = {
                name: value
                for name, value in vars(module).items()
                if not name.startswith("_")
            }
            return self._layout.render(
                {**scope, **exported, "content_for_layout": content_for_layout}
            )

        return content_for_layout

    def _environment(self) -> Any:
        assert _JinjaEnvironmentClass is not None
        settings = {
            key: value
            for key, value in self._options.items()
            if key not in _ENGINE_OPTIONS
        }
        settings.setdefault("undefined", StrictUndefined)
        settings.setdefault("autoescape", False)
        return _JinjaEnvironmentClass(**settings)

    def _load_body(self) -> str:
        return read_source(self.source_path, self._options.get("encoding", "utf-8"))
