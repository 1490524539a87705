"""Abstract Template — attributes, layout and the render entry point."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..factory import TemplateFactory

logger = logging.getLogger(__name__)


class Template(ABC):
    """Presentation of one template file.

    Output is customized by attributes which the template body can read.
    Attributes are also reachable through item access::

        template["whom"] = "World"
        "whom" in template      # True
        del template["whom"]

    Subclasses implement :meth:`_render` for one template format.
    """

    def __init__(
        self,
        source_path: str,
        factory: TemplateFactory,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._source_path = source_path
        self._factory = factory
        self._options: dict[str, Any] = dict(options or {})
        self._attributes: dict[str, Any] = {}
        self._layout: Template | None = None

        self.clear_attributes()
        self.set_layout(None)

    # ── Properties ───────────────────────────────────────────────

    @property
    def source_path(self) -> str:
        return self._source_path

    @property
    def factory(self) -> TemplateFactory:
        return self._factory

    @property
    def options(self) -> dict[str, Any]:
        return self._options

    @property
    def layout(self) -> Template | None:
        return self._layout

    # ── Rendering ────────────────────────────────────────────────

    def render(
        self,
        attributes: Mapping[str, Any] | None = None,
        layout: Any = None,
    ) -> str:
        """Merge *attributes*, optionally replace the layout, and render.

        Attributes are merged before rendering starts, so they stay merged
        even if rendering fails.
        """
        if layout is not None:
            self.set_layout(layout)

        self.set_attributes(attributes)

        logger.debug("Rendering %s", self._source_path)
        return self._render()

    @abstractmethod
    def _render(self) -> str:
        """Render the template body (and layout, if any)."""

    # ── Attributes ───────────────────────────────────────────────

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def get_attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def set_attributes(self, attributes: Mapping[str, Any] | None) -> None:
        """Merge *attributes* into the current ones; new values win."""
        self._attributes = {**self._attributes, **(attributes or {})}

    def clear_attributes(self) -> None:
        self._attributes = {}

    def clear_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)

    def __getitem__(self, name: str) -> Any:
        return self._attributes[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_attribute(name, value)

    def __delitem__(self, name: str) -> None:
        del self._attributes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    # ── Layout ───────────────────────────────────────────────────

    def set_layout(self, layout: Any) -> None:
        """Set the layout from a template name, a Template, or None."""
        self._layout = self._factory.open(layout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source_path!r})"
