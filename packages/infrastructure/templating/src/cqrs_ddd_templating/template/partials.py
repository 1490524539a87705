"""Partial rendering helpers shared by the template engines."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ..factory import TemplateFactory


class PartialRenderingMixin:
    """Render other templates from within a template.

    Partials inherit the calling template's attributes; explicitly passed
    attributes take precedence.
    """

    _factory: TemplateFactory
    _attributes: dict[str, Any]

    def render_partial(
        self,
        partial: Any,
        attributes: Mapping[str, Any] | None = None,
    ) -> str:
        """Render the partial template *partial*."""
        return self._factory.render(partial, {**self._attributes, **(attributes or {})})

    def render_partial_collection(
        self,
        partial: Any,
        collection: Iterable[Any],
        spacer: Any = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> str:
        """Render *partial* once for every member of *collection*.

        The member is bound to a variable named like the partial's file,
        without extension. With ``entry.txt`` containing ``<li>{entry}</li>``::

            template.render_partial_collection("entry", ["lorem", "ipsum"])
            # "<li>lorem</li><li>ipsum</li>"

        If *spacer* names a template, it is rendered once with *attributes*
        and placed between the members.
        """
        template = self._factory.open(partial)
        template.set_attributes(self._attributes)
        template.set_attributes(attributes)

        iterator_name = _iterator_name(partial)
        collected = [template.render({iterator_name: element}) for element in collection]

        separator = "" if spacer is None else self.render_partial(spacer, attributes)
        return separator.join(collected)


def _iterator_name(partial: Any) -> str:
    location = partial if isinstance(partial, str) else partial.source_path
    return PurePosixPath(location).stem
