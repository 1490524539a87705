"""TemplateFactory — resolves template names and builds renderers."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from .exceptions import HandlerResolutionError, TemplateNotFoundError
from .handlers import HandlerDefinition, default_handlers
from .sources import is_absolute, path_exists

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .template.base import Template

logger = logging.getLogger(__name__)

_SEPARATOR = "/"
_EXTENSION_PATTERN = re.compile(r"\.([^/.]+)$")


class TemplateFactory:
    """Creates Template objects for template names below a base path.

    Resolution rules for :meth:`open`:

    * ``factory.open("/path/to/template")`` does not prepend the base path
      and searches for ``template.*`` in ``/path/to``.
    * ``factory.open("template")`` prepends the base path and searches there
      for ``template.*``, trying registered extensions in order.
    * ``factory.open("template.txt")`` prepends the base path and opens that
      exact file with the handler registered for ``txt``.

    Anything that is not a string is returned unchanged, so helpers accepting
    a template name also accept an already opened template.
    """

    def __init__(
        self,
        path: str,
        handlers: Mapping[str, HandlerDefinition] | None = None,
    ) -> None:
        self._path: str | None = None
        self._handlers: dict[str, HandlerDefinition] = dict(
            default_handlers() if handlers is None else handlers
        )
        self.set_path(path)

    # ── Base path ────────────────────────────────────────────────

    def set_path(self, path: str) -> str | None:
        """Set a new base path and return the previous one."""
        old_path = self._path
        self._path = path.rstrip(_SEPARATOR) + _SEPARATOR
        logger.debug("Template path changed from %s to %s", old_path, self._path)
        return old_path

    def get_path(self) -> str | None:
        return self._path

    @property
    def path(self) -> str | None:
        return self._path

    # ── Handlers ─────────────────────────────────────────────────

    def add_handler(
        self,
        extension: str,
        renderer: Callable[..., Template],
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Register *renderer* for template files ending in *extension*.

        A later registration for the same extension replaces the earlier one
        but keeps its position in the extension search order.
        """
        extension = extension.lstrip(".")
        self._handlers[extension] = HandlerDefinition(
            renderer=renderer, options=dict(options or {})
        )
        logger.debug(
            "Registered template handler %s for .%s",
            self._handlers[extension].name,
            extension,
        )

    def get_template_handler(self, template_file: str) -> HandlerDefinition | None:
        """Return the handler matching the file's extension, if any."""
        extension = self.get_extension(template_file)
        if extension is None:
            return None
        return self._handlers.get(extension)

    @property
    def handlers(self) -> dict[str, HandlerDefinition]:
        return dict(self._handlers)

    # ── Resolution ───────────────────────────────────────────────

    def open(self, template: Any) -> Any:
        """Open the template called *template*.

        Raises :class:`TemplateNotFoundError` when no file matches and
        :class:`HandlerResolutionError` when the matched file's extension has
        no handler.
        """
        if not isinstance(template, str):
            return template

        template_file = self.get_template_file(template)

        handler = self.get_template_handler(template_file)
        if handler is None:
            raise HandlerResolutionError(
                self.get_extension(template_file), template_file
            )

        logger.debug("Opening %s with %s", template_file, handler.name)
        return handler.build(template_file, self)

    def get_template_file(self, name: str) -> str:
        """Return the absolute filename of the template called *name*."""
        template = self.get_absolute_path(name)
        extension = self.get_extension(template)

        if extension is not None and path_exists(template):
            return template

        if extension is None or extension not in self._handlers:
            found = self.find_template(template)
            if found is not None:
                return found

        raise TemplateNotFoundError(name, self._path)

    def get_absolute_path(self, name: str) -> str:
        """Prepend the base path unless *name* is already absolute."""
        if is_absolute(name):
            return name
        return f"{self._path}{name}"

    def find_template(self, template: str) -> str | None:
        """Probe ``<template>.<ext>`` for each registered extension in order."""
        for extension in self._handlers:
            candidate = f"{template}.{extension}"
            if path_exists(candidate):
                return candidate
        return None

    @staticmethod
    def get_extension(template_file: str) -> str | None:
        """Return the file extension of the last path segment, if any."""
        match = _EXTENSION_PATTERN.search(template_file)
        return match.group(1) if match else None

    # ── Rendering ────────────────────────────────────────────────

    def render(
        self,
        name: Any,
        attributes: Mapping[str, Any] | None = None,
        layout: Any = None,
    ) -> str:
        """Open *name* and render it with *attributes* inside *layout*."""
        result: str = self.open(name).render(attributes, layout)
        return result
