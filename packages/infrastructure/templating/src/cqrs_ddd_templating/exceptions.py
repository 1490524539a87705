"""Exception hierarchy for templating."""

from __future__ import annotations


class TemplatingError(Exception):
    """Base exception for template resolution and rendering failures."""


class TemplateNotFoundError(TemplatingError):
    """Raised when no template file matches a requested name."""

    def __init__(self, name: str, path: str | None) -> None:
        self.name = name
        self.path = path
        super().__init__(f'Missing template "{name}" in "{path}".')


class HandlerResolutionError(TemplatingError):
    """Raised when a resolved template file has no registered handler.

    Usage: TemplateFactory.open raises this for files whose extension was
    never registered with ``add_handler``.
    """

    def __init__(self, extension: str | None, template_file: str) -> None:
        self.extension = extension
        self.template_file = template_file
        super().__init__(
            f"No template handler registered for extension {extension!r} "
            f"(template file: {template_file})"
        )
