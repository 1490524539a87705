"""Declarative factory configuration validated with Pydantic."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .factory import TemplateFactory
from .handlers import HandlerDefinition, default_handlers
from .template.base import Template

logger = logging.getLogger(__name__)


def _import_renderer(path: str) -> Any:
    if ":" in path:
        module_path, _, attr = path.partition(":")
    else:
        module_path, _, attr = path.rpartition(".")
    if not module_path or not attr:
        msg = f"invalid renderer path '{path}'. Expected 'package.module:ClassName'."
        raise ValueError(msg)
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        msg = f"cannot import module '{module_path}' for renderer '{path}': {exc}"
        raise ValueError(msg) from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        msg = f"module '{module_path}' has no renderer named '{attr}'."
        raise ValueError(msg) from exc


class HandlerConfig(BaseModel):
    """Renderer class and default options for one extension."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    renderer: type[Template]
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("renderer", mode="before")
    @classmethod
    def _resolve_renderer(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _import_renderer(value)
        return value

    def to_definition(self) -> HandlerDefinition:
        return HandlerDefinition(renderer=self.renderer, options=dict(self.options))


class TemplatingConfig(BaseModel):
    """
    Configuration for a :class:`TemplateFactory`.

    Example::

        config = TemplatingConfig.from_mapping(
            {
                "path": "/srv/app/templates",
                "handlers": {
                    "html": {
                        "renderer": "cqrs_ddd_templating.engines.jinja:JinjaTemplate",
                        "options": {"autoescape": True},
                    },
                },
            }
        )
        factory = config.build_factory()
    """

    model_config = ConfigDict(frozen=True)

    path: str
    handlers: dict[str, HandlerConfig] = Field(default_factory=dict)
    include_default_handlers: bool = True

    @field_validator("handlers", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        normalized: dict[str, Any] = {}
        for raw_extension, handler in value.items():
            extension = str(raw_extension).lstrip(".")
            if not extension or "." in extension or "/" in extension:
                msg = f"invalid template extension '{raw_extension}'."
                raise ValueError(msg)
            normalized[extension] = handler
        return normalized

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> TemplatingConfig:
        return cls.model_validate(data)

    def build_factory(self) -> TemplateFactory:
        """Create a factory with the default and the configured handlers."""
        handlers = default_handlers() if self.include_default_handlers else {}
        for extension, handler in self.handlers.items():
            handlers[extension] = handler.to_definition()
        logger.debug(
            "Building template factory for %s with handlers %s",
            self.path,
            ", ".join(handlers),
        )
        return TemplateFactory(self.path, handlers=handlers)
