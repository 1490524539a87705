"""Template resolution and layout composition for CQRS/DDD applications."""

from __future__ import annotations

from .config import HandlerConfig, TemplatingConfig
from .engines.jinja import JinjaTemplate
from .engines.string import StringFormatTemplate
from .exceptions import HandlerResolutionError, TemplateNotFoundError, TemplatingError
from .factory import TemplateFactory
from .handlers import HandlerDefinition, default_handlers
from .template import PartialRenderingMixin, Template

__all__ = [
    "HandlerConfig",
    "HandlerDefinition",
    "HandlerResolutionError",
    "JinjaTemplate",
    "PartialRenderingMixin",
    "StringFormatTemplate",
    "Template",
    "TemplateFactory",
    "TemplateNotFoundError",
    "TemplatingConfig",
    "TemplatingError",
    "default_handlers",
]
