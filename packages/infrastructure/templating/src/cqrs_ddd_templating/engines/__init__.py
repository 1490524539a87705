"""Template rendering engines."""

from __future__ import annotations

from .jinja import JinjaTemplate
from .string import StringFormatTemplate

__all__ = ["JinjaTemplate", "StringFormatTemplate"]
