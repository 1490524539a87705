"""Template base class and composition helpers."""

from __future__ import annotations

from .base import Template
from .partials import PartialRenderingMixin

__all__ = [
    "PartialRenderingMixin",
    "Template",
]
