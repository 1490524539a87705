"""Zero-dependency string format template engine."""

from __future__ import annotations

import io
import logging
from typing import Any

from ..sources import read_source
from ..template.base import Template
from ..template.partials import PartialRenderingMixin

logger = logging.getLogger(__name__)


class StringFormatTemplate(PartialRenderingMixin, Template):
    """
    Template rendered with Python's ``str.format_map``.
    No external dependencies.

    Options:

    * ``encoding`` — source file encoding, ``"utf-8"`` by default.
    * ``keep_trailing_newline`` — keep the newline ending the source file.
    """

    def _render(self) -> str:
        scope: dict[str, Any] = dict(self._attributes)

        with io.StringIO() as buffer:
            try:
                buffer.write(self._load_body().format_map(scope))
            except KeyError as e:
                logger.error(f"Missing template variable {e} in {self.source_path}")
                raise
            except Exception as e:
                logger.error(f"Template rendering failed for {self.source_path}: {e}")
                raise
            content_for_layout = buffer.getvalue()

        if self._layout is not None:
            return self._layout.render({**scope, "content_for_layout": content_for_layout})

        return content_for_layout

    def _load_body(self) -> str:
        body = read_source(self.source_path, self._options.get("encoding", "utf-8"))
        if not self._options.get("keep_trailing_newline", False) and body.endswith("\n"):
            body = body[:-1]
        return body
