"""MarkupService — render, strip, and excerpt user-authored markup.

Wraps :class:`~bbmark.domain.engine.MarkupEngine` in the ServiceResult
contract and applies the settings that the engine itself knows nothing
about: the default case mode for rendering, the optional input-length
bound, and excerpt sizing.
"""

from __future__ import annotations

import logging
import re

from bbmark.services._helpers import collapse_whitespace, truncate_words
from bbmark.services.base import BaseService
from bbmark.services.result import ServiceResult, failure
from bbmark.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class MarkupService(BaseService):
    """Markup transformations for display, indexing, and previews."""

    # ------------------------------------------------------------------
    # render / strip
    # ------------------------------------------------------------------

    @traced
    def render(self, text: str | None, *, case_insensitive: bool | None = None) -> ServiceResult:
        """Render markup to hypertext.

        *case_insensitive* defaults to ``[engine] case_insensitive``.
        """
        op = "render"
        source = text or ""
        rejected = self._check_length(op, source)
        if rejected is not None:
            return rejected
        if case_insensitive is None:
            case_insensitive = self._settings.engine.case_insensitive

        with trace_span("engine.render") as span:
            output = self._engine.render(source, case_insensitive)
            if span:
                span.annotate("rules", len(self._engine.registry))
                span.annotate("input_chars", len(source))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "output": output,
                "length": len(output),
                "case_insensitive": case_insensitive,
            },
        )

    @traced
    def strip(self, text: str | None) -> ServiceResult:
        """Strip markup down to its plain-text content."""
        op = "strip"
        source = text or ""
        rejected = self._check_length(op, source)
        if rejected is not None:
            return rejected

        with trace_span("engine.strip") as span:
            output = self._engine.strip(source)
            if span:
                span.annotate("rules", len(self._engine.registry))
                span.annotate("input_chars", len(source))

        return ServiceResult(ok=True, op=op, data={"output": output, "length": len(output)})

    # ------------------------------------------------------------------
    # excerpt: plain-text preview
    # ------------------------------------------------------------------

    @traced
    def excerpt(
        self,
        text: str | None,
        *,
        length: int | None = None,
        suffix: str | None = None,
    ) -> ServiceResult:
        """Plain-text preview of a post.

        Strips markup, collapses whitespace to single spaces, then cuts on
        a word boundary. *length* and *suffix* default to ``[excerpt]``.
        """
        op = "excerpt"
        length = self._settings.excerpt.length if length is None else length
        suffix = self._settings.excerpt.suffix if suffix is None else suffix
        if length <= 0:
            return failure(
                op,
                "INVALID_ARGUMENT",
                f"Excerpt length must be positive, got {length}",
                length=length,
            )

        source = text or ""
        rejected = self._check_length(op, source)
        if rejected is not None:
            return rejected

        with trace_span("engine.strip"):
            plain = collapse_whitespace(self._engine.strip(source))
        output, truncated = truncate_words(plain, length, suffix)

        return ServiceResult(
            ok=True,
            op=op,
            data={"output": output, "truncated": truncated, "length": len(output)},
        )

    # ------------------------------------------------------------------
    # list_rules: registry introspection
    # ------------------------------------------------------------------

    @traced
    def list_rules(self) -> ServiceResult:
        """Describe the active rule table in application order."""
        items = [
            {
                "id": entry.id,
                "pattern": entry.rule.pattern,
                "multiline": bool(entry.rule.flags & re.DOTALL),
            }
            for entry in self._engine.registry
        ]
        return ServiceResult(ok=True, op="list_rules", data={"count": len(items), "items": items})

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_length(self, op: str, source: str) -> ServiceResult | None:
        """Return a failure result if *source* exceeds ``max_input_length``."""
        limit = self._settings.engine.max_input_length
        if limit is None or len(source) <= limit:
            return None
        logger.debug("Rejected %s input of %d chars (limit %d)", op, len(source), limit)
        return failure(
            op,
            "INPUT_TOO_LARGE",
            f"Input is {len(source)} characters; the limit is {limit}",
            length=len(source),
            limit=limit,
        )
