"""Transformation engine — ordered single-pass substitution over a registry.

Both modes walk the registry once, in order.  Each rule replaces every
non-overlapping match in the current string, and the result is handed to
the next rule.  Earlier rules are never revisited, so text produced by a
later substitution is not re-scanned by an earlier one, and same-tag
nesting is not supported.

Malformed markup is never an error: a tag without its closing partner
simply does not match and passes through unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bbmark.domain.rules import default_registry

if TYPE_CHECKING:
    from bbmark.domain.rules import RuleRegistry

logger = logging.getLogger(__name__)


class MarkupEngine:
    """Render bracket-tag markup to hypertext or strip it to plain text.

    Stateless apart from the injected registry, which is itself immutable,
    so one engine may serve any number of concurrent callers.

    Usage::

        engine = MarkupEngine(default_registry())
        engine.render("[b]Hello[/b]")  # '<b>Hello</b>'
        engine.strip("[b]Hello[/b]")  # 'Hello'
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def render(self, source: str | None, case_insensitive: bool = False) -> str:
        """Convert markup to hypertext.

        Args:
            source: Markup text. ``None`` is treated as empty.
            case_insensitive: Match tag keywords regardless of case
                (``[B]`` as well as ``[b]``). Captured content is always
                kept verbatim.
        """
        return self._apply(source, case_insensitive=case_insensitive, strip=False)

    def strip(self, source: str | None) -> str:
        """Remove markup, keeping only the captured text.

        Tag keywords are always matched case-insensitively here, unlike
        :meth:`render` where the caller chooses.
        """
        return self._apply(source, case_insensitive=True, strip=True)

    def _apply(self, source: str | None, *, case_insensitive: bool, strip: bool) -> str:
        if not source:
            return ""
        text = source
        trace = logger.isEnabledFor(logging.DEBUG)
        for entry in self._registry:
            template = entry.rule.content if strip else entry.rule.replacement
            pattern = entry.pattern_for(case_insensitive=case_insensitive)
            text, count = pattern.subn(template, text)
            if trace and count:
                logger.debug(
                    "Applied rule %s (%d substitution%s, mode=%s)",
                    entry.id,
                    count,
                    "" if count == 1 else "s",
                    "strip" if strip else "render",
                )
        return text
