"""CatalogService — help-page tag reference and example parity check."""

from __future__ import annotations

from dataclasses import asdict

from bbmark.domain.catalog import MessageCatalog, usable_tags
from bbmark.services.base import BaseService
from bbmark.services.result import ServiceResult
from bbmark.services.telemetry import traced


class CatalogService(BaseService):
    """Tag descriptors for documentation surfaces."""

    def _messages(self) -> MessageCatalog:
        return MessageCatalog(overrides=dict(self._settings.catalog.messages))

    @traced
    def list_tags(self) -> ServiceResult:
        """Return ``{title, description, example}`` for every tag family."""
        items = [asdict(tag) for tag in usable_tags(self._messages())]
        return ServiceResult(ok=True, op="list_tags", data={"count": len(items), "items": items})

    @traced
    def check_examples(self) -> ServiceResult:
        """Render every catalog example and flag those the engine leaves untouched.

        An example that renders to itself advertises a tag the active rule
        table does not handle (e.g. the rule was disabled in config).
        """
        case_insensitive = self._settings.engine.case_insensitive
        warnings: list[str] = []
        items = []
        for tag in usable_tags(self._messages()):
            rendered = self._engine.render(tag.example, case_insensitive)
            changed = rendered != tag.example
            if not changed:
                warnings.append(f"Example for '{tag.title}' renders unchanged: {tag.example!r}")
            items.append(
                {
                    "title": tag.title,
                    "example": tag.example,
                    "rendered": rendered,
                    "changed": changed,
                }
            )
        return ServiceResult(
            ok=True,
            op="check_examples",
            data={"count": len(items), "items": items},
            warnings=warnings,
        )
