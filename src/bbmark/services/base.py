"""BaseService — shared foundation for bbmark services.

Every service receives the frozen :class:`BbSettings` and a
:class:`MarkupEngine`. When no engine is passed, one is built from the
``[engine]`` rule selection in the settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bbmark.domain.engine import MarkupEngine
from bbmark.domain.rules import RuleRegistry, default_registry

if TYPE_CHECKING:
    from bbmark.config.models import EngineConfig
    from bbmark.config.settings import BbSettings

logger = logging.getLogger(__name__)


def build_registry(config: EngineConfig) -> RuleRegistry:
    """Select rules from the default table per ``[engine]`` config.

    ``enabled_rules`` narrows the table first (empty means all rules),
    then ``disabled_rules`` removes entries. Unknown ids raise
    :class:`~bbmark.domain.rules.RegistryError`.
    """
    registry = default_registry()
    if config.enabled_rules:
        registry = registry.only(*config.enabled_rules)
    if config.disabled_rules:
        registry = registry.excluding(*config.disabled_rules)
    if len(registry) != len(default_registry()):
        logger.debug("Using %d of %d rules", len(registry), len(default_registry()))
    return registry


class BaseService:
    """Base for service-layer classes.

    Usage::

        class MarkupService(BaseService):
            def render(self, text: str) -> ServiceResult:
                output = self._engine.render(text)
                ...
    """

    def __init__(self, settings: BbSettings, engine: MarkupEngine | None = None) -> None:
        self._settings = settings
        self._engine = engine or MarkupEngine(build_registry(settings.engine))

    @property
    def engine(self) -> MarkupEngine:
        return self._engine
