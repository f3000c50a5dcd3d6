"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds services lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bbmark.domain.rules import RegistryError
from bbmark.output.formatters import OutputSettings, format_result
from bbmark.output.renderers import render_text_meta

if TYPE_CHECKING:
    from bbmark.config.settings import BbSettings
    from bbmark.domain.engine import MarkupEngine
    from bbmark.services.catalog import CatalogService
    from bbmark.services.markup import MarkupService
    from bbmark.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine is built on first use so ``--help`` and ``--version``
    never compile the rule table.
    """

    def __init__(self, settings: BbSettings) -> None:
        self.settings = settings
        self._engine: MarkupEngine | None = None

        from bbmark.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from bbmark.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def engine(self) -> MarkupEngine:
        """The engine for the configured rule selection (created lazily)."""
        if self._engine is None:
            from bbmark.domain.engine import MarkupEngine
            from bbmark.services.base import build_registry

            try:
                self._engine = MarkupEngine(build_registry(self.settings.engine))
            except RegistryError as exc:
                raise click.ClickException(f"Invalid [engine] configuration: {exc}") from exc
        return self._engine

    @property
    def markup(self) -> MarkupService:
        from bbmark.services.markup import MarkupService

        return MarkupService(self.settings, self.engine)

    @property
    def catalog(self) -> CatalogService:
        from bbmark.services.catalog import CatalogService

        return CatalogService(self.settings, self.engine)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
          With ``-v``, the span tree of render/strip/excerpt goes to stderr too.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
                if settings.verbose and not settings.quiet:
                    meta = render_text_meta(result)
                    if meta:
                        click.echo(meta, err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
