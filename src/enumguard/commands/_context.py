"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the Store lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumguard.config.logging import configure_logging
from enumguard.domain.errors import DeclarationError
from enumguard.output.formatters import format_result

if TYPE_CHECKING:
    from enumguard.config.settings import EnumGuardSettings
    from enumguard.infrastructure.store import Store
    from enumguard.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is built on first use so ``--help`` and ``--version`` never
    load entity declarations or open the database.
    """

    def __init__(self, settings: EnumGuardSettings) -> None:
        self.settings = settings
        self._store: Store | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> Store:
        """The store (created lazily). A bad declaration aborts the command."""
        if self._store is None:
            from enumguard.infrastructure.store import Store

            try:
                self._store = Store(self.settings)
            except DeclarationError as exc:
                raise click.ClickException(f"Invalid rule declaration: {exc}") from exc
        return self._store

    def close(self) -> None:
        """Dispose the store's engine if a command opened one."""
        if self._store is not None:
            self._store.close()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr in human mode.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
