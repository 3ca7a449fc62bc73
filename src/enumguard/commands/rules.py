"""Command: list declared field rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumguard.commands._base import GuardCommand

if TYPE_CHECKING:
    from enumguard.commands._context import AppContext


@click.command(
    cls=GuardCommand,
    examples="""\
  enumguard rules
  enumguard rules --entity user
  enumguard --json rules""",
)
@click.option("--entity", default=None, help="Only list rules of this entity.")
@click.pass_obj
def rules(app: AppContext, entity: str | None) -> None:
    """List the enumerated-string rules declared in enumguard.toml."""
    from enumguard.services.validation import ValidationService

    app.emit(ValidationService(app.store).list_rules(entity))
