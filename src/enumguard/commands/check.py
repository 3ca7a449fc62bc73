"""Command: check one value against a declared field rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumguard.commands._base import GuardCommand

if TYPE_CHECKING:
    from enumguard.commands._context import AppContext


@click.command(
    cls=GuardCommand,
    examples="""\
  enumguard check user status ACTIVE
  enumguard check user status PENDING --stage update
  enumguard --json check order state shipped""",
)
@click.argument("entity")
@click.argument("field")
@click.argument("value")
@click.option(
    "--stage",
    default=None,
    help="Lifecycle stage. Defaults to the stage the rule declares.",
)
@click.pass_obj
def check(app: AppContext, entity: str, field: str, value: str, stage: str | None) -> None:
    """Check VALUE against the rule on ENTITY.FIELD. Exits 1 when rejected."""
    from enumguard.services.validation import ValidationService

    app.emit(ValidationService(app.store).check_value(entity, field, value, stage=stage))
