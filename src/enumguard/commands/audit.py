"""Command: scan stored records for rule violations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumguard.commands._base import GuardCommand
from enumguard.domain.lifecycle import DEFAULT_STAGE

if TYPE_CHECKING:
    from enumguard.commands._context import AppContext


@click.command(
    cls=GuardCommand,
    examples="""\
  enumguard audit
  enumguard audit --entity user
  enumguard audit --stage publish""",
)
@click.option("--entity", default=None, help="Only audit this entity.")
@click.option("--stage", default=DEFAULT_STAGE, show_default=True, help="Lifecycle stage.")
@click.pass_obj
def audit(app: AppContext, entity: str | None, stage: str) -> None:
    """Report stored values that violate declared rules."""
    from enumguard.services.audit import AuditService

    app.emit(AuditService(app.store).audit(entity, stage=stage))
