"""Subcommand modules for enumguard.

Provides register_commands() which uses deferred imports to keep
``enumguard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from enumguard.commands.audit import audit
    from enumguard.commands.check import check
    from enumguard.commands.rules import rules

    cli.add_command(rules)
    cli.add_command(check)
    cli.add_command(audit)
