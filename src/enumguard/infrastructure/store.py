"""Store: declared tables plus the database they live in.

The Store is the single dependency injected into every service. It owns
the table metadata (with rules attached to columns) and a lazily created
engine, and hands out transactions via :meth:`transaction`.

Building the metadata from settings runs every rule declaration, so a
malformed declaration raises ``DeclarationError`` here, before any
record is touched.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from enumguard.domain.errors import UnknownEntityError
from enumguard.infrastructure.database.engine import init_database
from enumguard.infrastructure.database.schema import build_metadata

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection, MetaData, Table
    from sqlalchemy.engine import Engine

    from enumguard.config.settings import EnumGuardSettings

logger = logging.getLogger(__name__)


class Store:
    """Table registry and transaction coordinator.

    Args:
        settings: Resolved settings; supplies the database path and,
            unless *metadata* is given, the entity declarations.
        metadata: Tables declared in code with ``enum_column``. Takes the
            place of ``settings.entities`` when provided.
    """

    def __init__(self, settings: EnumGuardSettings, metadata: MetaData | None = None) -> None:
        self.settings = settings
        self.metadata = metadata if metadata is not None else build_metadata(settings.entities)
        self._engine: Engine | None = None

    @property
    def engine(self) -> Engine:
        """The database engine (created on first access)."""
        if self._engine is None:
            logger.debug("Opening database at %s", self.settings.db_path)
            self._engine = init_database(self.settings.db_path, self.metadata)
        return self._engine

    @property
    def entities(self) -> list[str]:
        """Declared entity names, sorted."""
        return sorted(self.metadata.tables)

    def table(self, entity: str) -> Table:
        """Return the table for *entity*."""
        try:
            return self.metadata.tables[entity]
        except KeyError:
            raise UnknownEntityError(entity) from None

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction (commit or rollback on exit)."""
        with self.engine.begin() as conn:
            yield conn

    def close(self) -> None:
        """Dispose the engine, if one was opened."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
