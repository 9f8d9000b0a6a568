"""Database connectivity probe."""

from typing import Dict

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from ..exceptions import DatabaseProbeError
from .base import BaseProvider

# Engines are reused across check cycles, one per URL
_engines: Dict[str, Engine] = {}


def get_engine(database_url: str) -> Engine:
    """Get the engine for a database URL, creating it on first use."""
    engine = _engines.get(database_url)
    if engine is None:
        engine = create_engine(
            database_url,
            echo=False,
            pool_pre_ping=True,
        )
        _engines[database_url] = engine
    return engine


def dispose_engines() -> None:
    """Dispose all cached engines."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()


class DatabaseProvider(BaseProvider):
    """Checks that the configured database accepts queries."""

    name = "database"
    description = "Run SELECT 1 against the configured database"

    def check(self) -> None:
        try:
            with get_engine(self.settings.database_url).connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            raise DatabaseProbeError(str(e)) from e
