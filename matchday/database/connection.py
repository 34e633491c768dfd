"""SQLite access for the matches store.

Connections are short-lived: open one per unit of work, then close it.
Status writes run in worker threads and each opens its own connection.
"""

import sqlite3
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from matchday.config import Config

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Seconds a writer waits on a locked database before sqlite3 gives up
BUSY_TIMEOUT = 5.0


def _resolve_path(db_path: Path | str | None) -> Path:
    return Path(db_path) if db_path else Path(Config.DATABASE_PATH)


def get_connection(db_path: Path | str | None = None) -> sqlite3.Connection:
    """Open a connection whose rows support access by column name.

    Args:
        db_path: Database file; defaults to Config.DATABASE_PATH, read at call time
    """
    path = _resolve_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path, timeout=BUSY_TIMEOUT)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_db(db_path: Path | str | None = None) -> Generator[sqlite3.Connection, None, None]:
    """Yield a connection that commits on success and rolls back on error.

    The connection is closed either way.
    """
    conn = get_connection(db_path)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: Path | str | None = None) -> None:
    """Apply schema.sql. Idempotent, every statement is IF NOT EXISTS."""
    with get_db(db_path) as conn:
        conn.executescript(SCHEMA_PATH.read_text())


def reset_db(db_path: Path | str | None = None) -> None:
    """Delete the database file and recreate an empty schema."""
    path = _resolve_path(db_path)
    path.unlink(missing_ok=True)
    init_db(path)
