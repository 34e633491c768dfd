"""Database layer."""

from matchday.database.connection import get_connection, get_db, init_db, reset_db
from matchday.database.matches import (
    create_match,
    get_match,
    list_matches,
    status_persister,
    update_match_status,
)

__all__ = [
    "create_match",
    "get_connection",
    "get_db",
    "get_match",
    "init_db",
    "list_matches",
    "reset_db",
    "status_persister",
    "update_match_status",
]
