"""Shared utilities for native XML import services."""

from shared.utils.logging import configure_logging, get_import_id, get_logger, set_import_id
from shared.utils.db import close_db, create_schema, get_db_session, init_db

__all__ = [
    "configure_logging",
    "get_import_id",
    "get_logger",
    "set_import_id",
    "close_db",
    "create_schema",
    "get_db_session",
    "init_db",
]
