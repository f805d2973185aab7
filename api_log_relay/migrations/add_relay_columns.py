"""
Migration: Add response_time and error columns to request_logs table.

Databases created before relay timing and failure capture existed lack
these columns. Existing rows get response_time 0 and a NULL error.
"""

import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from api_log_relay.database import engine as default_engine


logger = logging.getLogger(__name__)

NEW_COLUMNS = {
    "response_time": "INTEGER DEFAULT 0 NOT NULL",
    "error": "TEXT",
}


def migrate(engine: Engine | None = None) -> list[str]:
    """
    Add any missing relay columns to request_logs.

    Returns:
        Names of the columns that were added
    """
    engine = engine or default_engine
    inspector = inspect(engine)
    if "request_logs" not in inspector.get_table_names():
        logger.info("Migration skipped: request_logs table does not exist.")
        return []

    columns = {col["name"] for col in inspector.get_columns("request_logs")}
    added = []
    with engine.begin() as conn:
        for name, ddl in NEW_COLUMNS.items():
            if name not in columns:
                conn.execute(text(f"ALTER TABLE request_logs ADD COLUMN {name} {ddl}"))
                added.append(name)

    if added:
        logger.info("Migration complete: Added %s to request_logs table.", ", ".join(added))
    else:
        logger.info("Migration skipped: relay columns already exist in request_logs table.")
    return added


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    migrate()
