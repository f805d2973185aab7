"""
Tests for the relay column migration on databases from older versions.
"""

from sqlalchemy import create_engine, inspect, text

from api_log_relay.migrations.add_relay_columns import migrate


LEGACY_DATABASE_URL = "sqlite:///./test_migrations.db"


def make_legacy_engine():
    """Engine over a request_logs table without response_time and error."""
    engine = create_engine(LEGACY_DATABASE_URL)
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE IF EXISTS request_logs"))
        conn.execute(text(
            "CREATE TABLE request_logs ("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "method VARCHAR(10) NOT NULL, "
            "url TEXT NOT NULL, "
            "headers JSON, "
            "request_body JSON, "
            "response_body JSON, "
            "status_code INTEGER NOT NULL, "
            "timestamp DATETIME NOT NULL)"
        ))
        conn.execute(text(
            "INSERT INTO request_logs (method, url, headers, status_code, timestamp) "
            "VALUES ('GET', 'https://example.com', '{}', 200, '2024-01-01 00:00:00')"
        ))
    return engine


def test_adds_missing_columns():
    engine = make_legacy_engine()
    try:
        assert sorted(migrate(engine)) == ["error", "response_time"]

        columns = {col["name"] for col in inspect(engine).get_columns("request_logs")}
        assert {"response_time", "error"} <= columns

        with engine.connect() as conn:
            row = conn.execute(text("SELECT response_time, error FROM request_logs")).one()
        assert row.response_time == 0
        assert row.error is None
    finally:
        engine.dispose()


def test_second_run_is_a_no_op():
    engine = make_legacy_engine()
    try:
        migrate(engine)
        assert migrate(engine) == []
    finally:
        engine.dispose()


def test_skips_when_table_missing():
    engine = create_engine("sqlite:///./test_migrations_empty.db")
    try:
        with engine.begin() as conn:
            conn.execute(text("DROP TABLE IF EXISTS request_logs"))
        assert migrate(engine) == []
    finally:
        engine.dispose()
