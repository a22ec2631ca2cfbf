from __future__ import annotations

from datetime import date, datetime

from src.attendance_tracker.attendance_tracker.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.attendance_tracker.attendance_tracker.database.mysql_base import normalize_mysql_date


def test_splitter_ignores_semicolons_in_quotes_and_comments():
    sql = """
    -- demo; data
    INSERT INTO holidays (student_id, holiday_date, description) VALUES (1, '2026-10-02', 'a;b');
    INSERT INTO subjects (student_id, name) VALUES (1, "x;y")
    """

    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 2
    assert statements[0].endswith("'a;b')")
    assert statements[1].endswith('"x;y")')


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS demo;\nUSE demo;\nCREATE TABLE t (id INT);\n"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


def test_normalize_mysql_date():
    assert normalize_mysql_date(date(2026, 10, 2)) == date(2026, 10, 2)
    assert normalize_mysql_date(datetime(2026, 10, 2, 8, 30)) == date(2026, 10, 2)
    assert normalize_mysql_date(b"2026-10-02") == date(2026, 10, 2)
    assert normalize_mysql_date("2026-10-02") == date(2026, 10, 2)
