from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.constants import DEFAULT_CATEGORIES
from .connection import DBConfig

logger = logging.getLogger(__name__)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def _apply_sql_file(db_config: dict, path: str | Path) -> None:
    target = DBConfig.from_dict(db_config)
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _apply_sql_file(db_config, schema_path)
    logger.info("schema applied from %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _apply_sql_file(db_config, seed_path)
    logger.info("seed applied from %s", seed_path)


def ensure_demo_users(db_config: dict) -> None:
    """Default categories plus one admin and one employee login."""

    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)

        for position, name in enumerate(DEFAULT_CATEGORIES):
            cur.execute(
                "INSERT IGNORE INTO categories(name, sort_order) VALUES(%s, %s)",
                (name, position),
            )

        cur.execute("SELECT category_id FROM categories WHERE name=%s", (DEFAULT_CATEGORIES[0],))
        row = cur.fetchone()
        if not row:
            raise RuntimeError(f"Missing categories row for name={DEFAULT_CATEGORIES[0]}")
        store_id = int(row["category_id"])

        cur.execute("SELECT employee_id FROM employees WHERE name=%s", ("FUNCIONARIO DEMO",))
        row = cur.fetchone()
        if row:
            employee_id = int(row["employee_id"])
        else:
            cur.execute(
                "INSERT INTO employees(name, email, category_id, is_active) VALUES(%s, %s, %s, 1)",
                ("FUNCIONARIO DEMO", "funcionario@example.com", store_id),
            )
            employee_id = int(cur.lastrowid)

        def upsert_user(email: str, password: str, role: str, linked_employee_id: int | None) -> None:
            cur.execute(
                """
                INSERT INTO users(email, password_hash, role, employee_id, is_active)
                VALUES(%s, %s, %s, %s, 1)
                ON DUPLICATE KEY UPDATE
                    password_hash=VALUES(password_hash),
                    role=VALUES(role),
                    employee_id=VALUES(employee_id),
                    is_active=1
                """,
                (email, generate_password_hash(password), role, linked_employee_id),
            )

        upsert_user("admin@example.com", "admin123", "admin", None)
        upsert_user("funcionario@example.com", "func123", "funcionario", employee_id)

        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
