# src/todo_controller/stores/sqlite.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any

from ..core.models import Task, TaskCounts, TaskId, TaskQuery
from ._ids import coerce_task_id

logger = logging.getLogger(__name__)


class SqliteTaskStore:
    """
    SQLite task store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Concurrency:
    - each call opens its own SQLite connection
    - blocking work runs in a worker thread so the event loop stays free
    """

    def __init__(self, db_path: str | Path = "todos.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteTaskStore ready db=%s total=%s", self._db_path, self._count_sync().total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL DEFAULT '',
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(todos)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE todos ADD COLUMN {name} {decl}")
                logger.info("SqliteTaskStore migration: added column %s", name)

            add_col("title", "TEXT NOT NULL DEFAULT ''")
            add_col("completed", "INTEGER NOT NULL DEFAULT 0")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")
            add_col("updated_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_todos_completed ON todos(completed)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            completed=bool(row["completed"]),
        )

    # ---- sync implementation ----

    def _read_sync(self, query: TaskQuery) -> list[Task]:
        where: list[str] = []
        params: list[Any] = []

        if query.id is not None:
            where.append("id = ?")
            params.append(coerce_task_id(query.id))

        if query.completed is not None:
            where.append("completed = ?")
            params.append(1 if query.completed else 0)

        sql = "SELECT id, title, completed FROM todos"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY id ASC"

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(sql, params)
            return [self._row_to_task(r) for r in cur.fetchall()]
        finally:
            conn.close()

    def _count_sync(self) -> TaskCounts:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*), COALESCE(SUM(completed != 0), 0) FROM todos")
            total, done = cur.fetchone()
            total, done = int(total), int(done)
            return TaskCounts(active=total - done, completed=done, total=total)
        finally:
            conn.close()

    def _create_sync(self, title: str) -> Task:
        now = time.time()
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                "INSERT INTO todos(title, completed, created_at, updated_at) VALUES (?, 0, ?, ?)",
                (title, now, now),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for todos insert")
            logger.debug("Task created id=%s", rowid)
            return Task(id=int(rowid), title=title, completed=False)
        finally:
            conn.close()

    def _update_sync(self, task_id: TaskId, title: str | None, completed: bool | None) -> None:
        fields: list[str] = []
        params: list[Any] = []

        if title is not None:
            fields.append("title = ?")
            params.append(title)

        if completed is not None:
            fields.append("completed = ?")
            params.append(1 if completed else 0)

        if not fields:
            return

        fields.append("updated_at = ?")
        params.append(time.time())
        params.append(coerce_task_id(task_id))

        sql = f"UPDATE todos SET {', '.join(fields)} WHERE id = ?"

        conn = self._get_conn()
        try:
            cur = conn.execute(sql, params)
            conn.commit()
            if cur.rowcount == 0:
                logger.debug("update: unknown task id=%s", task_id)
            else:
                logger.debug("Task updated id=%s title=%s completed=%s", task_id, title, completed)
        finally:
            conn.close()

    def _remove_sync(self, task_id: TaskId) -> None:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM todos WHERE id = ?", (coerce_task_id(task_id),))
            conn.commit()
            if cur.rowcount == 0:
                logger.debug("remove: unknown task id=%s", task_id)
            else:
                logger.debug("Task removed id=%s", task_id)
        finally:
            conn.close()

    # ---- public API ----

    async def read(self, query: TaskQuery | None = None) -> list[Task]:
        return await asyncio.to_thread(self._read_sync, query or TaskQuery())

    async def get_count(self) -> TaskCounts:
        return await asyncio.to_thread(self._count_sync)

    async def create(self, title: str) -> Task:
        return await asyncio.to_thread(self._create_sync, title)

    async def update(
        self,
        task_id: TaskId,
        *,
        title: str | None = None,
        completed: bool | None = None,
    ) -> None:
        await asyncio.to_thread(self._update_sync, task_id, title, completed)

    async def remove(self, task_id: TaskId) -> None:
        await asyncio.to_thread(self._remove_sync, task_id)
