import json
import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def _connect(db_path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str) -> None:
    conn = _connect(db_path)
    try:
        conn.execute(
            """
            create table if not exists savings_runs (
                id integer primary key autoincrement,
                payload text not null,
                result text not null,
                created_at text not null
            )
            """
        )
        conn.commit()
    finally:
        conn.close()


def save_run(db_path: str, payload: Dict[str, Any], result: Dict[str, Any]) -> None:
    """Store the inputs and result of one calculation with a UTC timestamp."""
    conn = _connect(db_path)
    try:
        conn.execute(
            """
            insert into savings_runs (payload, result, created_at)
            values (?, ?, ?)
            """,
            (
                json.dumps(payload),
                json.dumps(result),
                datetime.now(timezone.utc).isoformat(timespec="seconds"),
            ),
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("saved savings run to %s", db_path)


def fetch_latest_run(db_path: str) -> Optional[Dict[str, Any]]:
    conn = _connect(db_path)
    try:
        row = conn.execute(
            """
            select payload, result, created_at
            from savings_runs
            order by id desc
            limit 1
            """
        ).fetchone()
        if row is None:
            return None
        return {
            "payload": json.loads(row["payload"]),
            "result": json.loads(row["result"]),
            "createdAt": row["created_at"],
        }
    finally:
        conn.close()
