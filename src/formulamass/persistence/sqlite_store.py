"""SQLite persistence helpers for evaluation history."""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from formulamass.models import EvaluationResult

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS evaluation (
  id INTEGER PRIMARY KEY,
  formula TEXT NOT NULL,
  ok INTEGER NOT NULL,
  molecular_weight REAL,
  error TEXT,
  payload JSON,
  recorded_utc TEXT
);
CREATE INDEX IF NOT EXISTS evaluation_formula ON evaluation (formula);
"""


def connect(history_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a history database."""
    path = Path(history_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    connection.row_factory = sqlite3.Row
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def save_evaluation(
    connection: sqlite3.Connection,
    result: EvaluationResult,
    recorded_utc: str | None = None,
) -> int:
    """Persist one evaluation (successful or not) and return its ID."""
    recorded_utc = recorded_utc or _utc_now()
    if result.ok:
        molecular_weight, error = result.molecular_weight, None
    else:
        molecular_weight, error = None, result.message
    cursor = connection.execute(
        "INSERT INTO evaluation (formula, ok, molecular_weight, error, payload, recorded_utc)"
        " VALUES (?, ?, ?, ?, ?, ?)",
        (
            result.formula,
            int(result.ok),
            molecular_weight,
            error,
            _json_dumps(result.to_dict()),
            recorded_utc,
        ),
    )
    connection.commit()
    logger.debug("Recorded evaluation %d for %r", cursor.lastrowid, result.formula)
    return int(cursor.lastrowid)


def list_evaluations(connection: sqlite3.Connection, limit: int = 20) -> list[dict[str, Any]]:
    """Most recent evaluations first."""
    rows = connection.execute(
        "SELECT id, formula, ok, molecular_weight, error, payload, recorded_utc"
        " FROM evaluation ORDER BY id DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [
        {
            "id": row["id"],
            "formula": row["formula"],
            "ok": bool(row["ok"]),
            "molecular_weight": row["molecular_weight"],
            "error": row["error"],
            "payload": json.loads(row["payload"]),
            "recorded_utc": row["recorded_utc"],
        }
        for row in rows
    ]


def _json_dumps(payload: Mapping[str, object]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
