"""Persistence helpers for formulamass."""

from formulamass.persistence.sqlite_store import (
    connect,
    ensure_schema,
    list_evaluations,
    save_evaluation,
)

__all__ = [
    "connect",
    "ensure_schema",
    "list_evaluations",
    "save_evaluation",
]
