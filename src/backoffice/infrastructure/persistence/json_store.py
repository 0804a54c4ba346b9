"""Single JSON document holding every table.

Layout::

    {
      "customers": [...],
      "products": [...],
      "orders": [...],
      "order_items": [...],
      "sequences": {"customers": 0, "products": 0, "orders": 0, "order_items": 0}
    }

The repositories work on one in-memory copy of this document for the
lifetime of a unit of work.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from backoffice.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

TABLES = ("customers", "products", "orders", "order_items")


def empty_document() -> dict:
    document: dict = {table: [] for table in TABLES}
    document["sequences"] = {table: 0 for table in TABLES}
    return document


def next_id(document: dict, table: str) -> int:
    """Next id for a table.

    Ids are never reused, and a file written without sequences must
    not hand out an id that a row already holds.
    """
    sequences = document.setdefault("sequences", {})
    highest = max((row["id"] for row in document.get(table, [])), default=0)
    sequences[table] = max(sequences.get(table, 0), highest) + 1
    return sequences[table]


def upsert(rows: list[dict], row: dict) -> None:
    """Replace the row with the same id, otherwise append."""
    for i, existing in enumerate(rows):
        if existing["id"] == row["id"]:
            rows[i] = row
            return
    rows.append(row)


def load_document(file_path: Path) -> dict:
    if not file_path.exists():
        return empty_document()
    try:
        document = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise PersistenceError(f"Cannot read data file {file_path}: {exc}") from exc
    if not isinstance(document, dict):
        raise PersistenceError(f"Data file {file_path} does not hold a JSON object")

    for table in TABLES:
        document.setdefault(table, [])
    document.setdefault("sequences", {})
    return document


def write_document(file_path: Path, document: dict) -> None:
    """Write to a temp file beside the target, then swap it in atomically."""
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{file_path.name}.", dir=file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(document, indent=2) + "\n")
            os.replace(tmp_name, file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise PersistenceError(f"Cannot write data file {file_path}: {exc}") from exc
    logger.debug("Wrote %s", file_path)
