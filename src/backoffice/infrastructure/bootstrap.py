"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from backoffice.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory
from backoffice.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

DATA_DIR_ENV = "BACKOFFICE_DATA_DIR"
DATA_FILE_NAME = "backoffice.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_file(data_dir: Path | str | None = None) -> Path:
    """Locate the JSON data file: argument, then environment, then default."""
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV) or _DEFAULT_DATA_DIR
    return Path(data_dir) / DATA_FILE_NAME


def unit_of_work_factory(data_dir: Path | str | None = None) -> UnitOfWorkFactory:
    path = data_file(data_dir)

    def factory() -> UnitOfWork:
        return JsonUnitOfWork(path)

    return factory
