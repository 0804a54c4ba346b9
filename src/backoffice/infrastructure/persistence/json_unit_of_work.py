"""JSON-file-backed Unit of Work.

The whole data file is read when the unit of work begins; repositories
mutate that in-memory copy, and ``commit()`` swaps the new file in
atomically.  A rollback simply forgets the copy.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backoffice.domain.repository.unit_of_work import UnitOfWork
from backoffice.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from backoffice.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from backoffice.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from backoffice.infrastructure.persistence.json_store import (
    load_document,
    write_document,
)

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._document: dict | None = None

    def _begin(self) -> None:
        self._document = load_document(self._file_path)
        self.customers = JsonCustomerRepository(self._document)
        self.products = JsonProductRepository(self._document)
        self.orders = JsonOrderRepository(self._document)

    def _commit(self) -> None:
        if self._document is None:
            raise RuntimeError("JsonUnitOfWork not started. Use it as a context manager.")
        write_document(self._file_path, self._document)
        logger.info("Transaction committed to %s", self._file_path)

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            logger.warning("Transaction on %s rolled back: %s", self._file_path, exc_val)
        super().__exit__(exc_type, exc_val, exc_tb)

    def rollback(self) -> None:
        self._document = None
