from __future__ import annotations

import logging
from typing import Any

from ulid import ULID

from billed.models.bill import Bill
from billed.models.receipt import ReceiptFile
from billed.models.session import Session
from billed.storage.base import ReceiptStorage
from billed.stores.base import BillStore

logger = logging.getLogger(__name__)


def _receipt_storage_key(prefix: str, bill_id: str, filename: str) -> str:
    if prefix:
        return f"{prefix}/{bill_id}/{filename}"
    return f"{bill_id}/{filename}"


class MemoryBillStore(BillStore):
    """Keeps bill records in process; receipts go to a ``ReceiptStorage``."""

    def __init__(
        self,
        storage: ReceiptStorage,
        records: list[dict[str, Any]] | None = None,
        prefix: str = "receipts",
    ) -> None:
        self.storage = storage
        self.prefix = prefix
        self._records: dict[str, dict[str, Any]] = {}
        for record in records or []:
            record_id = record.get("id") or str(ULID())
            self._records[record_id] = {**record, "id": record_id}

    def _visible_to(self, record: dict[str, Any], session: Session) -> bool:
        if session.is_admin:
            return True
        # An employee without an email only sees bills that have no owner either.
        return record.get("email") == session.email

    async def list(self, session: Session) -> list[dict[str, Any]]:
        result = [dict(r) for r in self._records.values() if self._visible_to(r, session)]
        logger.debug("Listed %d of %d bills for %s", len(result), len(self._records), session.email)
        return result

    async def create(self, bill: Bill, receipt: ReceiptFile, session: Session) -> Bill:
        bill_id = str(ULID())
        key = _receipt_storage_key(self.prefix, bill_id, receipt.filename)
        file_url = self.storage.save(key, receipt.data, content_type=receipt.content_type)

        stored = bill.model_copy(update={"id": bill_id, "file_url": file_url, "file_name": receipt.filename})
        self._records[bill_id] = stored.to_record()
        logger.info("Bill stored: id=%s email=%s file=%s", bill_id, stored.email, receipt.filename)
        return stored
