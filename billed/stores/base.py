from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from billed.models.bill import Bill
from billed.models.receipt import ReceiptFile
from billed.models.session import Session


class BillStore(ABC):
    """Remote persistence boundary for bills.

    Implementations raise ``StoreError`` on failure, with a message that is
    displayed to the employee unchanged.
    """

    @abstractmethod
    async def list(self, session: Session) -> list[dict[str, Any]]:
        """Return the raw bill records visible to the session, in any order."""
        ...

    @abstractmethod
    async def create(self, bill: Bill, receipt: ReceiptFile, session: Session) -> Bill:
        """Store a new bill together with its receipt and return the stored bill."""
        ...
