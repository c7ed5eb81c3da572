"""Root conftest: sessions, sample records and a scriptable in-process store."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from billed.errors import StoreError
from billed.fixtures import SAMPLE_BILLS
from billed.models.bill import Bill
from billed.models.receipt import ReceiptFile
from billed.models.session import Session, UserType
from billed.stores.base import BillStore


class FakeStore(BillStore):
    """Returns canned records and records every create call."""

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        list_error: str | None = None,
        create_error: str | None = None,
    ) -> None:
        self.records = records or []
        self.list_error = list_error
        self.create_error = create_error
        self.list_calls: list[Session] = []
        self.created: list[tuple[Bill, ReceiptFile]] = []

    async def list(self, session: Session) -> list[dict[str, Any]]:
        self.list_calls.append(session)
        if self.list_error:
            raise StoreError(self.list_error)
        return self.records

    async def create(self, bill: Bill, receipt: ReceiptFile, session: Session) -> Bill:
        self.created.append((bill, receipt))
        if self.create_error:
            raise StoreError(self.create_error)
        return bill.model_copy(
            update={"id": f"bill-{len(self.created)}", "file_url": f"https://test.storage.tld/{receipt.filename}"}
        )


@pytest.fixture()
def employee_session() -> Session:
    return Session(type=UserType.EMPLOYEE, email="a@a")


@pytest.fixture()
def admin_session() -> Session:
    return Session(type=UserType.ADMIN, email="admin@billed.test")


@pytest.fixture()
def sample_records() -> list[dict[str, Any]]:
    return copy.deepcopy(SAMPLE_BILLS)


@pytest.fixture()
def fake_store():
    return FakeStore


@pytest.fixture()
def png_receipt() -> ReceiptFile:
    return ReceiptFile(filename="facture-hotel.png", content_type="image/png", data=b"\x89PNG")
