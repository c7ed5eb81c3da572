from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from billed.constants import ROUTES_PATH, format_date, format_status
from billed.errors import FetchError, StoreError
from billed.models import format_amount
from billed.models.bill import Bill, BillStatus, PresentableBill
from billed.models.session import Session
from billed.stores.base import BillStore

logger = logging.getLogger(__name__)


def _date_key(record: dict[str, Any]) -> str:
    value = record.get("date")
    return value if isinstance(value, str) else ""


def sort_records(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Most recent first, comparing the stored date strings as text.

    Well-formed 'YYYY-MM-DD' values order chronologically this way; anything
    else falls where its characters put it.
    """
    return sorted(records, key=_date_key, reverse=True)


def present(record: dict[str, Any]) -> PresentableBill:
    """Format one raw record for display without ever dropping it."""
    raw_date = record.get("date")
    try:
        bill = Bill.model_validate(record)
    except ValidationError as exc:
        logger.warning("Bill %s could not be parsed: %s", record.get("id"), exc.errors()[0]["msg"])
        return PresentableBill(
            record=record,
            date=str(raw_date or ""),
            amount="" if record.get("amount") is None else str(record["amount"]),
            status=format_status(str(record.get("status") or "")),
            format_error=str(exc),
        )

    try:
        display_date = format_date(bill.date)
    except (TypeError, ValueError) as exc:
        logger.warning("Bill %s has an unreadable date %r: %s", bill.id, raw_date, exc)
        return PresentableBill(
            record=record,
            bill=bill,
            date=str(raw_date or ""),
            amount=format_amount(bill.amount),
            status=format_status(bill.status),
            format_error=str(exc),
        )

    return PresentableBill(
        record=record,
        bill=bill,
        date=display_date,
        amount=format_amount(bill.amount),
        status=format_status(bill.status),
    )


def filter_by_status(bills: list[PresentableBill], status: BillStatus) -> list[PresentableBill]:
    """Bills whose stored status matches, in their current order."""
    return [b for b in bills if b.record.get("status") == status.value]


class BillList:
    def __init__(
        self,
        store: BillStore,
        session: Session,
        navigate: Callable[[str], None] | None = None,
        open_receipt: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.session = session
        self.navigate = navigate
        self.open_receipt = open_receipt

    async def fetch_and_present(self, session: Session | None = None) -> list[PresentableBill]:
        session = session or self.session
        try:
            records = await self.store.list(session)
        except StoreError as exc:
            logger.error("Listing bills failed for %s: %s", session.email, exc)
            raise FetchError(str(exc)) from exc

        result = [present(record) for record in sort_records(records)]
        failed = sum(1 for b in result if b.format_error)
        logger.debug("Presented %d bills (%d unformatted) for %s", len(result), failed, session.email)
        return result

    def new_bill(self) -> None:
        if self.navigate is None:
            raise ValueError("No navigation configured")
        self.navigate(ROUTES_PATH["NewBill"])

    def show_receipt(self, bill: PresentableBill) -> None:
        if self.open_receipt is None:
            raise ValueError("No receipt viewer configured")
        if not bill.file_url:
            raise ValueError("Bill has no receipt")
        logger.debug("Opening receipt %s", bill.file_url)
        self.open_receipt(bill.file_url)
