from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from billed.constants import DEFAULT_PERCENTAGE, ROUTES_PATH
from billed.errors import DraftClosedError, ReceiptValidationError, StoreError, SubmitError
from billed.models.bill import Bill, BillForm, BillStatus
from billed.models.receipt import FileCheck, ReceiptFile
from billed.models.session import Session
from billed.services.file_validator import receipt_filename, validate_receipt
from billed.stores.base import BillStore

logger = logging.getLogger(__name__)


class DraftState(str, Enum):
    EMPTY = "empty"
    FILE_REJECTED = "file_rejected"
    FILE_ACCEPTED = "file_accepted"
    SUBMITTING = "submitting"
    SUBMIT_FAILED = "submit_failed"
    SUBMITTED = "submitted"


class BillCreator:
    """Holds one new-bill draft from file selection to submission.

    A submitted draft is closed: build a new ``BillCreator`` for the next bill.
    """

    def __init__(self, store: BillStore, session: Session, navigate: Callable[[str], None]) -> None:
        self.store = store
        self.session = session
        self.navigate = navigate
        self.state = DraftState.EMPTY
        self.receipt: ReceiptFile | None = None
        self.rejection: str = ""
        self.last_draft: Bill | None = None

    def _ensure_open(self) -> None:
        if self.state == DraftState.SUBMITTED:
            raise DraftClosedError("Cette note de frais a déjà été envoyée")

    def attach_file(self, receipt: ReceiptFile) -> FileCheck:
        self._ensure_open()
        receipt = receipt.model_copy(update={"filename": receipt_filename(receipt.filename)})
        check = validate_receipt(receipt.filename, receipt.content_type)
        if check.accepted:
            self.receipt = receipt
            self.rejection = ""
            self.state = DraftState.FILE_ACCEPTED
            logger.debug("Receipt accepted: %s (%s)", receipt.filename, receipt.content_type)
        else:
            self.receipt = None
            self.rejection = check.reason
            self.state = DraftState.FILE_REJECTED
            logger.info("Receipt rejected: %s (%s)", receipt.filename, receipt.content_type)
        return check

    def build_draft(self, form: BillForm) -> Bill:
        if self.receipt is None:
            raise ReceiptValidationError(self.rejection or "Aucun justificatif joint")
        percentage = form.percentage if form.percentage is not None else DEFAULT_PERCENTAGE
        return Bill(
            email=self.session.email,
            type=form.type,
            name=form.name,
            amount=form.amount,
            date=form.date,
            vat=form.vat,
            percentage=percentage,
            commentary=form.commentary,
            file_name=self.receipt.filename,
            status=BillStatus.PENDING,
        )

    async def submit(self, form: BillForm) -> Bill:
        self._ensure_open()
        draft = self.build_draft(form)
        self.last_draft = draft
        self.state = DraftState.SUBMITTING

        try:
            stored = await self.store.create(draft, self.receipt, self.session)
        except StoreError as exc:
            self.state = DraftState.SUBMIT_FAILED
            logger.error("Submitting bill %r failed: %s", draft.name, exc)
            raise SubmitError(str(exc)) from exc
        except Exception:
            self.state = DraftState.SUBMIT_FAILED
            logger.exception("Submitting bill %r failed", draft.name)
            raise

        self.state = DraftState.SUBMITTED
        logger.info("Bill submitted: id=%s email=%s amount=%s", stored.id, stored.email, stored.amount)
        self.navigate(ROUTES_PATH["Bills"])
        return stored

    @property
    def can_submit(self) -> bool:
        return self.state in (DraftState.FILE_ACCEPTED, DraftState.SUBMIT_FAILED)
