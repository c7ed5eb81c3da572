from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from billed.errors import StoreError
from billed.models.bill import Bill
from billed.models.receipt import ReceiptFile
from billed.models.session import Session
from billed.stores.base import BillStore

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Use the API's ``message`` field when present, else the status code."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Erreur {response.status_code}"


class HttpBillStore(BillStore):
    """Talks to the Billed REST API (``/bills``)."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self, session: Session) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if session.token:
            headers["Authorization"] = f"Bearer {session.token}"
        return headers

    async def _send(self, method: str, path: str, session: Session, **kwargs: Any) -> Any:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.request(method, path, headers=self._headers(session), **kwargs)
            except httpx.HTTPError as exc:
                logger.error("%s %s failed: %s", method, path, exc)
                raise StoreError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            message = _error_message(response)
            logger.error("%s %s returned %d: %s", method, path, response.status_code, message)
            raise StoreError(message)

        try:
            return response.json()
        except ValueError as exc:
            logger.error("%s %s returned %d without a JSON body", method, path, response.status_code)
            raise StoreError(f"Erreur {response.status_code}") from exc

    async def list(self, session: Session) -> list[dict[str, Any]]:
        data = await self._send("GET", "/bills", session)
        if not isinstance(data, list):
            raise StoreError("Réponse inattendue du serveur")
        logger.debug("GET /bills returned %d records", len(data))
        return data

    async def create(self, bill: Bill, receipt: ReceiptFile, session: Session) -> Bill:
        fields = {k: str(v) for k, v in bill.to_record().items()}
        files = {"file": (receipt.filename, receipt.data, receipt.content_type or "application/octet-stream")}
        data = await self._send("POST", "/bills", session, data=fields, files=files)

        if not isinstance(data, dict):
            raise StoreError("Réponse inattendue du serveur")

        # The API may answer with only the generated key and file URL.
        try:
            stored = Bill.model_validate({**bill.to_record(), **data})
        except ValidationError as exc:
            logger.error("POST /bills returned an unreadable bill: %s", exc)
            raise StoreError("Réponse inattendue du serveur") from exc
        logger.info("POST /bills created id=%s", stored.id)
        return stored
