from __future__ import annotations

from pydantic import BaseModel


class ReceiptFile(BaseModel):
    filename: str
    content_type: str = ""
    data: bytes = b""


class FileCheck(BaseModel):
    accepted: bool
    reason: str = ""


ALLOWED_RECEIPT_EXTENSIONS = {".jpg", ".jpeg", ".png"}
RECEIPT_REJECTED_MESSAGE = "Le fichier doit être de type .jpg, .jpeg ou .png"
