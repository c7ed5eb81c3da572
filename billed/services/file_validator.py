from __future__ import annotations

from pathlib import PurePosixPath

from billed.models.receipt import ALLOWED_RECEIPT_EXTENSIONS, RECEIPT_REJECTED_MESSAGE, FileCheck


def receipt_filename(path: str) -> str:
    """Last segment of a selected file path: 'C:\\fakepath\\a.png' -> 'a.png'"""
    return PurePosixPath(path.replace("\\", "/")).name


def validate_receipt(filename: str, content_type: str | None = None) -> FileCheck:
    """Accept a receipt by its extension only.

    ``content_type`` is what the browser declared; it is not trusted since
    browsers report image types inconsistently.
    """
    suffix = PurePosixPath(receipt_filename(filename)).suffix.lower()
    if suffix in ALLOWED_RECEIPT_EXTENSIONS:
        return FileCheck(accepted=True)
    return FileCheck(accepted=False, reason=RECEIPT_REJECTED_MESSAGE)
