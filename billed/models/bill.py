from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BillStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


class Bill(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "key"))
    email: str | None = None
    type: str = ""
    name: str = ""
    amount: int | None = None
    date: str | None = None  # 'YYYY-MM-DD'
    vat: str | None = None
    percentage: int | None = Field(default=None, alias="pct")
    commentary: str | None = None
    comment_admin: str | None = Field(default=None, alias="commentAdmin")
    file_url: str | None = Field(default=None, alias="fileUrl")
    file_name: str | None = Field(default=None, alias="fileName")
    status: BillStatus = BillStatus.PENDING

    def to_record(self) -> dict[str, Any]:
        """Dump using the wire (camelCase) field names, dropping unset values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BillForm(BaseModel):
    """Fields typed by the employee on the new-bill form."""

    type: str = ""
    name: str = ""
    date: str | None = None
    amount: int | None = None
    vat: str | None = None
    percentage: int | None = None
    commentary: str | None = None


class PresentableBill(BaseModel):
    model_config = ConfigDict(frozen=True)

    record: dict[str, Any]
    bill: Bill | None = None
    date: str = ""
    amount: str = ""
    status: str = ""
    format_error: str | None = None

    @property
    def raw_date(self) -> Any:
        return self.record.get("date")

    @property
    def file_url(self) -> str | None:
        if self.bill is not None:
            return self.bill.file_url
        return self.record.get("fileUrl")
