from __future__ import annotations

import json
from enum import Enum

from pydantic import BaseModel


class UserType(str, Enum):
    EMPLOYEE = "Employee"
    ADMIN = "Admin"


class Session(BaseModel):
    type: UserType = UserType.EMPLOYEE
    email: str | None = None
    token: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.type == UserType.ADMIN

    @classmethod
    def from_json(cls, raw: str) -> Session:
        """Build a session from the JSON stored under the browser's ``user`` key."""
        return cls.model_validate(json.loads(raw))
