"""Shared value objects."""
from __future__ import annotations

from enum import Enum
from typing import Union

from orderflow.domain.core.exceptions import InvalidArgumentError


class Role(str, Enum):
    """Caller roles."""
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"

    @classmethod
    def from_value(cls, value: Union["Role", str]) -> "Role":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown role: {value}",
                {"valid_roles": [role.value for role in cls]},
            )

    @property
    def can_process_payments(self) -> bool:
        return _PAYMENT_PRIVILEGES[self]


# Every Role must appear here
_PAYMENT_PRIVILEGES = {
    Role.ADMIN: True,
    Role.USER: False,
    Role.GUEST: False,
}
