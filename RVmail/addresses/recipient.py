from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..connection.exceptions import InvalidArgumentError

Json = Dict[str, Any]


class RecipientType(Enum):
    TO = "to"
    CC = "cc"
    BCC = "bcc"

    @property
    def graph_field(self) -> str:
        """Name of the Graph message property holding recipients of this role."""
        return f"{self.value}Recipients"


@dataclass(frozen=True)
class Recipient:
    """
    One resolved recipient: an optional display name, an address and an
    optional role.

    The address is never empty. Whether it is a *valid* address is not
    checked here; Graph rejects bad ones when the message is sent.
    """

    name: Optional[str]
    address: str
    type: Optional[RecipientType] = None

    def __post_init__(self):
        if not self.address:
            raise InvalidArgumentError("Recipient address must not be empty")

    @staticmethod
    def from_graph(item: Optional[Json], type: Optional[RecipientType] = None) -> Optional["Recipient"]:
        """
        Graph recipient shape:
          {"emailAddress": {"name": "...", "address": "..."}}

        Returns None when Graph gives no address (e.g. a deleted contact).
        """
        d = (item or {}).get("emailAddress") or {}
        address = d.get("address") or ""
        if not address:
            return None
        return Recipient(name=d.get("name") or None, address=address, type=type)

    def with_type(self, type: Optional[RecipientType]) -> "Recipient":
        return Recipient(self.name, self.address, type)

    def to_graph(self) -> Json:
        email: Json = {"address": self.address}
        if self.name:
            email["name"] = self.name
        return {"emailAddress": email}

    def display(self) -> str:
        if self.name:
            return f"{self.name} <{self.address}>"
        return self.address
