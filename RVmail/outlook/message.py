from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..addresses import Recipient, RecipientType


class MailMessage:
    """
    Active record around a raw Graph message. Recipients are exposed as
    Recipient objects tagged with their role.
    """

    __slots__ = ("_client", "_user", "raw")

    def __init__(self, client: Any, user: str, raw: Dict[str, Any]):
        self._client = client
        self._user = user
        self.raw = raw

    @property
    def id(self) -> str:
        return self.raw.get("id", "") or ""

    @property
    def subject(self) -> str:
        return self.raw.get("subject", "") or ""

    @property
    def is_read(self) -> bool:
        return bool(self.raw.get("isRead", False))

    def _recipient_list(self, key: str, type: Optional[RecipientType]) -> List[Recipient]:
        out: List[Recipient] = []
        for item in self.raw.get(key) or []:
            r = Recipient.from_graph(item, type)
            if r is not None:
                out.append(r)
        return out

    @property
    def from_(self) -> Optional[Recipient]:
        return Recipient.from_graph(self.raw.get("from"))

    @property
    def to(self) -> List[Recipient]:
        return self._recipient_list(RecipientType.TO.graph_field, RecipientType.TO)

    @property
    def cc(self) -> List[Recipient]:
        return self._recipient_list(RecipientType.CC.graph_field, RecipientType.CC)

    @property
    def bcc(self) -> List[Recipient]:
        """Only populated for messages the mailbox sent itself."""
        return self._recipient_list(RecipientType.BCC.graph_field, RecipientType.BCC)

    @property
    def reply_to(self) -> List[Recipient]:
        return self._recipient_list("replyTo", None)

    @property
    def recipients(self) -> List[Recipient]:
        return self.to + self.cc + self.bcc

    # ---- active record ops ----

    def refresh(self, *, select: Optional[Sequence[str]] = None) -> "MailMessage":
        if select is None:
            return self._client.get_message(self._user, self.id)
        return self._client.get_message(self._user, self.id, select=select)

    def mark_read(self, is_read: bool = True) -> "MailMessage":
        url = self._client.user_url(self._user, f"/messages/{self.id}")
        raw = self._client.request("PATCH", url, json={"isRead": is_read}, expected_status=(200,))
        return MailMessage(self._client, self._user, raw)

    def delete(self) -> None:
        url = self._client.user_url(self._user, f"/messages/{self.id}")
        self._client.request("DELETE", url, expected_status=204)
