from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..addresses import Recipient, RecipientType, resolve_recipients
from ..connection.exceptions import GraphError, InvalidArgumentError, translate_graph_error
from .message import MailMessage

logger = logging.getLogger(__name__)

Json = Dict[str, Any]
AddressInput = Union[str, Recipient]


@dataclass
class ComposeMessage:
    """
    A local, fluent builder for a message you intend to send (or save as draft).

    Recipients may be given as Recipient objects or as free-form address
    lists ("Doe, Jane <jane@x.com>; bob@y.com"), which are split and
    resolved into one Recipient per address.

    This is NOT a Graph message yet until you call:
      - send()
      - save_draft()
    """
    _client: Any
    _user: str

    _subject: str = ""
    _body_type: str = "Text"  # "Text" or "HTML"
    _body_content: str = ""

    _recipients: List[Recipient] = field(default_factory=list)
    _reply_to: List[Recipient] = field(default_factory=list)
    _split_strategy: Optional[str] = None

    def subject(self, s: str) -> "ComposeMessage":
        self._subject = s
        return self

    def text(self, content: str) -> "ComposeMessage":
        self._body_type = "Text"
        self._body_content = content
        return self

    def html(self, content: str) -> "ComposeMessage":
        self._body_type = "HTML"
        self._body_content = content
        return self

    def _resolve(
        self,
        addresses: tuple,
        name: Optional[str],
        fixed_name: bool,
        type: Optional[RecipientType],
    ) -> List[Recipient]:
        out: List[Recipient] = []
        for a in addresses:
            if isinstance(a, Recipient):
                out.append(a.with_type(type))
            else:
                out.extend(resolve_recipients(a, name, fixed_name, type, self._split_strategy))
        return out

    def add(
        self,
        type: RecipientType,
        *addresses: AddressInput,
        name: Optional[str] = None,
        fixed_name: bool = False,
    ) -> "ComposeMessage":
        """
        Add recipients of one role.

        ``name`` is the default display name for addresses that carry none;
        with ``fixed_name=True`` it replaces any name in the address text.
        """
        self._recipients.extend(self._resolve(addresses, name, fixed_name, type))
        return self

    def to(self, *addresses: AddressInput, name: Optional[str] = None, fixed_name: bool = False) -> "ComposeMessage":
        return self.add(RecipientType.TO, *addresses, name=name, fixed_name=fixed_name)

    def cc(self, *addresses: AddressInput, name: Optional[str] = None, fixed_name: bool = False) -> "ComposeMessage":
        return self.add(RecipientType.CC, *addresses, name=name, fixed_name=fixed_name)

    def bcc(self, *addresses: AddressInput, name: Optional[str] = None, fixed_name: bool = False) -> "ComposeMessage":
        return self.add(RecipientType.BCC, *addresses, name=name, fixed_name=fixed_name)

    def reply_to(self, address: AddressInput, name: Optional[str] = None) -> "ComposeMessage":
        self._reply_to.extend(self._resolve((address,), name, False, None))
        return self

    def recipients(self, type: Optional[RecipientType] = None) -> List[Recipient]:
        if type is None:
            return list(self._recipients)
        return [r for r in self._recipients if r.type is type]

    def as_graph_message(self) -> Json:
        msg: Json = {
            "subject": self._subject,
            "body": {"contentType": self._body_type, "content": self._body_content},
        }
        for role in RecipientType:
            recipients = self.recipients(role)
            if recipients:
                msg[role.graph_field] = [r.to_graph() for r in recipients]
        if self._reply_to:
            msg["replyTo"] = [r.to_graph() for r in self._reply_to]
        return msg

    def send(self, *, save_to_sent_items: bool = True) -> None:
        """
        Send immediately via POST /sendMail.
        """
        if not self._recipients:
            raise InvalidArgumentError("Cannot send a message without recipients")

        url = self._client.user_url(self._user, "/sendMail")
        payload = {"message": self.as_graph_message(), "saveToSentItems": save_to_sent_items}
        logger.info("Sending '%s' from %s to %d recipient(s)", self._subject, self._user, len(self._recipients))
        try:
            self._client.request("POST", url, json=payload, expected_status=202)
        except GraphError as e:
            translate_graph_error(f"sendMail for mailbox {self._user}", e)

    def save_draft(self) -> MailMessage:
        """
        Create a draft via POST /messages and return a MailMessage (active record).
        """
        url = self._client.user_url(self._user, "/messages")
        raw = self._client.request("POST", url, json=self.as_graph_message(), expected_status=201)
        logger.info("Saved draft '%s' in mailbox %s", self._subject, self._user)
        return MailMessage(self._client, self._user, raw)
