from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generator, Optional, Sequence
from urllib.parse import quote

from .compose import ComposeMessage
from .message import MailMessage

logger = logging.getLogger(__name__)

Json = Dict[str, Any]

MESSAGE_FIELDS: tuple[str, ...] = (
    "id",
    "subject",
    "from",
    "toRecipients",
    "ccRecipients",
    "bccRecipients",
    "replyTo",
    "isRead",
)


def qs_encode(s: str) -> str:
    return quote(s, safe="")


@dataclass
class MailClient:
    """
    Transport + factories only.

    Public transport helpers used by the active record models:
      - user_url(user, path)
      - request(method, url, **kwargs)

    ``split_strategy`` is handed to every ComposeMessage it creates and
    decides how address lists passed to to()/cc()/bcc() are split.
    """

    conn: Any
    split_strategy: Optional[str] = None

    @classmethod
    def from_settings(cls, conn: Any, settings: Any) -> "MailClient":
        return cls(conn, split_strategy=settings.split_strategy)

    def user_url(self, user: str, path: str) -> str:
        """
        Build a Graph URL under /users/{user}/... safely.
        `path` should start with '/', e.g. '/messages/{id}'.
        """
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.conn.graph_base}/users/{user}{path}"

    def request(self, method: str, url: str, **kwargs) -> Json:
        return self.conn.graph_request(method, url, **kwargs)

    def list_messages(
        self,
        user: str,
        folder: str = "Inbox",
        *,
        top: int = 25,
        select: Sequence[str] = MESSAGE_FIELDS,
        filter: Optional[str] = None,
        next_link: Optional[str] = None,
    ) -> tuple[list[MailMessage], Optional[str]]:
        if next_link:
            url = next_link
        else:
            sel = ",".join(select)
            url = self.user_url(
                user,
                f"/mailFolders/{folder}/messages?$top={top}&$select={qs_encode(sel)}",
            )
            if filter:
                url += f"&$filter={qs_encode(filter)}"

        page: Json = self.request("GET", url)
        msgs = [MailMessage(self, user, m) for m in page.get("value", [])]
        return msgs, page.get("@odata.nextLink")

    def iter_messages(
        self,
        user: str,
        folder: str = "Inbox",
        *,
        page_size: int = 50,
        **kwargs,
    ) -> Generator[MailMessage, None, None]:
        msgs, next_link = self.list_messages(user, folder, top=page_size, **kwargs)
        yield from msgs
        while next_link:
            logger.debug("Following nextLink for %s/%s", user, folder)
            msgs, next_link = self.list_messages(user, folder, next_link=next_link)
            yield from msgs

    def get_message(
        self,
        user: str,
        message_id: str,
        *,
        select: Sequence[str] = MESSAGE_FIELDS,
    ) -> MailMessage:
        sel = ",".join(select)
        url = self.user_url(user, f"/messages/{message_id}?$select={qs_encode(sel)}")
        raw: Json = self.request("GET", url)
        return MailMessage(self, user, raw)

    def new_message(self, user: str) -> ComposeMessage:
        return ComposeMessage(self, user, _split_strategy=self.split_strategy)
