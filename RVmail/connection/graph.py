from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence

import msal
import requests

from .exceptions import GraphError, RvmailConfigError

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_SCOPES: tuple[str, ...] = ("https://graph.microsoft.com/.default",)
DEFAULT_GRAPH_BASE = "https://graph.microsoft.com/v1.0"


@dataclass
class GraphConnection:
    """
    App-only connection to Microsoft Graph (tenant_id + client_id +
    client_secret). The app registration needs Mail.Send to send and
    Mail.Read to list messages.

    One connection can back any number of MailClient instances.
    """

    tenant_id: str
    client_id: str
    client_secret: str

    graph_scopes: Sequence[str] = field(
        default_factory=lambda: list(DEFAULT_GRAPH_SCOPES)
    )
    graph_base: str = DEFAULT_GRAPH_BASE
    timeout: int = 15

    _authority: str = field(init=False)
    _msal_app: Optional[msal.ConfidentialClientApplication] = field(
        init=False, default=None
    )
    _session: requests.Session = field(init=False)

    def __post_init__(self):
        if not self.tenant_id or not self.client_id or not self.client_secret:
            raise RvmailConfigError(
                "tenant_id, client_id and client_secret are required for GraphConnection"
            )

        self._authority = f"https://login.microsoftonline.com/{self.tenant_id}"
        self._session = requests.Session()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GraphConnection":
        return cls(
            tenant_id=settings.tenant_id,
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            graph_base=settings.graph_base,
            timeout=settings.timeout,
        )

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def msal_app(self) -> msal.ConfidentialClientApplication:
        if self._msal_app is None:
            self._msal_app = msal.ConfidentialClientApplication(
                self.client_id,
                authority=self._authority,
                client_credential=self.client_secret,
            )
        return self._msal_app

    def get_access_token(self) -> str:
        """
        Acquire an app-only token using client credentials. MSAL caches it
        until shortly before expiry.
        """
        result = self.msal_app.acquire_token_for_client(scopes=list(self.graph_scopes))

        if "access_token" not in result:
            logger.error("Token acquisition failed for client %s: %s", self.client_id, result.get("error"))
            raise RvmailConfigError(
                f"Failed to obtain access token: {json.dumps(result, indent=2)}"
            )
        return result["access_token"]

    def graph_request(
        self,
        method: str,
        url: str,
        expected_status=(200, 201, 204),
        token: Optional[str] = None,
        **kwargs,
    ):
        """
        Send one Graph request.

        - Adds Authorization and Accept headers
        - Raises GraphError on non-expected status codes
        - Returns parsed JSON for JSON responses, the raw response otherwise
          (202/204 replies from sendMail or DELETE carry no body)
        """
        if token is None:
            token = self.get_access_token()

        headers = kwargs.pop("headers", None) or {}
        headers.setdefault("Authorization", f"Bearer {token}")
        headers.setdefault("Accept", "application/json")

        if "json" in kwargs and "Content-Type" not in headers:
            headers["Content-Type"] = "application/json"

        timeout = kwargs.pop("timeout", self.timeout)
        logger.debug("Graph %s %s", method, url)
        resp = self._session.request(
            method,
            url,
            headers=headers,
            timeout=timeout,
            **kwargs,
        )

        if isinstance(expected_status, int):
            expected_status = (expected_status,)

        if resp.status_code not in expected_status:
            logger.warning("Graph %s %s returned %s", method, url, resp.status_code)
            raise GraphError(
                f"Graph {method} {url} failed", resp.status_code, resp.text
            )

        content_type = resp.headers.get("Content-Type", "")
        if (
            resp.status_code in (202, 204)
            or kwargs.get("stream")
            or "application/json" not in content_type
        ):
            return resp

        try:
            return resp.json()
        except ValueError:
            return resp
