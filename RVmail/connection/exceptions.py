"""
Exceptions used throughout the RVmail package.

All custom exceptions inherit from BaseError so callers can catch
the entire family with a single handler if desired.
"""


class BaseError(Exception):
    """Base class for all RVmail-specific errors."""
    pass


class InvalidArgumentError(BaseError, ValueError):
    """
    Raised when a caller hands in a value that can never be processed,
    e.g. a blank address list.
    """
    pass


class AddressParseError(BaseError, ValueError):
    """
    Raised by the lenient address parser when an entry does not even
    look like a single address. The recipient resolver swallows it and
    degrades to the verbatim entry.
    """
    pass


class RvmailConfigError(BaseError):
    """
    Configuration or initialization errors:
      - Missing tenant ID / client ID / client secret
      - Bad environment variables (timeout, split strategy)
      - MSAL token acquisition failure (e.g., missing Mail.Send role)
    """
    pass


class GraphError(BaseError):
    """
    Raised when a Microsoft Graph call fails at the HTTP layer.

    Attributes:
        status_code (int): HTTP status code
        response_text (str): Raw response body from Graph
    """

    def __init__(self, message: str, status_code: int, response_text: str):
        super().__init__(f"{message} (status {status_code}): {response_text}")
        self.status_code = status_code
        self.response_text = response_text


class MailboxNotFoundError(BaseError):
    """Raised for Graph 404 responses on a mailbox, message or folder."""
    pass


class MailPermissionError(BaseError):
    """Raised for Graph 401/403 responses (missing Mail.* application roles)."""
    pass


class MailConflictError(BaseError):
    """Raised for Graph 409 responses, e.g. sending a draft twice."""
    pass


def translate_graph_error(target: str, e: GraphError) -> None:
    """
    Translate a low-level GraphError into a more specific mail
    exception, based on HTTP status code.

    Args:
        target: Human-readable description of the resource
                (e.g. "mailbox info@example.com", "message AAMk...").
        e: The GraphError instance to translate.

    Raises:
        MailboxNotFoundError
        MailPermissionError
        MailConflictError
        GraphError (re-raised if there is no special mapping)
    """
    msg = f"{target} (Graph status {e.status_code})"

    if e.status_code == 404:
        raise MailboxNotFoundError(f"Not found: {msg}") from e

    if e.status_code in (401, 403):
        raise MailPermissionError(f"Permission denied: {msg}") from e

    if e.status_code == 409:
        raise MailConflictError(f"Conflict: {msg}") from e

    raise e
