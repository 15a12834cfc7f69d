from .graph import GraphConnection
from .exceptions import (
    AddressParseError,
    BaseError,
    GraphError,
    InvalidArgumentError,
    MailboxNotFoundError,
    MailConflictError,
    MailPermissionError,
    RvmailConfigError,
    translate_graph_error,
)

__all__ = [
    "GraphConnection",
    "AddressParseError",
    "BaseError",
    "GraphError",
    "InvalidArgumentError",
    "MailboxNotFoundError",
    "MailConflictError",
    "MailPermissionError",
    "RvmailConfigError",
    "translate_graph_error",
]
