from .message import MailMessage
from .compose import ComposeMessage
from .client import MailClient

__all__ = [
    "MailMessage",
    "ComposeMessage",
    "MailClient",
]
