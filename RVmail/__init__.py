from .addresses import (
    Recipient,
    RecipientType,
    parse_address,
    resolve_recipient,
    resolve_recipients,
    select_name,
    split_address_list,
)
from .config import Settings, configure_logging, load_settings
from .connection import GraphConnection
from .outlook import ComposeMessage, MailClient, MailMessage

__all__ = [
    "Recipient",
    "RecipientType",
    "parse_address",
    "resolve_recipient",
    "resolve_recipients",
    "select_name",
    "split_address_list",
    "Settings",
    "configure_logging",
    "load_settings",
    "GraphConnection",
    "ComposeMessage",
    "MailClient",
    "MailMessage",
]
