from .recipient import Recipient, RecipientType
from .resolve import parse_address, resolve_recipient, resolve_recipients, select_name
from .splitting import (
    DEFAULT_SPLIT_STRATEGY,
    STRATEGIES,
    extract_email_addresses,
    split_address_list,
    tokenize_address_list,
)

__all__ = [
    "Recipient",
    "RecipientType",
    "parse_address",
    "resolve_recipient",
    "resolve_recipients",
    "select_name",
    "split_address_list",
    "extract_email_addresses",
    "tokenize_address_list",
    "DEFAULT_SPLIT_STRATEGY",
    "STRATEGIES",
]
