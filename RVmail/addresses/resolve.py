"""
Resolution of single address entries into Recipient records.
"""

from __future__ import annotations

import logging
import re
from email.utils import getaddresses
from typing import List, Optional, Tuple

from ..connection.exceptions import AddressParseError
from ..utils.preconditions import check_argument_not_empty
from .recipient import Recipient, RecipientType
from .splitting import split_address_list

logger = logging.getLogger(__name__)

_ANGLE_ADDR = re.compile(r"^(?P<name>[^<]*)<(?P<address>[^<>]*)>\s*$", re.DOTALL)
_QUOTED_PAIR = re.compile(r"\\(.)", re.DOTALL)
_NOT_IN_ADDRESS = re.compile(r'[\s"<>,;]')


def _clean_name(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    name = raw.strip()
    if len(name) >= 2 and name[0] == '"' and name[-1] == '"':
        name = _QUOTED_PAIR.sub(r"\1", name[1:-1]).strip()
    return name or None


def parse_address(entry: str) -> Tuple[Optional[str], str]:
    """
    Leniently parse one address entry.

    ``Name <addr>`` takes everything before ``<`` as the display name,
    quoted or not, so ``Doe, Jane <jane@x.com>`` keeps its comma. Any
    other form goes through ``email.utils.getaddresses`` and only the
    first address it finds is used.

    Returns:
        (display name or None, bare address)

    Raises:
        AddressParseError: when no usable address can be extracted.
    """
    match = _ANGLE_ADDR.match(entry.strip())
    if match:
        name, address = match.group("name"), match.group("address").strip()
    else:
        parsed = getaddresses([entry])
        if not parsed:
            raise AddressParseError(f"No address found in {entry!r}")
        name, address = parsed[0]

    if not address or _NOT_IN_ADDRESS.search(address):
        raise AddressParseError(f"Cannot interpret {entry!r} as a single address")
    return _clean_name(name), address


def select_name(name: Optional[str], embedded_name: Optional[str], fixed_name: bool) -> Optional[str]:
    """
    Pick the display name for a recipient.

    With ``fixed_name`` the caller's name wins; without it the name found
    in the address text wins. Either way, if the preferred one is absent
    the other is used. Empty strings count as absent.
    """
    name = name or None
    embedded_name = embedded_name or None
    if fixed_name or embedded_name is None:
        return name if name is not None else embedded_name
    return embedded_name


def resolve_recipient(
    name: Optional[str],
    fixed_name: bool,
    entry: str,
    type: Optional[RecipientType] = None,
) -> Recipient:
    """
    Turn one address entry into a Recipient.

    Never raises for a malformed entry: when the entry cannot be parsed,
    the result carries the caller's name and the entry verbatim as its
    address, leaving the final verdict to the mail server.

    Args:
        name: Name supplied by the caller, independent of the entry.
        fixed_name: When True, ``name`` overrides a name found in ``entry``.
        entry: ``"Name <addr@domain>"``, ``"addr@domain"`` or anything else.
        type: Recipient role, passed through unchanged.
    """
    try:
        embedded_name, address = parse_address(entry)
    except AddressParseError as e:
        logger.debug("Keeping unparsable address entry verbatim: %s", e)
        return Recipient(name or None, entry, type)

    return Recipient(select_name(name, embedded_name, fixed_name), address, type)


def resolve_recipients(
    address_list: str,
    name: Optional[str] = None,
    fixed_name: bool = False,
    type: Optional[RecipientType] = None,
    strategy: Optional[str] = None,
) -> List[Recipient]:
    """
    Split ``address_list`` and resolve every entry with the same naming
    hints and role.

    Raises:
        InvalidArgumentError: for a blank ``address_list``.
    """
    check_argument_not_empty(address_list, "address_list")
    return [
        resolve_recipient(name, fixed_name, entry, type)
        for entry in split_address_list(address_list, strategy)
    ]
