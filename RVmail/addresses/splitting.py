"""
Splitting of free-form address lists into single address entries.

A list such as ``Doe, Jane <jane@x.com>; bob@y.com`` cannot simply be
split on ``,``/``;`` because both characters are legal inside display
names. Two strategies are offered:

  - "heuristic": recognises the tail of each address (``@...`` plus an
    optional ``>``) and only treats a delimiter right after such a tail
    as a separator.
  - "scanner": walks the string once, tracking quotes, angle brackets and
    comments, and treats a delimiter as a separator only at nesting depth
    zero once the current entry has shown its ``@``.

The scanner is the default. The heuristic still splits on a quoted
display name that itself ends in ``name@domain>,``; the scanner does not.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..connection.exceptions import InvalidArgumentError
from ..utils.preconditions import check_argument_not_empty

logger = logging.getLogger(__name__)

HEURISTIC = "heuristic"
SCANNER = "scanner"
STRATEGIES = (HEURISTIC, SCANNER)
DEFAULT_SPLIT_STRATEGY = SCANNER

# never part of an address or a display name on its own
TOKEN = "<|>"

_ADDRESS_TAIL_DELIMITER = re.compile(r"(@.*?>?)\s*[,;]")
_TRAILING_TOKEN = re.compile(r"<\|>$")
_TOKEN_DELIMITER = re.compile(r"\s*<\|>\s*")
_DELIMITER_ARTIFACTS = re.compile(r"^[\s,;]+|[\s,;]+$")


def _clean(fragment: str) -> str:
    return _DELIMITER_ARTIFACTS.sub("", fragment)


def _collect(fragments) -> List[str]:
    out: List[str] = []
    for fragment in fragments:
        entry = _clean(fragment)
        if entry:
            out.append(entry)
    return out


def extract_email_addresses(address_list: str) -> List[str]:
    """
    Tail-anchored split.

    Every delimiter that directly follows ``@domain`` (optionally closed
    by ``>``) is swapped for TOKEN, after which the list is split on
    TOKEN. Delimiters anywhere else stay part of the entry.

    Args:
        address_list: One or more addresses, optionally with names.

    Returns:
        The entries in input order, trimmed.

    Raises:
        InvalidArgumentError: for None, empty or blank input.
    """
    check_argument_not_empty(address_list, "address_list")

    unambiguous = _ADDRESS_TAIL_DELIMITER.sub(r"\1" + TOKEN, address_list.strip())
    unambiguous = _TRAILING_TOKEN.sub("", unambiguous)
    return _collect(_TOKEN_DELIMITER.split(unambiguous))


def tokenize_address_list(address_list: str) -> List[str]:
    """
    Single-pass split that tracks quoted strings, ``<...>`` and ``(...)``
    nesting.

    A ``,`` or ``;`` ends the current entry only when it sits outside
    quotes, brackets and comments, and the entry already contains an
    ``@`` outside quotes. A delimiter met while the entry is still blank
    is dropped, so repeated delimiters never yield empty entries.

    Raises:
        InvalidArgumentError: for None, empty or blank input.
    """
    check_argument_not_empty(address_list, "address_list")

    fragments: List[str] = []
    current: List[str] = []
    blank = True
    seen_at = False
    in_quotes = False
    escaped = False
    angle_depth = 0
    comment_depth = 0

    for ch in address_list:
        if escaped:
            escaped = False
        elif ch == "\\" and (in_quotes or comment_depth):
            escaped = True
        elif in_quotes:
            if ch == '"':
                in_quotes = False
        elif comment_depth:
            if ch == "(":
                comment_depth += 1
            elif ch == ")":
                comment_depth -= 1
        elif ch == '"':
            in_quotes = True
        elif ch == "(":
            comment_depth = 1
        elif ch == "<":
            angle_depth += 1
        elif ch == ">":
            angle_depth = max(angle_depth - 1, 0)
        elif ch == "@":
            seen_at = True
        elif ch in ",;" and not angle_depth:
            if seen_at:
                fragments.append("".join(current))
                current, blank, seen_at = [], True, False
                continue
            if blank:
                continue

        current.append(ch)
        if blank and not ch.isspace():
            blank = False

    fragments.append("".join(current))
    return _collect(fragments)


def split_address_list(address_list: str, strategy: Optional[str] = None) -> List[str]:
    """
    Split ``address_list`` into single address entries.

    Args:
        address_list: Delimited list of addresses (or a single address),
            each optionally preceded by a display name.
        strategy: "scanner" or "heuristic"; None picks DEFAULT_SPLIT_STRATEGY.

    Returns:
        List of entries in input order, each trimmed of whitespace and
        leftover delimiters.

    Raises:
        InvalidArgumentError: blank input or an unknown strategy.
    """
    strategy = strategy or DEFAULT_SPLIT_STRATEGY
    if strategy == SCANNER:
        entries = tokenize_address_list(address_list)
    elif strategy == HEURISTIC:
        entries = extract_email_addresses(address_list)
    else:
        raise InvalidArgumentError(
            f"Unknown address split strategy {strategy!r}, expected one of {STRATEGIES}"
        )

    logger.debug("Split address list into %d entries (%s)", len(entries), strategy)
    return entries
