"""Whole-text URN grammar and structural rules

The grammar is the strict RFC 2141 variant: a NID of 1 to 31 lowercase
letters, and a body made of letters, digits, `/`, `-` and `%XX`
escapes. Only the leading `urn` token is case-insensitive.
"""

import logging
import re
from typing import Optional

from .codec import QUERY, WILDCARD
from .errors import InvalidArgumentError, SemanticError, UrnSyntaxError


log = logging.getLogger(__name__)

PREFIX = "urn"
SEP = ":"
EMPTY = "void"
MAX_NID_LENGTH = 31

_CHAR = r"(?:[\-a-zA-Z0-9/]|%[0-9a-fA-F]{2})"
_PAIR = rf"\w+(?:={_CHAR}*)?"

URN_PATTERN = re.compile(
    rf"(?i:{PREFIX}):[a-z]{{1,{MAX_NID_LENGTH}}}(?::{_CHAR}*)+(?:\?{_PAIR}(?:&{_PAIR})*)?\*?",
    re.ASCII,
)
NID_PATTERN = re.compile(rf"[a-z]{{1,{MAX_NID_LENGTH}}}", re.ASCII)
PARAM_NAME_PATTERN = re.compile(r"\w+", re.ASCII)


def segment(text: str, index: int) -> str:
    """Get one of the three colon-separated parts of a URN text

    0 is the prefix, 1 is the NID and 2 is everything after the second
    colon, further colons included. Empty parts are kept.
    """
    if not 0 <= index <= 2:
        raise IndexError(f"URN has no segment {index}")
    return text.split(SEP, 2)[index]


def raw_nss(text: str) -> str:
    """Get the still-encoded NSS: segment 2 without query and wildcard"""
    tail = segment(text, 2)
    if QUERY in tail:
        return tail.split(QUERY, 1)[0]
    if tail.endswith(WILDCARD):
        return tail[:-1]
    return tail


def is_syntactically_valid(text: Optional[str]) -> bool:
    """Check text against the whole-string grammar only"""
    return text is not None and URN_PATTERN.fullmatch(text) is not None


def validate(text: Optional[str]) -> None:
    """Check both the grammar and the structural rules

    Raises UrnSyntaxError or SemanticError; None is an InvalidArgumentError.
    """
    if text is None:
        raise InvalidArgumentError("URN text can't be None")
    if not is_syntactically_valid(text):
        log.debug("Rejected malformed URN %r", text)
        raise UrnSyntaxError(text, "Invalid format of URN")
    validate_semantics(text)


def validate_semantics(text: str) -> None:
    """Check the rules the grammar alone doesn't express"""
    nid = segment(text, 1)
    if not NID_PATTERN.fullmatch(nid):
        reason = f"NID '{nid}' can contain up to {MAX_NID_LENGTH} low case letters"
    elif nid.lower() == PREFIX:
        reason = f"NID can't be '{PREFIX}' according to RFC 2141, section 2.1"
    elif nid == EMPTY and raw_nss(text):
        reason = "Empty URN can't have NSS"
    else:
        return
    log.debug("Rejected URN %r: %s", text, reason)
    raise SemanticError(text, reason)
