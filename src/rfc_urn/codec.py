"""Percent-encoding of URN bodies and the query-parameter codec

Both the namespace-specific string and parameter values are encoded to
the same restricted alphabet, so the allowed-byte predicate lives here
and is shared by every encoding path.
"""

import string
from typing import Dict, List, Mapping

from .errors import EncodingError


ENCODING = "utf-8"
QUERY = "?"
PAIR_SEP = "&"
KV_SEP = "="
WILDCARD = "*"


def is_allowed(byte: int) -> bool:
    """Check if a byte can appear literally in an encoded URN body"""
    return (
        0x41 <= byte <= 0x5A      # A-Z
        or 0x61 <= byte <= 0x7A   # a-z
        or 0x30 <= byte <= 0x39   # 0-9
        or byte in (0x2F, 0x2D)   # / -
    )


def encode(text: str) -> str:
    """Percent-encode text to the allowed alphabet

    Works on the UTF-8 bytes of the text, so a multi-byte character
    becomes one `%XX` triplet per byte. Hex digits are uppercase.
    """
    try:
        data = text.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise EncodingError(f"Text can't be encoded as {ENCODING}: {text!r}") from e

    result: List[str] = []
    for byte in data:
        if is_allowed(byte):
            result.append(chr(byte))
        else:
            result.append(f"%{byte:02X}")
    return "".join(result)


def decode(text: str) -> str:
    """Replace every `%XX` triplet with its byte and read the result as UTF-8

    Unlike form decoding, `+` stays a plus sign.
    """
    data = bytearray()
    pos = 0
    while pos < len(text):
        c = text[pos]
        if c == '%':
            escape = text[pos + 1:pos + 3]
            if len(escape) != 2 or any(h not in string.hexdigits for h in escape):
                raise EncodingError(f"Malformed escape sequence '%{escape}' at position {pos} in '{text}'")
            data.append(int(escape, 16))
            pos += 3
        else:
            try:
                data.extend(c.encode(ENCODING))
            except UnicodeEncodeError as e:
                raise EncodingError(f"Invalid character at position {pos} in {text!r}") from e
            pos += 1

    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise EncodingError(f"Decoded bytes of '{text}' are not valid {ENCODING}") from e


def decode_params(text: str) -> Dict[str, str]:
    """Decode the `?...` suffix of a URN into a dict of name to value

    A trailing wildcard marker is not part of the last value. Names come
    back in the order they appear; a name without `=` maps to "".
    """
    if text.endswith(WILDCARD):
        text = text[:-1]

    params: Dict[str, str] = {}
    if QUERY not in text:
        return params

    query = text.split(QUERY, 1)[1]
    for part in query.split(PAIR_SEP):
        if not part:
            continue
        key, sep, value = part.partition(KV_SEP)
        params[key] = decode(value) if sep else ""
    return params


def encode_params(params: Mapping[str, str]) -> str:
    """Encode params into a `?...` suffix, sorted by name

    Sorting makes the suffix independent of insertion order. Names are
    written as-is; empty values are written as a bare name.
    """
    if not params:
        return ""

    pairs = []
    for key in sorted(params):
        value = params[key]
        if value:
            pairs.append(f"{key}{KV_SEP}{encode(value)}")
        else:
            pairs.append(key)
    return QUERY + PAIR_SEP.join(pairs)
