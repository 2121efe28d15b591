"""Uniform Resource Name value as in RFC 2141

The canonical text is the whole state of a URN. Every accessor derives
its answer from that text, and every "mutator" returns a new URN built
from a new, re-validated text.
"""

import logging
from functools import total_ordering
from typing import Any, Dict, Optional, Union
from urllib.parse import SplitResult, urlsplit

from .codec import QUERY, WILDCARD, decode, decode_params, encode, encode_params
from .errors import InvalidArgumentError, ParamNotFoundError, UrnError
from .grammar import (
    EMPTY,
    MAX_NID_LENGTH,
    NID_PATTERN,
    PARAM_NAME_PATTERN,
    PREFIX,
    SEP,
    raw_nss,
    segment,
    validate,
)


log = logging.getLogger(__name__)


@total_ordering
class Urn:
    """A URN with optional query params and an optional trailing wildcard

    Examples:
    - `urn:isbn:0451450523`
    - `urn:test:x?bar=1&foo` (query params)
    - `urn:test:*` (pattern matching any `urn:test:` URN)

    Usage:

        urn = Urn.from_string("urn:foo:A123-456")
        assert urn.nid() == "foo"
        assert urn.nss() == "A123-456"

    NOTICE: lexical equivalence from RFC 2141 section 6 is not
    implemented; `URN:foo:a` and `urn:foo:a` are different values.
    """

    __slots__ = ("_text",)

    def __init__(self, nid: str = EMPTY, nss: str = ""):
        """Create a URN from a namespace ID and a raw namespace specific string

        The NSS is percent-encoded here. Any rejection is reported as
        InvalidArgumentError. Without arguments this is the empty URN.
        """
        if nid is None:
            raise InvalidArgumentError("NID can't be None")
        if nss is None:
            raise InvalidArgumentError("NSS can't be None")
        # NID goes into the text unencoded, a colon in it would shift the NSS
        if not isinstance(nid, str) or not NID_PATTERN.fullmatch(nid):
            raise InvalidArgumentError(f"NID '{nid}' can contain up to {MAX_NID_LENGTH} low case letters")
        try:
            text = f"{PREFIX}{SEP}{nid}{SEP}{encode(nss)}"
            validate(text)
        except UrnError as e:
            log.debug("Rejected URN components %r, %r: %s", nid, nss, e)
            raise InvalidArgumentError(f"Can't build URN from NID '{nid}' and NSS {nss!r}: {e}") from e
        object.__setattr__(self, "_text", text)

    @classmethod
    def _trusted(cls, text: str) -> 'Urn':
        urn = cls.__new__(cls)
        object.__setattr__(urn, "_text", text)
        return urn

    @classmethod
    def from_string(cls, text: str) -> 'Urn':
        """Create a URN from its text, kept verbatim as the canonical form

        Raises UrnSyntaxError if the text doesn't match the grammar and
        SemanticError if it breaks a structural rule (NID, reserved word,
        empty URN with NSS). None is an InvalidArgumentError.
        """
        validate(text)
        return cls._trusted(text)

    @classmethod
    def create(cls, text: str) -> 'Urn':
        """Create a URN from its text, reporting any failure as InvalidArgumentError"""
        if text is None:
            raise InvalidArgumentError("URN can't be None")
        try:
            return cls.from_string(text)
        except UrnError as e:
            log.debug("Rejected URN %r: %s", text, e)
            raise InvalidArgumentError(str(e)) from e

    @classmethod
    def from_parts(cls, nid: str, nss: str) -> 'Urn':
        """Create a URN from a namespace ID and a raw namespace specific string"""
        return cls(nid, nss)

    @classmethod
    def empty(cls) -> 'Urn':
        """Create the empty URN, `urn:void:`"""
        return cls()

    @staticmethod
    def is_valid(text: Optional[str]) -> bool:
        """Check if the text is a valid URN"""
        if text is None:
            return False
        try:
            validate(text)
        except UrnError:
            return False
        return True

    def to_string(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Urn('{self._text}')"

    def nid(self) -> str:
        """Get the namespace ID"""
        return segment(self._text, 1)

    def nss(self) -> str:
        """Get the decoded namespace specific string, without params and wildcard"""
        return decode(raw_nss(self._text))

    def is_empty(self) -> bool:
        return self.nid() == EMPTY

    def params(self) -> Dict[str, str]:
        """Get all query params, decoded"""
        return decode_params(self._text)

    def param(self, name: str) -> str:
        """Get a query param by name

        A param given without a value (`?flag`) is "". Raises
        ParamNotFoundError if there is no such param.
        """
        if name is None:
            raise InvalidArgumentError("Param name can't be None")
        params = self.params()
        if name not in params:
            raise ParamNotFoundError(name, self._text, params.keys())
        return params[name]

    def with_param(self, name: str, value: Any) -> 'Urn':
        """Add or overwrite a query param

        The name must be letters, digits or underscores; the value is
        converted with str(). Params are written in name order, so the
        result doesn't depend on the order they were added. A trailing
        wildcard stays at the end.
        """
        if name is None:
            raise InvalidArgumentError("Param name can't be None")
        if value is None:
            raise InvalidArgumentError(f"Value of param '{name}' can't be None")
        if not isinstance(name, str) or not PARAM_NAME_PATTERN.fullmatch(name):
            raise InvalidArgumentError(f"Param name '{name}' can contain only letters, digits and '_'")
        params = self.params()
        params[name] = str(value)
        try:
            suffix = encode_params(params)
        except UrnError as e:
            raise InvalidArgumentError(f"Can't encode value of param '{name}': {e}") from e
        return Urn.create(self._body() + suffix + self._wildcard())

    def pure(self) -> 'Urn':
        """Get the URN without its query params, keeping a trailing wildcard"""
        if not self.has_params():
            return self
        return Urn.create(self._body() + self._wildcard())

    def _body(self) -> str:
        body = self._text.split(QUERY, 1)[0]
        if body.endswith(WILDCARD):
            return body[:-1]
        return body

    def _wildcard(self) -> str:
        return WILDCARD if self._text.endswith(WILDCARD) else ""

    def has_params(self) -> bool:
        return QUERY in self._text

    def matches(self, pattern: Union[str, 'Urn']) -> bool:
        """Check if this URN matches a pattern

        The pattern matches when it is exactly this URN, or when it ends
        with `*` and this URN starts with the rest of it.
        """
        if pattern is None:
            raise InvalidArgumentError("Pattern can't be None")
        pattern = str(pattern)
        if self._text == pattern:
            return True
        if pattern.endswith(WILDCARD):
            return self._text.startswith(pattern[:-1])
        return False

    def to_uri(self) -> SplitResult:
        """Convert to the generic URI form of urllib"""
        return urlsplit(self._text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Urn):
            return False
        return self._text == other._text

    def __lt__(self, other: 'Urn') -> bool:
        if not isinstance(other, Urn):
            return NotImplemented
        return self._text < other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Urn is immutable, can't set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Urn is immutable, can't delete '{name}'")

    def __reduce__(self):
        return (Urn.from_string, (self._text,))

    def __copy__(self) -> 'Urn':
        return self

    def __deepcopy__(self, memo) -> 'Urn':
        return self
