"""RFC URN - Uniform Resource Names as in RFC 2141

This package parses, validates, builds and renders URNs, with optional
query params (`?a=1&b`) and a trailing wildcard (`*`) for matching.
"""

from .codec import decode, decode_params, encode, encode_params
from .errors import (
    UrnError,
    InvalidArgumentError,
    InvalidUrnError,
    UrnSyntaxError,
    SemanticError,
    EncodingError,
    ParamNotFoundError,
)
from .grammar import is_syntactically_valid, segment, validate, validate_semantics
from .mocker import UrnMocker
from .urn import Urn

__version__ = "0.1.0"

__all__ = [
    "Urn",
    "UrnMocker",
    "UrnError",
    "InvalidArgumentError",
    "InvalidUrnError",
    "UrnSyntaxError",
    "SemanticError",
    "EncodingError",
    "ParamNotFoundError",
    "encode",
    "decode",
    "encode_params",
    "decode_params",
    "is_syntactically_valid",
    "validate",
    "validate_semantics",
    "segment",
]
