"""Error kinds raised while parsing, building and reading URNs"""

from typing import Iterable, Optional


class UrnError(Exception):
    """Base exception for URN errors"""
    pass


class InvalidArgumentError(UrnError, ValueError):
    """Required input is missing, or a value was rejected"""
    pass


class InvalidUrnError(UrnError, ValueError):
    """Text is not a valid URN"""
    def __init__(self, text: Optional[str], reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: '{text}'")


class UrnSyntaxError(InvalidUrnError):
    """Text does not match the URN grammar"""
    pass


class SemanticError(InvalidUrnError):
    """Text matches the grammar but breaks a structural rule"""
    pass


class EncodingError(UrnError, ValueError):
    """Malformed percent-escape or a byte sequence that is not UTF-8"""
    pass


class ParamNotFoundError(UrnError, LookupError):
    """Requested query parameter is absent"""
    def __init__(self, name: str, urn: str, keys: Iterable[str]):
        self.name = name
        self.urn = urn
        self.keys = list(keys)
        super().__init__(f"Param '{name}' not found in '{urn}', among {self.keys}")
