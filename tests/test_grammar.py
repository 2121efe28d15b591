import pytest
from rfc_urn import (
    InvalidArgumentError,
    InvalidUrnError,
    SemanticError,
    UrnSyntaxError,
    is_syntactically_valid,
    segment,
    validate,
    validate_semantics,
)


def test_accepts_valid_texts(valid_urns):
    for text in valid_urns:
        assert is_syntactically_valid(text), text
        validate(text)


def test_rejects_malformed_texts(malformed_urns):
    for text in malformed_urns:
        assert not is_syntactically_valid(text), text
        with pytest.raises(UrnSyntaxError):
            validate(text)


def test_none_is_not_a_syntax_error():
    assert not is_syntactically_valid(None)
    with pytest.raises(InvalidArgumentError):
        validate(None)


def test_syntax_error_carries_text_and_reason():
    with pytest.raises(UrnSyntaxError) as exc_info:
        validate("some incorrect name")
    assert exc_info.value.text == "some incorrect name"
    assert exc_info.value.reason
    assert isinstance(exc_info.value, InvalidUrnError)
    assert isinstance(exc_info.value, ValueError)


def test_nid_urn_is_reserved():
    assert is_syntactically_valid("urn:urn:hello")
    with pytest.raises(SemanticError) as exc_info:
        validate("urn:urn:hello")
    assert "2.1" in exc_info.value.reason


def test_empty_urn_cant_have_nss():
    with pytest.raises(SemanticError):
        validate("urn:void:it-is-impossible-to-have-any-NSS-here")
    with pytest.raises(SemanticError):
        validate("urn:void:x?a=1")
    validate("urn:void:?a=1")
    validate("urn:void:*")


def test_semantic_check_of_nid():
    with pytest.raises(SemanticError):
        validate_semantics("urn:abcdefghijklmnopqrstuvwxyzabcdef:x")
    with pytest.raises(SemanticError):
        validate_semantics("urn:with-dash:x")
    with pytest.raises(SemanticError):
        validate_semantics("urn::x")
    validate_semantics("urn:foo:x")


def test_semantic_error_is_distinct_from_syntax_error():
    with pytest.raises(SemanticError) as exc_info:
        validate("urn:void:x")
    assert not isinstance(exc_info.value, UrnSyntaxError)
    assert isinstance(exc_info.value, InvalidUrnError)


def test_segments():
    assert segment("URN:hello:test", 0) == "URN"
    assert segment("urn:hello:test", 1) == "hello"
    assert segment("urn:hello:test", 2) == "test"


def test_segment_keeps_extra_colons():
    assert segment("urn:a:b:c:d", 2) == "b:c:d"
    assert segment("urn:woquo:ns:pa/x?name=*", 2) == "ns:pa/x?name=*"


def test_segment_keeps_empty_parts():
    assert segment("urn:a:", 2) == ""
    assert segment("urn::", 1) == ""


def test_segment_out_of_range():
    with pytest.raises(IndexError):
        segment("urn:a:b", 3)
    with pytest.raises(IndexError):
        segment("urn:a:b", -1)
    with pytest.raises(IndexError):
        segment("abc", 1)
