import pytest


VALID_URNS = [
    "URN:hello:test",
    "Urn:hello:test",
    "urn:foo:some%20text%20with%20spaces",
    "urn:a:",
    "urn:a:?alpha=50",
    "urn:a:?boom",
    "urn:a:test?123",
    "urn:a:test?1a2b3c",
    "urn:a:test?1A2B3C",
    "urn:a:?alpha=abccde%20%45%4Fme",
    "urn:woquo:ns:pa/procure/BalanceRecord?name=*",
    "urn:a:?alpha=50&beta=u%20worksfine",
    "urn:verylongnamespaceid:",
    "urn:a:?alpha=50*",
    "urn:a:b/c/d",
    "urn:a:b:c:d",
    "urn:test:*",
    "urn:void:",
    "urn:abcdefghijklmnopqrstuvwxyzabcde:x",
]

MALFORMED_URNS = [
    "abc",
    "",
    "urn::",
    "urn:incorrect namespace name with spaces:test",
    "urn:abc+foo:test-me",
    "urn:test:?abc?",
    "urn:test:?abc=incorrect*value",
    "urn:test:?abc=invalid-symbols:^%$#&@*()!-in-argument-value",
    "urn:incorrect%20namespace:",
    "urn:verylongnameofanamespaceverylongnameofanamespace:",
    "urn:abcdefghijklmnopqrstuvwxyzabcdef:x",
    "urn:test:spaces are not allowed here",
    "urn:test:unicode-has-to-be-encoded:\u8514",
    "urn:Test:x",
    "urn:test",
    "urn:test:%2",
    "urn:test:x\n",
    " urn:test:x",
    "urn:test:x**",
]


@pytest.fixture
def valid_urns():
    return list(VALID_URNS)


@pytest.fixture
def malformed_urns():
    return list(MALFORMED_URNS)
