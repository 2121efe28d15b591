"""Random URN values for tests"""

import uuid

from .urn import Urn


class UrnMocker:
    """Builder of random, valid URNs

    Defaults to NID `test` and a random UUID as NSS, so two mocks made
    with the defaults are never equal.
    """

    def __init__(self):
        self.nid = "test"
        self.nss = str(uuid.uuid4())

    def with_nid(self, name: str) -> 'UrnMocker':
        self.nid = name
        return self

    def with_nss(self, text: str) -> 'UrnMocker':
        self.nss = text
        return self

    def mock(self) -> Urn:
        return Urn(self.nid, self.nss)
