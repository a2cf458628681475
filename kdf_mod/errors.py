from __future__ import annotations


class KeyDerivationError(ValueError):
    """Base class for every failure reported by compute_key()."""

    summary = "PBKDF2 Error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class MissingPassword(KeyDerivationError):
    def __init__(self, detail: str = "password is required"):
        super().__init__(detail)


class InvalidSaltEncoding(KeyDerivationError):
    pass


class RandomnessUnavailable(KeyDerivationError):
    pass


class UnsupportedHashKind(KeyDerivationError):
    def __init__(self, identifier: object):
        super().__init__(f"unknown hash function: {identifier!r}")
        self.identifier = identifier
