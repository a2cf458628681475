from __future__ import annotations
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes

from .errors import UnsupportedHashKind


@dataclass(frozen=True)
class HashKind:
    name: str
    algorithm: type[hashes.HashAlgorithm]
    digest_size: int  # bytes, also the default derived key length


_REGISTRY = {
    "sha1": HashKind("sha1", hashes.SHA1, 20),
    "sha256": HashKind("sha256", hashes.SHA256, 32),
    "sha512": HashKind("sha512", hashes.SHA512, 64),
}

SUPPORTED_HASHES = tuple(_REGISTRY)


def resolve(identifier: str) -> HashKind:
    try:
        return _REGISTRY[identifier]
    except (KeyError, TypeError):
        raise UnsupportedHashKind(identifier) from None
