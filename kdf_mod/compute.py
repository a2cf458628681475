from __future__ import annotations
import base64
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Callable, Mapping, Optional, Union

from . import hashes
from .errors import MissingPassword
from .kdf import KDFParams, derive_key
from .salt import resolve_salt
from .schema import INPUT_FIELDS

logger = logging.getLogger(__name__)


@dataclass
class DerivationRequest:
    password: Union[str, bytes]
    hash_function: str
    salt: Optional[str] = None
    iterations: Optional[int] = None
    key_length: Optional[int] = None

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> "DerivationRequest":
        """Build a request from data source field names; absent fields are None."""
        unknown = set(fields) - INPUT_FIELDS
        if unknown:
            raise ValueError(f"Unknown request fields: {', '.join(sorted(unknown))}")
        return cls(
            password=fields.get("password") or b"",
            hash_function=fields.get("hash_function"),
            salt=fields.get("salt"),
            iterations=fields.get("iterations"),
            key_length=fields.get("key_length"),
        )


@dataclass(frozen=True)
class DerivationResult:
    salt: str  # base64
    key: str   # base64

    def salt_bytes(self) -> bytes:
        return base64.b64decode(self.salt)

    def key_bytes(self) -> bytes:
        return base64.b64decode(self.key)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def _password_bytes(password: Union[str, bytes, None]) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password or b"")


def _positive_or(value: Optional[int], default: int) -> int:
    if value is None or value <= 0:
        return default
    return value


def compute_key(
    request: DerivationRequest,
    params: KDFParams = KDFParams(),
    *,
    randbytes: Callable[[int], bytes] = os.urandom,
) -> DerivationResult:
    """Derive a PBKDF2 key for one request.

    Steps run in a fixed order: check the password, resolve the salt
    (generating params.salt_len bytes when none is given), default the
    iteration count, resolve the hash function, default the key length,
    derive. Only the password, salt and hash steps can fail; the first
    failure is raised as a KeyDerivationError subclass and no partial
    result is produced. The returned salt is the one actually used, freshly
    generated when the request carried none.
    """
    password = _password_bytes(request.password)
    if not password:
        raise MissingPassword()

    salt, salt64 = resolve_salt(request.salt, length=params.salt_len, randbytes=randbytes)

    iterations = _positive_or(request.iterations, params.iterations)

    kind = hashes.resolve(request.hash_function)
    key_length = _positive_or(request.key_length, kind.digest_size)

    key = derive_key(password, salt, iterations, key_length, kind.algorithm)
    logger.debug("derived %d byte key with %s", len(key), kind.name)

    return DerivationResult(
        salt=salt64,
        key=base64.b64encode(key).decode("ascii"),
    )
