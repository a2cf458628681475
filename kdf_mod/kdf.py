from __future__ import annotations
import logging
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KDFParams:
    # Applied when the caller omits iterations or passes a non-positive count.
    # No upper bound is enforced.
    iterations: int = 100_000
    salt_len: int = 16


def derive_key(
    password: bytes,
    salt: bytes,
    iterations: int,
    key_length: int,
    algorithm: type[hashes.HashAlgorithm],
) -> bytes:
    """PBKDF2 (RFC 2898) over HMAC-<algorithm>.

    Inputs are expected to be validated by the caller. Returns exactly
    key_length bytes; identical inputs always produce identical output.
    """
    logger.debug(
        "PBKDF2-HMAC-%s: %d iterations, %d byte salt, %d byte key",
        algorithm.name, iterations, len(salt), key_length,
    )
    kdf = PBKDF2HMAC(
        algorithm=algorithm(),
        length=key_length,
        salt=bytes(salt),
        iterations=iterations,
    )
    return kdf.derive(bytes(password))
