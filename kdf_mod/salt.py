from __future__ import annotations
import base64
import binascii
import logging
import os
from typing import Callable, Optional

from .errors import InvalidSaltEncoding, RandomnessUnavailable
from .kdf import KDFParams

logger = logging.getLogger(__name__)

SALT_LEN = KDFParams.salt_len


def _unwrap(salt64: str) -> str:
    # Line breaks inside wrapped base64 are skipped, not rejected.
    return salt64.replace("\r", "").replace("\n", "")


def new_salt(length: int = SALT_LEN, randbytes: Callable[[int], bytes] = os.urandom) -> bytes:
    try:
        return randbytes(length)
    except (OSError, NotImplementedError) as e:
        raise RandomnessUnavailable(f"error generating salt: {e}") from e


def resolve_salt(
    salt64: Optional[str] = None,
    *,
    length: int = SALT_LEN,
    randbytes: Callable[[int], bytes] = os.urandom,
) -> tuple[bytes, str]:
    """Return (raw salt, base64 salt) for a caller-supplied or missing salt.

    A missing or empty salt is replaced by `length` fresh random bytes.
    A supplied salt must be standard base64 apart from embedded CR/LF;
    whatever it decodes to is used as-is, with no minimum length. The encoded
    half of the result is always re-encoded from the raw bytes, so it decodes
    to exactly what was used.
    """
    if not salt64:
        salt = new_salt(length, randbytes)
        logger.debug("generated %d byte salt", len(salt))
    else:
        try:
            salt = base64.b64decode(_unwrap(salt64), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidSaltEncoding(f"error decoding salt: {e}") from e
        logger.debug("using supplied %d byte salt", len(salt))

    return salt, base64.b64encode(salt).decode("ascii")
