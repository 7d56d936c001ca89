"""Key derivation — logical keys to on-disk filenames."""

from __future__ import annotations

import hashlib
import hmac

HMAC_DIGEST = "sha256"


def directory_secret(directory: str) -> bytes:
    """Return the HMAC key for a store rooted at *directory*.

    The hex MD5 of the path string.  Two stores over different directories
    get different secrets, so the same logical key maps to different files.
    """
    return hashlib.md5(directory.encode("utf-8"), usedforsecurity=False).hexdigest().encode("ascii")


def derive_filename(secret: bytes, key: str) -> str:
    """Return the filename backing *key*.

    Hex-encoded HMAC of the key, so the result is fixed-length, restricted
    to ``[0-9a-f]`` and cannot escape the store directory.
    """
    return hmac.new(secret, key.encode("utf-8"), HMAC_DIGEST).hexdigest()
