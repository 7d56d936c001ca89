"""TTL envelope — inline expiration marker in front of a serialized payload.

On-disk layout of an entry::

    #^e:<unix seconds>\\n<payload>     expiring entry
    <payload>                         non-expiring entry

The marker is always the first line.  Payloads produced by the bundled
serializers never start with ``#``, so the sentinel cannot be confused with
payload bytes.
"""

from __future__ import annotations

import re
from collections.abc import Callable

SENTINEL = b"#^e:"

_LEADING_INT = re.compile(rb"\s*([+-]?\d+)")


def encode(payload: bytes, expire_at: int | None = None) -> bytes:
    """Prefix *payload* with an expiry marker, or return it unchanged."""
    if expire_at is None:
        return payload
    return SENTINEL + str(int(expire_at)).encode("ascii") + b"\n" + payload


def read_expiry(line: bytes) -> int | None:
    """Return the expiry stored in a first line, or ``None`` if it has no marker.

    The number is read leniently up to the first non-digit.  A marker with
    no number at all reads as ``0``, i.e. long expired.
    """
    if not line.startswith(SENTINEL):
        return None
    match = _LEADING_INT.match(line, len(SENTINEL))
    return int(match.group(1)) if match else 0


def is_expired(expire_at: int, now: int) -> bool:
    # Strict: an entry is still live during the second it expires in.
    return expire_at < now


def decode(data: bytes, now: int, on_expire: Callable[[], None]) -> bytes | None:
    """Strip the marker from *data* and return the payload.

    Returns ``None`` after calling *on_expire* when the entry has expired.
    """
    if not data.startswith(SENTINEL):
        return data

    header, newline, payload = data.partition(b"\n")
    expire_at = read_expiry(header)
    if expire_at is not None and is_expired(expire_at, now):
        on_expire()
        return None
    return payload if newline else b""
