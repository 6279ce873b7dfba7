"""Digest helpers: request signing and content checksums."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any

# Parameters that never take part in the request signature.
_UNSIGNED_PARAMS: frozenset[str] = frozenset({
    "api_key",
    "file",
    "resource_type",
    "signature",
})


def md5_checksum(data: bytes) -> str:
    """Return the hex-encoded MD5 digest of *data*.

    Used to fingerprint uploaded content in tracking records; **not** a
    security primitive.

    Examples
    --------
    >>> md5_checksum(b"hello")
    '5d41402abc4b2a76b9719d911017c592'
    """
    return hashlib.md5(data).hexdigest()


def api_signature(params: Mapping[str, Any], api_secret: str) -> str:
    """Return the SHA-1 signature of a request's parameters.

    Parameters are sorted by key, serialised as ``key=value`` pairs joined
    with ``&`` and suffixed with *api_secret* before hashing.  Empty values
    and the unsigned parameters (``api_key``, ``file``, ``resource_type``,
    ``signature``) are excluded.

    Examples
    --------
    >>> api_signature({"public_id": "a", "timestamp": 1}, "s")
    '01cef644b4aae010a240228ea0682b4fdb6db393'
    """
    to_sign = "&".join(
        f"{key}={params[key]}"
        for key in sorted(params)
        if key not in _UNSIGNED_PARAMS and params[key] not in (None, "")
    )
    return hashlib.sha1((to_sign + api_secret).encode("utf-8")).hexdigest()
