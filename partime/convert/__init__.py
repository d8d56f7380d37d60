"""Conversions of partial temporal values to canonical bytes.

Functions:
    canonical_bytes: Deterministic encoding of precision tag and fields.
    hash_into: Feed that encoding into a hash sink.
    content_hash: Hex digest of that encoding.
"""

from __future__ import annotations

from partime.convert.canonical import canonical_bytes, content_hash, hash_into

__all__: list[str] = [
    "canonical_bytes",
    "hash_into",
    "content_hash",
]
