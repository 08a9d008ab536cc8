# src/cache/keys.py — v1
"""Store key builders for entries and tag sets.

Entries and tag sets live in separate sub-namespaces under a shared
prefix, so a tag can never shadow an entry with the same name.
"""

from __future__ import annotations

DEFAULT_PREFIX = "tagcache:"
ENTRY_NAMESPACE = "entry:"
TAG_NAMESPACE = "tag:"


def entry_key(fingerprint: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Store key for the entry addressed by fingerprint."""
    return f"{prefix}{ENTRY_NAMESPACE}{fingerprint}"


def tag_key(tag: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Store key for the membership set of tag."""
    return f"{prefix}{TAG_NAMESPACE}{tag}"
