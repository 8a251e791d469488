"""Identifier generation for domain entities.

IDs are UUIDv7 strings: unique across processes and time-ordered, so they
sort by creation time when persisted.

Usage:
    from sales.core.identity import generate_id

    payment_id = generate_id()  # "0192f4c1-7b0e-7c3a-9d1e-5f2a8b6c4d3e"
"""

from uuid_extensions import uuid7


def generate_id() -> str:
    """Return a new unique identifier string (UUIDv7)."""
    return str(uuid7())
