"""
Version-5 UUID checks: canonical string format, and binding of a UUID
to the exact bytes it was derived from.
"""

import hashlib
import re
import uuid
from typing import Union

_UUID_V5 = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-5[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}"
)


def validate_uuid(value: object) -> bool:
    """
    Return True if value is a canonical, hyphenated version-5 variant-1 UUID.
    Case-insensitive. Never raises.
    """
    return isinstance(value, str) and _UUID_V5.fullmatch(value) is not None


def derive_uuid(namespace: uuid.UUID, content: bytes) -> uuid.UUID:
    """Name-based (SHA-1) UUID of content within namespace, as in RFC 4122."""
    digest = hashlib.sha1(namespace.bytes + bytes(content)).digest()
    return uuid.UUID(bytes=digest[:16], version=5)


def validate_file_uuid(
    namespace: uuid.UUID,
    content: bytes,
    candidate: Union[uuid.UUID, str],
) -> bool:
    """
    Check that candidate is the version-5 UUID of content under namespace.

    The same bytes give a different UUID in another namespace, so a UUID
    issued for one namespace never validates in another.
    """
    if isinstance(candidate, str):
        try:
            candidate = uuid.UUID(candidate)
        except ValueError:
            return False
    return derive_uuid(namespace, content) == candidate
