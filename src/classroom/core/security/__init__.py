"""Security utilities.

Re-exports token helpers for convenience.
"""

from src.classroom.core.security.crypto import (
    create_access_token,
    decode_token,
    generate_invitation_key,
)

__all__ = [
    "create_access_token",
    "decode_token",
    "generate_invitation_key",
]
