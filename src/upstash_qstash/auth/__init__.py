"""
Auth handlers for upstash_qstash.
"""
from .auth_handler import (
    AuthHandler,
    BearerAuthHandler,
)

__all__ = [
    "AuthHandler",
    "BearerAuthHandler",
]
