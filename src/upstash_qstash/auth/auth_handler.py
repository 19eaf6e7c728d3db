"""
Auth handler utilities for upstash_qstash.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..types import RequestContext
from ..config import mask_sensitive, validate_token

logger = logging.getLogger("upstash_qstash.auth")


class AuthHandler(ABC):
    """Auth handler interface."""

    @abstractmethod
    def get_header(self, context: RequestContext) -> Optional[Dict[str, str]]:
        """Get auth header for request."""
        ...


class BearerAuthHandler(AuthHandler):
    """Holds a QStash token and renders it as a bearer Authorization header.

    The token is checked once, here; a handler never exists with a blank token.
    """

    def __init__(self, token: str):
        self._token = validate_token(token)

    @property
    def token(self) -> str:
        return self._token

    def get_header(self, context: RequestContext) -> Optional[Dict[str, str]]:
        """Get bearer auth header."""
        header = {"Authorization": f"Bearer {self._token}"}
        logger.debug(
            f"BearerAuthHandler.get_header: {context.method} {context.path} "
            f"token={mask_sensitive(self._token)}"
        )
        return header

    def __repr__(self) -> str:
        return f"BearerAuthHandler(token={mask_sensitive(self._token)!r})"
