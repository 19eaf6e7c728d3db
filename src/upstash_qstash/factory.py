"""
Factory functions for creating QStash clients.
"""
from typing import Any

from .client import AsyncQStashClient, QStashClient


def create_client(token: str, **options: Any) -> AsyncQStashClient:
    """Create an async client. Options are the AsyncQStashClient keywords."""
    return AsyncQStashClient(token, **options)


def create_sync_client(token: str, **options: Any) -> QStashClient:
    """Create a sync client. Options are the QStashClient keywords."""
    return QStashClient(token, **options)
