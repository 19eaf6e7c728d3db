"""
Client for Upstash QStash, the HTTP messaging and scheduling service.

Serializes publish requests, attaches bearer auth, makes one HTTP call via
httpx, and turns the answer into a typed result or a typed error.
"""
from .types import (
    HttpMethod,
    PreparedRequest,
    RequestContext,
    Serializer,
    TransportResponse,
)
from .config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    DefaultSerializer,
    TimeoutConfig,
)
from .errors import (
    QStashError,
    InitError,
    PublishRequestError,
    ApiError,
    TransportError,
    DeserializationError,
    RemoteError,
)
from .message import PublishRequest, PublishResult, PublishSettings
from .auth.auth_handler import AuthHandler, BearerAuthHandler
from .core.response_interpreter import StatusClass, classify_status
from .core.transport import AsyncTransport, SyncTransport
from .client import AsyncQStashClient, QStashClient
from .factory import create_client, create_sync_client

__all__ = [
    # Types
    "HttpMethod",
    "PreparedRequest",
    "RequestContext",
    "Serializer",
    "TransportResponse",
    # Config
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "DefaultSerializer",
    "TimeoutConfig",
    # Errors
    "QStashError",
    "InitError",
    "PublishRequestError",
    "ApiError",
    "TransportError",
    "DeserializationError",
    "RemoteError",
    # Messages
    "PublishRequest",
    "PublishResult",
    "PublishSettings",
    # Auth
    "AuthHandler",
    "BearerAuthHandler",
    # Responses
    "StatusClass",
    "classify_status",
    # Transport
    "AsyncTransport",
    "SyncTransport",
    # Clients
    "AsyncQStashClient",
    "QStashClient",
    # Factory
    "create_client",
    "create_sync_client",
]

__version__ = "0.1.0"
