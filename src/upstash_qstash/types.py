"""
Type definitions for upstash_qstash.
"""
from typing import (
    Any,
    Dict,
    Literal,
    Optional,
    Protocol,
    Union,
)
from dataclasses import dataclass, field


# HTTP methods
HttpMethod = Literal["POST"]


@dataclass
class RequestContext:
    """Request context passed to auth handlers."""

    method: HttpMethod
    path: str
    headers: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class PreparedRequest:
    """Fully specified HTTP request, ready for the transport."""

    method: HttpMethod
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[Union[str, bytes]] = None


@dataclass(frozen=True)
class TransportResponse:
    """Raw response handed back by the transport adapter."""

    status: int
    reason: str
    headers: Dict[str, str]
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Serializer(Protocol):
    """Serializer protocol for custom JSON handling."""

    def serialize(self, data: Any) -> str:
        """Serialize data to string."""
        ...

    def deserialize(self, text: str) -> Any:
        """Deserialize string to data."""
        ...


class AsyncTransportProtocol(Protocol):
    """Async transport interface."""

    async def send(self, request: PreparedRequest) -> TransportResponse:
        ...

    async def close(self) -> None:
        ...


class SyncTransportProtocol(Protocol):
    """Sync transport interface."""

    def send(self, request: PreparedRequest) -> TransportResponse:
        ...

    def close(self) -> None:
        ...
