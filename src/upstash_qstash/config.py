"""
Configuration for upstash_qstash.
"""
import dataclasses
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel

from .errors import InitError
from .types import Serializer

DEFAULT_BASE_URL = "https://qstash.upstash.io"
PUBLISH_PATH = "/v1/publish/"
DEFAULT_CONTENT_TYPE = "application/json"


def mask_sensitive(value: Optional[str], visible_chars: int = 10) -> str:
    """Mask sensitive value for safe logging."""
    if value is None:
        return "<None>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


@dataclass(frozen=True)
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class ClientConfig:
    """Client configuration."""

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Union[TimeoutConfig, float, None] = None
    headers: Dict[str, str] = field(default_factory=dict)
    verbose: bool = False

    def __repr__(self) -> str:
        return (
            f"ClientConfig(token={mask_sensitive(self.token)!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout!r}, "
            f"headers={sorted(self.headers)!r}, verbose={self.verbose!r})"
        )


# Default values
DEFAULT_TIMEOUT = TimeoutConfig()


def _to_jsonable(value: Any) -> Any:
    """``json.dumps`` fallback for payloads that know how to dump themselves."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class DefaultSerializer:
    """Default JSON serializer.

    Keys are sorted so the encoding does not depend on dict insertion order,
    which means every dict key in a payload must be of one comparable type
    (``{1: "a", "b": 2}`` raises TypeError). NaN and infinities are not JSON
    and raise ValueError.
    """

    def serialize(self, data: Any) -> str:
        """Serialize data to JSON string."""
        return json.dumps(
            data,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_to_jsonable,
        )

    def deserialize(self, text: str) -> Any:
        """Deserialize JSON string to data."""
        return json.loads(text)


default_serializer = DefaultSerializer()


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def validate_token(token: Any) -> str:
    """Return the token unchanged, or raise InitError if it is blank."""
    if not isinstance(token, str):
        raise InitError(f"token must be a string, got {type(token).__name__}")
    if not token.strip():
        raise InitError("token is required")
    return token


def invalid_header_reason(name: str, value: Any) -> Optional[str]:
    """Why a header cannot be sent as-is, or None when it can."""
    for part in (name, value):
        if not isinstance(part, str):
            return f"header {name!r} must be str, got {type(part).__name__}"
        if any(ch in part for ch in "\r\n\0"):
            return f"header {name!r} contains a CR, LF or NUL character"
        try:
            part.encode("ascii")
        except UnicodeEncodeError:
            return f"header {name!r} contains non-ASCII characters"
    return None


def validate_config(config: ClientConfig) -> None:
    """Validate client configuration."""
    validate_token(config.token)
    reason = invalid_header_reason("Authorization", config.token)
    if reason:
        raise InitError(f"token cannot be sent: {reason}")

    if not config.base_url:
        raise InitError("base_url is required")

    parsed = urlparse(config.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InitError(f"Invalid base_url: {config.base_url}")
    try:
        httpx.URL(config.base_url)
    except httpx.InvalidURL as e:
        raise InitError(f"Invalid base_url: {config.base_url}: {e}") from e

    for name, value in config.headers.items():
        reason = invalid_header_reason(name, value)
        if reason:
            raise InitError(reason)


@dataclass(frozen=True)
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    token: str
    base_url: str
    timeout: TimeoutConfig
    headers: Dict[str, str]
    content_type: str
    verbose: bool
    serializer: Serializer

    def __repr__(self) -> str:
        return (
            f"ResolvedConfig(token={mask_sensitive(self.token)!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout!r}, "
            f"verbose={self.verbose!r})"
        )


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Resolve client configuration with defaults."""
    validate_config(config)

    return ResolvedConfig(
        token=config.token,
        base_url=config.base_url.rstrip("/"),
        timeout=normalize_timeout(config.timeout),
        headers=dict(config.headers),
        content_type=DEFAULT_CONTENT_TYPE,
        verbose=config.verbose,
        serializer=default_serializer,
    )
