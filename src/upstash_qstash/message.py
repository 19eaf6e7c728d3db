"""
Publish request and result models.

``PublishSettings`` carries the optional per-message options QStash reads from
``Upstash-*`` headers. Every option defaults to ``None``, meaning the header is
not sent and the server-side default applies.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import invalid_header_reason
from .errors import PublishRequestError

HEADER_DELAY = "Upstash-Delay"
HEADER_RETRIES = "Upstash-Retries"
HEADER_CRON = "Upstash-Cron"
HEADER_CALLBACK = "Upstash-Callback"
HEADER_DEDUPLICATION_ID = "Upstash-Deduplication-Id"


@dataclass(frozen=True)
class PublishSettings:
    """Optional parameters for a published message.

    Attributes:
        delay: Delay relative to publish time, as ``(number)(unit)``,
            e.g. ``"10s"``, ``"30m"``, ``"2h"``, ``"7d"``.
        retries: How many times QStash retries delivery. The ceiling
            depends on the account plan.
        cron: Cron expression (evaluated in UTC); turns the publish into
            a schedule.
        callback: URL QStash calls with the destination's response once
            delivery finishes.
        deduplication_id: Messages sharing this id are accepted but only
            enqueued once.
        headers: Extra headers sent along with the message.
    """

    delay: Optional[str] = None
    retries: Optional[int] = None
    cron: Optional[str] = None
    callback: Optional[str] = None
    deduplication_id: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.retries is not None:
            if isinstance(self.retries, bool) or not isinstance(self.retries, int):
                raise PublishRequestError(
                    f"retries must be an int, got {type(self.retries).__name__}"
                )
            if self.retries < 0:
                raise PublishRequestError(f"retries must be >= 0, got {self.retries}")

        for name, value in self.as_headers().items():
            reason = invalid_header_reason(name, value)
            if reason:
                raise PublishRequestError(reason)

    def as_headers(self) -> Dict[str, str]:
        """Render the options that are set as QStash headers."""
        headers: Dict[str, str] = {}

        if self.delay is not None:
            headers[HEADER_DELAY] = self.delay
        if self.retries is not None:
            headers[HEADER_RETRIES] = str(self.retries)
        if self.cron is not None:
            headers[HEADER_CRON] = self.cron
        if self.callback is not None:
            headers[HEADER_CALLBACK] = self.callback
        if self.deduplication_id is not None:
            headers[HEADER_DEDUPLICATION_ID] = self.deduplication_id
        headers.update(self.headers)

        return headers


@dataclass(frozen=True)
class PublishRequest:
    """One logical publish: where to deliver, what to deliver, and how."""

    destination: str
    payload: Any
    settings: PublishSettings = field(default_factory=PublishSettings)

    def __post_init__(self):
        if not isinstance(self.destination, str) or not self.destination.strip():
            raise PublishRequestError("destination is required")
        if self.settings is None:
            object.__setattr__(self, "settings", PublishSettings())


class PublishResult(BaseModel):
    """Acknowledgement returned by QStash for one accepted message."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    message_id: str = Field(alias="messageId")
    url: Optional[str] = None
    deduplicated: bool = False
