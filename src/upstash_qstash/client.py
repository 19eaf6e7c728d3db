"""
QStash client facade.

Example:
    async with AsyncQStashClient("your-token") as qstash:
        result = await qstash.publish_json(
            "https://example.com/api/webhook",
            {"key1": "value1", "key2": "value2"},
            PublishSettings(delay="10s", retries=3),
        )
        print(result.message_id)
"""
import logging
from typing import Any, Dict, Optional, Union

import httpx

from .auth.auth_handler import BearerAuthHandler
from .config import DEFAULT_BASE_URL, ClientConfig, ResolvedConfig, TimeoutConfig, resolve_config
from .core.request_builder import build_publish_request
from .core.response_interpreter import PublishOutcome, interpret_publish_response
from .core.transport import AsyncTransport, SyncTransport
from .message import PublishRequest, PublishSettings
from .types import AsyncTransportProtocol, SyncTransportProtocol

logger = logging.getLogger("upstash_qstash.client")


class _BaseClient:
    def __init__(self, config: ClientConfig):
        self._config: ResolvedConfig = resolve_config(config)
        self._auth = BearerAuthHandler(self._config.token)
        self._closed = False

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("Client has been closed")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, auth={self._auth!r})"


class AsyncQStashClient(_BaseClient):
    """Asynchronous QStash client.

    Holds only immutable configuration and a transport handle, so a single
    instance can be shared by concurrent tasks.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Union[TimeoutConfig, float, None] = None,
        headers: Optional[Dict[str, str]] = None,
        verbose: bool = False,
        httpx_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[AsyncTransportProtocol] = None,
    ):
        super().__init__(
            ClientConfig(
                token=token,
                base_url=base_url,
                timeout=timeout,
                headers=dict(headers or {}),
                verbose=verbose,
            )
        )
        self._transport = transport or AsyncTransport(self._config, httpx_client=httpx_client)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ) -> "AsyncQStashClient":
        return cls(
            config.token,
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.headers,
            verbose=config.verbose,
            httpx_client=httpx_client,
        )

    async def publish(self, request: PublishRequest) -> PublishOutcome:
        """Publish a message; one network call, no retries.

        Cancelling the awaiting task raises ``asyncio.CancelledError`` as usual
        rather than TransportError; nothing is retried and no state is kept.
        """
        self._check_open()
        logger.debug(f"publish: destination={request.destination}")
        prepared = build_publish_request(self._config, self._auth, request)
        response = await self._transport.send(prepared)
        return interpret_publish_response(response, self._config.serializer)

    async def publish_json(
        self,
        destination: str,
        payload: Any,
        settings: Optional[PublishSettings] = None,
    ) -> PublishOutcome:
        """Publish a JSON message to a URL, topic or queue.

        Args:
            destination: Full URL of the endpoint, or a topic/queue name.
            payload: Any JSON-serializable value, pydantic model or dataclass.
            settings: Optional delay, retries, cron, callback, dedup id, headers.

        Returns:
            The PublishResult, or one per subscriber when publishing to a topic.

        Raises:
            PublishRequestError: blank or unsendable destination, or a payload
                that is not JSON (unserializable values, NaN, mixed key types).
            TransportError: no response was received.
            RemoteError: QStash answered with a non-2xx status.
            DeserializationError: a 2xx answer whose body could not be parsed.
        """
        request = PublishRequest(destination, payload, settings or PublishSettings())
        return await self.publish(request)

    async def close(self) -> None:
        """Close the client."""
        self._closed = True
        await self._transport.close()

    async def __aenter__(self) -> "AsyncQStashClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class QStashClient(_BaseClient):
    """Synchronous QStash client."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Union[TimeoutConfig, float, None] = None,
        headers: Optional[Dict[str, str]] = None,
        verbose: bool = False,
        httpx_client: Optional[httpx.Client] = None,
        transport: Optional[SyncTransportProtocol] = None,
    ):
        super().__init__(
            ClientConfig(
                token=token,
                base_url=base_url,
                timeout=timeout,
                headers=dict(headers or {}),
                verbose=verbose,
            )
        )
        self._transport = transport or SyncTransport(self._config, httpx_client=httpx_client)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        httpx_client: Optional[httpx.Client] = None,
    ) -> "QStashClient":
        return cls(
            config.token,
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.headers,
            verbose=config.verbose,
            httpx_client=httpx_client,
        )

    def publish(self, request: PublishRequest) -> PublishOutcome:
        """Publish a message; one network call, no retries."""
        self._check_open()
        logger.debug(f"publish: destination={request.destination}")
        prepared = build_publish_request(self._config, self._auth, request)
        response = self._transport.send(prepared)
        return interpret_publish_response(response, self._config.serializer)

    def publish_json(
        self,
        destination: str,
        payload: Any,
        settings: Optional[PublishSettings] = None,
    ) -> PublishOutcome:
        """Publish a JSON message. See ``AsyncQStashClient.publish_json``."""
        request = PublishRequest(destination, payload, settings or PublishSettings())
        return self.publish(request)

    def close(self) -> None:
        """Close the client."""
        self._closed = True
        self._transport.close()

    def __enter__(self) -> "QStashClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
