"""
Transport adapters over httpx.

The adapters send one prepared request and hand back the raw response. Any
httpx failure (connect, DNS, TLS, timeout, protocol) becomes TransportError.
"""
import logging
from typing import Optional

import httpx

from ..config import ResolvedConfig
from ..errors import TransportError
from ..types import PreparedRequest, TransportResponse
from .trace import mask_headers, trace_request, trace_response

logger = logging.getLogger("upstash_qstash.transport")


def _httpx_timeout(config: ResolvedConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.timeout.connect,
        read=config.timeout.read,
        write=config.timeout.write,
        pool=config.timeout.connect,
    )


def _to_transport_response(response: httpx.Response) -> TransportResponse:
    return TransportResponse(
        status=response.status_code,
        reason=response.reason_phrase or "",
        headers=dict(response.headers),
        text=response.text,
    )


class AsyncTransport:
    """Asynchronous transport backed by ``httpx.AsyncClient``.

    An injected client is borrowed and left open on ``close()``; a client the
    transport built itself is owned and closed.
    """

    def __init__(
        self,
        config: ResolvedConfig,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = config
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = httpx.AsyncClient(timeout=_httpx_timeout(config))
            self._owns_client = True

    async def send(self, request: PreparedRequest) -> TransportResponse:
        logger.debug(
            f"AsyncTransport.send: {request.method} {request.url} "
            f"headers={mask_headers(request.headers)}"
        )
        if self._config.verbose:
            trace_request(request)

        try:
            response = await self._client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=request.content,
            )
        except httpx.HTTPError as e:
            raise TransportError(e) from e

        result = _to_transport_response(response)
        logger.debug(f"AsyncTransport.send: {request.url} -> {result.status} {result.reason}")
        if self._config.verbose:
            trace_response(request, result)
        return result

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class SyncTransport:
    """Synchronous transport backed by ``httpx.Client``."""

    def __init__(
        self,
        config: ResolvedConfig,
        httpx_client: Optional[httpx.Client] = None,
    ):
        self._config = config
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = httpx.Client(timeout=_httpx_timeout(config))
            self._owns_client = True

    def send(self, request: PreparedRequest) -> TransportResponse:
        logger.debug(
            f"SyncTransport.send: {request.method} {request.url} "
            f"headers={mask_headers(request.headers)}"
        )
        if self._config.verbose:
            trace_request(request)

        try:
            response = self._client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=request.content,
            )
        except httpx.HTTPError as e:
            raise TransportError(e) from e

        result = _to_transport_response(response)
        logger.debug(f"SyncTransport.send: {request.url} -> {result.status} {result.reason}")
        if self._config.verbose:
            trace_response(request, result)
        return result

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
