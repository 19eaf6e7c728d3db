"""
Request builder utilities for upstash_qstash.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import httpx

from ..auth.auth_handler import AuthHandler
from ..config import PUBLISH_PATH, ResolvedConfig
from ..errors import PublishRequestError
from ..message import PublishRequest
from ..types import PreparedRequest, RequestContext, Serializer

logger = logging.getLogger("upstash_qstash.request_builder")


def build_url(base_url: str, path: str) -> str:
    """Append an absolute path to the base URL, keeping the base path."""
    # urljoin would treat a destination such as "https://example.com/hook"
    # as a new URL, so the path is appended verbatim.
    parsed = urlparse(base_url)
    base_path = parsed.path.rstrip("/")
    return f"{parsed.scheme}://{parsed.netloc}{base_path}{path}"


def publish_path(destination: str) -> str:
    """Path for publishing to a URL, topic or queue name."""
    return PUBLISH_PATH + destination.lstrip("/")


def validate_url(url: str) -> None:
    """Reject URLs httpx would refuse to send."""
    try:
        httpx.URL(url)
    except httpx.InvalidURL as e:
        raise PublishRequestError(f"invalid publish URL: {e}") from e


def build_headers(
    config: ResolvedConfig,
    auth: Optional[AuthHandler] = None,
    headers: Optional[Dict[str, str]] = None,
    context: Optional[RequestContext] = None,
    has_body: bool = False,
) -> Dict[str, str]:
    """Build request headers.

    Precedence, lowest first: client defaults, per-request headers,
    content negotiation defaults, auth.
    """
    result = dict(config.headers)

    if headers:
        result.update(headers)

    lowered = {k.lower() for k in result}
    if has_body and "content-type" not in lowered:
        result["Content-Type"] = config.content_type
    if "accept" not in lowered:
        result["Accept"] = "application/json"

    if auth is not None and context is not None:
        auth_header = auth.get_header(context)
        if auth_header:
            for key in [k for k in result if k.lower() in {h.lower() for h in auth_header}]:
                del result[key]
            result.update(auth_header)
    else:
        logger.debug("build_headers: no auth handler, sending unauthenticated request")

    return result


def build_body(payload: Any, serializer: Serializer) -> str:
    """Serialize a payload, rejecting values the serializer cannot encode."""
    try:
        return serializer.serialize(payload)
    except (TypeError, ValueError) as e:
        raise PublishRequestError(f"payload is not serializable: {e}") from e


def build_publish_request(
    config: ResolvedConfig,
    auth: AuthHandler,
    request: PublishRequest,
) -> PreparedRequest:
    """Turn a PublishRequest into a POST against the publish endpoint."""
    path = publish_path(request.destination)
    url = build_url(config.base_url, path)
    validate_url(url)

    extra_headers = request.settings.as_headers()
    context = RequestContext(method="POST", path=path, headers=extra_headers)

    content = build_body(request.payload, config.serializer)
    request_headers = build_headers(config, auth, extra_headers, context, has_body=True)

    logger.debug(f"build_publish_request: url={url}, headers={sorted(request_headers)}")
    return PreparedRequest(method="POST", url=url, headers=request_headers, content=content)
