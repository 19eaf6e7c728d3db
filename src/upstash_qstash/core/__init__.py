"""
Core modules for upstash_qstash.
"""
from .request_builder import (
    build_headers,
    build_body,
    build_publish_request,
    build_url,
    publish_path,
    validate_url,
)
from .response_interpreter import (
    ErrorBody,
    ErrorBodyKind,
    StatusClass,
    classify_status,
    generic_message,
    interpret_publish_response,
    parse_error_body,
    parse_publish_result,
)
from .transport import AsyncTransport, SyncTransport

__all__ = [
    "build_url",
    "build_headers",
    "build_body",
    "build_publish_request",
    "publish_path",
    "validate_url",
    "ErrorBody",
    "ErrorBodyKind",
    "StatusClass",
    "classify_status",
    "generic_message",
    "interpret_publish_response",
    "parse_error_body",
    "parse_publish_result",
    "AsyncTransport",
    "SyncTransport",
]
