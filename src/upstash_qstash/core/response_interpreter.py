"""
Response interpretation: status classification, error bodies, result parsing.
"""
import json
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..errors import DeserializationError, RemoteError
from ..message import PublishResult
from ..types import TransportResponse


class StatusClass(str, Enum):
    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNEXPECTED = "unexpected"


class ErrorBodyKind(str, Enum):
    EMPTY = "empty"
    NOT_JSON = "not_json"
    NO_MESSAGE = "no_message"
    MESSAGE = "message"


@dataclass(frozen=True)
class ErrorBody:
    """Outcome of reading a failure body. ``message`` is set only for MESSAGE."""

    kind: ErrorBodyKind
    message: Optional[str] = None


PublishOutcome = Union[PublishResult, List[PublishResult]]

_publish_adapter: TypeAdapter = TypeAdapter(Union[PublishResult, List[PublishResult]])


def classify_status(status: int) -> StatusClass:
    """Map a status code onto exactly one class."""
    if 200 <= status <= 299:
        return StatusClass.SUCCESS
    if 400 <= status <= 499:
        return StatusClass.CLIENT_ERROR
    if 500 <= status <= 599:
        return StatusClass.SERVER_ERROR
    return StatusClass.UNEXPECTED


def generic_message(status: int) -> str:
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "Unexpected status"
    return f"HTTP {status} {phrase}"


def parse_error_body(text: Optional[str]) -> ErrorBody:
    """Read a server-provided message out of a failure body, if there is one."""
    if not text or not text.strip():
        return ErrorBody(ErrorBodyKind.EMPTY)

    try:
        data: Any = json.loads(text)
    except ValueError:
        return ErrorBody(ErrorBodyKind.NOT_JSON)

    if isinstance(data, dict):
        for key in ("error", "message"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                return ErrorBody(ErrorBodyKind.MESSAGE, value)
    return ErrorBody(ErrorBodyKind.NO_MESSAGE)


def remote_error(response: TransportResponse, status_class: StatusClass) -> RemoteError:
    body = parse_error_body(response.text)
    if body.kind is ErrorBodyKind.MESSAGE:
        message = body.message
    else:
        message = generic_message(response.status)
    return RemoteError(
        status=response.status,
        message=message,
        body=response.text or "",
        status_class=status_class.value,
    )


def parse_publish_result(text: str, serializer: Any) -> PublishOutcome:
    """Parse a success body into one result, or a list for topic fan-out."""
    try:
        data = serializer.deserialize(text)
    except ValueError as e:
        raise DeserializationError(text, e) from e

    try:
        return _publish_adapter.validate_python(data)
    except ValidationError as e:
        raise DeserializationError(text, e) from e


def interpret_publish_response(response: TransportResponse, serializer: Any) -> PublishOutcome:
    """Return the publish result, or raise the matching ApiError."""
    status_class = classify_status(response.status)
    if status_class is not StatusClass.SUCCESS:
        raise remote_error(response, status_class)
    return parse_publish_result(response.text, serializer)
