"""
Rich request/response tracing, enabled with ``verbose=True``.
"""
import json
from typing import Any, Dict, Optional, Union

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from ..config import mask_sensitive
from ..types import PreparedRequest, TransportResponse

console = Console(stderr=True)

_SENSITIVE_HEADERS = ("authorization",)


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask authorization header for safe logging."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in _SENSITIVE_HEADERS:
            masked[key] = mask_sensitive(masked[key], 15)
    return masked


def _format_body(body: Optional[Union[str, bytes]]) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    try:
        return json.dumps(json.loads(body), indent=2, ensure_ascii=False)
    except ValueError:
        return body


def _print_body(body: Any, title: str) -> None:
    text = _format_body(body)
    if text:
        console.print(Panel(Syntax(text, "json", word_wrap=True), title=title))


def trace_request(request: PreparedRequest) -> None:
    console.print(
        Panel(
            f"[bold cyan]{request.method}[/bold cyan] {request.url}",
            title="[bold blue]Request[/bold blue]",
        )
    )
    console.print("[bold]Headers:[/bold]", mask_headers(request.headers))
    _print_body(request.content, "[bold]Request Body[/bold]")


def trace_response(request: PreparedRequest, response: TransportResponse) -> None:
    color = "green" if response.ok else "red"
    console.print(
        Panel(
            f"[bold {color}]{response.status}[/bold {color}] {response.reason}",
            title=f"[bold blue]Response[/bold blue] ({request.url})",
        )
    )
    console.print("[bold]Headers:[/bold]", response.headers)
    _print_body(response.text, "[bold]Response Body[/bold]")
