"""
Console output for requestr.

Status lines use the ``[=]`` / ``[+]`` / ``[-]`` markers; payloads are
printed as-is so they can be copied out of a terminal.
"""
from __future__ import annotations

from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, highlight=False)


def mask_auth_header(value: Optional[str], visible_chars: int = 15) -> str:
    """Mask an Authorization header value, keeping the scheme readable."""
    if not value:
        return "<none>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "***"


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of headers with credentials masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in ("authorization", "proxy-authorization", "cookie"):
            masked[key] = mask_auth_header(masked[key])
    return masked


def print_info(message: str) -> None:
    console.print(f"[=] {escape(message)}")


def print_success(message: str) -> None:
    console.print(f"[green][+][/green] {escape(message)}")


def print_failure(message: str) -> None:
    console.print(f"[red][-][/red] {escape(message)}")


def print_payload(payload: str) -> None:
    """Print a request or response body without markup processing."""
    console.print(payload, markup=False)


def print_headers(headers: Dict[str, str]) -> None:
    """Print one ``name = value`` line per header, tab-indented."""
    for name, value in headers.items():
        console.print(f"\t{name} = {value}", markup=False)
    console.print("")
