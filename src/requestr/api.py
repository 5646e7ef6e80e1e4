"""
Module-level request helpers.

These send through a process-wide ``Requestr`` built on first use from
``get_config()``, so HTTP_PROXY is read once and cookies accumulate for the
lifetime of the process. Any failure, including a client that cannot be built
from the configuration, is fatal: it is logged and the process exits with
status 1 before a partial result can be returned.
"""
import logging
import threading
from typing import Callable, NoReturn, Optional, TypeVar

from .console import print_failure
from .core.dispatcher import Requestr
from .errors import RequestrError
from .types import DeleteRequest, GetRequest, PostRequest, Response

logger = logging.getLogger("requestr.api")

T = TypeVar("T")

_default_client: Optional[Requestr] = None
_default_client_lock = threading.Lock()


def get_default_client() -> Requestr:
    """Return the shared dispatcher, creating it on first call."""
    global _default_client
    with _default_client_lock:
        if _default_client is None:
            _default_client = Requestr()
        return _default_client


def set_default_client(client: Optional[Requestr]) -> Optional[Requestr]:
    """Replace the shared dispatcher; returns the previous one (not closed)."""
    global _default_client
    with _default_client_lock:
        previous = _default_client
        _default_client = client
        return previous


def _fatal(exc: RequestrError) -> NoReturn:
    logger.critical(str(exc))
    print_failure(str(exc))
    raise SystemExit(1) from exc


def _run_or_exit(call: Callable[[], T]) -> T:
    try:
        return call()
    except RequestrError as exc:
        _fatal(exc)


def send_get_request(debug: bool, request_url: str, get_request: Optional[GetRequest] = None) -> Response:
    """Send a GET request on the shared client; exits the process on failure."""
    return _run_or_exit(lambda: get_default_client().get(request_url, get_request, debug=debug))


def send_post_request(debug: bool, request_url: str, post_request: PostRequest) -> Response:
    """Send a POST request on the shared client; exits the process on failure."""
    return _run_or_exit(lambda: get_default_client().post(request_url, post_request, debug=debug))


def send_delete_request(debug: bool, request_url: str, delete_request: Optional[DeleteRequest] = None) -> Response:
    """Send a DELETE request on the shared client; exits the process on failure."""
    return _run_or_exit(lambda: get_default_client().delete(request_url, delete_request, debug=debug))
