"""
GET, POST and DELETE helpers over a shared httpx client.

Handles basic auth, custom headers, cookies and form, JSON, XML or multipart
bodies, and returns a flat ``Response`` (status, content length, body text,
headers joined per name).
"""
from .types import (
    ContentType,
    Cookie,
    DeleteRequest,
    GetRequest,
    PostRequest,
    Response,
)
from .config import RequestrConfig, get_config
from .errors import (
    InvalidContentTypeError,
    MultipartFileError,
    RequestBuildError,
    RequestSendError,
    RequestrError,
    ResponseReadError,
)
from .factory import create_async_http_client, create_http_client
from .core.dispatcher import AsyncRequestr, Requestr
from .core.multipart import create_multipart_form_data
from .api import (
    get_default_client,
    set_default_client,
    send_delete_request,
    send_get_request,
    send_post_request,
)

__all__ = [
    # Types
    "ContentType",
    "Cookie",
    "DeleteRequest",
    "GetRequest",
    "PostRequest",
    "Response",
    # Config
    "RequestrConfig",
    "get_config",
    # Errors
    "InvalidContentTypeError",
    "MultipartFileError",
    "RequestBuildError",
    "RequestSendError",
    "RequestrError",
    "ResponseReadError",
    # Clients
    "create_async_http_client",
    "create_http_client",
    "AsyncRequestr",
    "Requestr",
    # Multipart
    "create_multipart_form_data",
    # Module-level helpers
    "get_default_client",
    "set_default_client",
    "send_delete_request",
    "send_get_request",
    "send_post_request",
]

__version__ = "0.1.0"
