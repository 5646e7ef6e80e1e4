"""
Request builder utilities for requestr.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

import httpx

from ..auth import encode_basic_auth
from ..errors import InvalidContentTypeError, RequestBuildError
from ..types import (
    CONTENT_TYPES,
    Cookie,
    DeleteRequest,
    FormValue,
    GetRequest,
    HttpMethod,
    PostRequest,
    Response,
)
from .multipart import create_multipart_form_data, empty_multipart_body

logger = logging.getLogger("requestr.request_builder")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPE = "application/xml"

RequestOptions = Union[GetRequest, PostRequest, DeleteRequest]
HeaderList = List[Tuple[str, str]]
BodyKwargs = Dict[str, Any]


def encode_form_data(form: Mapping[str, FormValue]) -> bytes:
    """URL-encode form values, sorted by key; list values repeat the key."""
    pairs: List[Tuple[str, str]] = []
    for key in sorted(form):
        value = form[key]
        if isinstance(value, str):
            pairs.append((key, value))
        else:
            pairs.extend((key, item) for item in value)
    return urlencode(pairs).encode("ascii")


def build_post_body(options: PostRequest) -> Tuple[BodyKwargs, Optional[str]]:
    """
    Return ``(body_kwargs, content_type)`` for the POST request mode.

    ``body_kwargs`` is passed to ``build_request`` as-is. For multipart parts
    the content type is left to httpx, which adds the boundary.
    """
    mode = options.content_type

    if mode == "multipart":
        parts = create_multipart_form_data(options.multipart_data)
        if not parts:
            content, content_type = empty_multipart_body()
            return {"content": content}, content_type
        return {"files": parts}, None

    if mode == "form":
        return {"content": encode_form_data(options.form_data)}, FORM_CONTENT_TYPE

    if mode == "json":
        return {"content": options.json_data}, JSON_CONTENT_TYPE

    if mode == "xml":
        return {"content": options.xml_data}, XML_CONTENT_TYPE

    if mode == "none":
        return {}, None

    raise InvalidContentTypeError(mode)


def build_headers(
    options: RequestOptions,
    content_type: Optional[str] = None,
) -> HeaderList:
    """
    Build request headers in send order: content type, basic auth, then
    custom headers. Custom headers are appended, never replaced.
    """
    headers: HeaderList = []

    if content_type:
        headers.append(("Content-Type", content_type))

    if options.auth_user:
        headers.extend(encode_basic_auth(options.auth_user, options.auth_pass).items())

    if isinstance(options, PostRequest):
        headers.extend((str(k), str(v)) for k, v in options.headers.items())

    return headers


def attach_cookies(request: httpx.Request, cookies: Sequence[Cookie]) -> None:
    """Put explicit cookies ahead of the Cookie header produced from the jar."""
    if not cookies:
        return
    explicit = "; ".join(str(cookie) for cookie in cookies)
    existing = request.headers.get("Cookie")
    request.headers["Cookie"] = f"{explicit}; {existing}" if existing else explicit


def is_domain_or_subdomain(host: str, parent: str) -> bool:
    """``sub.example.com`` and ``example.com`` both match ``example.com``."""
    host, parent = host.lower(), parent.lower()
    return host == parent or host.endswith("." + parent)


def redirect_cookies(
    cookies: Sequence[Cookie],
    response: httpx.Response,
    next_request: httpx.Request,
) -> List[Cookie]:
    """
    Carry explicit cookies onto the next hop of a redirect.

    A cookie the redirect response sets again is dropped, since the jar now
    holds the newer value. The rest are attached only when the next host is
    the previous host or one of its subdomains. Returns the cookies still
    carried, for the following hop.
    """
    replaced = set(response.cookies.keys())
    carried = [cookie for cookie in cookies if cookie.name not in replaced]
    if is_domain_or_subdomain(next_request.url.host, response.request.url.host):
        attach_cookies(next_request, carried)
    return carried


def build_request(
    client: Union[httpx.Client, httpx.AsyncClient],
    method: HttpMethod,
    url: str,
    options: RequestOptions,
) -> httpx.Request:
    """Assemble the outgoing request; raises before anything is sent."""
    body: BodyKwargs = {}
    content_type: Optional[str] = None
    if isinstance(options, PostRequest):
        if options.content_type not in CONTENT_TYPES:
            raise InvalidContentTypeError(options.content_type, url)
        body, content_type = build_post_body(options)

    headers = build_headers(options, content_type)
    logger.debug(
        f"build_request: method={method}, url={url}, body={sorted(body)}, "
        f"content_type={content_type}, auth={'basic' if options.auth_user else 'none'}"
    )

    try:
        request = client.build_request(
            method,
            url,
            headers=httpx.Headers(headers),
            **body,
        )
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        raise RequestBuildError(f"Failed to create HTTP request: {exc}", url) from exc

    if isinstance(options, PostRequest):
        attach_cookies(request, options.cookies)

    return request


def canonical_header_key(key: str) -> str:
    """Canonical MIME header form: ``content-type`` -> ``Content-Type``."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


def flatten_headers(headers: httpx.Headers) -> Dict[str, str]:
    """Collapse repeated headers into one ``", "``-joined value per name."""
    grouped: Dict[str, List[str]] = {}
    for key, value in headers.multi_items():
        grouped.setdefault(canonical_header_key(key), []).append(value)
    return {key: ", ".join(values) for key, values in grouped.items()}


def parse_content_length(headers: httpx.Headers) -> int:
    """Content-Length as declared by the server, or -1 when unknown."""
    raw = headers.get("Content-Length")
    if raw is None:
        return -1
    try:
        length = int(raw.strip())
    except ValueError:
        return -1
    return length if length >= 0 else -1


def to_response(response: httpx.Response) -> Response:
    """Normalize an already-read httpx response."""
    return Response(
        status_code=response.status_code,
        content_length=parse_content_length(response.headers),
        response_body=response.text,
        response_headers=flatten_headers(response.headers),
    )
