"""
Type definitions for requestr.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Mapping, Sequence, Union


# POST body modes
#
# - none: no body, no Content-Type
# - form: application/x-www-form-urlencoded
# - json: raw bytes sent as application/json
# - xml: raw bytes sent as application/xml
# - multipart: multipart/form-data built from multipart_data
ContentType = Literal["none", "form", "json", "xml", "multipart"]

CONTENT_TYPES = ("none", "form", "json", "xml", "multipart")

# HTTP methods
HttpMethod = Literal["GET", "POST", "DELETE"]

FormValue = Union[str, Sequence[str]]


@dataclass
class Cookie:
    """Cookie attached to a single outgoing request."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dataclass
class GetRequest:
    """Options for a GET request."""

    auth_user: str = ""
    auth_pass: str = ""


@dataclass
class DeleteRequest:
    """Options for a DELETE request."""

    auth_user: str = ""
    auth_pass: str = ""


@dataclass
class PostRequest:
    """Options for a POST request.

    Only the payload field matching ``content_type`` is sent:

    - form: ``form_data`` (values may be a string or a list of strings)
    - json: ``json_data``
    - xml: ``xml_data``
    - multipart: ``multipart_data`` (values starting with ``@`` are file paths)
    """

    content_type: str = "none"
    auth_user: str = ""
    auth_pass: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: List[Cookie] = field(default_factory=list)
    form_data: Mapping[str, FormValue] = field(default_factory=dict)
    json_data: bytes = b""
    xml_data: bytes = b""
    multipart_data: Mapping[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """Normalized HTTP response."""

    status_code: int
    content_length: int
    response_body: str
    response_headers: Dict[str, str]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
