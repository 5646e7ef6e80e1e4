"""
Core modules for requestr.
"""
from .dispatcher import AsyncRequestr, Requestr
from .multipart import create_multipart_form_data, empty_multipart_body
from .request_builder import (
    build_headers,
    build_post_body,
    build_request,
    encode_form_data,
    flatten_headers,
    parse_content_length,
    to_response,
)

__all__ = [
    "AsyncRequestr",
    "Requestr",
    "create_multipart_form_data",
    "empty_multipart_body",
    "build_headers",
    "build_post_body",
    "build_request",
    "encode_form_data",
    "flatten_headers",
    "parse_content_length",
    "to_response",
]
