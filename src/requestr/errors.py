"""
Exceptions raised by requestr.

Client methods raise these; the module-level ``send_*`` helpers in
``requestr.api`` turn any of them into process termination.
"""
from typing import Optional


class RequestrError(Exception):
    """Base class for every requestr failure."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message


class RequestBuildError(RequestrError):
    """The HTTP request could not be constructed."""


class InvalidContentTypeError(RequestBuildError):
    """POST request mode is not one of none, form, json, xml or multipart."""

    def __init__(self, content_type: str, url: Optional[str] = None):
        super().__init__(f"Invalid POST request mode - {content_type}", url)
        self.content_type = content_type


class MultipartFileError(RequestBuildError):
    """A file referenced from multipart data could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Error while opening file {path}: {reason}")
        self.path = path


class RequestSendError(RequestrError):
    """Sending the request failed at the transport level."""


class ResponseReadError(RequestrError):
    """The response body could not be read."""
