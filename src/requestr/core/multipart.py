"""
Multipart form assembly.

Values prefixed with ``@`` are read from disk and sent as file parts; the
path (without the prefix) doubles as the part's filename. Everything else is
sent as a plain form field. The result is handed to httpx as ``files=``,
which does the encoding.

httpx only switches to multipart/form-data when at least one part exists, so
an empty mapping is encoded here as a bare closing delimiter.
"""
import logging
import secrets
from typing import Any, List, Mapping, Tuple

from ..errors import MultipartFileError

logger = logging.getLogger("requestr.multipart")

FILE_PREFIX = "@"
FILE_CONTENT_TYPE = "application/octet-stream"

FormParts = List[Tuple[str, Tuple[Any, ...]]]


def _read_file(path: str) -> bytes:
    try:
        with open(path, "rb") as fp:
            return fp.read()
    except OSError as exc:
        raise MultipartFileError(path, exc.strerror or str(exc)) from exc


def create_multipart_form_data(form: Mapping[str, str]) -> FormParts:
    """
    Turn a field-name to value mapping into httpx ``files=`` entries.

    Plain fields become ``(name, (None, value))`` so no filename is sent;
    ``@path`` values become ``(name, (path, content, FILE_CONTENT_TYPE))``.
    Files are read up front, so an unreadable one raises
    ``MultipartFileError`` before any request exists.
    """
    parts: FormParts = []
    for key, value in form.items():
        if value.startswith(FILE_PREFIX):
            path = value[len(FILE_PREFIX):]
            content = _read_file(path)
            logger.debug(f"create_multipart_form_data: file part {key!r} <- {path} ({len(content)} bytes)")
            parts.append((key, (path, content, FILE_CONTENT_TYPE)))
        else:
            parts.append((key, (None, value)))
    return parts


def empty_multipart_body() -> Tuple[bytes, str]:
    """Body and Content-Type of a multipart form with no parts."""
    boundary = secrets.token_hex(16)
    return f"--{boundary}--\r\n".encode("ascii"), f"multipart/form-data; boundary={boundary}"
