"""
Authorization header encoding.
"""
import base64
from typing import Dict


def _base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def encode_basic_auth(username: str, password: str = "") -> Dict[str, str]:
    """
    Encode HTTP basic credentials (RFC 7617).

    An empty password is allowed; an empty username is not, since requests
    without a username are sent unauthenticated.
    """
    if not username:
        raise ValueError("Basic auth requires a username")
    return {"Authorization": f"Basic {_base64_encode(f'{username}:{password}')}"}
