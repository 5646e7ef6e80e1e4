"""
Configuration for requestr.
"""
import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel

logger = logging.getLogger("requestr.config")


def mask_proxy_url(url: Optional[str]) -> str:
    """Mask proxy URL for safe logging (hide credentials if present)."""
    if not url:
        return "None"
    if "@" in url:
        protocol_end = url.find("://")
        if protocol_end != -1:
            at_pos = url.rfind("@")
            return f"{url[:protocol_end + 3]}***@{url[at_pos + 1:]}"
    return url


class RequestrConfig(BaseModel):
    """
    Settings for the shared HTTP client.

    TLS verification is off by default; compression is disabled so the
    server's Content-Length matches the body that is read back.
    """

    proxy_url: Optional[str] = None
    verify_ssl: bool = False
    disable_compression: bool = True
    follow_redirects: bool = True
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "RequestrConfig":
        """Build config from the HTTP_PROXY environment variable."""
        proxy_url = os.environ.get("HTTP_PROXY") or None
        logger.debug(f"from_env: HTTP_PROXY={mask_proxy_url(proxy_url)}")
        return cls(proxy_url=proxy_url)


@lru_cache()
def get_config() -> RequestrConfig:
    """Get cached config; the environment is read on first call only."""
    return RequestrConfig.from_env()
