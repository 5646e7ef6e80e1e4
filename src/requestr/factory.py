"""
Factory functions for the shared httpx clients.

The client carries the transport settings (proxy, TLS verification,
compression, redirects) and the cookie jar for every request sent through it.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from .config import RequestrConfig, get_config, mask_proxy_url
from .errors import RequestBuildError

logger = logging.getLogger("requestr.factory")


def _build_kwargs(config: RequestrConfig) -> Dict[str, Any]:
    """Build kwargs for httpx.Client/AsyncClient."""
    kwargs: Dict[str, Any] = {
        "timeout": httpx.Timeout(config.timeout),
        "follow_redirects": config.follow_redirects,
        "verify": config.verify_ssl,
        # HTTP_PROXY has already been read into config
        "trust_env": False,
    }

    if config.proxy_url:
        kwargs["proxy"] = config.proxy_url

    if config.disable_compression:
        kwargs["headers"] = {"Accept-Encoding": "identity"}

    logger.debug(
        f"_build_kwargs: proxy={mask_proxy_url(config.proxy_url)}, "
        f"verify={config.verify_ssl}, follow_redirects={config.follow_redirects}, "
        f"timeout={config.timeout}, disable_compression={config.disable_compression}"
    )
    return kwargs


def create_http_client(config: Optional[RequestrConfig] = None) -> httpx.Client:
    """Create a synchronous httpx.Client with its own cookie jar."""
    kwargs = _build_kwargs(config or get_config())
    try:
        return httpx.Client(**kwargs)
    except (httpx.InvalidURL, ValueError) as exc:
        raise RequestBuildError(f"Failed to create HTTP client: {exc}") from exc


def create_async_http_client(config: Optional[RequestrConfig] = None) -> httpx.AsyncClient:
    """Create an asynchronous httpx.AsyncClient with its own cookie jar."""
    kwargs = _build_kwargs(config or get_config())
    try:
        return httpx.AsyncClient(**kwargs)
    except (httpx.InvalidURL, ValueError) as exc:
        raise RequestBuildError(f"Failed to create HTTP client: {exc}") from exc
