"""
Request dispatchers using httpx.

``Requestr`` and ``AsyncRequestr`` send GET, POST and DELETE requests
through one shared httpx client, so connection pool and cookie jar are
reused across calls. Every call reads the full body before returning.

Redirects are followed here rather than inside httpx, which drops the
Cookie header on every hop; explicit request cookies are put back on
same-domain hops.
"""
import logging
from typing import Optional, Sequence

import httpx

from ..config import RequestrConfig
from ..console import (
    mask_headers,
    print_headers,
    print_info,
    print_payload,
    print_success,
)
from ..errors import RequestSendError, ResponseReadError
from ..factory import create_async_http_client, create_http_client
from ..types import Cookie, DeleteRequest, GetRequest, HttpMethod, PostRequest, Response
from .request_builder import RequestOptions, build_request, redirect_cookies, to_response

logger = logging.getLogger("requestr.dispatcher")


def _print_request(method: HttpMethod, url: str, options: RequestOptions, request: httpx.Request) -> None:
    if isinstance(options, PostRequest):
        if options.content_type == "json":
            print_info("JSON HTTP POST payload:")
            print_payload(options.json_data.decode("utf-8", errors="replace"))
        elif options.content_type == "xml":
            print_info("XML HTTP POST payload:")
            print_payload(options.xml_data.decode("utf-8", errors="replace"))
    logger.debug(f"request headers: {mask_headers(dict(request.headers))}")
    print_info(f"Sending HTTP {method} request to: {url}")


def _explicit_cookies(options: RequestOptions) -> Sequence[Cookie]:
    return options.cookies if isinstance(options, PostRequest) else ()


def _too_many_redirects(request: httpx.Request) -> httpx.TooManyRedirects:
    return httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=request)


def _print_response(result: Response) -> None:
    print_success("Got HTTP response!")
    print_info(f"HTTP response status code: {result.status_code}")
    print_info(f"HTTP response content length: {result.content_length}")
    print_info("Response body: ")
    print_payload(result.response_body)
    print_info("Response headers: ")
    print_headers(result.response_headers)


class Requestr:
    """Synchronous request dispatcher."""

    def __init__(
        self,
        config: Optional[RequestrConfig] = None,
        httpx_client: Optional[httpx.Client] = None,
    ):
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = create_http_client(config)
            self._owns_client = True
        self._closed = False

    @property
    def cookies(self) -> httpx.Cookies:
        """Cookie jar shared by every request sent through this dispatcher."""
        return self._client.cookies

    def _send(self, request: httpx.Request, cookies: Sequence[Cookie]) -> httpx.Response:
        """Send and follow redirects; the returned response is still unread."""
        response = self._client.send(request, stream=True, follow_redirects=False)
        redirects = 0
        while self._client.follow_redirects and response.next_request is not None:
            next_request = response.next_request
            cookies = redirect_cookies(cookies, response, next_request)
            response.close()
            if redirects >= self._client.max_redirects:
                raise _too_many_redirects(next_request)
            logger.debug(f"redirect: {response.status_code} -> {next_request.method} {next_request.url}")
            response = self._client.send(next_request, stream=True, follow_redirects=False)
            redirects += 1
        return response

    def request(
        self,
        method: HttpMethod,
        url: str,
        options: RequestOptions,
        debug: bool = False,
    ) -> Response:
        """Build, send and normalize a single request."""
        if self._closed:
            raise RuntimeError("Client has been closed")

        request = build_request(self._client, method, url, options)
        if debug:
            _print_request(method, url, options, request)

        try:
            response = self._send(request, _explicit_cookies(options))
        except httpx.HTTPError as exc:
            raise RequestSendError(f"Failed to send HTTP request: {exc}", url) from exc

        try:
            response.read()
        except httpx.HTTPError as exc:
            raise ResponseReadError(f"Failed to read HTTP response body: {exc}", url) from exc
        finally:
            response.close()

        result = to_response(response)
        logger.debug(f"request: {method} {url} -> {result.status_code} ({result.content_length} bytes)")
        if debug:
            _print_response(result)
        return result

    def get(self, url: str, options: Optional[GetRequest] = None, debug: bool = False) -> Response:
        """GET request."""
        return self.request("GET", url, options or GetRequest(), debug)

    def post(self, url: str, options: Optional[PostRequest] = None, debug: bool = False) -> Response:
        """POST request."""
        return self.request("POST", url, options or PostRequest(), debug)

    def delete(self, url: str, options: Optional[DeleteRequest] = None, debug: bool = False) -> Response:
        """DELETE request."""
        return self.request("DELETE", url, options or DeleteRequest(), debug)

    def close(self) -> None:
        """Close the client if this dispatcher created it."""
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Requestr":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncRequestr:
    """Asynchronous request dispatcher."""

    def __init__(
        self,
        config: Optional[RequestrConfig] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = create_async_http_client(config)
            self._owns_client = True
        self._closed = False

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    async def _send(self, request: httpx.Request, cookies: Sequence[Cookie]) -> httpx.Response:
        response = await self._client.send(request, stream=True, follow_redirects=False)
        redirects = 0
        while self._client.follow_redirects and response.next_request is not None:
            next_request = response.next_request
            cookies = redirect_cookies(cookies, response, next_request)
            await response.aclose()
            if redirects >= self._client.max_redirects:
                raise _too_many_redirects(next_request)
            logger.debug(f"redirect: {response.status_code} -> {next_request.method} {next_request.url}")
            response = await self._client.send(next_request, stream=True, follow_redirects=False)
            redirects += 1
        return response

    async def request(
        self,
        method: HttpMethod,
        url: str,
        options: RequestOptions,
        debug: bool = False,
    ) -> Response:
        """Build, send and normalize a single request."""
        if self._closed:
            raise RuntimeError("Client has been closed")

        request = build_request(self._client, method, url, options)
        if debug:
            _print_request(method, url, options, request)

        try:
            response = await self._send(request, _explicit_cookies(options))
        except httpx.HTTPError as exc:
            raise RequestSendError(f"Failed to send HTTP request: {exc}", url) from exc

        try:
            await response.aread()
        except httpx.HTTPError as exc:
            raise ResponseReadError(f"Failed to read HTTP response body: {exc}", url) from exc
        finally:
            await response.aclose()

        result = to_response(response)
        logger.debug(f"request: {method} {url} -> {result.status_code} ({result.content_length} bytes)")
        if debug:
            _print_response(result)
        return result

    async def get(self, url: str, options: Optional[GetRequest] = None, debug: bool = False) -> Response:
        """GET request."""
        return await self.request("GET", url, options or GetRequest(), debug)

    async def post(self, url: str, options: Optional[PostRequest] = None, debug: bool = False) -> Response:
        """POST request."""
        return await self.request("POST", url, options or PostRequest(), debug)

    async def delete(self, url: str, options: Optional[DeleteRequest] = None, debug: bool = False) -> Response:
        """DELETE request."""
        return await self.request("DELETE", url, options or DeleteRequest(), debug)

    async def close(self) -> None:
        """Close the client if this dispatcher created it."""
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncRequestr":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
