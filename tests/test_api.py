"""
Tests for api.py
Logic testing: Decision/Branch, Error Path, State
"""
from unittest import mock

import pytest

from requestr import api
from requestr.config import RequestrConfig
from requestr.core.dispatcher import Requestr
from requestr.types import DeleteRequest, GetRequest, PostRequest

from .conftest import plain


class TestSendHelpers:
    """Module-level helpers route through the default client."""

    def test_send_get_request(self, default_requestr, transport):
        result = api.send_get_request(False, "https://example.com/a", GetRequest())

        assert result.status_code == 200
        assert transport.last.method == "GET"

    def test_send_get_request_default_options(self, default_requestr, transport):
        api.send_get_request(False, "https://example.com/a")
        assert "authorization" not in transport.last.headers

    def test_send_post_request(self, default_requestr, transport):
        options = PostRequest(content_type="json", json_data=b"[]")
        result = api.send_post_request(False, "https://example.com/b", options)

        assert result.response_body == "ok"
        assert transport.last.headers["Content-Type"] == "application/json"

    def test_send_delete_request(self, default_requestr, transport):
        api.send_delete_request(False, "https://example.com/c", DeleteRequest(auth_user="x"))

        assert transport.last.method == "DELETE"
        assert transport.last.headers["Authorization"].startswith("Basic ")


class TestFatalErrors:
    """Any failure terminates the process."""

    # Error Path: unknown mode exits without sending
    def test_invalid_mode_exits(self, default_requestr, transport, capsys):
        with pytest.raises(SystemExit) as exc_info:
            api.send_post_request(False, "https://example.com", PostRequest(content_type="soap"))

        assert exc_info.value.code == 1
        assert transport.requests == []
        assert "Invalid POST request mode - soap" in plain(capsys.readouterr().err)

    # Error Path: missing multipart file exits without sending
    def test_missing_file_exits(self, default_requestr, transport, tmp_path):
        options = PostRequest(content_type="multipart", multipart_data={"f": f"@{tmp_path / 'x.bin'}"})
        with pytest.raises(SystemExit):
            api.send_post_request(False, "https://example.com", options)
        assert transport.requests == []

    # Error Path: failure is logged at CRITICAL
    def test_failure_logged(self, default_requestr, caplog):
        with pytest.raises(SystemExit):
            api.send_post_request(False, "https://example.com", PostRequest(content_type="???"))

        records = [r for r in caplog.records if r.name == "requestr.api"]
        assert records and records[0].levelname == "CRITICAL"

    # Error Path: default client cannot be built from the configuration
    def test_bad_proxy_exits(self, capsys):
        previous = api.set_default_client(None)
        bad_config = RequestrConfig(proxy_url="ftp://proxy:21")
        try:
            with mock.patch("requestr.factory.get_config", return_value=bad_config):
                with pytest.raises(SystemExit) as exc_info:
                    api.send_get_request(False, "https://example.com")

            assert exc_info.value.code == 1
            assert "Failed to create HTTP client" in plain(capsys.readouterr().err)
            assert api.set_default_client(None) is None
        finally:
            api.set_default_client(previous)


class TestDefaultClient:
    """State of the process-wide client."""

    def test_lazily_created_and_reused(self):
        previous = api.set_default_client(None)
        try:
            first = api.get_default_client()
            assert isinstance(first, Requestr)
            assert api.get_default_client() is first
            first.close()
        finally:
            api.set_default_client(previous)

    def test_set_returns_previous(self, requestr):
        previous = api.set_default_client(requestr)
        try:
            assert api.set_default_client(requestr) is requestr
        finally:
            api.set_default_client(previous)
