"""Tests for the Knowledge API client: request shape, retries, classification."""

from __future__ import annotations

import httpx
import pytest
from conftest import FakeApi, error_body, response_body

from msacademic_sync.client import AcademicClient, RemoteResponse, ResponseKind, is_domain_error
from msacademic_sync.config import DEFAULT_ATTRIBUTES, SyncConfig


class TestRemoteResponse:
    """Tests for status classification."""

    @pytest.mark.parametrize("status", [400, 401, 404, 410])
    def test_domain_error_range(self, status):
        assert is_domain_error(status)
        assert RemoteResponse.classify(status, "{}").kind is ResponseKind.DOMAIN_ERROR

    @pytest.mark.parametrize("status", [0, 302, 399, 411, 429, 500, 503])
    def test_everything_else_is_no_response(self, status):
        response = RemoteResponse.classify(status, "body")
        assert response.kind is ResponseKind.NO_RESPONSE
        assert response.content is None

    def test_success_keeps_body(self):
        response = RemoteResponse.classify(200, "body")
        assert response.is_success
        assert response.content == "body"


class TestAcademicClientRequest:
    """Tests for the request sent to the Evaluate endpoint."""

    def test_query_parameters(self, make_client):
        api = FakeApi((200, response_body()))
        make_client(api).submit("Ti='deep learning for x'")

        params = api.requests[0].url.params
        assert params["expr"] == "Ti='deep learning for x'"
        assert params["model"] == "latest"
        assert params["count"] == "10"
        assert params["offset"] == "0"
        assert params["attributes"] == DEFAULT_ATTRIBUTES

    def test_headers(self, make_client, tmp_path):
        api = FakeApi((200, response_body()))
        cfg = SyncConfig(
            api_key="secret", crawl_delay=0, report_dir=str(tmp_path), repository_url="https://repo.example.org"
        )
        make_client(api, cfg).submit("Id=1")

        headers = api.requests[0].headers
        assert headers["Ocp-Apim-Subscription-Key"] == "secret"
        assert headers["Accept"] == "application/json"
        assert headers["Accept-Charset"] == "utf-8"
        assert headers["User-Agent"].startswith("msacademic-sync/")
        assert headers["User-Agent"].endswith("; https://repo.example.org")

    def test_uses_configured_endpoint(self, make_client, tmp_path):
        api = FakeApi((200, response_body()))
        cfg = SyncConfig(
            api_key="k", crawl_delay=0, report_dir=str(tmp_path), uri="https://api.example.org/evaluate"
        )
        make_client(api, cfg).submit("Id=1")
        assert api.requests[0].url.host == "api.example.org"
        assert api.requests[0].url.path == "/evaluate"


class TestAcademicClientRetries:
    """Tests for retry bound, crawl delay and outcome classification."""

    def test_success_on_first_attempt(self, make_client):
        api = FakeApi((200, response_body()))
        response = make_client(api).submit("Id=1")
        assert response.kind is ResponseKind.SUCCESS
        assert response.status == 200
        assert len(api.requests) == 1

    def test_retry_bound_excludes_fourth_attempt(self, make_client):
        """Three timeouts with crawl_retry=3 give up before a fourth, successful attempt."""
        api = FakeApi(
            httpx.ConnectTimeout("timed out"),
            httpx.ReadTimeout("timed out"),
            httpx.ConnectTimeout("timed out"),
            (200, response_body()),
        )
        response = make_client(api).submit("Id=1")
        assert response.kind is ResponseKind.NO_RESPONSE
        assert response.status == 0
        assert response.content is None
        assert len(api.requests) == 3

    def test_recovers_after_transient_failure(self, make_client):
        api = FakeApi(httpx.ConnectError("refused"), (200, response_body()))
        response = make_client(api).submit("Id=1")
        assert response.is_success
        assert len(api.requests) == 2

    def test_server_error_retried_then_no_response(self, make_client):
        api = FakeApi((500, "Internal Server Error"))
        response = make_client(api).submit("Id=1")
        assert response.kind is ResponseKind.NO_RESPONSE
        assert response.status == 500
        assert len(api.requests) == 3

    def test_domain_error_not_retried(self, make_client):
        api = FakeApi((404, error_body("NotFound", "Unknown path")))
        response = make_client(api).submit("Id=1")
        assert response.is_domain_error
        assert response.status == 404
        assert "NotFound" in response.content
        assert len(api.requests) == 1

    def test_sleeps_after_every_attempt(self, config, logger, monkeypatch):
        sleeps = []
        monkeypatch.setattr("msacademic_sync.client.time.sleep", sleeps.append)
        config.crawl_delay = 1.5
        api = FakeApi((503, ""), (503, ""), (200, response_body()))

        with AcademicClient(config, logger, transport=httpx.MockTransport(api)) as client:
            response = client.submit("Id=1")

        assert response.is_success
        assert sleeps == [1.5, 1.5, 1.5]

    def test_no_response_logged(self, make_client, caplog):
        api = FakeApi((502, ""))
        with caplog.at_level("WARNING"):
            make_client(api).submit("Id=7")
        assert "No response from MS Academic Knowledge API" in caplog.text
