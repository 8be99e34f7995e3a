"""Shared fixtures for msacademic_sync tests."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
import pytest

from msacademic_sync import AcademicClient, LocalRecord, SyncConfig


@pytest.fixture
def make_record():
    """Factory fixture for creating local repository records."""

    def _make_record(**kwargs) -> LocalRecord:
        data: dict[str, Any] = {
            "eprintid": 42,
            "title": "Deep Learning for X",
            "type": "article",
        }
        data.update(kwargs)
        return LocalRecord.from_dict(data)

    return _make_record


@pytest.fixture
def make_entity():
    """Factory fixture for entity JSON objects as returned by the Evaluate endpoint."""

    def _make_entity(id: int = 2100000001, title: str = "deep learning for x", extended=None, **kwargs):
        entity: dict[str, Any] = {"Id": id, "Ti": title, "Y": 2019, "D": "2019-06-01", "CC": 7, "ECC": 8}
        if extended is not None:
            entity["E"] = extended if isinstance(extended, str) else json.dumps(extended)
        entity.update(kwargs)
        return entity

    return _make_entity


def response_body(*entities: dict[str, Any], expr: str = "Ti='deep learning for x'") -> str:
    return json.dumps({"expr": expr, "entities": list(entities)})


def error_body(code: str = "Unspecified", message: str = "Access denied") -> str:
    return json.dumps({"error": {"code": code, "message": message}})


@pytest.fixture
def logger():
    """Create a test logger."""
    return logging.getLogger("test")


@pytest.fixture
def config(tmp_path):
    """Configuration with a key, no crawl delay and the report under tmp_path."""
    return SyncConfig(api_key="test-key", crawl_delay=0, report_dir=str(tmp_path))


class FakeApi:
    """Scripted Knowledge API behind an httpx.MockTransport.

    Each item of ``replies`` is an (status, body) pair or an exception to
    raise; the last item is repeated once the script runs out.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests: list[httpx.Request] = []

    @property
    def expressions(self) -> list[str]:
        return [r.url.params["expr"] for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.replies)) - 1
        reply = self.replies[index]
        if isinstance(reply, Exception):
            raise reply
        status, body = reply
        return httpx.Response(status, text=body)


@pytest.fixture
def make_client(config, logger, monkeypatch):
    """Factory fixture for an AcademicClient talking to a FakeApi."""
    monkeypatch.setattr("msacademic_sync.client.time.sleep", lambda seconds: None)

    def _make_client(api: FakeApi, cfg: SyncConfig | None = None) -> AcademicClient:
        return AcademicClient(cfg or config, logger, transport=httpx.MockTransport(api))

    return _make_client
