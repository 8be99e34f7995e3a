"""Tests for the on-disk response snapshots."""

from __future__ import annotations

import os

import pytest
from conftest import error_body, response_body

from msacademic_sync.client import ResponseKind
from msacademic_sync.parser import ResponseParseError, parse_response
from msacademic_sync.snapshots import SnapshotStore


class TestSnapshotStore:
    """Tests for SnapshotStore save/load."""

    def test_path_layout(self, tmp_path):
        store = SnapshotStore(str(tmp_path))
        assert store.path(42) == os.path.join(str(tmp_path), "json", "msacademic_000042.txt")

    def test_success_round_trip(self, tmp_path, make_entity):
        store = SnapshotStore(str(tmp_path))
        body = response_body(make_entity(id=7))
        store.save(42, body)

        response = store.load(42)
        assert response.kind is ResponseKind.SUCCESS
        assert response.status == 200
        assert response.content == body
        assert [e.id for e in parse_response(response.content)] == [7]

    def test_error_round_trip(self, tmp_path):
        store = SnapshotStore(str(tmp_path))
        store.save(42, error_body())

        response = store.load(42)
        assert response.kind is ResponseKind.DOMAIN_ERROR
        assert response.status == 400

    def test_body_written_verbatim(self, tmp_path):
        store = SnapshotStore(str(tmp_path))
        store.save(3, '{"entities":[],  "expr":"Id=1"}')
        with open(store.path(3), encoding="utf-8") as f:
            assert f.read() == '{"entities":[],  "expr":"Id=1"}'

    def test_save_replaces(self, tmp_path):
        store = SnapshotStore(str(tmp_path))
        store.save(1, error_body())
        store.save(1, response_body())
        assert store.load(1).is_success
        assert os.listdir(store.directory) == ["msacademic_000001.txt"]

    def test_missing(self, tmp_path):
        store = SnapshotStore(str(tmp_path))
        assert not store.exists(5)
        assert store.load(5) is None

    def test_corrupt_snapshot(self, tmp_path):
        store = SnapshotStore(str(tmp_path))
        os.makedirs(store.directory)
        with open(store.path(9), "w", encoding="utf-8") as f:
            f.write("<html>Service Unavailable</html>")
        with pytest.raises(ResponseParseError):
            store.load(9)
