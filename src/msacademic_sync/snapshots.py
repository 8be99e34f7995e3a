"""Raw Knowledge API responses kept on disk, one file per record.

Snapshots let a run be restarted, or a report be rebuilt, without querying
the API again.
"""

from __future__ import annotations

import json
import os
import tempfile

from msacademic_sync.client import RemoteResponse
from msacademic_sync.parser import ResponseParseError


class SnapshotStore:
    """Snapshot files under ``<report_dir>/json/msacademic_<id>.txt``."""

    def __init__(self, report_dir: str) -> None:
        self.directory = os.path.join(report_dir, "json")

    def path(self, record_id: int) -> str:
        return os.path.join(self.directory, f"msacademic_{record_id:06d}.txt")

    def exists(self, record_id: int) -> bool:
        return os.path.exists(self.path(record_id))

    def save(self, record_id: int, body: str) -> None:
        """Write a response body verbatim, replacing any earlier snapshot."""
        os.makedirs(self.directory, exist_ok=True)
        tmp = tempfile.NamedTemporaryFile(
            "w", delete=False, encoding="utf-8", suffix=".txt", prefix=".tmp_snapshot_", dir=self.directory
        )
        try:
            tmp.write(body)
            tmp.flush()
            os.fsync(tmp.fileno())
        finally:
            tmp.close()
        os.replace(tmp.name, self.path(record_id))

    def load(self, record_id: int) -> RemoteResponse | None:
        """Read a snapshot back, or None if there is none.

        The HTTP status is not stored, so it is re-derived from the body: an
        ``error.code`` marks a domain error (400), anything else a success.

        Raises:
            ResponseParseError: if the snapshot is not a JSON object
        """
        path = self.path(record_id)
        if not os.path.exists(path):
            return None
        with open(path, encoding="utf-8") as f:
            content = f.read()
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Snapshot {path} is not JSON: {e}") from e
        if not isinstance(data, dict):
            raise ResponseParseError(f"Snapshot {path} is not a JSON object")
        error = data.get("error")
        if isinstance(error, dict) and error.get("code") is not None:
            return RemoteResponse.classify(400, content)
        return RemoteResponse.classify(200, content)
