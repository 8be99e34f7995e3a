"""Configuration for MS Academic synchronization runs."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from msacademic_sync.utils import MSACADEMIC_API

API_KEY_ENV = "MSACADEMIC_API_KEY"

DEFAULT_ATTRIBUTES = "Id,Ti,Y,D,CC,ECC,AA.AuN,AA.AuId,AA.AfN,AA.AfId,F.FN,F.FId,J.JN,J.JId,C.CN,C.CId,RId,E"

DEFAULT_EPRINT_FIELDS = [
    "eprintid",
    "title",
    "type",
    "date",
    "doi",
    "language_mult",
    "subjects",
    "dewey",
    "scopus_cluster",
    "scopus_impact",
    "woslamr_cluster",
    "woslamr_times_cited",
    "refereed",
    "full_text_status",
    "publisher",
]

DEFAULT_MULTIPLE_FIELDS = ["language_mult", "subjects", "dewey", "creators", "editors", "divisions"]


class ConfigError(ValueError):
    """Raised for unusable configuration."""


@dataclass
class SyncConfig:
    """Settings for querying the Knowledge API and writing reports.

    Attributes:
        uri: Base URL of the Evaluate REST endpoint
        api_key: Subscription key; falls back to $MSACADEMIC_API_KEY
        attributes: Entity attributes the API shall return
        answer_count: Number of entities requested per query
        crawl_delay: Seconds to wait after each request
        crawl_retry: Maximum number of attempts per query
        timeout: Per-attempt request timeout in seconds
        eprint_fields: Repository fields copied into the report
        multiple_fields: Repository fields that hold lists
        affiliation_id: MS Academic affiliation id of the own institution
        report_dir: Directory for report.csv, report.xml and json/ snapshots
        save_json: Keep every raw response as a snapshot
        restart: Prefer existing snapshots over new queries
        repository_url: Base URL of the repository, sent in the User-Agent
        discipline_mapping: Optional CSV mapping subject codes to disciplines
    """

    uri: str = MSACADEMIC_API
    api_key: str | None = None
    attributes: str = DEFAULT_ATTRIBUTES
    answer_count: int = 10
    crawl_delay: float = 1.0
    crawl_retry: int = 3
    timeout: float = 60.0
    eprint_fields: list[str] = field(default_factory=lambda: list(DEFAULT_EPRINT_FIELDS))
    multiple_fields: list[str] = field(default_factory=lambda: list(DEFAULT_MULTIPLE_FIELDS))
    affiliation_id: int | None = 202697423
    report_dir: str = "."
    save_json: bool = False
    restart: bool = False
    repository_url: str = ""
    discipline_mapping: str | None = None

    def __post_init__(self) -> None:
        if self.api_key is None:
            self.api_key = os.environ.get(API_KEY_ENV) or None

    @property
    def json_dir(self) -> str:
        return os.path.join(self.report_dir, "json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SyncConfig:
        """Create config from a dictionary (e.g., loaded from YAML)."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SyncConfig:
        """Load config from a YAML file; a top-level ``msacademic`` section is accepted."""
        import yaml

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"{path}: invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping at top level")
        if "msacademic" in data:
            data = data["msacademic"] or {}
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary, leaving out the API key."""
        data = asdict(self)
        data.pop("api_key")
        return data

    def validate(self, needs_network: bool = True) -> None:
        """Raise ConfigError if the settings cannot support a run."""
        if needs_network and not self.api_key:
            raise ConfigError(f"No MS Academic API key; set api_key in the config or ${API_KEY_ENV}")
        if self.crawl_retry < 1:
            raise ConfigError("crawl_retry must be at least 1")
        if self.crawl_delay < 0:
            raise ConfigError("crawl_delay must not be negative")
        if self.answer_count < 1:
            raise ConfigError("answer_count must be at least 1")
        if self.timeout <= 0:
            raise ConfigError("timeout must be positive")
