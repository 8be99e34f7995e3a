"""Local repository records and the loaders that read them from an export."""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from dataclasses import dataclass, field
from typing import Any

import bibtexparser
from bibtexparser.bparser import BibTexParser

from msacademic_sync.utils import CLUSTER_NOT_APPLICABLE, first_page

logger = logging.getLogger(__name__)


def _is_set(value: Any) -> bool:
    """Mirror the repository notion of a set field: not None, not blank, not empty."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) > 0
    return True


def _as_str(value: Any) -> str | None:
    return str(value) if _is_set(value) else None


def _as_list(value: Any) -> list[Any]:
    if not _is_set(value):
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@dataclass
class LocalRecord:
    """A bibliographic item exported from the institutional repository.

    Only ``msacademic_cluster`` and ``msacademic_citation_count`` are changed
    by synchronization; everything else is read-only input.
    """

    eprintid: int
    title: str | None = None
    msacademic_cluster: str | None = None
    msacademic_citation_count: int | None = None
    doi: str | None = None
    publication: str | None = None
    series: str | None = None
    volume: str | None = None
    number: str | None = None
    pagerange: str | None = None
    subjects: list[str] = field(default_factory=list)
    creators: list[Any] = field(default_factory=list)
    editors: list[Any] = field(default_factory=list)
    fields: dict[str, Any] = field(default_factory=dict)  # every exported field, verbatim

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LocalRecord:
        """Build a record from an exported field mapping."""
        if not _is_set(data.get("eprintid")):
            raise ValueError(f"Record without eprintid: {data.get('title')!r}")
        citation_count = data.get("msacademic_citation_count")
        return cls(
            eprintid=int(data["eprintid"]),
            title=_as_str(data.get("title")),
            msacademic_cluster=_as_str(data.get("msacademic_cluster")),
            msacademic_citation_count=int(citation_count) if _is_set(citation_count) else None,
            doi=_as_str(data.get("doi")),
            publication=_as_str(data.get("publication")),
            series=_as_str(data.get("series")),
            volume=_as_str(data.get("volume")),
            number=_as_str(data.get("number")),
            pagerange=_as_str(data.get("pagerange")),
            subjects=[str(s) for s in _as_list(data.get("subjects"))],
            creators=_as_list(data.get("creators")),
            editors=_as_list(data.get("editors")),
            fields=dict(data),
        )

    @property
    def journal_series(self) -> str | None:
        """Journal name, falling back to the series name."""
        return self.publication or self.series

    @property
    def first_page(self) -> str | None:
        return first_page(self.pagerange)

    @property
    def author_count(self) -> int:
        return len(self.creators) + len(self.editors)

    def has_cluster(self) -> bool:
        """True when the record carries a usable MS Academic id."""
        return _is_set(self.msacademic_cluster) and self.msacademic_cluster != CLUSTER_NOT_APPLICABLE

    def can_process(self) -> bool:
        """Whether any query strategy can hope to find this record."""
        return self.has_cluster() or _is_set(self.title)

    def get(self, fieldname: str) -> Any:
        """Value of an exported field, reflecting any synchronized updates."""
        if fieldname == "msacademic_cluster":
            return self.msacademic_cluster
        if fieldname == "msacademic_citation_count":
            return self.msacademic_citation_count
        return self.fields.get(fieldname)

    def apply_citation_datum(self, cluster: str, impact: int | None) -> None:
        """Write back the matched MS Academic id and citation count."""
        self.msacademic_cluster = cluster
        self.msacademic_citation_count = impact

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.fields)
        data["eprintid"] = self.eprintid
        data["msacademic_cluster"] = self.msacademic_cluster
        data["msacademic_citation_count"] = self.msacademic_citation_count
        return data


# ------------- Loaders -------------


def load_json_records(path: str) -> list[LocalRecord]:
    """Load records from a repository JSON export (a list of field mappings)."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "records" in data:
        data = data["records"]
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of records")
    return [LocalRecord.from_dict(item) for item in data]


# BibTeX field name -> repository field name
BIBTEX_FIELD_MAP = {
    "journal": "publication",
    "number": "number",
    "pages": "pagerange",
    "series": "series",
    "volume": "volume",
    "doi": "doi",
    "title": "title",
    "eprintid": "eprintid",
    "msacademic_cluster": "msacademic_cluster",
    "msacademic_citation_count": "msacademic_citation_count",
}


def bibtex_entry_to_fields(entry: dict[str, Any]) -> dict[str, Any]:
    """Translate a BibTeX entry into repository field names."""
    data: dict[str, Any] = {"type": entry.get("ENTRYTYPE")}
    for bib_name, value in entry.items():
        if bib_name in ("ENTRYTYPE", "ID"):
            continue
        data[BIBTEX_FIELD_MAP.get(bib_name, bib_name)] = value
    if data.get("pagerange"):
        data["pagerange"] = re.sub(r"-+", "-", data["pagerange"])
    if data.get("title"):
        data["title"] = re.sub(r"\s+", " ", data["title"]).strip()
    for bib_name, name in (("author", "creators"), ("editor", "editors")):
        value = data.pop(bib_name, None)
        if value:
            data[name] = [p.strip() for p in re.split(r"\s+\band\b\s+", value) if p.strip()]
    if data.get("subjects"):
        data["subjects"] = [s.strip() for s in data["subjects"].split(",") if s.strip()]
    return data


def load_bibtex_records(path: str) -> list[LocalRecord]:
    """Load records from a BibTeX export; entries need an ``eprintid`` field."""
    parser = BibTexParser(common_strings=True)
    parser.customization = None
    with open(path, encoding="utf-8") as f:
        db = bibtexparser.load(f, parser=parser)
    records = []
    for entry in db.entries:
        if not entry.get("eprintid"):
            logger.warning("Skipping BibTeX entry %s without eprintid", entry.get("ID"))
            continue
        records.append(LocalRecord.from_dict(bibtex_entry_to_fields(entry)))
    return records


def load_records(path: str) -> list[LocalRecord]:
    """Load a record export, choosing the format by file extension."""
    if path.lower().endswith(".bib"):
        records = load_bibtex_records(path)
    else:
        records = load_json_records(path)
    logger.debug("Loaded %d records from %s", len(records), path)
    return records


def write_records(records: list[LocalRecord], path: str) -> None:
    """Write records back out as a JSON export, atomically."""
    directory = os.path.dirname(os.path.abspath(path))
    tmp = tempfile.NamedTemporaryFile(
        "w", delete=False, encoding="utf-8", suffix=".json", prefix=".tmp_records_", dir=directory
    )
    try:
        json.dump([r.to_dict() for r in records], tmp, indent=2, ensure_ascii=False)
        tmp.flush()
        os.fsync(tmp.fileno())
    finally:
        tmp.close()
    os.replace(tmp.name, path)
