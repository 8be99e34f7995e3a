"""The synchronization report: per-record local and MS Academic fields.

Each record id maps to two sections. ``eprint`` holds the repository fields
copied from the record plus two derived ones; ``msacademic`` holds a fixed set
of columns describing the query outcome and the matched entity. Every record
carries every MS Academic column, blank when unknown, so CSV rows line up.
"""

from __future__ import annotations

import csv
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from msacademic_sync.matching import MatchResult
from msacademic_sync.parser import CandidateEntity
from msacademic_sync.records import LocalRecord

logger = logging.getLogger(__name__)

OTHER_DISCIPLINE = "Other"

STATUS_FIELDS = ("result_status", "result_message", "result_count")
MATCH_FIELDS = ("match_type", "matched_record", "bib_match", "tit_match", "doi_match", "id_match")
ENTITY_FIELDS = (
    "id",
    "year",
    "date",
    "citation_count",
    "doi",
    "journal",
    "volume",
    "issue",
    "first_page",
    "has_affiliation",
    "reference_count",
    "author_count",
)
REMOTE_FIELDS = STATUS_FIELDS + MATCH_FIELDS + ENTITY_FIELDS


@dataclass
class ReportField:
    """A projected repository field; ``values`` is a list when ``multiple``."""

    multiple: bool
    values: Any


@dataclass
class ReportRecord:
    eprint: dict[str, ReportField] = field(default_factory=dict)
    msacademic: dict[str, Any] = field(default_factory=lambda: dict.fromkeys(REMOTE_FIELDS, ""))


# ------------- Field Projection -------------


def map_disciplines(subjects: Iterable[str], mapping: dict[str, str]) -> list[str]:
    return [mapping.get(subject, OTHER_DISCIPLINE) for subject in subjects]


def project_local(
    record: LocalRecord,
    eprint_fields: Iterable[str],
    multiple_fields: Iterable[str] = (),
    mapping: dict[str, str] | None = None,
) -> dict[str, ReportField]:
    """Copy the configured repository fields and add the derived ones."""
    multiple_fields = set(multiple_fields)
    projected: dict[str, ReportField] = {}
    for fieldname in eprint_fields:
        value = record.get(fieldname)
        multiple = fieldname in multiple_fields or isinstance(value, (list, tuple))
        if multiple and value is not None and not isinstance(value, (list, tuple)):
            value = [value]
        projected[fieldname] = ReportField(multiple, value)
    projected["author_count"] = ReportField(False, record.author_count)
    projected["disciplines"] = ReportField(True, map_disciplines(record.subjects, mapping or {}))
    return projected


def has_affiliation(entity: CandidateEntity, affiliation_id: Any) -> int:
    """1 if any author of the entity is affiliated with the given institution."""
    if affiliation_id is None:
        return 0
    for author in entity.authors:
        if author.get("AfId") is not None and str(author["AfId"]) == str(affiliation_id):
            return 1
    return 0


def project_entity(entity: CandidateEntity, affiliation_id: Any = None) -> dict[str, Any]:
    """Extract the reported fields of a matched entity.

    Raises:
        ExtendedMetadataError: if the entity's extended metadata is unreadable
    """
    extended = entity.extended_metadata()
    return {
        "id": entity.id,
        "year": entity.year,
        "date": entity.date,
        "citation_count": entity.citation_count,
        "doi": extended.get("DOI"),
        "journal": extended.get("VFN"),
        "volume": extended.get("V"),
        "issue": extended.get("I"),
        "first_page": extended.get("FP"),
        "has_affiliation": has_affiliation(entity, affiliation_id),
        "reference_count": len(entity.reference_ids),
        "author_count": len(entity.authors),
    }


# ------------- Report Accumulator -------------


class Report:
    """Report rows keyed by record id; re-processing a record replaces its row."""

    def __init__(self) -> None:
        self.records: dict[int, ReportRecord] = {}

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self.records

    def __getitem__(self, record_id: int) -> ReportRecord:
        return self.records[record_id]

    def sorted_ids(self) -> list[int]:
        return sorted(self.records, key=int)

    def items(self) -> Iterator[tuple[int, ReportRecord]]:
        for record_id in self.sorted_ids():
            yield record_id, self.records[record_id]

    def begin(self, record_id: int) -> ReportRecord:
        """Start a fresh, blank row for a record."""
        row = ReportRecord()
        self.records[record_id] = row
        return row

    def set_eprint_fields(self, record_id: int, projected: dict[str, ReportField]) -> None:
        self.records[record_id].eprint = dict(projected)

    def reset_entity_fields(self, record_id: int) -> None:
        """Blank the matched-entity columns."""
        self.records[record_id].msacademic.update(dict.fromkeys(ENTITY_FIELDS, ""))

    def record_match(self, record_id: int, result: MatchResult) -> None:
        """Store the outcome of matching a successful response."""
        row = self.records[record_id].msacademic
        row["result_status"] = "success"
        row["result_message"] = ""
        row["result_count"] = result.entity_count
        row.update(result.report_fields())

    def record_error(self, record_id: int, code: str, message: str) -> None:
        """Store a domain error returned by the API."""
        row = self.records[record_id].msacademic
        row["result_status"] = f"error: {code}"
        row["result_message"] = message
        row["result_count"] = -1

    def record_no_response(self, record_id: int, status: str = "no response") -> None:
        """Mark a record no query got an answer for, unless another query did."""
        row = self.records[record_id].msacademic
        if row["result_status"] == "":
            row["result_status"] = status
            row["result_count"] = -1

    def record_failure(self, record_id: int, reason: str, message: str) -> None:
        """Store a per-record processing failure; entity columns are blanked."""
        self.reset_entity_fields(record_id)
        row = self.records[record_id].msacademic
        row["result_status"] = f"error: {reason}"
        row["result_message"] = message
        row["result_count"] = -1

    def set_entity_fields(self, record_id: int, values: dict[str, Any]) -> None:
        row = self.records[record_id].msacademic
        for name in ENTITY_FIELDS:
            value = values.get(name)
            row[name] = "" if value is None else value

    def citation_datum(self, record_id: int) -> tuple[str, Any] | None:
        """The (cluster, citation count) pair to write back, if an entity matched."""
        row = self.records[record_id].msacademic
        if row["id"] in ("", None):
            return None
        impact = row["citation_count"]
        return str(row["id"]), (None if impact == "" else impact)


# ------------- Serialization -------------


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _csv_value(record_id: int, fieldname: str, item: ReportField) -> str:
    if item.multiple:
        return " ".join(_text(v) for v in (item.values or []))
    value = _text(item.values)
    if "\r" in value:
        logger.warning("EPrint %s, field %s contains carriage returns.", record_id, fieldname)
        value = value.replace("\r", "")
    return value


def write_csv(report: Report, path: str) -> None:
    """Write the report as CSV, one row per record sorted by id.

    The header is taken from the first record: its repository fields, then
    the MS Academic columns.
    """
    logger.info("Saving CSV report to %s", path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        if not len(report):
            return
        sample = report[report.sorted_ids()[0]]
        eprint_names = list(sample.eprint)
        remote_names = list(sample.msacademic)
        writer.writerow(eprint_names + remote_names)
        for record_id, row in report.items():
            values = []
            for name in eprint_names:
                item = row.eprint.get(name)
                values.append(_csv_value(record_id, name, item) if item else "")
            values.extend(_text(row.msacademic.get(name)) for name in remote_names)
            writer.writerow(values)


def _append_field(parent: ET.Element, name: str, multiple: bool, values: Iterable[Any]) -> None:
    element = ET.SubElement(parent, "field", name=name, multiple="1" if multiple else "0")
    for value in values:
        ET.SubElement(element, "value").text = _text(value)


def build_xml(report: Report) -> ET.ElementTree:
    root = ET.Element("records", count=str(len(report)))
    for record_id, row in report.items():
        element = ET.SubElement(root, "record", id=str(record_id))
        eprint = ET.SubElement(element, "eprint")
        for name, item in row.eprint.items():
            if item.multiple:
                values = item.values or []
            else:
                values = [item.values]
            _append_field(eprint, name, item.multiple, values)
        msacademic = ET.SubElement(element, "msacademic")
        for name, value in row.msacademic.items():
            _append_field(msacademic, name, False, [value])
    tree = ET.ElementTree(root)
    ET.indent(tree)
    return tree


def write_xml(report: Report, path: str) -> None:
    """Write the report as XML, records sorted by id."""
    logger.info("Saving XML report to %s", path)
    build_xml(report).write(path, encoding="utf-8", xml_declaration=True)


# ------------- Discipline Mappings -------------


def load_discipline_mapping(path: str) -> dict[str, str]:
    """Read ``subject,discipline`` lines; unparseable lines are logged and skipped."""
    logger.info("Reading mappings from %s", path)
    mapping: dict[str, str] = {}
    with open(path, encoding="utf-8", newline="") as f:
        for line_count, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            try:
                row = next(csv.reader([line], strict=True))
            except csv.Error:
                row = []
            if len(row) < 2 or not row[0].strip():
                logger.warning("Line %d could not be parsed: %s", line_count, line)
                continue
            mapping[row[0].strip()] = row[1].strip()
    return mapping
