"""Decoding of Knowledge API responses.

The ``E`` (extended metadata) attribute of an entity is itself a JSON
document serialized into a string, and the service's encoder corrupts it in a
handful of known ways. ``parse_extended_metadata`` undoes exactly those
corruptions before decoding; it is not a general JSON repair.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "CandidateEntity",
    "ExtendedMetadataError",
    "ResponseParseError",
    "EXTENDED_METADATA_REPAIRS",
    "repair_extended_metadata",
    "parse_extended_metadata",
    "parse_response",
    "parse_error",
]


class ExtendedMetadataError(ValueError):
    """The extended metadata string could not be decoded after repair."""


class ResponseParseError(ValueError):
    """A response body is not the JSON document the API documents."""


# Applied in this order. Each entry is (corrupt text, replacement).
EXTENDED_METADATA_REPAIRS: tuple[tuple[str, str], ...] = (
    # doubly escaped quote closing an array before these citation context keys
    ('\\\\"],"2143890424"', '"],"2143890424"'),
    ('\\\\"],"1965888463"', '"],"1965888463"'),
    ('\\\\"],"2021764794"', '"],"2021764794"'),
    # escaped quote closing an object key before an array
    ('\\\\\\\\":[', '":['),
    ('\\\\":[', '":['),
    # string consisting of an escaped backslash only
    ('"\\\\"', '""'),
    # escaped line breaks
    ("\\r", ""),
    ("\\n", ""),
    # quotes inside values
    ('\\"', "'"),
    # whatever backslashes remain
    ("\\", ""),
)


def repair_extended_metadata(e_string: str) -> str:
    """Apply the fixed repair sequence to a raw extended metadata string."""
    for corrupt, replacement in EXTENDED_METADATA_REPAIRS:
        e_string = e_string.replace(corrupt, replacement)
    return e_string


def parse_extended_metadata(e_string: str | None) -> dict[str, Any]:
    """Repair and decode an entity's extended metadata.

    Returns an empty dict when the entity has no extended metadata.

    Raises:
        ExtendedMetadataError: if the repaired string is still not valid JSON
    """
    if not e_string:
        return {}
    repaired = repair_extended_metadata(e_string)
    try:
        data = json.loads(repaired)
    except json.JSONDecodeError as e:
        raise ExtendedMetadataError(f"Cannot decode extended metadata: {e}") from e
    if not isinstance(data, dict):
        raise ExtendedMetadataError("Extended metadata is not a JSON object")
    return data


@dataclass
class CandidateEntity:
    """One entity returned by the Evaluate endpoint."""

    id: Any
    title: str | None = None
    year: int | None = None
    date: str | None = None
    citation_count: int | None = None
    estimated_citation_count: int | None = None
    raw_extended: str | None = None
    reference_ids: list[Any] = field(default_factory=list)
    authors: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> CandidateEntity:
        return cls(
            id=data.get("Id"),
            title=data.get("Ti"),
            year=data.get("Y"),
            date=data.get("D"),
            citation_count=data.get("CC"),
            estimated_citation_count=data.get("ECC"),
            raw_extended=data.get("E"),
            reference_ids=list(data.get("RId") or []),
            authors=list(data.get("AA") or []),
        )

    def extended_metadata(self) -> dict[str, Any]:
        return parse_extended_metadata(self.raw_extended)


def _decode(body: str | bytes | None) -> dict[str, Any]:
    if body is None:
        raise ResponseParseError("Empty response body")
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Response is not JSON: {e}") from e
    if not isinstance(data, dict):
        raise ResponseParseError("Response is not a JSON object")
    return data


def parse_response(body: str | bytes | None) -> list[CandidateEntity]:
    """Decode a successful response into its candidate entities."""
    data = _decode(body)
    entities = data.get("entities") or []
    if not isinstance(entities, list):
        raise ResponseParseError("'entities' is not a list")
    return [CandidateEntity.from_json(e) for e in entities if isinstance(e, dict)]


def parse_error(body: str | bytes | None) -> tuple[str, str]:
    """Return (code, message) from a domain error response body."""
    error = _decode(body).get("error") or {}
    return str(error.get("code") or ""), str(error.get("message") or "")
