"""Record linkage between a local record and the entities of one response.

Four predicates are evaluated independently over the candidates:

- id: the record's stored MS Academic id equals the entity id
- doi: the record DOI equals the DOI in the entity's extended metadata
- bib: journal, volume and first page agree (weak), plus issue (strong)
- tit: the cleaned (or Greek-transliterated) title equals the entity title

Each predicate keeps the first candidate satisfying it. The winner is chosen
by applying bib, tit, doi and id in that order, each overwriting the previous
choice, so id > doi > tit > bib.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rapidfuzz.fuzz import token_sort_ratio

from msacademic_sync.parser import CandidateEntity, ExtendedMetadataError
from msacademic_sync.records import LocalRecord
from msacademic_sync.utils import clean_title, transliterate_greek

__all__ = [
    "MatchResult",
    "find_match",
    "bibliographic_tier",
    "closest_title",
]

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Per-predicate first-match indices (1-based, 0 = none) and the winner."""

    entity_count: int = 0
    id_match: int = 0
    doi_match: int = 0
    bib_match: int = 0
    title_match: int = 0
    bib_tier: str | None = None  # "weak" or "strong"; not reported
    matched: int = 0
    match_type: str = "none"

    @property
    def found(self) -> bool:
        return self.matched > 0

    def report_fields(self) -> dict[str, Any]:
        """Diagnostic report columns for this result."""
        if not self.found:
            return {
                "match_type": "none",
                "matched_record": 0,
                "bib_match": "none",
                "tit_match": "none",
                "doi_match": "none",
                "id_match": "none",
            }
        return {
            "match_type": self.match_type,
            "matched_record": self.matched,
            "bib_match": self.bib_match,
            "tit_match": self.title_match,
            "doi_match": self.doi_match,
            "id_match": self.id_match,
        }


def _same(a: Any, b: Any) -> bool:
    return a is not None and b is not None and str(a) == str(b)


def bibliographic_tier(record: LocalRecord, extended: dict[str, Any]) -> str | None:
    """Return "strong", "weak" or None for the bibliographic comparison."""
    journal = extended.get("VFN")
    volume = extended.get("V")
    page = extended.get("FP")
    if not (
        _same(record.journal_series, journal) and _same(record.volume, volume) and _same(record.first_page, page)
    ):
        return None
    if _same(record.number, extended.get("I")):
        return "strong"
    return "weak"


def find_match(
    record: LocalRecord, candidates: Sequence[CandidateEntity], log: logging.Logger | None = None
) -> MatchResult:
    """Find the candidate that best matches the record."""
    log = log or logger
    result = MatchResult(entity_count=len(candidates))

    title_clean = clean_title(record.title)
    title_greek = transliterate_greek(title_clean)

    for index, entity in enumerate(candidates, start=1):
        try:
            extended = entity.extended_metadata()
        except ExtendedMetadataError as e:
            log.warning("Record %s, entity %s: %s", record.eprintid, entity.id, e)
            extended = {}

        if not result.id_match and _same(record.msacademic_cluster, entity.id):
            result.id_match = index

        if not result.doi_match and record.doi and _same(record.doi, extended.get("DOI")):
            result.doi_match = index

        if not result.bib_match:
            tier = bibliographic_tier(record, extended)
            if tier:
                result.bib_match = index
                result.bib_tier = tier

        if not result.title_match and entity.title and entity.title in (title_clean, title_greek):
            result.title_match = index

    log.debug(
        "Entities: %d, Matches: id: %d, doi: %d, bib: %d, title: %d",
        result.entity_count,
        result.id_match,
        result.doi_match,
        result.bib_match,
        result.title_match,
    )

    for index, match_type in (
        (result.bib_match, "bib"),
        (result.title_match, "tit"),
        (result.doi_match, "doi"),
        (result.id_match, "id"),
    ):
        if index:
            result.matched = index
            result.match_type = match_type

    if not result.found and candidates:
        best = closest_title(title_clean, candidates)
        if best:
            log.debug("Record %s: no match, closest title is entity %d (score %.0f)", record.eprintid, *best)
    return result


def closest_title(title_clean: str, candidates: Sequence[CandidateEntity]) -> tuple[int, float] | None:
    """Index and similarity of the candidate title nearest to a cleaned title."""
    scored = [
        (index, token_sort_ratio(title_clean, clean_title(entity.title)))
        for index, entity in enumerate(candidates, start=1)
        if entity.title
    ]
    if not scored:
        return None
    return max(scored, key=lambda s: s[1])
