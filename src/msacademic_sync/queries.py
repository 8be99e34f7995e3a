"""Query expressions for the Knowledge API and the fallback chain that tries them.

Each strategy turns a local record into an Evaluate query expression, or
declines with ``None`` when the record lacks the metadata it needs. In "full"
mode the strategies are tried in order until one yields a match.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Protocol

from msacademic_sync.records import LocalRecord
from msacademic_sync.stopwords import STOPWORDS
from msacademic_sync.utils import clean_title, quoted_value, transliterate_greek

__all__ = [
    "QueryStrategy",
    "DEFAULT_STRATEGIES",
    "TitleTermIndex",
    "RecordTitleIndex",
    "filter_title_terms",
    "title_words_expression",
    "QueryBuilder",
    "QueryChain",
]


class QueryStrategy(Enum):
    ID = "id"
    TITLE_EXACT = "title_exact"
    TITLE_WORDS = "title_words"
    TITLE_EXACT_GREEK = "title_exact_greek"


DEFAULT_STRATEGIES: tuple[QueryStrategy, ...] = (
    QueryStrategy.ID,
    QueryStrategy.TITLE_EXACT,
    QueryStrategy.TITLE_WORDS,
    QueryStrategy.TITLE_EXACT_GREEK,
)


# ------------- Title Term Index -------------


class TitleTermIndex(Protocol):
    """Full-text index lookup: the indexed title terms of one record."""

    def terms(self, record_id: int) -> list[str]: ...


_TERM_RE = re.compile(r"\w+(?:'\w+)*")


class RecordTitleIndex:
    """In-process title index built from the loaded records.

    Terms are lower-cased word tokens, de-duplicated and returned in sorted
    order, matching how a term list is read back from a full-text index.
    """

    def __init__(self, records: Iterable[LocalRecord] = ()) -> None:
        self._terms: dict[int, list[str]] = {}
        for record in records:
            self.add(record)

    def add(self, record: LocalRecord) -> None:
        tokens = _TERM_RE.findall((record.title or "").lower())
        self._terms[record.eprintid] = sorted(set(tokens))

    def terms(self, record_id: int) -> list[str]:
        return list(self._terms.get(record_id, []))


def filter_title_terms(terms: Iterable[str], stopwords: frozenset[str] = STOPWORDS) -> list[str]:
    """Drop numbers and stop words; reduce elided terms to their longer side.

    "l'analyse" becomes "analyse", "o'neill" becomes "neill".
    """
    words = []
    for term in terms:
        if term.isdigit():
            continue
        if "'" in term:
            before, after = term.split("'", 1)
            term = before if len(before) > len(after) else after
        if term and term not in stopwords:
            words.append(term)
    return words


def title_words_expression(words: Sequence[str]) -> str | None:
    """Fold words into a left-nested And() of W= clauses."""
    expression = None
    for word in words:
        clause = "W=" + quoted_value(word)
        expression = clause if expression is None else f"And({expression},{clause})"
    return expression


# ------------- Query Builder -------------


class QueryBuilder:
    """Builds the query expression of a strategy for a record."""

    def __init__(self, title_index: TitleTermIndex | None = None, stopwords: frozenset[str] = STOPWORDS) -> None:
        self.title_index = title_index
        self.stopwords = stopwords

    def build(self, strategy: QueryStrategy, record: LocalRecord) -> str | None:
        if strategy is QueryStrategy.ID:
            return self.by_id(record)
        if strategy is QueryStrategy.TITLE_EXACT:
            return self.by_title_exact(record)
        if strategy is QueryStrategy.TITLE_WORDS:
            return self.by_title_words(record)
        if strategy is QueryStrategy.TITLE_EXACT_GREEK:
            return self.by_title_exact_greek(record)
        raise ValueError(f"Unknown query strategy: {strategy!r}")

    def by_id(self, record: LocalRecord) -> str | None:
        if not record.has_cluster():
            return None
        return f"Id={record.msacademic_cluster}"

    def by_title_exact(self, record: LocalRecord) -> str | None:
        if not record.title:
            return None
        return "Ti=" + quoted_value(clean_title(record.title))

    def by_title_exact_greek(self, record: LocalRecord) -> str | None:
        if not record.title:
            return None
        return "Ti=" + quoted_value(transliterate_greek(clean_title(record.title)))

    def by_title_words(self, record: LocalRecord) -> str | None:
        if self.title_index is None:
            return None
        words = filter_title_terms(self.title_index.terms(record.eprintid), self.stopwords)
        return title_words_expression(words)


# ------------- Strategy Chain -------------


class QueryChain:
    """One-shot cursor over an ordered list of strategies.

    ``reset()`` rewinds to before the first strategy; ``advance()`` moves to
    the next one and returns it, or returns None once all have been visited.
    """

    def __init__(self, strategies: Sequence[QueryStrategy] = DEFAULT_STRATEGIES) -> None:
        if not strategies:
            raise ValueError("A query chain needs at least one strategy")
        self.strategies = tuple(strategies)
        self.current = -1

    @classmethod
    def pinned(cls, strategy: QueryStrategy) -> QueryChain:
        """A chain that runs a single strategy and no fallback."""
        return cls((strategy,))

    def reset(self) -> None:
        self.current = -1

    def advance(self) -> QueryStrategy | None:
        if self.exhausted:
            return None
        self.current += 1
        return self.strategies[self.current]

    @property
    def exhausted(self) -> bool:
        return self.current >= len(self.strategies) - 1
