"""MS Academic Sync - Citation data for institutional repository records.

This package provides tools for:
- Querying the MS Academic Knowledge API with a fallback chain of strategies
- Matching returned entities against local records by id, DOI, bibliographic data and title
- Writing CSV and XML reports and storing raw responses for restarts

Example usage:
    from msacademic_sync import AcademicClient, QueryBuilder, QueryChain, find_match

    chain = QueryChain()
    chain.reset()
    strategy = chain.advance()
    expression = QueryBuilder().build(strategy, record)

    response = client.submit(expression)
    result = find_match(record, parse_response(response.content))
"""

from msacademic_sync._version import __version__
from msacademic_sync.client import AcademicClient, RemoteResponse, ResponseKind
from msacademic_sync.config import ConfigError, SyncConfig
from msacademic_sync.matching import MatchResult, find_match
from msacademic_sync.parser import (
    CandidateEntity,
    ExtendedMetadataError,
    ResponseParseError,
    parse_extended_metadata,
    parse_response,
)
from msacademic_sync.queries import QueryBuilder, QueryChain, QueryStrategy, RecordTitleIndex
from msacademic_sync.records import LocalRecord, load_records
from msacademic_sync.report import Report, load_discipline_mapping, write_csv, write_xml
from msacademic_sync.snapshots import SnapshotStore
from msacademic_sync.sync import Mode, Synchronizer
from msacademic_sync.utils import clean_title, transliterate_greek

__all__ = [
    "__version__",
    # Client
    "AcademicClient",
    "RemoteResponse",
    "ResponseKind",
    # Configuration
    "ConfigError",
    "SyncConfig",
    # Queries and matching
    "QueryBuilder",
    "QueryChain",
    "QueryStrategy",
    "RecordTitleIndex",
    "MatchResult",
    "find_match",
    # Responses
    "CandidateEntity",
    "ExtendedMetadataError",
    "ResponseParseError",
    "parse_extended_metadata",
    "parse_response",
    # Records and reports
    "LocalRecord",
    "load_records",
    "Report",
    "load_discipline_mapping",
    "write_csv",
    "write_xml",
    "SnapshotStore",
    # Orchestration
    "Mode",
    "Synchronizer",
    # Text
    "clean_title",
    "transliterate_greek",
]
