#!/usr/bin/env python3
"""
Synchronize repository records with the MS Academic Knowledge API.

For each record a fallback chain of query strategies is tried (id, exact
title, title words, Greek-transliterated title) until a returned entity
matches the record. Matched ids and citation counts are written back to the
record, and a report of every record is saved as report.csv and report.xml.

Usage:
  msacademic-sync records.json --config msacademic.yaml --report-dir reports/
  msacademic-sync records.bib --mode title_exact --save-json
  msacademic-sync records.json --mode read --report-dir reports/
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from msacademic_sync.client import AcademicClient, RemoteResponse
from msacademic_sync.config import SyncConfig
from msacademic_sync.matching import MatchResult, find_match
from msacademic_sync.parser import (
    CandidateEntity,
    ExtendedMetadataError,
    ResponseParseError,
    parse_error,
    parse_response,
)
from msacademic_sync.queries import DEFAULT_STRATEGIES, QueryBuilder, QueryChain, QueryStrategy, RecordTitleIndex
from msacademic_sync.records import LocalRecord, load_records, write_records
from msacademic_sync.report import (
    Report,
    load_discipline_mapping,
    project_entity,
    project_local,
    write_csv,
    write_xml,
)
from msacademic_sync.snapshots import SnapshotStore


class Mode(Enum):
    """Operating modes: the full strategy chain, one pinned strategy, or read-only."""

    FULL = "full"
    TITLE_WORDS = "title_words"
    TITLE_EXACT = "title_exact"
    ID = "id"
    READ = "read"

    @property
    def needs_network(self) -> bool:
        return self is not Mode.READ

    def chain(self) -> QueryChain | None:
        if self is Mode.FULL:
            return QueryChain(DEFAULT_STRATEGIES)
        if self is Mode.READ:
            return None
        return QueryChain.pinned(QueryStrategy(self.value))


@dataclass
class SyncSummary:
    total: int = 0
    matched: int = 0
    unmatched: int = 0
    errors: int = 0
    skipped: int = 0


class Synchronizer:
    """Processes records one at a time and fills the report.

    Per-record failures (unreadable responses or extended metadata) are
    recorded in that record's report row and never stop the batch. Errors
    reading or writing files propagate.
    """

    def __init__(
        self,
        config: SyncConfig,
        mode: Mode,
        report: Report,
        snapshots: SnapshotStore,
        logger: logging.Logger,
        client: AcademicClient | None = None,
        builder: QueryBuilder | None = None,
        mapping: dict[str, str] | None = None,
    ) -> None:
        if mode.needs_network and client is None:
            raise ValueError(f"Mode {mode.value!r} needs an API client")
        self.config = config
        self.mode = mode
        self.report = report
        self.snapshots = snapshots
        self.logger = logger
        self.client = client
        self.builder = builder or QueryBuilder()
        self.chain = mode.chain()
        self.mapping = mapping or {}

    def run(self, records: Iterable[LocalRecord], limit: int | None = None) -> SyncSummary:
        """Process a batch in input order; records with an id above ``limit`` are skipped."""
        summary = SyncSummary()
        for record in records:
            if limit is not None and record.eprintid > limit:
                summary.skipped += 1
                continue
            if self.mode.needs_network and not record.can_process():
                self.logger.info("Skipping record %d: no title and no MS Academic id", record.eprintid)
                summary.skipped += 1
                continue
            summary.total += 1
            matched = self.process(record)
            status = self.report[record.eprintid].msacademic["result_status"]
            if matched:
                summary.matched += 1
            elif status.startswith("error") or status == "no response":
                summary.errors += 1
            else:
                summary.unmatched += 1
        self.logger.info(
            "Summary: total=%d, matched=%d, unmatched=%d, errors=%d, skipped=%d",
            summary.total,
            summary.matched,
            summary.unmatched,
            summary.errors,
            summary.skipped,
        )
        return summary

    def process(self, record: LocalRecord) -> bool:
        """Query, match and report one record. Returns True if an entity matched."""
        eprintid = record.eprintid
        self.report.begin(eprintid)
        self.report.set_eprint_fields(
            eprintid,
            project_local(record, self.config.eprint_fields, self.config.multiple_fields, self.mapping),
        )

        try:
            if self.mode is Mode.READ:
                outcome = self.read_snapshot(record)
            elif self.config.restart and self.snapshots.exists(eprintid):
                self.logger.debug("Record %d: using stored response", eprintid)
                outcome = self.read_snapshot(record)
            else:
                outcome = self.query(record)
        except (ResponseParseError, ExtendedMetadataError) as e:
            self.logger.error("Record %d: %s", eprintid, e)
            self.report.record_failure(eprintid, "invalid response", str(e))
            return False

        if outcome is None:
            self.logger.info("Record %d: no match", eprintid)
            return False
        candidates, result = outcome

        try:
            values = project_entity(candidates[result.matched - 1], self.config.affiliation_id)
        except ExtendedMetadataError as e:
            self.logger.error("Record %d: %s", eprintid, e)
            self.report.record_failure(eprintid, "extended metadata", str(e))
            return False
        self.report.set_entity_fields(eprintid, values)
        self.logger.info("Record %d: matched entity %s (%s)", eprintid, values["id"], result.match_type)

        if self.mode is not Mode.READ:
            datum = self.report.citation_datum(eprintid)
            if datum is None:
                self.logger.error("MS Academic Knowledge API responded with no 'id' for record %d", eprintid)
            else:
                record.apply_citation_datum(*datum)
        return True

    def query(self, record: LocalRecord) -> tuple[list[CandidateEntity], MatchResult] | None:
        """Walk the strategy chain until a response yields a match."""
        assert self.chain is not None and self.client is not None
        self.chain.reset()
        queried = False
        while True:
            strategy = self.chain.advance()
            if strategy is None:
                break
            expression = self.builder.build(strategy, record)
            if expression is None:
                self.logger.debug("Record %d: %s query not applicable", record.eprintid, strategy.value)
                continue
            queried = True
            response = self.client.submit(expression)
            if self.config.save_json and response.content is not None:
                self.snapshots.save(record.eprintid, response.content)
            if response.is_domain_error:
                self.record_domain_error(record, response)
                return None
            outcome = self.evaluate(record, response)
            if outcome is not None:
                return outcome
        self.report.record_no_response(record.eprintid, "no response" if queried else "no query")
        return None

    def read_snapshot(self, record: LocalRecord) -> tuple[list[CandidateEntity], MatchResult] | None:
        """Match a record against its stored response instead of querying."""
        response = self.snapshots.load(record.eprintid)
        if response is None:
            self.logger.debug("Record %d: no stored response", record.eprintid)
            self.report.record_no_response(record.eprintid)
            return None
        if response.is_domain_error:
            self.record_domain_error(record, response)
            return None
        return self.evaluate(record, response)

    def evaluate(
        self, record: LocalRecord, response: RemoteResponse
    ) -> tuple[list[CandidateEntity], MatchResult] | None:
        """Parse a successful response and match its entities against the record."""
        if not response.is_success:
            return None
        candidates = parse_response(response.content)
        result = find_match(record, candidates, self.logger)
        self.report.record_match(record.eprintid, result)
        if not result.found:
            return None
        return candidates, result

    def record_domain_error(self, record: LocalRecord, response: RemoteResponse) -> None:
        code, message = parse_error(response.content)
        self.report.record_error(record.eprintid, code, message)
        self.logger.warning(
            "Record %d: HTTP Error %d, Error: %s, %s", record.eprintid, response.status, code, message
        )


# ------------- CLI -------------


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="msacademic-sync",
        description="Match repository records with MS Academic entities and report citation data.",
    )
    p.add_argument("records", help="Repository export: JSON list of records or a .bib file")
    p.add_argument("-c", "--config", help="YAML configuration file")
    p.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.FULL.value,
        help="Query strategy to use; 'full' tries all, 'read' rebuilds the report from stored responses",
    )
    p.add_argument("--restart", action="store_true", help="Use stored responses where present instead of querying")
    p.add_argument("--limit", type=int, help="Skip records with an id above LIMIT")
    p.add_argument("--report-dir", help="Directory for report.csv, report.xml and json/ (overrides config)")
    p.add_argument("--save-json", action="store_true", help="Store every API response under <report-dir>/json")
    p.add_argument("--mapping", help="CSV file mapping subject codes to disciplines (overrides config)")
    p.add_argument("--api-key", help="MS Academic subscription key (overrides config and environment)")
    p.add_argument("--update-records", metavar="PATH", help="Write the records with synchronized data as JSON")
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    return p


def init_logging(verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    return logging.getLogger("msacademic_sync")


def load_config(args: argparse.Namespace) -> SyncConfig:
    """Build the run configuration: file values, then command-line overrides."""
    config = SyncConfig.from_yaml(args.config) if args.config else SyncConfig()
    if args.api_key:
        config.api_key = args.api_key
    if args.report_dir:
        config.report_dir = args.report_dir
    if args.mapping:
        config.discipline_mapping = args.mapping
    if args.save_json:
        config.save_json = True
    if args.restart:
        config.restart = True
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point for MS Academic synchronization.

    Args:
        argv: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code: 0=success, 1=configuration or file error.
    """
    args = build_arg_parser().parse_args(argv)
    logger = init_logging(args.verbose)
    mode = Mode(args.mode)

    try:
        config = load_config(args)
        config.validate(needs_network=mode.needs_network)
        records = load_records(args.records)
        mapping = load_discipline_mapping(config.discipline_mapping) if config.discipline_mapping else {}
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    report = Report()
    client = AcademicClient(config, logger) if mode.needs_network else None
    try:
        synchronizer = Synchronizer(
            config,
            mode,
            report,
            SnapshotStore(config.report_dir),
            logger,
            client=client,
            builder=QueryBuilder(RecordTitleIndex(records)),
            mapping=mapping,
        )
        synchronizer.run(records, limit=args.limit)

        os.makedirs(config.report_dir, exist_ok=True)
        write_csv(report, os.path.join(config.report_dir, "report.csv"))
        write_xml(report, os.path.join(config.report_dir, "report.xml"))
        if args.update_records:
            write_records(records, args.update_records)
            logger.info("Wrote %d records to %s", len(records), args.update_records)
    except OSError as e:
        logger.error("%s", e)
        return 1
    finally:
        if client is not None:
            client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
