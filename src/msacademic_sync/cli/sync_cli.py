#!/usr/bin/env python3
"""CLI entry point for msacademic-sync command.

Matches repository records with MS Academic entities and writes the report.
"""

import sys


def main() -> None:
    """Entry point for msacademic-sync command."""
    from msacademic_sync.sync import main as sync_main

    sys.exit(sync_main())


if __name__ == "__main__":
    main()
