#!/usr/bin/env python3
"""
Pod Inventory Snapshot Viewer

Reads a network service or FRU info snapshot (JSON), validates it against
the wire contract and prints it.
Features:
- Automatic snapshot kind detection
- Strict mode rejecting unknown keys
- Multiple output formats (list, table, JSON)

Usage:
    python show_snapshot.py network_service.json             # Print as list
    python show_snapshot.py fru.json --format table          # Print as table
    python show_snapshot.py service.json --json              # Re-emit wire JSON
    python show_snapshot.py service.json --strict            # Reject unknown keys
    SNAPSHOT_FILE=service.json python show_snapshot.py       # Path from environment
"""

import argparse
import logging
import sys
from typing import List, Optional

from pod_inventory.config import (
    AppConfig,
    SerializationConfig,
    FeatureFlags,
    load_environment,
    setup_logging,
    validate_config,
)
from pod_inventory.formatters import FruInfoFormatter, NetworkServiceFormatter
from pod_inventory.repositories import SnapshotKind
from pod_inventory.serializers import SerializationError
from pod_inventory.services import SnapshotService

logger = logging.getLogger(__name__)

_FORMATTERS = {
    SnapshotKind.NETWORK_SERVICE: NetworkServiceFormatter,
    SnapshotKind.FRU_INFO: FruInfoFormatter,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a network service snapshot
  python show_snapshot.py network_service.json

  # Print a FRU record as a table
  python show_snapshot.py fru.json --format table

  # Validate strictly and re-emit the wire JSON
  python show_snapshot.py network_service.json --strict --json
        """
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Snapshot file to read (default: SNAPSHOT_FILE env var)"
    )

    parser.add_argument(
        "--kind", "-k",
        choices=["auto"] + [kind.value for kind in SnapshotKind],
        default="auto",
        help="Snapshot kind (default: detect from keys)"
    )

    parser.add_argument(
        "--format", "-f",
        choices=list(SerializationConfig.OUTPUT_FORMATS),
        help="Output format: list, table, or json (default: OUTPUT_FORMAT env var or list)"
    )

    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON (shortcut for --format json)"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject snapshots containing unknown keys"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with settings"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the snapshot viewer.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    if args.env_file:
        load_environment(args.env_file)

    setup_logging(verbose=args.verbose)

    try:
        validate_config()
    except ValueError as e:
        logger.error(str(e))
        print(f"\n❌ {e}")
        return 1

    path = args.path or SerializationConfig.SNAPSHOT_FILE
    if not path:
        print("\n❌ No snapshot file given. Pass a path or set SNAPSHOT_FILE.")
        return 1

    kind = None if args.kind == "auto" else SnapshotKind(args.kind)
    service = SnapshotService(
        strict=args.strict or FeatureFlags.STRICT_PAYLOADS,
        json_indent=SerializationConfig.JSON_INDENT or None,
        check_host_identity=FeatureFlags.CHECK_HOST_IDENTITY
    )

    try:
        snapshot = service.load_file(path, kind=kind, encoding=SerializationConfig.FILE_ENCODING)
    except OSError as e:
        logger.error(f"Failed to read snapshot: {e}")
        print(f"\n❌ Cannot read {path}: {e}")
        return 1
    except SerializationError as e:
        logger.error(f"Invalid snapshot: {e}")
        print(f"\n❌ Invalid snapshot in {path}: {e}")
        return 1

    output_format = "json" if args.json else (args.format or SerializationConfig.DEFAULT_OUTPUT_FORMAT)
    formatter_class = _FORMATTERS[service.kind_of(snapshot)]
    formatter = formatter_class(output_format=output_format, json_indent=service.json_indent)

    print(formatter.format(snapshot))
    return 0


def run():
    """Console entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\n❌ Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
