"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from dialuxadapter.controller.converter import furnishings_to_openings, openings_to_furnishings
from dialuxadapter.logging_config import setup_logging
from dialuxadapter.model.io import IOManager

logger = logging.getLogger("dialuxadapter.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dialuxadapter",
        description="Convert openings between panel sets and DIALux furnishing records.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging (same as --log-level DEBUG).")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level name (default: $DIALUXADAPTER_LOG_LEVEL or INFO).",
    )
    parser.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_import = sub.add_parser("import", help="Place furnishing records as openings on their host panels.")
    p_import.add_argument("panels", help="Panels JSON forming the space.")
    p_import.add_argument("records", help="Furnishing records file.")
    p_import.add_argument("--output", "-o", required=True, help="Panels JSON written with the new openings.")
    p_import.add_argument(
        "--skip-invalid",
        dest="skip_invalid",
        action="store_true",
        help="Log and skip malformed records instead of stopping.",
    )

    p_export = sub.add_parser("export", help="Write every hosted opening as a furnishing record.")
    p_export.add_argument("panels", help="Panels JSON with openings.")
    p_export.add_argument("--output", "-o", required=True, help="Furnishing records file.")

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else args.log_level, log_file=args.log_file)

    panels = IOManager.load_panels(args.panels)
    match args.command:
        case "import":
            records = IOManager.load_records(args.records)
            placements = furnishings_to_openings(records, panels, skip_invalid=args.skip_invalid)
            IOManager.save_panels(panels, args.output)
            unresolved = sum(1 for p in placements if not p.is_resolved)
            if unresolved:
                logger.warning(f"{unresolved} furnishings could not be placed on a host panel.")
        case "export":
            furnishings = openings_to_furnishings(panels)
            IOManager.save_records([f.to_fields() for f in furnishings], args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
