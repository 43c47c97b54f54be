"""Command line entrypoint for catalog maintenance."""

import argparse
import logging
import sys
from pathlib import Path

from purine_catalog.app_logging import configure_logging
from purine_catalog.config import Settings
from purine_catalog.containers import build_ingestion_service
from purine_catalog.domain.errors import CatalogIngestionError

_logger = logging.getLogger("purine_catalog.cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the catalog commands."""
    parser = argparse.ArgumentParser(
        prog="purine-catalog",
        description="Build the purine food catalog from USDA CSV snapshots.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    update = subcommands.add_parser(
        "update", help="Parse the newest dated snapshot and write the catalog"
    )
    update.add_argument("--data-dir", type=Path, help="Root of dated snapshot folders")
    update.add_argument("--output", type=Path, help="Catalog JSON file to write")

    clear = subcommands.add_parser("clear", help="Reset the catalog to an empty list")
    clear.add_argument("--output", type=Path, help="Catalog JSON file to reset")
    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run a catalog command and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    resolved_settings = settings or Settings()
    overrides: dict[str, object] = {}
    if getattr(args, "data_dir", None):
        overrides["catalog_data_dir"] = args.data_dir
    if args.output:
        overrides["catalog_output_file"] = args.output
    if overrides:
        resolved_settings = resolved_settings.model_copy(update=overrides)

    service = build_ingestion_service(resolved_settings)
    if args.command == "clear":
        service.clear()
        return 0

    try:
        result = service.update()
    except CatalogIngestionError as exc:
        _logger.error("Catalog update failed: %s", exc)
        return 1
    _logger.info(
        "Updated %s from %s (%s food, %s alcohol, %s unique)",
        resolved_settings.catalog_output_file,
        result.snapshot.folder,
        result.food_count,
        result.alcohol_count,
        len(result.catalog),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
