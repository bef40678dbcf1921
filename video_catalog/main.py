import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import config
from .core import CatalogBuilder
from .exceptions import ExportError, ScanCancelledError, ScanRootError
from .filtering import filter_records
from .metadata.probe import MetadataProbe
from .models import Catalog, FacetSelection, ToleranceBand, VideoRecord
from .reporting import CatalogExporter
from .scanning.filesystem import PathScanner

TABLE_COLUMNS = ["Title", "Year", "Decade", "Resolution", "Aspect Ratio", "Quality", "Size", "Duration", "Language"]


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, a log file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Video Catalog: scan, classify and filter a video library")

    p.add_argument("root", type=Path, help="Directory to scan")

    p.add_argument("--decade", default=config.ALL, help="Show only this decade, e.g. 1990s")
    p.add_argument("--aspect-ratio", default=config.ALL, help="Show only this aspect ratio, e.g. 1.78 or UltraWide")
    p.add_argument("--quality", default=config.ALL, help="Show only this quality tier (4K, 1080p, 720p)")
    p.add_argument("--list-facets", action="store_true", help="Print the available filter values and exit")
    p.add_argument("--export", type=Path, default=None, help="Write the visible records to this CSV file")

    p.add_argument("--ext", action="append", default=None, help="Video extension to include (repeatable)")
    p.add_argument("--ffprobe", default=config.FFPROBE_BIN, help="ffprobe executable")
    p.add_argument("--timeout", type=float, default=config.PROBE_TIMEOUT_SEC, help="Seconds to wait for each ffprobe call")
    p.add_argument("--workers", type=int, default=config.DEFAULT_MAX_WORKERS, help="Parallel ffprobe workers")

    p.add_argument("--ultrawide-min", type=float, default=config.ULTRAWIDE_MIN, help="Lower bound of the UltraWide band")
    p.add_argument("--ultrawide-max", type=float, default=config.ULTRAWIDE_MAX, help="Upper bound of the UltraWide band")
    p.add_argument("--ultrawide-label", default=config.ULTRAWIDE_LABEL, help="Facet label for the UltraWide band")

    p.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)


def print_facets(catalog: Catalog, band: ToleranceBand):
    decades, ratios, qualities = catalog.facet_options(band)
    print(f"Decade:       {', '.join(decades)}")
    print(f"Aspect Ratio: {', '.join(ratios)}")
    print(f"Quality:      {', '.join(qualities)}")


def print_table(records: List[VideoRecord]):
    rows = [rec.as_row(TABLE_COLUMNS) for rec in records]
    widths = [len(c) for c in TABLE_COLUMNS]
    for row in rows:
        widths = [max(w, len(v)) for w, v in zip(widths, row)]

    print(" | ".join(c.ljust(w) for c, w in zip(TABLE_COLUMNS, widths)))
    print("-+-".join("-" * w for w in widths))
    for row in rows:
        print(" | ".join(v.ljust(w) for v, w in zip(row, widths)))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    root = args.root.resolve()
    band = ToleranceBand(label=args.ultrawide_label, low=args.ultrawide_min, high=args.ultrawide_max)
    if band.low > band.high:
        logging.error(f"--ultrawide-min ({band.low}) is greater than --ultrawide-max ({band.high}).")
        return 2

    builder = CatalogBuilder(
        scanner=PathScanner(args.ext) if args.ext else PathScanner(),
        probe=MetadataProbe(args.ffprobe, timeout=args.timeout),
        max_workers=args.workers,
    )

    try:
        catalog = builder.build(root, progress=not args.no_progress)
    except ScanRootError as e:
        logging.error(str(e))
        return 2
    except (KeyboardInterrupt, ScanCancelledError):
        logging.warning("Scan cancelled by user.")
        return 130

    if args.list_facets:
        print_facets(catalog, band)
        return 0

    selection = FacetSelection(decade=args.decade, aspect_ratio=args.aspect_ratio, quality=args.quality)
    visible = filter_records(catalog, selection, band)
    logging.info(f"Showing {len(visible)} of {len(catalog)} records.")
    print_table(visible)

    if args.export:
        try:
            CatalogExporter().write_csv(visible, args.export)
        except ExportError as e:
            logging.error(str(e))
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
