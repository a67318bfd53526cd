#!/usr/bin/env python3
"""
Heap dump report export tool.

This tool decodes a heap dump and saves the per-class report as a table
(Parquet or JSON) plus a JSON summary, for later analysis or plotting with
`tools/plot_footprint.py`.

Usage examples:
  # Export to Parquet with default compression
  python tools/export_report.py --dump heap.dump --word-size 8 --output-dir out/

  # Export to JSON and keep a copy of the plain-text report
  python tools/export_report.py --dump heap.dump --word-size 4 \
    --output-dir out/ --format json --text-report
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dumpstats.config import SUPPORTED_COMPRESSIONS, SUPPORTED_FORMATS, StorageConfig
from dumpstats.decoding import decode_file
from dumpstats.storage import ReportStorageManager
from dumpstats.validation import DumpStatsError, validate_path_exists, validate_positive_integer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Setup logging configuration for the export tool.

    Args:
        verbose: Whether to enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def export_report(
    dump_path: Path,
    word_size: int,
    output_dir: Path,
    storage_config: StorageConfig,
    verbose: bool = False,
) -> bool:
    """
    Decode one heap dump and export its report.

    Args:
        verbose: Also log the size of every written file

    Returns:
        True if the export completed, False if any error occurred
    """
    try:
        dump_path = validate_path_exists(dump_path, field_name="--dump")
        word_size = validate_positive_integer(word_size, field_name="--word-size")

        records = decode_file(dump_path)
        manager = ReportStorageManager(output_dir, storage_config)
        written = manager.save_report(records, word_size, source=str(dump_path))

        for kind, path in written.items():
            logger.info(f"  {kind}: {path}")
        if verbose:
            info = manager.get_storage_info()
            for name, size in info["files"].items():
                logger.debug(f"  {name}: {size} bytes")
        return True

    except (DumpStatsError, OSError) as e:
        logger.error(f"Failed to export report for {dump_path}: {e}")
        return False


def main():
    parser = argparse.ArgumentParser(
        description="Export a heap dump report to Parquet or JSON.",
    )
    parser.add_argument(
        "--dump",
        type=Path,
        required=True,
        help="Path to the binary heap dump file.",
    )
    parser.add_argument(
        "--word-size",
        type=int,
        required=True,
        help="Byte width of one machine word on the producing system.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        required=True,
        help="Directory where report files are written.",
    )
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        default="parquet",
        help="Table format. Default: parquet.",
    )
    parser.add_argument(
        "--compression",
        choices=SUPPORTED_COMPRESSIONS,
        default="snappy",
        help="Parquet compression algorithm. Default: snappy.",
    )
    parser.add_argument(
        "--text-report",
        action="store_true",
        help="Also write the plain-text report as report.txt.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging.",
    )
    args = parser.parse_args()

    setup_logging(args.verbose)

    storage_config = StorageConfig.from_dict(
        {
            "format": args.format,
            "compression": args.compression,
            "write_text_report": args.text_report,
        }
    )

    if export_report(
        args.dump, args.word_size, args.output_dir, storage_config, verbose=args.verbose
    ):
        logger.info("Export completed successfully")
        sys.exit(0)
    logger.error("Export failed")
    sys.exit(1)


if __name__ == "__main__":
    main()
