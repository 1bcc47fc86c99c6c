#!/usr/bin/env python3
"""
Aspect Ratio Scanner.

Scans a directory tree for images and lists those whose aspect ratio
deviates from a target ratio beyond a tolerance.

Usage:
    python aspect_ratio_scanner.py <path> [--name TEXT] [--ratio R] [--tolerance PCT] [--output FILE]

Examples:
    # Find fanart that is not 16:9 (2% tolerance)
    python aspect_ratio_scanner.py D:/media --name fanart

    # Posters should be 2:3, allow 1.5%
    python aspect_ratio_scanner.py D:/media --name poster --ratio 2:3 --tolerance 1.5

    # Read dimensions on 8 threads and save a JSON summary
    python aspect_ratio_scanner.py D:/media --workers 8 --json summary.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from aspect_scanner.core import AspectRatioScanner, LineReportWriter, parse_ratio
from aspect_scanner.domain import (
    ConfigurationError,
    OutputWriteError,
    ScanConfiguration,
    ScanResult,
)
from aspect_scanner.domain.models import (
    DEFAULT_EXTENSION,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_TOLERANCE_PERCENT,
)
from aspect_scanner.protocols import ImageScannerProtocol, ReportWriterProtocol

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """
    Configure root logger for console and optional file output.

    Args:
        verbose: Show debug messages on the console
        log_file: Also write a debug log to this file
    """
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=logging.DEBUG, handlers=handlers)


def print_results(result: ScanResult) -> None:
    """
    Print scan results to console.

    Args:
        result: Scan result to display
    """
    config = result.configuration

    print("\n" + "=" * 80)
    print("Aspect Ratio Scan Results")
    print("=" * 80)
    if config is not None:
        print(f"Path: {config.root_directory}")
        print(f"Name filter: {config.name_pattern or '(any)'} ({config.extension})")
        print(f"Target ratio: {config.target_ratio:.5f} ± {config.tolerance_percent}%")
        print(f"Acceptable range: {config.min_acceptable:.5f} - {config.max_acceptable:.5f}")
    print()

    stats = result.stats
    print("Statistics:")
    print(f"  Files discovered: {stats.files_discovered}")
    print(f"  Conforming: {stats.conforming}")
    print(f"  Non-conforming: {stats.non_conforming}")
    print(f"  Failed to decode: {stats.failed}")
    print()

    if result.non_conforming:
        print("Non-conforming Files:")
        print("-" * 80)
        for i, path in enumerate(result.non_conforming, 1):
            print(f"{i}. {path}")
        print()

    if result.failures:
        print("Unreadable Files:")
        print("-" * 80)
        for failure in result.failures:
            print(f"  {failure.path}")
            print(f"      Reason: {failure.cause}")
        print()

    print("=" * 80)


def save_json(result: ScanResult, output_path: Path) -> None:
    """
    Save scan summary to JSON file.

    Args:
        result: Scan result to save
        output_path: Where to save JSON
    """
    config = result.configuration
    data = {
        'scan_path': str(config.root_directory) if config else None,
        'name_pattern': config.name_pattern if config else None,
        'extension': config.extension if config else None,
        'target_ratio': config.target_ratio if config else None,
        'tolerance_percent': config.tolerance_percent if config else None,
        'statistics': {
            'files_discovered': result.stats.files_discovered,
            'conforming': result.stats.conforming,
            'non_conforming': result.stats.non_conforming,
            'failed': result.stats.failed,
        },
        'non_conforming': [str(path) for path in result.non_conforming],
        'failures': [
            {
                'path': str(failure.path),
                'cause': failure.cause,
            }
            for failure in result.failures
        ],
    }

    try:
        output_path.write_text(json.dumps(data, indent=2), encoding='utf-8')
    except OSError as e:
        raise OutputWriteError(output_path, str(e)) from e
    logger.info(f"Summary saved to: {output_path}")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description='List images whose aspect ratio deviates from a target ratio',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        'path',
        type=Path,
        help='Directory to scan',
    )

    parser.add_argument(
        '--name',
        default='',
        metavar='TEXT',
        help='Only check files whose name contains TEXT (case-insensitive)',
    )

    parser.add_argument(
        '--ratio',
        default='16:9',
        help='Target aspect ratio, e.g. 16:9, 2/3 or 1.7778 (default: 16:9)',
    )

    parser.add_argument(
        '--tolerance',
        type=float,
        default=DEFAULT_TOLERANCE_PERCENT,
        metavar='PCT',
        help=f'Allowed deviation in percent of the target (default: {DEFAULT_TOLERANCE_PERCENT})',
    )

    parser.add_argument(
        '--output',
        type=Path,
        default=Path(DEFAULT_OUTPUT_NAME),
        metavar='FILE',
        help=f'Where to write the non-conforming list (default: {DEFAULT_OUTPUT_NAME})',
    )

    parser.add_argument(
        '--extension',
        default=DEFAULT_EXTENSION,
        help=f'Image file extension to check (default: {DEFAULT_EXTENSION})',
    )

    parser.add_argument(
        '--max-depth',
        type=int,
        default=None,
        help='Maximum depth to scan (0=root only, omit for unlimited)',
    )

    parser.add_argument(
        '--workers',
        type=int,
        default=1,
        help='Threads used to read image dimensions (default: 1, sequential)',
    )

    parser.add_argument(
        '--json',
        type=Path,
        metavar='FILE',
        help='Save a summary to JSON file',
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        metavar='FILE',
        help='Write a debug log to FILE',
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug output',
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 when the scan completed, 1 on configuration or output errors)
    """
    args = build_parser().parse_args(argv)

    try:
        configure_logging(args.verbose, args.log_file)
    except OSError as e:
        configure_logging(args.verbose)
        logger.error(f"Cannot open log file {args.log_file}: {e}")
        return 1

    try:
        config = ScanConfiguration.create(
            root_directory=args.path,
            output_path=args.output,
            name_pattern=args.name,
            target_ratio=parse_ratio(args.ratio),
            tolerance_percent=args.tolerance,
            extension=args.extension,
            max_depth=args.max_depth,
            workers=args.workers,
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Scanning: {config.root_directory}")

    scanner: ImageScannerProtocol = AspectRatioScanner()
    writer: ReportWriterProtocol = LineReportWriter()
    result = scanner.scan(config)

    print_results(result)

    try:
        writer.write(
            config.output_path,
            (str(path) for path in result.non_conforming),
        )
        if args.json:
            save_json(result, args.json)
    except OutputWriteError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
