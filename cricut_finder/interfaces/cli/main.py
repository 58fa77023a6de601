#!/usr/bin/env python3
"""
Cricut Finder CLI - List Design Space canvas images and open their folders
"""

import argparse
import sys
from typing import List, Optional

from cricut_finder import __version__
from cricut_finder.application.services.discovery_service import DiscoveryService
from cricut_finder.domain.errors import CricutFinderError, FolderOpenFailed
from cricut_finder.infrastructure.config.config import get_settings
from cricut_finder.infrastructure.logging.logging_config import configure_logging, get_logger
from cricut_finder.infrastructure.opener.selector import select_folder_opener
from cricut_finder.infrastructure.persistence.canvas_scanner import CanvasScanner
from cricut_finder.interfaces.cli.formatter import ListingFormatter

APPLICATION_TITLE = "Cricut Design Space File Viewer"

EXIT_OK = 0
EXIT_DISCOVERY_FAILED = 1
EXIT_BAD_INDEX = 2
EXIT_OPEN_FAILED = 3
EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="cricut-finder",
        description=f"{APPLICATION_TITLE} - list canvas images, most recent first"
    )

    parser.add_argument(
        "--limit", "-n",
        type=int,
        help="Show at most this many files"
    )
    parser.add_argument(
        "--open", "-o",
        type=int,
        metavar="INDEX",
        dest="open_index",
        help="Open the folder of the file at INDEX (1-based, as listed)"
    )
    parser.add_argument(
        "--format",
        choices=["pretty", "json", "yaml"],
        default="pretty",
        help="Output format (default: pretty)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must not be negative")
    return args


def build_service() -> DiscoveryService:
    """Wire the scanner and this platform's folder opener"""
    return DiscoveryService(
        discovery_port=CanvasScanner(),
        folder_opener=select_folder_opener(),
    )


def main(argv: Optional[List[str]] = None, service: Optional[DiscoveryService] = None) -> int:
    """Main CLI function, returns the process exit code"""
    args = parse_args(argv)

    configure_logging(args.log_level, get_settings().log_format)
    logger = get_logger(__name__)

    service = service or build_service()

    try:
        files = service.list_recent(limit=args.limit)
    except CricutFinderError as e:
        logger.debug("Discovery failed", **e.to_dict())
        print(f"Error getting Cricut files: {e}", file=sys.stderr)
        return EXIT_DISCOVERY_FAILED

    print(ListingFormatter(format=args.format).format_files(files))

    if args.open_index is None:
        return EXIT_OK

    if not 1 <= args.open_index <= len(files):
        print(
            f"Error: index {args.open_index} is out of range (1-{len(files)})",
            file=sys.stderr,
        )
        return EXIT_BAD_INDEX

    selected = files[args.open_index - 1]
    try:
        service.open_containing_folder(selected)
    except FolderOpenFailed as e:
        logger.debug("Folder open failed", **e.to_dict())
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_OPEN_FAILED

    return EXIT_OK


def entry_point():
    """CLI entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    entry_point()
