#!/usr/bin/env python3
"""
html-filter - Main Entry Point

Parses markup and prints the part of it selected by the command line rules.
"""

import argparse
import sys
from typing import List, Optional, Tuple

from . import __version__
from .errors import ParseError
from .parser.html_parser import HTMLParser
from .selection.filter import Filter
from .utils.config import Config
from .utils.loader import ContentLoader, LoaderError
from .utils.logging import PerformanceLogger, log_exception, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="html-filter",
        description="html-filter - Parse HTML and keep only the selected nodes"
    )

    parser.add_argument("source", nargs="?", default=None,
                        help="File path, http(s) URL, or '-' for standard input (default)")
    parser.add_argument("--tag", action="append", default=[], metavar="NAME",
                        help="Select tags with this name")
    parser.add_argument("--except-tag", action="append", default=[], metavar="NAME",
                        help="Drop tags with this name")
    parser.add_argument("--attr", action="append", default=[], metavar="NAME[=VALUE]",
                        help="Select tags with this attribute, or this attribute value")
    parser.add_argument("--except-attr", action="append", default=[], metavar="NAME[=VALUE]",
                        help="Drop tags with this attribute, or this attribute value")
    parser.add_argument("--depth", type=int, default=0,
                        help="Number of ancestor generations kept around a selected tag")
    parser.add_argument("--no-comments", action="store_true", help="Drop comments")
    parser.add_argument("--no-doctype", action="store_true", help="Drop doctypes")
    parser.add_argument("--no-text", action="store_true", help="Drop text")
    parser.add_argument("--no-tags", action="store_true",
                        help="Drop tags when no tag or attribute is selected")
    parser.add_argument("--find", action="store_true", help="Print only the first selected node")
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--version", action="version", version=f"html-filter {__version__}")

    args = parser.parse_args(argv)
    if args.depth < 0:
        parser.error("--depth must be positive")
    return args


def split_attribute(option: str) -> Tuple[str, Optional[str]]:
    """Split ``NAME=VALUE`` into its parts; a bare ``NAME`` has no value."""
    if '=' in option:
        name, value = option.split('=', 1)
        return name, value
    return option, None


def build_filter(args: argparse.Namespace) -> Filter:
    """
    Build a Filter from parsed arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Filter: The selection rules
    """
    filter = Filter().depth(args.depth)
    for name in args.tag:
        filter = filter.tag_name(name)
    for name in args.except_tag:
        filter = filter.except_tag_name(name)
    for option in args.attr:
        name, value = split_attribute(option)
        filter = filter.attribute_name(name) if value is None else filter.attribute_value(name, value)
    for option in args.except_attr:
        name, value = split_attribute(option)
        if value is None:
            filter = filter.except_attribute_name(name)
        else:
            filter = filter.except_attribute_value(name, value)
    if args.no_comments:
        filter = filter.comment(False)
    if args.no_doctype:
        filter = filter.doctype(False)
    if args.no_text:
        filter = filter.text(False)
    if args.no_tags:
        filter = filter.no_tags()
    return filter


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = parse_args(argv)

    try:
        config = Config(args.config)
    except (OSError, ValueError) as e:
        print(f"html-filter: cannot load configuration: {e}", file=sys.stderr)
        return 2

    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    logger = setup_logging(log_file=config.get("logging.file"), console_level=console_level)
    perf = PerformanceLogger(logger, "html-filter")

    loader = ContentLoader(config)
    try:
        text = loader.load(args.source)
    except LoaderError as e:
        log_exception(logger, e, "Failed to load input")
        return 2
    finally:
        loader.close()

    filter = build_filter(args)
    logger.debug(f"Using {filter!r}")

    try:
        perf.start("parse")
        document = HTMLParser(config).parse(text)
        perf.end("parse")
    except ParseError as e:
        log_exception(logger, e, "Failed to parse input")
        return 1

    perf.start("filter")
    result = document.find(filter) if args.find else document.filter(filter)
    perf.end("filter")

    output = result.to_string()
    sys.stdout.write(output)
    if output and not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
