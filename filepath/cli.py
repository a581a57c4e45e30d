"""Command-line interface for filepath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path as FsPath
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from filepath.config import CLI_CONFIG
from filepath.dsl.loader import load_paths_yaml
from filepath.logging import get_logger, set_global_log_level
from filepath.model.parser import parse
from filepath.model.path import Path

logger = get_logger(__name__)

FORMATS = ("text", "json", "yaml")


def _format_table(
    headers: List[str], rows: List[List[str]], min_width: int = 6
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _path_record(path: Path, raw: Optional[str] = None) -> Dict[str, Any]:
    """Return a JSON/YAML-safe summary of ``path``."""
    record: Dict[str, Any] = {}
    if raw is not None:
        record["input"] = raw
    record["render"] = path.render()
    record["names"] = list(path.names())
    record["structure"] = path.to_dict()
    return record


def _emit(
    paths: List[Path], fmt: str, raws: Optional[List[str]] = None
) -> None:
    """Print ``paths`` in the requested output format."""
    if fmt == "text":
        for path in paths:
            print(path.render())
        return

    records = [
        _path_record(path, raws[i] if raws is not None else None)
        for i, path in enumerate(paths)
    ]
    if fmt == "json":
        print(json.dumps(records, indent=CLI_CONFIG.json_indent))
    else:
        print(yaml.safe_dump(records, sort_keys=False), end="")


def _parse_strings(raws: List[str], fmt: str) -> None:
    paths = [parse(raw) for raw in raws]
    logger.debug("Parsed %d path string(s)", len(paths))
    _emit(paths, fmt, raws)


def _render_document(path: FsPath, fmt: str) -> None:
    """Load a paths YAML document and print each entry.

    Args:
        path: YAML document location.
        fmt: Output format.
    """
    logger.info(f"Loading paths from: {path}")

    try:
        paths = load_paths_yaml(path.read_text())
    except FileNotFoundError:
        logger.error(f"Paths file not found: {path}")
        print(f"ERROR: Paths file not found: {path}")
        sys.exit(1)
    except (
        OSError,
        ValueError,
        yaml.YAMLError,
        jsonschema.ValidationError,
    ) as e:
        logger.error(f"Failed to load paths document: {e}")
        print("ERROR: Failed to load paths document")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(f"Loaded {len(paths)} path(s)")
    _emit(paths, fmt)


def _inspect_path(raw: str) -> None:
    """Print the chain of ``raw`` node by node."""
    path = parse(raw)
    rows = [
        [str(i), "file" if node.is_file else "directory", repr(node.name)]
        for i, node in enumerate(path.segments())
    ]

    print(f"Input:    {raw!r}")
    print(f"Rendered: {path.render()!r}")
    print(f"Depth:    {path.depth}")
    print(f"Absolute: {path.is_absolute}")
    print(_format_table(["#", "kind", "name"], rows, CLI_CONFIG.table_min_width))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``filepath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="filepath",
        description="Parse and render filesystem-style path strings.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Explicit log level name (debug, info, warning, error)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{parse,render,inspect}",
        help="Available commands",
    )

    parse_parser = subparsers.add_parser(
        "parse", help="Parse path strings and print their canonical form"
    )
    parse_parser.add_argument("raw", nargs="+", help="Path string(s) to parse")

    render_parser = subparsers.add_parser(
        "render", help="Render every path listed in a YAML document"
    )
    render_parser.add_argument("document", type=FsPath, help="Path to paths YAML")

    for p in (parse_parser, render_parser):
        p.add_argument(
            "--format",
            "-f",
            choices=FORMATS,
            default=None,
            help=f"Output format (default: {CLI_CONFIG.default_format})",
        )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the segment chain of a path string"
    )
    inspect_parser.add_argument("raw", help="Path string to inspect")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.log_level:
        set_global_log_level(args.log_level)
    elif args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "parse":
        _parse_strings(args.raw, CLI_CONFIG.resolve_format(args.format))
    elif args.command == "render":
        _render_document(args.document, CLI_CONFIG.resolve_format(args.format))
    elif args.command == "inspect":
        _inspect_path(args.raw)


if __name__ == "__main__":
    main()
