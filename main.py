"""CLI entry point for YAML pattern discovery."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any

from loguru import logger

from pattern_discovery.deriver import DEFAULT_FILE_EXTENSIONS, YamlPatternsDeriver
from pattern_discovery.filesystem import FileSystemScanner
from pattern_discovery.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line parser."""
    parser = argparse.ArgumentParser(description="Discover YAML pattern definitions")
    parser.add_argument("--path", required=True, help="Directory path to scan")
    parser.add_argument(
        "--extension",
        action="append",
        dest="extensions",
        help=(
            "Accepted filename suffix, may be repeated "
            f"(default: {', '.join(DEFAULT_FILE_EXTENSIONS)})"
        ),
    )
    parser.add_argument(
        "--ignore-dir",
        action="append",
        dest="ignore_dirs",
        default=[],
        help="Directory name to exclude from the scan, may be repeated",
    )
    parser.add_argument(
        "--format",
        choices=("json", "table"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--output",
        help="Optional file path to write output (overwrites existing file)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose debug output",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Configure loguru output for CLI messages."""
    logger.remove()
    logger.add(
        sys.stdout,
        level="DEBUG" if verbose else "INFO",
        format="{message}",
        filter=lambda record: record["level"].name in {"INFO", "DEBUG"},
    )
    logger.add(sys.stderr, level="WARNING", format="{message}")


def build_result(files: dict[str, Any], duration_ms: int) -> dict[str, Any]:
    """Assemble the output payload from a scan result."""
    return {
        "summary": {
            "discovered_files": len(files),
            "duration_ms": duration_ms,
        },
        "files": [scanned_file.to_dict() for scanned_file in files.values()],
    }


def format_json_output(result: dict[str, Any]) -> str:
    """Render scan result as pretty JSON."""
    return json.dumps(result, indent=2)


def _build_aligned_table(rows: list[list[str]]) -> list[str]:
    """Return table rows with simple aligned columns."""
    if not rows:
        return []

    column_widths = [0] * len(rows[0])
    for row in rows:
        for index, value in enumerate(row):
            column_widths[index] = max(column_widths[index], len(value))

    return [
        " | ".join(value.ljust(column_widths[index]) for index, value in enumerate(row))
        for row in rows
    ]


def format_table_output(result: dict[str, Any]) -> str:
    """Render scan result as a human-readable table."""
    discovered_files = result["summary"]["discovered_files"]
    duration_ms = result["summary"]["duration_ms"]

    table_rows: list[list[str]] = [["URI", "FILENAME", "NAME"]]
    table_rows.extend(
        [scanned_file["uri"], scanned_file["filename"], scanned_file["name"]]
        for scanned_file in result["files"]
    )

    lines = [
        "=== Scan Summary ===",
        f"Discovered files: {discovered_files}",
        f"Duration: {duration_ms} ms",
        "",
        "=== Files ===",
        *_build_aligned_table(table_rows),
    ]

    return "\n".join(lines)


def write_output_file(output_path: str, content: str) -> None:
    """Write rendered content to an output file, overwriting if it exists."""
    Path(output_path).write_text(f"{content}\n", encoding="utf-8")


def main() -> int:
    """Run the pattern discovery CLI."""
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(verbose=args.verbose)

    target_path = Path(args.path)
    if not target_path.exists():
        logger.error(f"Error: path does not exist: {target_path}")
        return 1
    if not target_path.is_dir():
        logger.error(f"Error: path is not a directory: {target_path}")
        return 1

    deriver = YamlPatternsDeriver(
        scanner=FileSystemScanner(),
        settings=Settings.from_ignore_directories(args.ignore_dirs),
        file_extensions=args.extensions or DEFAULT_FILE_EXTENSIONS,
    )

    if args.verbose:
        logger.debug(f"[DEBUG] Starting scan for: {target_path}")

    started_at = perf_counter()
    try:
        files = deriver.file_scan_directory(str(target_path))
    except Exception as exc:
        logger.error(f"Error: scan failed: {exc}")
        return 1
    duration_ms = int((perf_counter() - started_at) * 1000)

    result = build_result(files, duration_ms)
    if args.format == "json":
        rendered_output = format_json_output(result)
    else:
        rendered_output = format_table_output(result)

    logger.info(rendered_output)

    if args.output:
        try:
            write_output_file(args.output, rendered_output)
        except OSError as exc:
            logger.error(f"Error: failed to write output file '{args.output}': {exc}")
            return 1
        if args.verbose:
            logger.debug(f"[DEBUG] Wrote output to: {args.output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
