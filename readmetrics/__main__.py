"""
CLI entry point for readability analysis.

Each input file is one text unit, identified by its path. Inline texts
passed with --text are identified as text-1, text-2, ... With no inputs,
stdin is read as a single text unit identified as "stdin".

Usage:
    python -m readmetrics chapter1.html chapter2.txt
    python -m readmetrics --text "The cat sat on the mat."
    python -m readmetrics docs/*.html --format csv --workers 4
    cat essay.txt | python -m readmetrics --format text
    python -m readmetrics --describe
"""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import List

from readmetrics.config import settings
from readmetrics.features.readability import BatchItem, BatchResult, ReadabilityAnalyzer
from readmetrics.features.readability.constants import (
    OUTPUT_HEADER,
    READABILITY_CITATIONS,
    READABILITY_INDEX_DESCRIPTIONS,
    READABILITY_MODULE_DESCRIPTION,
    READABILITY_MODULE_NAME,
    READABILITY_MODULE_VERSION,
    STANDARD_READABILITY_INDICES,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _collect_items(args: argparse.Namespace) -> List[BatchItem]:
    """Build the ordered batch from files, inline texts, or stdin."""
    items = []

    for file_name in args.files:
        path = Path(file_name)
        try:
            text = path.read_text(encoding='utf-8', errors='replace')
        except OSError as exc:
            logger.error("Cannot read %s: %s", path, exc)
            sys.exit(1)
        items.append(BatchItem(identifier=str(path), text=text))

    for idx, text in enumerate(args.text or [], 1):
        items.append(BatchItem(identifier=f"text-{idx}", text=text))

    if not items:
        items.append(BatchItem(identifier="stdin", text=sys.stdin.read()))

    return items


def _write_json(results: List[BatchResult], include_clean_text: bool) -> None:
    exclude = None if include_clean_text else {"clean_text"}
    records = [
        {"id": entry.identifier, **entry.result.model_dump(exclude=exclude)}
        for entry in results
    ]
    json.dump(records, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _write_csv(results: List[BatchResult]) -> None:
    writer = csv.DictWriter(sys.stdout, fieldnames=("Id",) + OUTPUT_HEADER)
    writer.writeheader()
    for entry in results:
        writer.writerow({"Id": entry.identifier, **entry.result.to_record()})


def _write_text(results: List[BatchResult]) -> None:
    for entry in results:
        sys.stdout.write(f"[{entry.identifier}]\n{entry.result.get_summary()}\n\n")


def _write_description() -> None:
    """Print the module description, each index and the formula citations."""
    lines = [
        f"{READABILITY_MODULE_NAME} {READABILITY_MODULE_VERSION}",
        READABILITY_MODULE_DESCRIPTION,
        "",
        "Indices:",
    ]
    for name in STANDARD_READABILITY_INDICES:
        lines.append(f"  {name}: {READABILITY_INDEX_DESCRIPTIONS[name]}")
    lines += ["", "References:"]
    lines += [f"  {citation}" for citation in READABILITY_CITATIONS.values()]
    sys.stdout.write("\n".join(lines) + "\n")


def main() -> None:
    ap = argparse.ArgumentParser(
        prog="readmetrics",
        description=f"{READABILITY_MODULE_NAME} {READABILITY_MODULE_VERSION}: "
                    f"{READABILITY_MODULE_DESCRIPTION}"
    )
    ap.add_argument('files', nargs='*', help='Input text/HTML files (one text unit each)')
    ap.add_argument('--text', action='append',
                    help='Inline text to analyze (repeatable)')
    ap.add_argument('--format', choices=['json', 'csv', 'text'], default=None,
                    help='Output format (default: from config, json)')
    ap.add_argument('--workers', type=int, default=None,
                    help='Worker processes for batches (default: from config, 1)')
    ap.add_argument('--include-clean-text', action='store_true',
                    help='Include the normalized text in JSON output')
    ap.add_argument('--describe', action='store_true',
                    help='Describe the readability indices and exit')
    ap.add_argument('--quiet', action='store_true', help='Only log warnings and errors')
    args = ap.parse_args()

    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    if args.describe:
        _write_description()
        return

    output_format = args.format or settings.readability.output.format

    items = _collect_items(args)
    logger.info(f"Analyzing {len(items)} text unit(s)")

    analyzer = ReadabilityAnalyzer(max_workers=args.workers)
    results = analyzer.analyze_batch(items)

    empty = sum(1 for entry in results if entry.result.is_empty)
    if empty:
        logger.warning(f"{empty} text unit(s) had no letters; statistics left empty")

    if output_format == 'csv':
        _write_csv(results)
    elif output_format == 'text':
        _write_text(results)
    else:
        _write_json(results, args.include_clean_text)


if __name__ == '__main__':
    main()
