"""Main TWL build step: normalize, augment, reconcile, and re-serialize.

Takes the TSV text produced by the external term-link generator (already
quote-localized) and an optional existing TWL document, and returns the
merged TSV that is shown to the user and exported.

Pipeline order:
  1. normalize + validate the generated text (header required)
  2. add GLQuote / GLOccurrence after TWLink
  3. bring the existing document to the same layout and reconcile
  4. reassign IDs after the merge (the first valid occurrence in row order
     keeps its ID, whichever side it came from)
  5. drop unlinked words, mark deleted rows
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Mapping

from twl_builder import config
from twl_builder.tsv.augment import add_gl_quote_columns
from twl_builder.tsv.errors import InputError, SchemaError, TwlError
from twl_builder.tsv.filters import filter_unlinked_words, mark_deleted_rows
from twl_builder.tsv.ids import reassign_ids
from twl_builder.tsv.normalize import (
    check_tsv_structure,
    export_core_columns,
    has_header_row,
    is_six_column_tsv,
    load_generated,
    normalize_column_count,
    parse_tsv,
    to_tsv,
)
from twl_builder.tsv.patterns import GL_QUOTE
from twl_builder.tsv.reconcile import reconcile

logger = logging.getLogger(__name__)


# ─── Existing Document Handling ──────────────────────────────────────────────


def validate_existing(content: str) -> None:
    """Raise if a pasted / uploaded existing document cannot be reconciled.

    Accepts empty content, content with a valid core header, or header-less
    content with exactly six columns per line.
    """
    if not content.strip():
        return
    if has_header_row(content):
        check_tsv_structure(content)
    elif not is_six_column_tsv(content):
        raise SchemaError("Existing content must start with a TWL header row or have exactly six columns per line")


def prepare_existing(content: str) -> str:
    """Give the existing document a header and the GLQuote columns if it lacks them."""
    validate_existing(content)
    if not content.strip():
        return content
    has_header = has_header_row(content)
    existing = parse_tsv(normalize_column_count(content) if has_header else content, has_header)
    if not existing.has_column(GL_QUOTE):
        existing = add_gl_quote_columns(existing)
    return to_tsv(existing)


# ─── Main Pipeline Step ──────────────────────────────────────────────────────


def run(
    generated_text: str,
    existing_text: str = "",
    assign_ids: bool = True,
    unlinked_words: Iterable[Mapping] = (),
    deleted_rows: Iterable[Mapping] = (),
) -> str:
    """Build the merged TWL TSV from generated and (optional) existing content."""
    generated = load_generated(generated_text)
    logger.info("Loaded %d generated rows (%d columns)", len(generated.rows), generated.width)

    if not generated.has_column(GL_QUOTE):
        generated = add_gl_quote_columns(generated)

    merged = reconcile(generated, prepare_existing(existing_text))
    logger.info("Reconciled: %d generated rows -> %d merged rows", len(generated.rows), len(merged.rows))

    if assign_ids:
        merged = reassign_ids(merged)

    n_before = len(merged.rows)
    merged = filter_unlinked_words(merged, unlinked_words)
    if len(merged.rows) != n_before:
        logger.info("Removed %d unlinked-word rows", n_before - len(merged.rows))

    merged = mark_deleted_rows(merged, deleted_rows)
    return to_tsv(merged)


# ─── CLI ─────────────────────────────────────────────────────────────────────


def _read_json_list(path: Path | None) -> list[dict]:
    """Load a JSON list of objects, raising InputError for anything else."""
    if path is None:
        return []
    with open(path, "r", encoding="utf-8-sig") as fopen:
        try:
            items = json.load(fopen)
        except json.JSONDecodeError as exc:
            raise InputError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise InputError(f"{path}: expected a JSON list of objects")
    return items


def main(argv: list[str] | None = None) -> int:
    """Merge a generated TWL file with an existing one and write the result."""
    parser = argparse.ArgumentParser(description="Reconcile generated TWL rows with an existing TWL document")
    parser.add_argument("generated", type=Path, help="Generated TWL TSV (with header)")
    parser.add_argument("--existing", type=Path, default=None, help="Existing TWL TSV (header optional)")
    parser.add_argument("--output", type=Path, default=None, help="Output file (default: stdout)")
    parser.add_argument("--no-ids", action="store_true", help="Keep IDs as they are instead of reassigning them")
    parser.add_argument("--core-only", action="store_true", help="Write only the six core columns, without DELETED rows")
    parser.add_argument("--unlinked-words", type=Path, default=None, help="JSON list of unlinked-word entries")
    parser.add_argument("--deleted-rows", type=Path, default=None, help="JSON list of deleted-row markers")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    # utf-8-sig drops the byte order mark some editors write
    generated_text = args.generated.read_text(encoding="utf-8-sig")
    existing_text = args.existing.read_text(encoding="utf-8-sig") if args.existing else ""

    try:
        result = run(
            generated_text,
            existing_text,
            assign_ids=not args.no_ids,
            unlinked_words=_read_json_list(args.unlinked_words),
            deleted_rows=_read_json_list(args.deleted_rows),
        )
        if args.core_only:
            result = to_tsv(export_core_columns(parse_tsv(result)))
    except TwlError as exc:
        logger.error("Failed to build TWL: %s", exc)
        return 1

    if args.output:
        args.output.write_text(result + "\n", encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
