"""Merge of freshly generated TWL rows with an existing dataset.

Both sides are walked in reference order with two pointers.  For each
existing row, generated rows that sort strictly before it are emitted as-is;
then the run of generated rows at the same reference is searched for an
exact (Reference, OrigWords, Occurrence) match:

  - match: the generated row is emitted with its first six cells replaced by
    the existing row's, so hand edits to the core columns survive while the
    machine-derived extension columns are kept;
  - no match: the existing row is inserted verbatim, padded to the
    generated width (e.g. a manually added link).

Every existing row survives exactly once, every generated row not superseded
by an existing one is still present, and at tied references existing rows
come first.  When the existing dataset has rows, an "Already Exists" column
is appended ("x" for existing-sourced rows, "" otherwise); when it is empty
the generated table is returned without that column.
"""

from twl_builder.tsv.errors import SchemaError
from twl_builder.tsv.normalize import has_header_row, parse_tsv
from twl_builder.tsv.patterns import (
    ALREADY_EXISTS,
    ALREADY_EXISTS_MARK,
    CORE_HEADERS,
    CORE_WIDTH,
    OCCURRENCE,
    ORIG_WORDS,
    REFERENCE,
)
from twl_builder.tsv.references import compare_references, reference_key
from twl_builder.tsv.schema import Table


def match_key(table: Table, row: list[str]) -> tuple[str, str, str]:
    """Return the (Reference, OrigWords, Occurrence) key used for exact matching."""
    return table.cell(row, REFERENCE), table.cell(row, ORIG_WORDS), table.cell(row, OCCURRENCE)


def _parse_existing(existing_text: str) -> Table:
    """Parse existing content, auto-detecting whether it carries a header."""
    return parse_tsv(existing_text, has_header=has_header_row(existing_text))


def _fit(row: list[str], width: int) -> list[str]:
    """Pad or truncate *row* to exactly *width* cells."""
    return (list(row) + [""] * (width - len(row)))[:width]


def reconcile(generated: Table, existing_text: str) -> Table:
    """Merge *generated* (header, reference-sorted rows) with the existing TSV text.

    Neither input is modified; a new Table is returned.  Raises SchemaError
    if the generated table does not start with the six core columns, or if it
    already has an "Already Exists" column while the existing dataset has rows.
    """
    if tuple(generated.headers[:CORE_WIDTH]) != CORE_HEADERS:
        raise SchemaError(f"Generated table must start with the core columns {CORE_HEADERS}, got {generated.headers}")
    existing = _parse_existing(existing_text) if existing_text.strip() else Table(headers=[], rows=[])
    if not existing.rows:
        return generated.copy_with()
    if generated.has_column(ALREADY_EXISTS):
        raise SchemaError(f'Generated table already has an "{ALREADY_EXISTS}" column')

    width = generated.width
    gen_rows = generated.padded_rows()
    # Stable: an already-ordered existing document keeps its row order
    existing_rows = sorted(existing.rows, key=lambda row: reference_key(existing.cell(row, REFERENCE)))

    def generated_only(row: list[str]) -> list[str]:
        return row + [""]

    merged: list[list[str]] = []
    gen_ptr = 0

    for existing_row in existing_rows:
        existing_ref = existing.cell(existing_row, REFERENCE)
        existing_key = match_key(existing, existing_row)

        # ── 1. Flush generated rows that sort before this existing row ──
        while gen_ptr < len(gen_rows) and compare_references(gen_rows[gen_ptr][0], existing_ref) < 0:
            merged.append(generated_only(gen_rows[gen_ptr]))
            gen_ptr += 1

        # ── 2. Look for an exact match within the equal-reference run ───
        match_idx = None
        scan = gen_ptr
        while scan < len(gen_rows) and compare_references(gen_rows[scan][0], existing_ref) == 0:
            if match_key(generated, gen_rows[scan]) == existing_key:
                match_idx = scan
                break
            scan += 1

        if match_idx is None:
            # ── 3a. No counterpart: keep the existing row verbatim ───────
            merged.append(_fit(existing_row, width) + [ALREADY_EXISTS_MARK])
            continue

        # ── 3b. Emit the rows skipped over, then the overwritten match ──
        while gen_ptr < match_idx:
            merged.append(generated_only(gen_rows[gen_ptr]))
            gen_ptr += 1
        core = _fit(existing_row, CORE_WIDTH)
        merged.append(core + gen_rows[match_idx][CORE_WIDTH:] + [ALREADY_EXISTS_MARK])
        gen_ptr += 1

    # ── 4. Remaining generated rows ──────────────────────────────────────
    merged.extend(generated_only(row) for row in gen_rows[gen_ptr:])

    return Table(headers=list(generated.headers) + [ALREADY_EXISTS], rows=merged)
