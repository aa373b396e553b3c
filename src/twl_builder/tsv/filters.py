"""Row-level filters and edits: deleted-row markers, unlinked words, row removal.

Deleted-row markers and unlinked-word entries are stored by an external
service; this module only applies already-fetched lists of them to a table.
Original-language words are compared after stripping Hebrew cantillation
marks and normalizing whitespace, so pointing differences between documents
do not prevent a match.
"""

from typing import Iterable, Mapping

from twl_builder.tsv.patterns import (
    ALREADY_EXISTS,
    ALREADY_EXISTS_MARK,
    DELETED_PREFIX,
    HEBREW_MARKS_RE,
    OCCURRENCE,
    ORIG_WORDS,
    REFERENCE,
    TW_LINK,
    UNICODE_SPACES_RE,
    WHITESPACE_RE,
)
from twl_builder.tsv.references import strip_deleted_prefix
from twl_builder.tsv.schema import Table


def normalize_hebrew_text(text: str) -> str:
    """Strip Hebrew cantillation / vowel marks and collapse whitespace."""
    if not text:
        return ""
    text = HEBREW_MARKS_RE.sub("", text)
    text = UNICODE_SPACES_RE.sub(" ", text)
    return WHITESPACE_RE.sub(" ", text).strip()


# ─── Deleted Rows ────────────────────────────────────────────────────────────


def _deleted_key(item: Mapping) -> str:
    orig_words = item.get("normalizedOrigWords") or normalize_hebrew_text(item.get("origWords", ""))
    return f"{item.get('reference', '')}|{orig_words}|{str(item.get('occurrence', '')).strip()}"


def mark_deleted_rows(table: Table, deleted_items: Iterable[Mapping]) -> Table:
    """Prefix "DELETED " to the Reference of rows matching a deleted-row marker.

    Each marker is a mapping with reference, origWords (or
    normalizedOrigWords) and occurrence.  Rows already deleted, and rows
    that came from the existing dataset (Already Exists = "x"), are left as
    they are.
    """
    keys = {_deleted_key(item) for item in deleted_items}
    if not keys:
        return table.copy_with()
    cols = table.require(REFERENCE, ORIG_WORDS, OCCURRENCE)

    rows: list[list[str]] = []
    for row in table.rows:
        reference = table.cell(row, REFERENCE)
        display_ref = strip_deleted_prefix(reference)
        orig_words = normalize_hebrew_text(table.cell(row, ORIG_WORDS))
        key = f"{display_ref}|{orig_words}|{table.cell(row, OCCURRENCE).strip()}"

        imported = table.cell(row, ALREADY_EXISTS) == ALREADY_EXISTS_MARK
        if key in keys and not reference.startswith(DELETED_PREFIX) and not imported:
            new_row = table.padded(row)
            new_row[cols[REFERENCE]] = DELETED_PREFIX + display_ref
            rows.append(new_row)
        else:
            rows.append(list(row))
    return table.copy_with(rows=rows)


# ─── Unlinked Words ──────────────────────────────────────────────────────────


def filter_unlinked_words(table: Table, unlinked_words: Iterable[Mapping]) -> Table:
    """Drop rows whose OrigWords / TWLink pair matches an active unlinked-word entry.

    Entries flagged ``removed`` are ignored.
    """
    active = {
        (normalize_hebrew_text(word.get("origWords", "")), word.get("twLink", "").strip())
        for word in unlinked_words
        if not word.get("removed")
    }
    if not active:
        return table.copy_with()
    table.require(ORIG_WORDS, TW_LINK)

    rows = [
        list(row)
        for row in table.rows
        if (normalize_hebrew_text(table.cell(row, ORIG_WORDS)), table.cell(row, TW_LINK).strip()) not in active
    ]
    return table.copy_with(rows=rows)


def unlink_rows(table: Table, row_index: int) -> tuple[Table, dict[str, str]]:
    """Remove every row sharing the OrigWords / TWLink pair of row *row_index*.

    Returns the filtered table and the unlinked-word entry describing the
    removed pair (for the caller to persist).
    """
    table.require(ORIG_WORDS, TW_LINK)
    target = table.rows[row_index]
    entry = {
        "reference": table.cell(target, REFERENCE),
        "origWords": table.cell(target, ORIG_WORDS),
        "twLink": table.cell(target, TW_LINK),
    }
    return filter_unlinked_words(table, [entry]), entry


def delete_row(table: Table, row_index: int) -> Table:
    """Return a copy of *table* without row *row_index*."""
    if not 0 <= row_index < len(table.rows):
        raise IndexError(f"Row {row_index} out of range for table with {len(table.rows)} rows")
    rows = [list(row) for i, row in enumerate(table.rows) if i != row_index]
    return table.copy_with(rows=rows)
