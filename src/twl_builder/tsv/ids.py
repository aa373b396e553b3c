"""Unique row identifier assignment.

IDs are four characters: a lowercase letter followed by three lowercase
letters or digits.  Assignment is a single greedy pass in row order: the
first occurrence of a valid ID keeps it, and later duplicates or malformed
IDs are replaced with freshly generated ones.
"""

import logging
import random

from twl_builder.tsv.patterns import ID, ID_FIRST_CHARS, ID_LENGTH, ID_OTHER_CHARS, ID_RE
from twl_builder.tsv.schema import Table

logger = logging.getLogger(__name__)


def is_valid_id(value: str) -> bool:
    """Return True if *value* matches [a-z][a-z0-9]{3}."""
    return bool(value) and bool(ID_RE.match(value))


def generate_id(used: set[str], rng: random.Random | None = None) -> str:
    """Generate a random well-formed ID that is not in *used*."""
    rng = rng or random.Random()
    while True:
        new_id = rng.choice(ID_FIRST_CHARS) + "".join(rng.choice(ID_OTHER_CHARS) for _ in range(ID_LENGTH - 1))
        if new_id not in used:
            return new_id


def reassign_ids(table: Table, rng: random.Random | None = None) -> Table:
    """Return a new table whose ID column is well-formed and collision-free.

    Raises SchemaError if the table has no ID column.  Pass *rng* for
    reproducible output; otherwise a fresh Random instance is used.
    """
    id_idx = table.require(ID)[ID]
    rng = rng or random.Random()
    used: set[str] = set()

    rows: list[list[str]] = []
    for row_number, row in enumerate(table.rows, start=1):
        new_row = list(row) if len(row) > id_idx else table.padded(row)[: id_idx + 1]
        current = new_row[id_idx]
        if not is_valid_id(current) or current in used:
            new_id = generate_id(used, rng)
            logger.debug('Changed ID from "%s" to "%s" in row %d', current, new_id, row_number)
            new_row[id_idx] = new_id
        used.add(new_row[id_idx])
        rows.append(new_row)
    return table.copy_with(rows=rows)
