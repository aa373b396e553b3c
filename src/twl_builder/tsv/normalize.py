"""TSV validation, column-count normalization, parsing and serialization.

Both generated and existing TWL documents pass through here before any
positional assumption (e.g. the fixed TWLink index) is relied on.  Blank
lines are ignored everywhere; a header row is required for generated
content and auto-detected for pasted or uploaded existing content.
"""

from twl_builder.tsv.errors import SchemaError, StructureError
from twl_builder.tsv.patterns import BYTE_ORDER_MARK, CORE_HEADERS, CORE_WIDTH, DELETED_PREFIX, HEADER_SIGNATURE, REFERENCE
from twl_builder.tsv.schema import Table


def _split_lines(content: str) -> list[str]:
    """Split text into non-empty lines (tolerating a leading BOM and CRLF line endings)."""
    content = content.removeprefix(BYTE_ORDER_MARK)
    return [line.rstrip("\r") for line in content.split("\n") if line.rstrip("\r")]


# ─── Validation ──────────────────────────────────────────────────────────────


def check_tsv_structure(content: str, expected_headers: tuple[str, ...] = CORE_HEADERS) -> None:
    """Raise if *content* does not start with *expected_headers* or has over-wide rows.

    Raises SchemaError for an empty document or a header mismatch, and
    StructureError for the first data row with more columns than the header.
    Rows with fewer columns are allowed (they imply trailing blanks).
    """
    lines = _split_lines(content or "")
    if not lines:
        raise SchemaError("TSV content is empty")

    headers = lines[0].split("\t")
    if len(headers) < len(expected_headers):
        raise SchemaError(f"Header has {len(headers)} columns, expected at least {len(expected_headers)}")
    for i, expected in enumerate(expected_headers):
        if headers[i] != expected:
            raise SchemaError(f'Header mismatch at position {i}: expected "{expected}", got "{headers[i]}"')
    if len(set(headers)) != len(headers):
        raise SchemaError(f"Duplicate column headers: {headers}")

    for line_number, line in enumerate(lines[1:], start=1):
        n_cells = len(line.split("\t"))
        if n_cells > len(headers):
            raise StructureError(line_number, n_cells, len(headers))


def validate_tsv_structure(content: str, expected_headers: tuple[str, ...] = CORE_HEADERS) -> bool:
    """Return True if *content* passes check_tsv_structure()."""
    try:
        check_tsv_structure(content, expected_headers)
    except (SchemaError, StructureError):
        return False
    return True


def is_six_column_tsv(content: str) -> bool:
    """Return True if every non-empty line has exactly the six core columns (header optional)."""
    lines = _split_lines(content or "")
    if not lines:
        return False
    return all(len(line.split("\t")) == CORE_WIDTH for line in lines)


def has_header_row(content: str) -> bool:
    """Return True if the first non-empty line starts with Reference, ID, Tags."""
    lines = _split_lines(content or "")
    if not lines:
        return False
    first = lines[0].split("\t")
    return tuple(first[: len(HEADER_SIGNATURE)]) == HEADER_SIGNATURE


# ─── Normalization ───────────────────────────────────────────────────────────


def normalize_column_count(content: str) -> str:
    """Pad or truncate every line so it has exactly as many columns as the header."""
    if not content:
        return content
    lines = _split_lines(content)
    if not lines:
        return content

    expected = len(lines[0].split("\t"))
    normalized: list[str] = []
    for line in lines:
        columns = line.split("\t")
        if len(columns) < expected:
            columns += [""] * (expected - len(columns))
        normalized.append("\t".join(columns[:expected]))
    return "\n".join(normalized)


# ─── Parsing & Serialization ─────────────────────────────────────────────────


def parse_tsv(content: str, has_header: bool = True) -> Table:
    """Parse TSV text into a Table.

    Without a header the core headers are assumed, extended with generic
    "Column N" names when a row is wider than six cells.
    """
    lines = _split_lines(content or "")
    if not lines:
        return Table(headers=[], rows=[])

    if has_header:
        headers = lines[0].split("\t")
        rows = [line.split("\t") for line in lines[1:]]
        for line_number, row in enumerate(rows, start=1):
            if len(row) > len(headers):
                raise StructureError(line_number, len(row), len(headers))
        return Table(headers=headers, rows=rows)

    rows = [line.split("\t") for line in lines]
    widest = max(len(row) for row in rows)
    headers = list(CORE_HEADERS) + [f"Column {n}" for n in range(CORE_WIDTH + 1, widest + 1)]
    return Table(headers=headers, rows=rows)


def to_tsv(table: Table) -> str:
    """Serialize a Table back to TSV text (header line first)."""
    if not table.headers:
        return ""
    lines = ["\t".join(table.headers)]
    lines.extend("\t".join(row) for row in table.rows)
    return "\n".join(lines)


def load_generated(content: str) -> Table:
    """Normalize, validate and parse generated TWL content (header required)."""
    normalized = normalize_column_count(content)
    check_tsv_structure(normalized)
    return parse_tsv(normalized, has_header=True)


def export_core_columns(table: Table) -> Table:
    """Keep only the six core columns and drop rows marked DELETED."""
    positions = list(table.require(*CORE_HEADERS).values())
    rows: list[list[str]] = []
    for row in table.rows:
        if table.cell(row, REFERENCE).startswith(DELETED_PREFIX):
            continue
        full = table.padded(row)
        rows.append([full[i] for i in positions])
    return Table(headers=list(CORE_HEADERS), rows=rows)
