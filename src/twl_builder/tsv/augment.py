"""GLQuote / GLOccurrence column insertion.

The gateway-language columns start out as copies of OrigWords and
Occurrence and are placed immediately after TWLink, so that generated and
existing tables share the same layout once both have been augmented.
"""

from twl_builder.tsv.errors import SchemaError
from twl_builder.tsv.patterns import GL_OCCURRENCE, GL_QUOTE, OCCURRENCE, ORIG_WORDS, TW_LINK
from twl_builder.tsv.schema import Table


def add_gl_quote_columns(table: Table) -> Table:
    """Return a new table with GLQuote and GLOccurrence inserted after TWLink.

    Raises SchemaError if OrigWords, Occurrence or TWLink is missing, or if
    the table has already been augmented.
    """
    cols = table.require(ORIG_WORDS, OCCURRENCE, TW_LINK)
    already = [name for name in (GL_QUOTE, GL_OCCURRENCE) if table.has_column(name)]
    if already:
        raise SchemaError(f"Table already has derived column(s): {', '.join(already)}")

    anchor = cols[TW_LINK] + 1
    headers = table.headers[:anchor] + [GL_QUOTE, GL_OCCURRENCE] + table.headers[anchor:]

    rows: list[list[str]] = []
    for row in table.rows:
        full = table.padded(row)
        gl_values = [full[cols[ORIG_WORDS]], full[cols[OCCURRENCE]]]
        # Keep short rows short: trailing blanks after the anchor stay implicit
        tail = row[anchor:]
        rows.append(full[:anchor] + gl_values + tail)
    return Table(headers=headers, rows=rows)
