"""Manual disambiguation parsing and option switching.

A Disambiguation cell records which of several candidate dictionary
articles was chosen for one occurrence, e.g.::

    manual:option1 (1:other/time, 2:other/age-timeperiod)

Parsing is total: text that does not follow this form yields no
alternatives and is reported back unchanged as the current option.
"""

from pydantic import BaseModel

from twl_builder.tsv.patterns import DISAMBIGUATION, DISAMBIGUATION_RE, OPTION_RE, TW_LINK, TW_LINK_PREFIX
from twl_builder.tsv.schema import Table


class DisambiguationOption(BaseModel):
    """One numbered candidate article, e.g. 2:other/age-timeperiod."""

    number: int
    path: str

    @property
    def text(self) -> str:
        return f"{self.number}:{self.path}"


class DisambiguationAlternative(BaseModel):
    """A sibling option and the cell / TWLink rewrite that selecting it produces."""

    number: int
    path: str
    text: str
    cell: str
    link: str


class DisambiguationChoice(BaseModel):
    """Parsed Disambiguation cell: the current selection plus its alternatives."""

    current_option: str
    selected: int | None = None
    options: list[DisambiguationOption] = []
    alternatives: list[DisambiguationAlternative] = []


def _parse_options(options_text: str) -> list[DisambiguationOption]:
    """Parse "1:kt/god, 2:kt/falsegod" into options (malformed entries are skipped)."""
    options: list[DisambiguationOption] = []
    for entry in options_text.split(","):
        match = OPTION_RE.match(entry.strip())
        if match:
            options.append(DisambiguationOption(number=int(match.group(1)), path=match.group(2).strip()))
    return options


def resolve_disambiguation(text: str) -> DisambiguationChoice:
    """Parse a Disambiguation cell into its current option and switchable alternatives."""
    raw = text or ""
    match = DISAMBIGUATION_RE.match(raw.strip())
    if not match:
        return DisambiguationChoice(current_option=raw)

    selected = int(match.group(1))
    options_text = match.group(2)
    options = _parse_options(options_text)

    alternatives = [
        DisambiguationAlternative(
            number=option.number,
            path=option.path,
            text=option.text,
            cell=f"manual:option{option.number} ({options_text})",
            link=f"{TW_LINK_PREFIX}{option.path}",
        )
        for option in options
        if option.number != selected
    ]
    return DisambiguationChoice(
        current_option=f"manual:option{selected}",
        selected=selected,
        options=options,
        alternatives=alternatives,
    )


def apply_disambiguation(table: Table, row_index: int, alternative: DisambiguationAlternative) -> Table:
    """Return a copy of *table* with *alternative* selected on row *row_index*.

    Rewrites both the Disambiguation cell and the TWLink cell.  Raises
    SchemaError if either column is missing and IndexError for a bad row.
    """
    cols = table.require(DISAMBIGUATION, TW_LINK)
    rows = [list(row) for row in table.rows]
    row = table.padded(rows[row_index])
    row[cols[DISAMBIGUATION]] = alternative.cell
    row[cols[TW_LINK]] = alternative.link
    rows[row_index] = row
    return table.copy_with(rows=rows)


def clear_disambiguation(table: Table, row_index: int) -> Table:
    """Return a copy of *table* with the Disambiguation cell of row *row_index* blanked."""
    idx = table.require(DISAMBIGUATION)[DISAMBIGUATION]
    rows = [list(row) for row in table.rows]
    row = table.padded(rows[row_index])
    row[idx] = ""
    rows[row_index] = row
    return table.copy_with(rows=rows)
