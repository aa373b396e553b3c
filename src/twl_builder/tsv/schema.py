"""Pydantic model for a parsed TWL table.

A Table is an ordered header list plus rows of string cells.  Rows may be
shorter than the header (missing trailing cells read as ""), never longer.
Column lookups go through a header-to-index map that is built once per
table, so a missing column is a single up-front SchemaError rather than
scattered -1 checks.
"""

from functools import cached_property

from pydantic import BaseModel, model_validator

from twl_builder.tsv.errors import SchemaError


class Table(BaseModel):
    """Headers and rows of a TWL tab-separated document."""

    headers: list[str]
    rows: list[list[str]]

    @model_validator(mode="after")
    def validate_shape(self) -> "Table":
        """Ensure header names are unique and no row is wider than the header."""
        seen: set[str] = set()
        for name in self.headers:
            if name in seen:
                raise ValueError(f"Duplicate column header {name!r}")
            seen.add(name)
        n_cols = len(self.headers)
        for i, row in enumerate(self.rows):
            if len(row) > n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected at most {n_cols} (matching headers)")
        return self

    @cached_property
    def column_index(self) -> dict[str, int]:
        """Map each header name to its position."""
        return {name: i for i, name in enumerate(self.headers)}

    @property
    def width(self) -> int:
        return len(self.headers)

    def has_column(self, name: str) -> bool:
        return name in self.column_index

    def require(self, *names: str) -> dict[str, int]:
        """Return the positions of *names*, raising SchemaError if any is absent."""
        missing = [name for name in names if name not in self.column_index]
        if missing:
            raise SchemaError(f"Missing required column(s): {', '.join(missing)}")
        return {name: self.column_index[name] for name in names}

    def cell(self, row: list[str], name: str) -> str:
        """Return the cell of *row* under column *name* ("" if the column or cell is absent)."""
        idx = self.column_index.get(name)
        if idx is None or idx >= len(row):
            return ""
        return row[idx]

    def padded(self, row: list[str]) -> list[str]:
        """Return a copy of *row* padded with empty cells to the header width."""
        return list(row) + [""] * (self.width - len(row))

    def padded_rows(self) -> list[list[str]]:
        return [self.padded(row) for row in self.rows]

    def copy_with(self, headers: list[str] | None = None, rows: list[list[str]] | None = None) -> "Table":
        """Build a new validated Table, defaulting to copies of this one's headers / rows."""
        return Table(
            headers=list(self.headers) if headers is None else headers,
            rows=[list(row) for row in self.rows] if rows is None else rows,
        )
