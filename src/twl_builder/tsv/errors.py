"""Typed failures raised by the TWL table operations."""


class TwlError(Exception):
    """Base class for every TWL table failure."""


class SchemaError(TwlError):
    """A required column is missing, or the header is present but malformed."""


class StructureError(TwlError):
    """A data row has more columns than its header."""

    def __init__(self, line_number: int, n_cells: int, n_headers: int):
        self.line_number = line_number
        self.n_cells = n_cells
        self.n_headers = n_headers
        super().__init__(f"Row {line_number} has too many columns: {n_cells} > {n_headers}")


class InputError(TwlError):
    """A side input (unlinked words, deleted rows) is not in the expected shape."""
