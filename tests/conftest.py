"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from twl_builder.tsv.normalize import parse_tsv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

CORE_HEADER = "Reference\tID\tTags\tOrigWords\tOccurrence\tTWLink"


def make_tsv(rows: list[list[str]], header: str | None = CORE_HEADER) -> str:
    """Build TSV text from a list of rows, optionally preceded by a header line."""
    lines = [header] if header is not None else []
    lines.extend("\t".join(row) for row in rows)
    return "\n".join(lines)


@pytest.fixture
def augmented_generated():
    """A small generated table already carrying GLQuote / GLOccurrence."""
    header = CORE_HEADER + "\tGLQuote\tGLOccurrence\tDisambiguation"
    rows = [
        ["1:1", "aaaa", "", "λόγος", "1", "rc://*/tw/dict/bible/kt/word", "word", "1", ""],
        ["1:2", "bbbb", "", "θεός", "1", "rc://*/tw/dict/bible/kt/god", "God", "1", ""],
        ["1:3", "abcd", "", "λόγος", "1", "rc://*/tw/dict/bible/kt/word", "word", "1", "note"],
        ["1:10", "cccc", "", "χρόνος", "1", "rc://*/tw/dict/bible/other/time", "time", "1", ""],
    ]
    return parse_tsv(make_tsv(rows, header))
