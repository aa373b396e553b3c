"""Unit tests for deleted-row markers, unlinked words and row removal."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from conftest import CORE_HEADER, make_tsv

from twl_builder.tsv.errors import SchemaError
from twl_builder.tsv.filters import delete_row, filter_unlinked_words, mark_deleted_rows, normalize_hebrew_text, unlink_rows
from twl_builder.tsv.normalize import parse_tsv
from twl_builder.tsv.schema import Table

# "בְּרֵאשִׁ֖ית" with points and a tipcha accent, and its bare consonants
POINTED = "בְּרֵאשִׁ֖ית"
BARE = "בראשית"
CREATION = "rc://*/tw/dict/bible/kt/creation"
GOD = "rc://*/tw/dict/bible/kt/god"


def _table(rows: list[list[str]], header: str = CORE_HEADER) -> Table:
    return parse_tsv(make_tsv(rows, header))


# ===========================================================================
# normalize_hebrew_text tests
# ===========================================================================


class TestNormalizeHebrewText:

    def test_strips_points_and_accents(self):
        assert normalize_hebrew_text(POINTED) == BARE

    def test_maqaf_removed(self):
        assert normalize_hebrew_text("כָּל־הָאָרֶץ") == "כלהארץ"

    def test_collapses_whitespace(self):
        assert normalize_hebrew_text("  a   b\t c ") == "a b c"

    def test_empty(self):
        assert normalize_hebrew_text("") == ""

    def test_greek_untouched(self):
        assert normalize_hebrew_text("λόγος") == "λόγος"


# ===========================================================================
# mark_deleted_rows tests
# ===========================================================================


class TestMarkDeletedRows:

    def test_marks_matching_row(self):
        table = _table([["1:1", "aaaa", "", POINTED, "1", CREATION], ["1:2", "bbbb", "", "אֱלֹהִים", "1", GOD]])
        result = mark_deleted_rows(table, [{"reference": "1:1", "origWords": BARE, "occurrence": 1}])
        assert result.rows[0][0] == "DELETED 1:1"
        assert result.rows[1][0] == "1:2"

    def test_uses_normalized_orig_words_when_given(self):
        table = _table([["1:1", "aaaa", "", POINTED, "1", CREATION]])
        result = mark_deleted_rows(table, [{"reference": "1:1", "normalizedOrigWords": BARE, "occurrence": "1"}])
        assert result.rows[0][0] == "DELETED 1:1"

    def test_occurrence_must_match(self):
        table = _table([["1:1", "aaaa", "", POINTED, "2", CREATION]])
        result = mark_deleted_rows(table, [{"reference": "1:1", "origWords": BARE, "occurrence": 1}])
        assert result.rows[0][0] == "1:1"

    def test_already_deleted_untouched(self):
        table = _table([["DELETED 1:1", "aaaa", "", POINTED, "1", CREATION]])
        result = mark_deleted_rows(table, [{"reference": "1:1", "origWords": BARE, "occurrence": 1}])
        assert result.rows[0][0] == "DELETED 1:1"

    def test_existing_rows_preserved(self):
        header = CORE_HEADER + "\tAlready Exists"
        table = _table([["1:1", "aaaa", "", POINTED, "1", CREATION, "x"]], header)
        result = mark_deleted_rows(table, [{"reference": "1:1", "origWords": BARE, "occurrence": 1}])
        assert result.rows[0][0] == "1:1"

    def test_no_markers_is_copy(self):
        table = _table([["1:1", "aaaa", "", POINTED, "1", CREATION]])
        assert mark_deleted_rows(table, []).rows == table.rows

    def test_missing_columns_raise(self):
        table = Table(headers=["Reference"], rows=[["1:1"]])
        with pytest.raises(SchemaError):
            mark_deleted_rows(table, [{"reference": "1:1", "origWords": "x", "occurrence": 1}])


# ===========================================================================
# Unlinked words tests
# ===========================================================================


class TestFilterUnlinkedWords:

    def test_drops_matching_pairs(self):
        table = _table(
            [
                ["1:1", "aaaa", "", POINTED, "1", CREATION],
                ["1:2", "bbbb", "", POINTED, "1", GOD],
                ["2:4", "cccc", "", BARE, "1", CREATION],
            ]
        )
        result = filter_unlinked_words(table, [{"origWords": BARE, "twLink": CREATION + " "}])
        assert [row[1] for row in result.rows] == ["bbbb"]

    def test_removed_entries_ignored(self):
        table = _table([["1:1", "aaaa", "", POINTED, "1", CREATION]])
        result = filter_unlinked_words(table, [{"origWords": BARE, "twLink": CREATION, "removed": True}])
        assert len(result.rows) == 1


class TestUnlinkRows:

    def test_removes_all_rows_with_pair(self):
        table = _table(
            [
                ["1:1", "aaaa", "", POINTED, "1", CREATION],
                ["1:2", "bbbb", "", "אֱלֹהִים", "1", GOD],
                ["2:4", "cccc", "", BARE, "1", CREATION],
            ]
        )
        result, entry = unlink_rows(table, 0)
        assert [row[1] for row in result.rows] == ["bbbb"]
        assert entry == {"reference": "1:1", "origWords": POINTED, "twLink": CREATION}


class TestDeleteRow:

    def test_removes_one_row(self):
        table = _table([["1:1", "aaaa"], ["1:2", "bbbb"], ["1:3", "cccc"]])
        result = delete_row(table, 1)
        assert [row[1] for row in result.rows] == ["aaaa", "cccc"]
        assert len(table.rows) == 3

    def test_out_of_range(self):
        table = _table([["1:1", "aaaa"]])
        with pytest.raises(IndexError):
            delete_row(table, 5)
