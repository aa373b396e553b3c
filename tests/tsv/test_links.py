"""Unit tests for rc:// link / reference URL helpers and Context truncation."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from twl_builder import config
from twl_builder.tsv.links import reference_to_tn_url, reference_to_ult_url, rc_link_to_url, truncate_context_around_word


class TestRcLinkToUrl:

    def test_tw_link(self):
        url = rc_link_to_url("rc://*/tw/dict/bible/kt/god")
        assert url == f"{config.tw_article_base()}/bible/kt/god.md"

    def test_not_rc(self):
        assert rc_link_to_url("https://example.com/kt/god") is None
        assert rc_link_to_url("") is None

    def test_too_short(self):
        assert rc_link_to_url("rc://*/kt/god") is None


class TestReferenceUrls:

    def test_tn_url(self):
        url = reference_to_tn_url("3:16", "jhn")
        assert url.endswith("/en_tn?book=jhn#jhn-3-16")
        assert url.startswith(f"https://{config.PREVIEW_HOST}/")

    def test_ult_url(self):
        assert reference_to_ult_url("1:1", "rut").endswith("/en_ult?book=rut#rut-1-1")

    def test_missing_parts(self):
        assert reference_to_tn_url("", "jhn") is None
        assert reference_to_ult_url("1:1", "") is None


class TestTruncateContextAroundWord:

    def test_keeps_two_words_each_side(self):
        context = "In the beginning was the [Word] and the Word was with God"
        assert truncate_context_around_word(context) == "was the [Word] and the"

    def test_reattaches_punctuation(self):
        assert truncate_context_around_word("and he said [yes] , then left") == "he said [yes], then"

    def test_no_brackets_unchanged(self):
        assert truncate_context_around_word("no marker here") == "no marker here"

    def test_bracket_at_start(self):
        assert truncate_context_around_word("[God] created the heavens") == "[God] created the"

    def test_empty(self):
        assert truncate_context_around_word("") == ""
