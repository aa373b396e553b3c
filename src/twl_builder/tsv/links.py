"""rc:// link and reference URL helpers, plus Context-cell truncation."""

from twl_builder import config
from twl_builder.tsv.patterns import CONTEXT_BRACKET_RE, CONTEXT_PUNCTUATION_GAP_RE, RC_LINK_RE, WHITESPACE_RE


def rc_link_to_url(rc_link: str) -> str | None:
    """Convert "rc://*/tw/dict/bible/kt/god" to the browsable article URL.

    Returns None for anything that is not an rc:// link with at least three
    path segments.
    """
    match = RC_LINK_RE.match(rc_link or "")
    if not match:
        return None
    parts = match.group(1).split("/")
    if len(parts) < 3:
        return None
    return f"{config.tw_article_base()}/{'/'.join(parts[-3:])}.md"


def _verse_anchor(book_id: str, reference: str) -> str:
    return f"{book_id}-{reference.replace(':', '-')}"


def reference_to_tn_url(reference: str, book_id: str) -> str | None:
    """Return the Translation Notes preview URL for a verse of *book_id*."""
    if not reference or not book_id:
        return None
    return (
        f"https://{config.PREVIEW_HOST}/u/{config.ORGANIZATION}/en_tn"
        f"?book={book_id}#{_verse_anchor(book_id, reference)}"
    )


def reference_to_ult_url(reference: str, book_id: str) -> str | None:
    """Return the ULT preview URL for a verse of *book_id*."""
    if not reference or not book_id:
        return None
    return (
        f"https://{config.PREVIEW_HOST}/u/{config.ORGANIZATION}/en_ult"
        f"?book={book_id}#{_verse_anchor(book_id, reference)}"
    )


def truncate_context_around_word(context: str, n_words: int = 2) -> str:
    """Keep at most *n_words* words either side of the bracketed [word] in a Context cell."""
    if not context:
        return context
    match = CONTEXT_BRACKET_RE.search(context)
    if not match:
        return context

    before = context[: match.start()].strip()
    after = context[match.end() :].strip()
    before_words = WHITESPACE_RE.split(before)[-n_words:] if before else []
    after_words = WHITESPACE_RE.split(after)[:n_words] if after else []

    parts = []
    if before_words:
        parts.append(" ".join(before_words))
    parts.append(match.group(0))
    if after_words:
        parts.append(" ".join(after_words))
    # Re-attach punctuation that directly follows the bracket
    return CONTEXT_PUNCTUATION_GAP_RE.sub(r"]\1", " ".join(parts))
