"""Chapter:verse reference parsing and ordering.

References sort numerically on (chapter, verse), so "1:10" comes after
"1:2".  Malformed references never raise; they degrade to (0, 0).
"""

from twl_builder.tsv.patterns import DELETED_PREFIX, LEADING_INT_RE


def _leading_int(part: str) -> int:
    """Return the leading integer of *part*, or 0 when there is none."""
    match = LEADING_INT_RE.match(part)
    return int(match.group(1)) if match else 0


def reference_key(reference: str) -> tuple[int, int]:
    """Parse a "chapter:verse" string into a comparable (chapter, verse) pair."""
    parts = (reference or "").split(":")
    chapter = _leading_int(parts[0])
    verse = _leading_int(parts[1]) if len(parts) > 1 else 0
    return chapter, verse


def compare_references(ref1: str, ref2: str) -> int:
    """Compare two references numerically.

    Returns a negative number if *ref1* sorts first, positive if *ref2* does,
    and 0 when both resolve to the same (chapter, verse).
    """
    chapter1, verse1 = reference_key(ref1)
    chapter2, verse2 = reference_key(ref2)
    if chapter1 != chapter2:
        return chapter1 - chapter2
    return verse1 - verse2


def strip_deleted_prefix(reference: str) -> str:
    """Return the reference without a leading "DELETED " marker."""
    if reference.startswith(DELETED_PREFIX):
        return reference[len(DELETED_PREFIX) :]
    return reference
