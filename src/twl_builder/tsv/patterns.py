"""Header names, compiled regex patterns and constants for TWL tables.

Used by every other module in this package; nothing here has behaviour of
its own.
"""

import re

# ─── Header Names ─────────────────────────────────────────────────────────────

REFERENCE = "Reference"
ID = "ID"
TAGS = "Tags"
ORIG_WORDS = "OrigWords"
OCCURRENCE = "Occurrence"
TW_LINK = "TWLink"

GL_QUOTE = "GLQuote"
GL_OCCURRENCE = "GLOccurrence"
DISAMBIGUATION = "Disambiguation"
CONTEXT = "Context"
ALREADY_EXISTS = "Already Exists"

# The six mandatory columns, in their fixed order
CORE_HEADERS = (REFERENCE, ID, TAGS, ORIG_WORDS, OCCURRENCE, TW_LINK)
CORE_WIDTH = len(CORE_HEADERS)

# First three header cells that identify a header line in pasted content
HEADER_SIGNATURE = (REFERENCE, ID, TAGS)

# Provenance value for rows sourced from (or matched against) an existing dataset
ALREADY_EXISTS_MARK = "x"


# ─── Cell Patterns ────────────────────────────────────────────────────────────

# Row identifier: one lowercase letter followed by three lowercase letters/digits
ID_RE = re.compile(r"^[a-z][a-z0-9]{3}$")
ID_FIRST_CHARS = "abcdefghijklmnopqrstuvwxyz"
ID_OTHER_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789"
ID_LENGTH = 4

# "manual:option2 (1:other/time, 2:other/age-timeperiod)"
DISAMBIGUATION_RE = re.compile(r"^manual:option(\d+)\s*\(([^)]+)\)$")

# One "N:path" entry inside the disambiguation option list
OPTION_RE = re.compile(r"^(\d+):(.+)$")

# Leading integer of a chapter or verse (mirrors parseInt: "3a" -> 3)
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

TW_LINK_PREFIX = "rc://*/tw/dict/bible/"
RC_LINK_RE = re.compile(r"^rc://\*/(.+)$")

DELETED_PREFIX = "DELETED "

# Some spreadsheet programs prefix saved UTF-8 files with U+FEFF
BYTE_ORDER_MARK = "\ufeff"


# ─── Text Normalization ──────────────────────────────────────────────────────

# Hebrew cantillation marks, vowel points, maqaf and punctuation marks
HEBREW_MARKS_RE = re.compile("[\u0591-\u05BD\u05BF-\u05C7\u05BE\u05C0\u05C3\u05C6]")

# Unicode spacing / formatting characters treated as plain spaces
UNICODE_SPACES_RE = re.compile("[\u2000-\u200F\u2028-\u202F]")

WHITESPACE_RE = re.compile(r"\s+")

# "[...]" marker around the linked word in a Context cell
CONTEXT_BRACKET_RE = re.compile(r"\[[^\]]*\]")

# Space left between the closing bracket and trailing punctuation after truncation
CONTEXT_PUNCTUATION_GAP_RE = re.compile(r"\] ([.?:,’”])")
