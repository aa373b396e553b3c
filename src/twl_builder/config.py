"""Shared configuration for the TWL builder (project paths, hosts, logging)."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

DATA_DIR = ROOT / "data"

# Content host serving the translation-word articles and the ULT/TN previews
DCS_HOST = os.getenv("TWL_DCS_HOST", "git.door43.org")
PREVIEW_HOST = os.getenv("TWL_PREVIEW_HOST", "preview.door43.org")
ORGANIZATION = os.getenv("TWL_ORG", "unfoldingWord")

LOG_LEVEL = os.getenv("TWL_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def tw_article_base() -> str:
    """Return the browsable base URL for translation-word articles."""
    return f"https://{DCS_HOST}/{ORGANIZATION}/en_tw/src/master"
