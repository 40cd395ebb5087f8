"""
Bilingual keyword matching for transaction type detection.
Plain case-insensitive substring lookup over the fixed keyword lists.
"""
from typing import Iterable, Optional

from core.keywords import EXPENSE_KEYWORDS, INCOME_KEYWORDS
from core.logger import setup_logger

logger = setup_logger(__name__)

INCOME = "INCOME"
EXPENSE = "EXPENSE"
UNKNOWN = "UNKNOWN"


def normalize_string(text: Optional[str]) -> str:
    """
    Normalize string for matching: lowercase only.
    Spacing is left alone so multi-word keywords match as typed.

    Args:
        text: Input string

    Returns:
        Lowercased string, empty for missing or non-string input
    """
    if not text or not isinstance(text, str):
        return ""

    return text.lower()


def find_keyword(text: str, keywords: Iterable[str]) -> Optional[str]:
    """
    Return the first keyword contained in already-normalized text.

    Args:
        text: Lowercased input
        keywords: Keywords in priority order

    Returns:
        Matching keyword or None
    """
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def detect_transaction_type(text: Optional[str]) -> str:
    """
    Guess whether a phrase describes income or an expense.

    Income keywords are checked first, then expense keywords; the first
    substring hit wins. Short keywords can match inside longer words
    ("ăn" in "căn"), which is accepted.

    Args:
        text: Raw quick input text

    Returns:
        "INCOME", "EXPENSE" or "UNKNOWN"
    """
    lowered = normalize_string(text)
    if not lowered:
        return UNKNOWN

    keyword = find_keyword(lowered, INCOME_KEYWORDS)
    if keyword is not None:
        logger.debug(f"Detected INCOME by keyword '{keyword}'")
        return INCOME

    keyword = find_keyword(lowered, EXPENSE_KEYWORDS)
    if keyword is not None:
        logger.debug(f"Detected EXPENSE by keyword '{keyword}'")
        return EXPENSE

    return UNKNOWN
