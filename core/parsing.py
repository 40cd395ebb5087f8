"""
Amount/note extraction from quick input text.

Supported formats:
- "breakfast 50k" -> amount 50000, note "breakfast"
- "50k breakfast" -> amount 50000, note "breakfast"
- "coffee 25000" -> amount 25000, note "coffee"
- "100000 dinner with family" -> amount 100000, note "dinner with family"

Three grammars are tried in a fixed order and the first match wins:
number first, number last, then the first number anywhere in the text.
"""
import re
from typing import Callable, Optional, Tuple

from core.keywords import NUMBER_PATTERN, SUFFIX_PATTERN, get_multiplier
from core.logger import setup_logger
from core.schema import DEFAULT_NOTE, ExtractedAmount

logger = setup_logger(__name__)

# "50k coffee", "100000 breakfast", "50k"
AMOUNT_FIRST_PATTERN = re.compile(
    rf"^(?P<num>{NUMBER_PATTERN})\s*(?P<suffix>{SUFFIX_PATTERN})?\s*(?P<note>.*)$"
)

# "coffee 50k", "breakfast 100000"
AMOUNT_LAST_PATTERN = re.compile(
    rf"^(?P<note>.*?)\s+(?P<num>{NUMBER_PATTERN})\s*(?P<suffix>{SUFFIX_PATTERN})?$"
)

# First number anywhere: "ăn sáng 30k hôm nay"
AMOUNT_ANYWHERE_PATTERN = re.compile(
    rf"(?P<num>{NUMBER_PATTERN})\s*(?P<suffix>{SUFFIX_PATTERN})?"
)


def compute_amount(number: str, suffix: Optional[str]) -> float:
    """
    Convert a captured numeral and optional suffix into an amount.

    Args:
        number: Digits with optional decimal part, e.g. "1.5"
        suffix: Magnitude suffix such as "k" or "triệu", or None

    Returns:
        number * multiplier(suffix)
    """
    return float(number) * get_multiplier(suffix)


def _build_result(number: str, suffix: Optional[str], note: str) -> ExtractedAmount:
    return ExtractedAmount(
        amount=compute_amount(number, suffix),
        note=note.strip() or DEFAULT_NOTE,
    )


def match_amount_first(text: str) -> Optional[ExtractedAmount]:
    """Number at the start, the rest (possibly empty) is the note."""
    match = AMOUNT_FIRST_PATTERN.match(text)
    if not match:
        return None
    return _build_result(match.group("num"), match.group("suffix"), match.group("note"))


def match_amount_last(text: str) -> Optional[ExtractedAmount]:
    """Free text, whitespace, then a number anchored to the end."""
    match = AMOUNT_LAST_PATTERN.match(text)
    if not match:
        return None
    return _build_result(match.group("num"), match.group("suffix"), match.group("note"))


def match_amount_anywhere(text: str) -> Optional[ExtractedAmount]:
    """
    First number anywhere in the text.
    The matched span is removed once; the remainder is kept as-is and trimmed.
    """
    match = AMOUNT_ANYWHERE_PATTERN.search(text)
    if not match:
        return None
    start, end = match.span()
    return _build_result(match.group("num"), match.group("suffix"), text[:start] + text[end:])


# Tried in order, first non-None result wins
EXTRACTION_STRATEGIES: Tuple[Tuple[str, Callable[[str], Optional[ExtractedAmount]]], ...] = (
    ("amount_first", match_amount_first),
    ("amount_last", match_amount_last),
    ("amount_anywhere", match_amount_anywhere),
)


def extract_amount_and_note(text) -> Optional[ExtractedAmount]:
    """
    Extract amount and note from quick input text.

    Args:
        text: Raw user input

    Returns:
        ExtractedAmount, or None if the input is empty, not a string,
        or contains no number at all
    """
    if not text or not isinstance(text, str):
        return None

    trimmed = text.strip()
    if not trimmed:
        return None

    for name, strategy in EXTRACTION_STRATEGIES:
        result = strategy(trimmed)
        if result is not None:
            logger.debug(f"Quick input matched '{name}': amount={result.amount}, note='{result.note}'")
            return result

    logger.debug("No amount found in quick input")
    return None
