"""
Quick input pipeline: amount/note extraction plus type detection.
"""
from typing import Optional

from core.matching import EXPENSE, INCOME, detect_transaction_type
from core.parsing import extract_amount_and_note
from core.schema import ParsedInput, normalize_type


def parse_quick_input(text, explicit_type: Optional[str] = None) -> Optional[ParsedInput]:
    """
    Parse a free-text phrase into a structured transaction.

    Args:
        text: Raw user input, e.g. "lương 10m"
        explicit_type: Caller-supplied income/expense label, any case; skips
            keyword detection. Anything else is ignored.

    Returns:
        ParsedInput, or None when no amount could be found
    """
    extracted = extract_amount_and_note(text)
    if extracted is None:
        return None

    override = normalize_type(explicit_type)
    if override in (INCOME, EXPENSE):
        transaction_type = override
    else:
        transaction_type = detect_transaction_type(text)

    return ParsedInput(
        amount=extracted.amount,
        note=extracted.note,
        type=transaction_type,
    )
