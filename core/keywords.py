"""
Fixed lookup tables for quick input parsing.

Magnitude suffixes (Vietnamese and English shorthand) and the bilingual
keyword lists used to guess whether a phrase is income or expense.
All tables are read-only and shared by every request.
"""
import re
from types import MappingProxyType
from typing import Mapping, Tuple

# Case-sensitive: only the spellings listed here are recognized.
MULTIPLIERS: Mapping[str, int] = MappingProxyType({
    "k": 1000,
    "K": 1000,
    "m": 1000000,
    "M": 1000000,
    "tr": 1000000,
    "triệu": 1000000,
    "nghìn": 1000,
    "ngàn": 1000,
})

# Checked before EXPENSE_KEYWORDS; order within each list matters.
INCOME_KEYWORDS: Tuple[str, ...] = (
    "lương",
    "salary",
    "thưởng",
    "bonus",
    "thu nhập",
    "income",
    "freelance",
    "bán",
    "sell",
    "hoàn tiền",
    "refund",
    "lãi",
)

EXPENSE_KEYWORDS: Tuple[str, ...] = (
    "coffee",
    "cafe",
    "ăn",
    "mua",
    "buy",
    "grab",
    "taxi",
    "xăng",
    "điện",
    "nước",
    "breakfast",
    "lunch",
    "dinner",
    "trà sữa",
    "sáng",
    "trưa",
    "tối",
)

# Longest first so "triệu" is never cut down to "tr" + "iệu".
SUFFIX_PATTERN = "|".join(
    re.escape(suffix) for suffix in sorted(MULTIPLIERS, key=len, reverse=True)
)

# ASCII digits only, optional single decimal part, no sign or separators.
NUMBER_PATTERN = r"[0-9]+(?:\.[0-9]+)?"


def get_multiplier(suffix: str) -> int:
    """
    Look up the multiplier for a magnitude suffix.

    Args:
        suffix: Captured suffix token (may be empty or None)

    Returns:
        Multiplier, 1 when the suffix is absent or unknown
    """
    if not suffix:
        return 1
    return MULTIPLIERS.get(suffix, 1)
