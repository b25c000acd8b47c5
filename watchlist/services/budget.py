"""Budget parsing and display formatting.

Budgets are free text. Strings such as ``"$160M"`` or ``"250,000"`` are
normalized to a USD display; anything else (``"TBD"``, ``"$3M/ep"``) is shown
as entered.
"""

import re
from decimal import ROUND_HALF_UP, Decimal

PLACEHOLDER = "-"

# Strict form used for display: the whole string must be an amount.
BUDGET_AMOUNT_RE = re.compile(r"^\$?(\d+(?:,\d{3})*(?:\.\d+)?)\s*([KMB]?)$", re.IGNORECASE)

# Looser form accepted on input: an amount prefix, or one of the known labels.
BUDGET_INPUT_RE = re.compile(
    r"^\$?\d+(?:,\d{3})*(?:\.\d+)?\s*[KMB]?|^(?:Low|Medium|High|Unknown|TBD|N/A)$",
    re.IGNORECASE,
)

SUFFIX_MULTIPLIERS = {
    "": Decimal(1),
    "K": Decimal(1_000),
    "M": Decimal(1_000_000),
    "B": Decimal(1_000_000_000),
}

COMPACT_UNITS = [
    (Decimal(1_000_000), "M"),
    (Decimal(1_000_000_000), "B"),
    (Decimal(1_000_000_000_000), "T"),
]

COMPACT_THRESHOLD = Decimal(1_000_000)


def is_valid_budget(value: str) -> bool:
    """Check whether a budget string is acceptable input."""
    return BUDGET_INPUT_RE.match(value.strip()) is not None


def parse_budget(raw: str) -> Decimal | None:
    """Parse a budget string into a dollar amount, or None if it is not an amount."""
    match = BUDGET_AMOUNT_RE.match(raw.strip())
    if match is None:
        return None
    number, suffix = match.groups()
    return Decimal(number.replace(",", "")) * SUFFIX_MULTIPLIERS[suffix.upper()]


def _format_compact(amount: Decimal) -> str:
    index = 0
    while index + 1 < len(COMPACT_UNITS) and amount >= COMPACT_UNITS[index + 1][0]:
        index += 1

    scaled = (amount / COMPACT_UNITS[index][0]).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    # 999.96M rounds to 1000.0M, which reads as $1B
    if scaled >= 1000 and index + 1 < len(COMPACT_UNITS):
        index += 1
        scaled = (amount / COMPACT_UNITS[index][0]).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )

    text = f"{scaled:,.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"${text}{COMPACT_UNITS[index][1]}"


def format_budget(raw: str | None) -> str:
    """Format a budget for display.

    Amounts of a million dollars or more use compact notation with at most
    one fraction digit ("$8.5M"); smaller amounts are shown in full with no
    cents ("$250,000"). Empty input returns a placeholder and anything that
    is not a plain amount is returned unchanged.
    """
    if raw is None or not raw.strip():
        return PLACEHOLDER

    amount = parse_budget(raw)
    if amount is None:
        return raw

    if amount >= COMPACT_THRESHOLD:
        return _format_compact(amount)

    whole = amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${whole:,.0f}"
