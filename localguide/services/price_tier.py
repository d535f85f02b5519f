"""
Price-tier normalization for knowledge rows.

The tables use both ASCII ("EE (Μεσαίο)") and Euro-sign ("€€ (Μεσαίο)")
spellings. Rows are normalized once at load time so the model and the
frontend only ever see the canonical Euro-sign form.
"""

from typing import Dict, Optional

from localguide.utils.constants import PRICE_TIER_ALIASES, PRICE_TIER_NOT_STATED


def normalize_price_tier(raw: Optional[str]) -> str:
    """
    Map a raw price-tier value to its canonical display string.

    Examples:
        - "E (Χαμηλό)" -> "€ (Χαμηλό)"
        - "Μη διαθέσιμο" -> "Δεν αναφέρεται"
        - "" / None -> "Δεν αναφέρεται"
        - "N/A" -> "N/A" (unrecognized values pass through unchanged)
    """
    if raw is None:
        return PRICE_TIER_NOT_STATED

    trimmed = raw.strip()
    if not trimmed:
        return PRICE_TIER_NOT_STATED

    return PRICE_TIER_ALIASES.get(trimmed, raw)


def normalize_row_price_tier(row: Dict[str, str], column: str) -> Dict[str, str]:
    """Return a copy of ``row`` with ``column`` normalized (added if absent)."""
    normalized = dict(row)
    normalized[column] = normalize_price_tier(row.get(column))
    return normalized
