"""
Fixed vocabulary shared by the knowledge files and the chat pipeline.

The placeholder tokens must appear verbatim in every <category>.txt template.
The price-tier strings mirror the values used in the <category>.csv tables.
"""

# Template placeholders
CSV_DATA_PLACEHOLDER = "{CSV_DATA_GOES_HERE}"
USER_QUERY_PLACEHOLDER = "{USER_QUERY_GOES_HERE}"

# Columns every knowledge table is expected to carry
NAME_COLUMN = "Name"
WEBSITE_COLUMN = "Website"
SOCIAL_MEDIA_COLUMN = "Social_Media"

CSV_DELIMITER = ";"

# Source link title suffixes
WEBSITE_LINK_LABEL = "Website"
SOCIAL_MEDIA_LINK_LABEL = "Social Media"
LINK_SCHEME_PREFIX = "http"

# Canonical price-tier display strings
PRICE_TIER_LOW = "€ (Χαμηλό)"
PRICE_TIER_MEDIUM = "€€ (Μεσαίο)"
PRICE_TIER_HIGH = "€€€ (Υψηλό)"
PRICE_TIER_LOW_TO_MEDIUM = "€-€€ (Χαμηλό προς Μεσαίο)"
PRICE_TIER_NOT_STATED = "Δεν αναφέρεται"

# Raw value (after trimming) -> canonical display string
PRICE_TIER_ALIASES = {
    'E (Χαμηλό)': PRICE_TIER_LOW,
    '€ (Χαμηλό)': PRICE_TIER_LOW,
    'EE (Μεσαίο)': PRICE_TIER_MEDIUM,
    '€€ (Μεσαίο)': PRICE_TIER_MEDIUM,
    'EEE (Υψηλό)': PRICE_TIER_HIGH,
    '€€€ (Υψηλό)': PRICE_TIER_HIGH,
    '€-€€ (Μεσαίο-Χαμηλό)': PRICE_TIER_LOW_TO_MEDIUM,
    # Explicit "not available" marker in the source tables
    'Μη διαθέσιμο': PRICE_TIER_NOT_STATED,
}

APOLOGY_TEMPLATE = "I'm sorry, I had a problem processing that request. (Error: {error})"
