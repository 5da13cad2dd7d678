"""
constants.py

Fixed parameters for the APPA membership fee estimator.
Section titles must match the first cell of the header rows in the
published membership cost sheet.
"""

from pathlib import Path

# =========================================================
# APPLICATION METADATA
# =========================================================
APP_VERSION = "v1.0.0"

# =========================================================
# FEE TABLE SOURCE
# =========================================================
DEFAULT_FEE_TABLE = Path(__file__).resolve().parent.parent / "data" / "membership_costs.csv"

# Seconds to wait when the fee table is fetched over HTTP
FEE_TABLE_TIMEOUT = 10

LOG_LEVEL = "INFO"

# =========================================================
# SECTION HEADERS
# =========================================================
FOUR_YEAR_SECTION = "Four-Year Institution Fees"
TWO_YEAR_SECTION = "Two-Year Institution Fees"
NON_HIGHER_ED_SECTION = "Non-Higher Education Fees"
BUSINESS_PARTNER_SECTION = "Business Partner Fees"
REGION_SECTION = "Regional Fee Multipliers"

SECTIONS = [
    FOUR_YEAR_SECTION,
    TWO_YEAR_SECTION,
    NON_HIGHER_ED_SECTION,
    BUSINESS_PARTNER_SECTION,
    REGION_SECTION,
]

# =========================================================
# INSTITUTION TYPES
# =========================================================
FOUR_YEAR = "four-year"
TWO_YEAR = "two-year"
BUSINESS_PARTNER = "business-partner"

INSTITUTION_TYPE_LABELS = {
    FOUR_YEAR: "Four-Year Institution",
    TWO_YEAR: "Two-Year Institution",
    BUSINESS_PARTNER: "Business Partner",
}

# =========================================================
# FORM FIELDS
# =========================================================
FTE = "fte"
GIE = "gie"
GIE_TWO_YEAR = "gie_two_year"
BUSINESS_LEVEL = "business_level"
REGION = "region"

FIELD_LABELS = {
    FTE: "FTE",
    GIE: "GIE",
    GIE_TWO_YEAR: "GIE",
    BUSINESS_LEVEL: "a business level",
    REGION: "a region",
}
