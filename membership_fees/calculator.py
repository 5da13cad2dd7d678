"""
calculator.py

National and regional membership fee calculation.

National fee by institution type:
- Four-year: fee matrix cell for (GIE row, FTE column)
- Two-year: flat fee per GIE bracket
- Business partner: flat fee per partner level
- Anything else: flat non-higher-education fee for that type

Regional fee = ceil(national fee x region multiplier), not charged to
business partners. Table entries that are missing resolve to zero and are
reported in ``FeeBreakdown.misses``. An unknown FTE bracket is charged at
the first FTE column and reported in ``FeeBreakdown.fallbacks``.
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal
from typing import Optional, Tuple

from .constants import (
    BUSINESS_LEVEL,
    BUSINESS_PARTNER,
    FIELD_LABELS,
    FOUR_YEAR,
    FTE,
    GIE,
    GIE_TWO_YEAR,
    INSTITUTION_TYPE_LABELS,
    REGION,
    TWO_YEAR,
)
from .errors import FeeLookupError, MissingSelectionError

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


def format_fee(amount):
    cents = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"${cents}"


@dataclass(frozen=True)
class FeeBreakdown:
    national: Decimal
    regional: Decimal
    misses: Tuple[str, ...] = ()
    fallbacks: Tuple[str, ...] = ()

    @property
    def total(self):
        return self.national + self.regional

    def as_display(self):
        return {
            "National Fee": format_fee(self.national),
            "Regional Fee": format_fee(self.regional),
            "Total Fee": format_fee(self.total),
        }


REQUIRED_FIELDS = {
    FOUR_YEAR: (FTE, GIE),
    TWO_YEAR: (GIE_TWO_YEAR,),
    BUSINESS_PARTNER: (BUSINESS_LEVEL,),
}


def _missing_message(fields, category):
    if fields == [REGION]:
        return "Please select a region."
    if fields == [BUSINESS_LEVEL]:
        return "Please select a business level."

    names = " and ".join(FIELD_LABELS[f] for f in fields)
    if len(fields) > 1:
        names = "both " + names
    return f"Please select {names} for {INSTITUTION_TYPE_LABELS[category].lower()}s."


def check_selections(category, selections):
    """Raise ``MissingSelectionError`` for the first group of empty selections."""
    required = REQUIRED_FIELDS.get(category, ())
    missing = [f for f in required if not selections.get(f)]
    if missing:
        raise MissingSelectionError(_missing_message(missing, category), missing)

    if category != BUSINESS_PARTNER and not selections.get(REGION):
        raise MissingSelectionError(_missing_message([REGION], category), [REGION])


class FeeCalculator:
    """Fee lookups against one set of ``FeeTables``.

    Lookups never fail on missing table entries unless ``strict`` is set;
    they return zero. Misses are only collected while ``total_fee`` runs
    and are returned on the ``FeeBreakdown``.
    """

    def __init__(self, tables, strict=False):
        self.tables = tables
        self.strict = strict
        self._misses = None
        self._fallbacks = None

    def _miss(self, table, key):
        if self.strict:
            raise FeeLookupError(table, key)
        logger.warning("%s has no entry for %r, using 0", table, key)
        if self._misses is not None:
            self._misses.append(f"{table}: {key}")
        return ZERO

    def _fallback(self, table, key):
        if self.strict:
            raise FeeLookupError(table, key)
        logger.warning("%s has no entry for %r, falling back to the first FTE column", table, key)
        if self._fallbacks is not None:
            self._fallbacks.append(f"{table}: {key} charged at first FTE column")

    def four_year_fee(self, fte_label, gie_label) -> Decimal:
        row = self.tables.fee_matrix.get(gie_label)
        if row is None:
            return self._miss("Four-year GIE", gie_label)

        index = self.tables.fte_index.get(fte_label)
        if index is None:
            self._fallback("Four-year FTE", fte_label)
            index = 0

        if index >= len(row):
            return self._miss("Four-year fee matrix", f"{gie_label} / {fte_label}")
        return row[index]

    def two_year_fee(self, gie_label) -> Decimal:
        fee = self.tables.two_year_fees.get(gie_label)
        if fee is None:
            return self._miss("Two-year GIE", gie_label)
        return fee

    def non_higher_ed_fee(self, category_label) -> Decimal:
        fee = self.tables.non_higher_ed_fees.get(category_label)
        if fee is None:
            return self._miss("Non-higher education type", category_label)
        return fee

    def business_partner_fee(self, level_label) -> Decimal:
        fee = self.tables.business_partner_fees.get(level_label)
        if fee is None:
            return self._miss("Business partner level", level_label)
        return fee

    def regional_fee(self, region_code, base_fee) -> Decimal:
        multiplier = self.tables.region_multipliers.get(region_code)
        if multiplier is None:
            multiplier = self._miss("Region", region_code)
        return (Decimal(base_fee) * multiplier).to_integral_value(rounding=ROUND_CEILING)

    def national_fee(self, category, selections) -> Decimal:
        if category == FOUR_YEAR:
            return self.four_year_fee(selections[FTE], selections[GIE])
        if category == TWO_YEAR:
            return self.two_year_fee(selections[GIE_TWO_YEAR])
        if category == BUSINESS_PARTNER:
            return self.business_partner_fee(selections[BUSINESS_LEVEL])
        return self.non_higher_ed_fee(category)

    def total_fee(self, category, selections) -> FeeBreakdown:
        """
        Validate the form selections and calculate the fee breakdown.

        ``selections`` maps form field names (``fte``, ``gie``,
        ``gie_two_year``, ``business_level``, ``region``) to the chosen
        values. Raises ``MissingSelectionError`` before any lookup when a
        required selection is empty.
        """
        check_selections(category, selections)
        self._misses, self._fallbacks = [], []
        try:
            national = self.national_fee(category, selections)

            regional = ZERO
            if category != BUSINESS_PARTNER:
                regional = self.regional_fee(selections[REGION], national)

            return FeeBreakdown(
                national=national,
                regional=regional,
                misses=tuple(self._misses),
                fallbacks=tuple(self._fallbacks),
            )
        finally:
            self._misses, self._fallbacks = None, None


def lookup_status(breakdown: FeeBreakdown) -> Optional[str]:
    notes = []
    if breakdown.misses:
        notes.append(
            "No fee table entry for " + "; ".join(breakdown.misses) + ". Those fees count as $0.00."
        )
    if breakdown.fallbacks:
        notes.append("Unknown FTE bracket: " + "; ".join(breakdown.fallbacks) + ".")
    return " ".join(notes) or None
