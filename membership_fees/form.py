"""
form.py

Dropdown state for the fee form. The institution type decides which of
the dependent dropdowns are enabled and what they offer.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import BUSINESS_PARTNER, FOUR_YEAR, INSTITUTION_TYPE_LABELS, TWO_YEAR


@dataclass
class FormFields:
    """Options per dropdown. An empty list means the dropdown is disabled."""

    fte: List[str] = field(default_factory=list)
    gie: List[str] = field(default_factory=list)
    gie_two_year: List[str] = field(default_factory=list)
    business_level: List[Tuple[str, str]] = field(default_factory=list)
    region: List[str] = field(default_factory=list)


def institution_types(tables):
    return [FOUR_YEAR, TWO_YEAR, BUSINESS_PARTNER] + tables.non_higher_ed_types


def institution_type_label(value):
    return INSTITUTION_TYPE_LABELS.get(value, value)


def form_fields(tables, institution_type):
    if institution_type == FOUR_YEAR:
        return FormFields(
            fte=list(tables.fte_labels),
            gie=list(tables.gie_labels),
            region=tables.regions,
        )
    if institution_type == TWO_YEAR:
        return FormFields(gie_two_year=tables.two_year_labels, region=tables.regions)
    if institution_type == BUSINESS_PARTNER:
        return FormFields(business_level=tables.business_partner_levels)
    return FormFields(region=tables.regions)
