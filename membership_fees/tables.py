"""
tables.py

Loads the membership cost sheet into immutable lookup tables.

The sheet is a single CSV file holding several named sections. Each
section starts with a row whose first cell is the section title and ends
at the next blank row.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Tuple

import requests

from .constants import (
    BUSINESS_PARTNER_SECTION,
    FEE_TABLE_TIMEOUT,
    FOUR_YEAR_SECTION,
    NON_HIGHER_ED_SECTION,
    REGION_SECTION,
    TWO_YEAR_SECTION,
)
from .errors import FeeTableError, SectionNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoYearOption:
    label: str
    fee: Decimal


@dataclass(frozen=True)
class FeeTables:
    """All lookup tables parsed from one fee sheet."""

    fee_matrix: Mapping[str, Tuple[Decimal, ...]]
    fte_labels: Tuple[str, ...]
    gie_labels: Tuple[str, ...]
    two_year_options: Tuple[TwoYearOption, ...]
    non_higher_ed_fees: Mapping[str, Decimal]
    business_partner_fees: Mapping[str, Decimal]
    region_multipliers: Mapping[str, Decimal]
    fte_index: Mapping[str, int] = field(init=False, repr=False, compare=False)
    two_year_fees: Mapping[str, Decimal] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "fte_index",
            MappingProxyType({label: i for i, label in enumerate(self.fte_labels)})
        )
        object.__setattr__(
            self, "two_year_fees",
            MappingProxyType({opt.label: opt.fee for opt in self.two_year_options})
        )

    @property
    def two_year_labels(self):
        return [opt.label for opt in self.two_year_options]

    @property
    def business_partner_levels(self):
        """(value, label) pairs with the label capitalised for display."""
        return [(level, level[:1].upper() + level[1:]) for level in self.business_partner_fees]

    @property
    def regions(self):
        return list(self.region_multipliers)

    @property
    def non_higher_ed_types(self):
        return list(self.non_higher_ed_fees)


# =========================================================
# SOURCE
# =========================================================
def read_fee_source(location, timeout=FEE_TABLE_TIMEOUT):
    """Return the raw sheet text from an HTTP(S) URL or a local path."""
    location = str(location)

    if location.startswith(("http://", "https://")):
        try:
            r = requests.get(location, timeout=timeout)
        except requests.RequestException as exc:
            raise FeeTableError(f"Fee table download failed: {exc}") from exc

        if r.status_code != 200:
            raise FeeTableError(f"Fee table download failed ({r.status_code}): {r.text[:200]}")

        return r.text

    try:
        return Path(location).read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise FeeTableError(f"Cannot read fee table {location}: {exc}") from exc


# =========================================================
# PARSING
# =========================================================
def parse_rows(text):
    """Split sheet text into rows of trimmed cells."""
    text = text.lstrip("\ufeff")
    return [
        [cell.replace('"', "").strip() for cell in row]
        for row in csv.reader(io.StringIO(text))
    ]


def is_blank(row):
    return not row or all(cell == "" for cell in row)


def section_rows(rows, header) -> List[List[str]]:
    """Rows following ``header`` up to the next blank row."""
    for start, row in enumerate(rows):
        if row and row[0] == header:
            break
    else:
        raise SectionNotFoundError(header)

    collected = []
    for row in rows[start + 1:]:
        if is_blank(row):
            break
        collected.append(row)
    return collected


def parse_amount(cell, section, label) -> Decimal:
    """Parse a fee or multiplier cell. Blank cells count as zero."""
    cleaned = cell.replace("$", "").replace(",", "").strip()
    if not cleaned:
        return Decimal(0)

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        value = None

    if value is None or not value.is_finite():
        raise FeeTableError(f"{section}: row '{label}' has a non-numeric value {cell!r}")
    return value


def _cell(row, i):
    return row[i] if i < len(row) else ""


def _flat_table(rows, section):
    fees = {}
    for row in rows:
        label = row[0]
        if label in fees:
            logger.warning("%s: duplicate row '%s', keeping the last one", section, label)
        fees[label] = parse_amount(_cell(row, 1), section, label)
    return fees


def _four_year_table(rows):
    if not rows:
        return (), {}

    header = rows[0][1:]
    while header and header[-1] == "":
        header = header[:-1]
    fte_labels = tuple(header)

    matrix = {}
    for row in rows[1:]:
        gie = row[0]
        if gie in matrix:
            logger.warning("%s: duplicate row '%s', keeping the last one", FOUR_YEAR_SECTION, gie)
        cells = row[1:1 + len(fte_labels)]
        matrix[gie] = tuple(parse_amount(c, FOUR_YEAR_SECTION, gie) for c in cells)

    return fte_labels, matrix


def load_fee_tables(text, strict=True) -> FeeTables:
    """
    Parse the sheet text into ``FeeTables``.

    With ``strict`` a missing section raises ``SectionNotFoundError``.
    Otherwise the section is logged and left empty, so every lookup
    against it falls back to a zero fee.
    """
    rows = parse_rows(text)

    def section(header):
        try:
            found = section_rows(rows, header)
        except SectionNotFoundError:
            if strict:
                raise
            logger.warning("Section '%s' not found, its fees will resolve to zero", header)
            return []
        logger.info("Loaded %d rows from '%s'", len(found), header)
        return found

    fte_labels, matrix = _four_year_table(section(FOUR_YEAR_SECTION))

    two_year = _flat_table(section(TWO_YEAR_SECTION), TWO_YEAR_SECTION)
    non_higher_ed = _flat_table(section(NON_HIGHER_ED_SECTION), NON_HIGHER_ED_SECTION)
    business = _flat_table(section(BUSINESS_PARTNER_SECTION), BUSINESS_PARTNER_SECTION)
    multipliers = _flat_table(section(REGION_SECTION), REGION_SECTION)

    for region, m in multipliers.items():
        if m < 0:
            raise FeeTableError(f"{REGION_SECTION}: region '{region}' has a negative multiplier {m}")

    return FeeTables(
        fee_matrix=MappingProxyType(matrix),
        fte_labels=fte_labels,
        gie_labels=tuple(matrix),
        two_year_options=tuple(TwoYearOption(label, fee) for label, fee in two_year.items()),
        non_higher_ed_fees=MappingProxyType(non_higher_ed),
        business_partner_fees=MappingProxyType(business),
        region_multipliers=MappingProxyType(multipliers),
    )
