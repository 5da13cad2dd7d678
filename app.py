import logging

import streamlit as st

from membership_fees.calculator import FeeCalculator, lookup_status
from membership_fees.constants import (
    APP_VERSION,
    BUSINESS_LEVEL,
    DEFAULT_FEE_TABLE,
    FEE_TABLE_TIMEOUT,
    FTE,
    GIE,
    GIE_TWO_YEAR,
    LOG_LEVEL,
    REGION,
)
from membership_fees.errors import FeeTableError, MissingSelectionError
from membership_fees.form import form_fields, institution_type_label, institution_types
from membership_fees.tables import load_fee_tables, read_fee_source

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# =========================================================
# STREAMLIT CONFIG
# =========================================================
st.set_page_config(page_title="APPA Membership Fee Estimator", layout="centered")
st.title("APPA Membership Fee Estimator")
st.caption(f"National and regional dues from the published membership cost sheet ({APP_VERSION})")

# =========================================================
# FEE TABLE CONFIG
# =========================================================
try:
    FEE_TABLE_SOURCE = st.secrets["FEE_TABLE_SOURCE"]
except Exception:
    FEE_TABLE_SOURCE = str(DEFAULT_FEE_TABLE)

try:
    TIMEOUT = float(st.secrets["FEE_TABLE_TIMEOUT"])
except Exception:
    TIMEOUT = FEE_TABLE_TIMEOUT

# =========================================================
# LOAD FEE TABLES
# =========================================================
@st.cache_data
def fetch_fee_sheet(source, timeout):
    return read_fee_source(source, timeout=timeout)

try:
    tables = load_fee_tables(fetch_fee_sheet(FEE_TABLE_SOURCE, TIMEOUT))
except FeeTableError as exc:
    st.error(f"Unable to load the fee table: {exc}")
    st.stop()

calculator = FeeCalculator(tables)

# =========================================================
# INSTITUTION
# =========================================================
st.subheader("A. Institution")

institution_type = st.selectbox(
    "Institution Type",
    institution_types(tables),
    format_func=institution_type_label
)

fields = form_fields(tables, institution_type)
business_labels = dict(fields.business_level)

# =========================================================
# SELECTIONS
# =========================================================
st.subheader("B. Fee Selections")

selections = {
    FTE: st.selectbox(
        "FTE Enrollment", fields.fte,
        index=None, placeholder="Select FTE", disabled=not fields.fte
    ),
    GIE: st.selectbox(
        "Gross Institutional Expenditure", fields.gie,
        index=None, placeholder="Select GIE", disabled=not fields.gie
    ),
    GIE_TWO_YEAR: st.selectbox(
        "Gross Institutional Expenditure (Two-Year)", fields.gie_two_year,
        index=None, placeholder="Select GIE", disabled=not fields.gie_two_year
    ),
    BUSINESS_LEVEL: st.selectbox(
        "Business Partner Level", list(business_labels),
        format_func=business_labels.get,
        index=None, placeholder="Select level", disabled=not business_labels
    ),
    REGION: st.selectbox(
        "Region", fields.region,
        index=None, placeholder="Select region", disabled=not fields.region
    ),
}

# =========================================================
# ESTIMATE
# =========================================================
st.subheader("C. Fee Estimate")

if st.button("Calculate Fee"):
    try:
        breakdown = calculator.total_fee(institution_type, selections)
    except MissingSelectionError as exc:
        st.warning(str(exc))
    else:
        st.write(breakdown.as_display())

        status = lookup_status(breakdown)
        if status:
            st.warning(status)
