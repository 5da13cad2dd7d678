import pytest

from membership_fees.tables import load_fee_tables

SHEET = """\
Four-Year Institution Fees,,,
GIE / FTE,"Under 5,000","5,000–9,999","10,000 and over"
Under $10M,800,900,1000
$10M–$25M,1100,1250,1400
Over $25M,1500,"$1,700",
,,,
Two-Year Institution Fees,,,
Under $10M,500,,
Over $10M,700,,
,,,
Non-Higher Education Fees,,,
K-12 School District,600,,
Government Agency,750,,
,,,
Business Partner Fees,,,
bronze,1500,,
gold,"$5,000",,
,,,
Regional Fee Multipliers,,,
CAPPA,0.12,,
ERAPPA,0.1,,
RMA,0,,
"""


@pytest.fixture
def sheet():
    return SHEET


@pytest.fixture
def tables(sheet):
    return load_fee_tables(sheet)
