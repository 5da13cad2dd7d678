from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app.py")


def selectbox(at, label):
    return next(s for s in at.selectbox if s.label == label)


@pytest.fixture
def app():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    return at


def test_page_loads_bundled_sheet(app):
    assert not app.exception
    assert not app.error
    assert selectbox(app, "Institution Type").value == "four-year"
    assert selectbox(app, "Region").options


def test_four_year_estimate(app):
    selectbox(app, "FTE Enrollment").select("5,000–9,999")
    selectbox(app, "Gross Institutional Expenditure").select("$10M–$25M")
    selectbox(app, "Region").select("CAPPA")
    app.button[0].click().run()

    assert not app.warning
    assert not app.exception
    # 1175 national, ceil(1175 x 0.12) = 141 regional
    shown = str(app.json[0].value)
    assert "$1175.00" in shown
    assert "$141.00" in shown
    assert "$1316.00" in shown


def test_missing_selection_warns(app):
    app.button[0].click().run()

    assert app.warning[0].value == "Please select both FTE and GIE for four-year institutions."


def test_business_partner_disables_region(app):
    selectbox(app, "Institution Type").select("business-partner").run()

    assert selectbox(app, "Region").disabled
    assert not selectbox(app, "Business Partner Level").disabled


def test_unreadable_source_stops_page(tmp_path):
    at = AppTest.from_file(APP, default_timeout=30)
    at.secrets["FEE_TABLE_SOURCE"] = str(tmp_path / "missing.csv")
    at.run()

    assert at.error
    assert "Unable to load the fee table" in at.error[0].value
