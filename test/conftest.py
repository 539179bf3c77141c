# test/conftest.py
import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from shotprofile.io import parse  # noqa: E402


TWO_TEMPERATURES = "{temperature 90 seconds 10}\n{temperature 94 seconds 5}"

PRESSURE_THEN_FLOW = (
    "{name {pressure up} pump pressure pressure 9 transition fast seconds 10}\n"
    "{name {flow down} pump flow flow 2 transition smooth seconds 20}\n"
)


@pytest.fixture
def two_temperatures():
    return parse(TWO_TEMPERATURES)


@pytest.fixture
def pressure_then_flow():
    return parse(PRESSURE_THEN_FLOW)


@pytest.fixture
def tcl_text():
    return (
        "advanced_shot {{name fill pump flow flow 4 temperature 90 seconds 20} "
        "{name hold pump pressure pressure 8.6 temperature 88 seconds 10}}\n"
        "author Decent\n"
        "profile_title {Test profile}\n"
    )
