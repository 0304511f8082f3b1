import logging

import numpy as np
import pandas as pd
import pytest

from seawater_calcs.exceptions import SeawaterError, UnknownTemperatureScaleError
from seawater_calcs.profile import DERIVED_COLUMNS, derive_profile, property_grid
from seawater_calcs.water_properties import density, sigma_t


@pytest.fixture
def cast():
    return pd.DataFrame({
        "pressure": [0.0, 10035.0],
        "temperature": [30.0, 2.48],
        "salinity": [35.0, 34.67],
    })


def test_derive_profile_reference_values(cast):
    out = derive_profile(cast, lat=4.0)
    assert list(out.columns[-len(DERIVED_COLUMNS):]) == DERIVED_COLUMNS
    np.testing.assert_allclose(out["density"], [1021.729, 1070.136], atol=5e-4)
    np.testing.assert_allclose(out["sigma_theta"], [21.729, 27.764], atol=5e-4)
    np.testing.assert_allclose(out["potential_temperature"], [30.0, 1.242], atol=5e-4)
    np.testing.assert_allclose(out["sound_velocity"], [1545.595, 1633.179], atol=5e-4)
    np.testing.assert_allclose(out["depth"], [0.0, 9758.558], atol=5e-4)


def test_derive_profile_does_not_modify_input(cast):
    before = cast.copy()
    derive_profile(cast)
    pd.testing.assert_frame_equal(cast, before)


def test_salinity_from_conductivity():
    cast = pd.DataFrame({
        "pressure": [27.0, 71.0],
        "temperature": [26.99, 18.1986],
        "conductivity": [5.538891, 4.705818],
    })
    out = derive_profile(cast)
    np.testing.assert_allclose(out["salinity"], [35.1554, 35.7918], atol=5e-5)


def test_historical_temperature_scale():
    cast = pd.DataFrame({"pressure": [0.0], "temperature": [30.0072], "salinity": [35.0]})
    out = derive_profile(cast, scale="T68")
    assert out["t90"].iloc[0] == pytest.approx(30.0, abs=1e-6)
    with pytest.raises(UnknownTemperatureScaleError):
        derive_profile(cast, scale="T90")


@pytest.mark.parametrize("columns", [["pressure", "salinity"], ["pressure", "temperature"]])
def test_missing_columns(columns):
    cast = pd.DataFrame({name: [1.0] for name in columns})
    with pytest.raises(SeawaterError):
        derive_profile(cast)


def test_out_of_envelope_samples_are_logged(caplog):
    cast = pd.DataFrame({"pressure": [0.0, 0.0], "temperature": [10.0, 45.0], "salinity": [35.0, 35.0]})
    with caplog.at_level(logging.WARNING, logger="seawater_calcs.profile"):
        derive_profile(cast)
    assert any("1 of 2 samples" in r.getMessage() for r in caplog.records)


def test_property_grid():
    temps = np.linspace(0.0, 30.0, 4)
    salts = [30.0, 35.0]
    grid = property_grid(sigma_t, temps, salts)
    assert grid.shape == (2, 4)
    assert grid.loc[35.0, 30.0] == pytest.approx(density(35.0, 30.0, 0.0) - 1000.0)
