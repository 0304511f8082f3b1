import importlib
import math
import sys

import pytest

from seawater_calcs import water_properties
from seawater_calcs.exceptions import (NegativeSalinityError, PressureSingularityError,
                                       SeawaterDomainError)
from seawater_calcs.water_properties import (density, density_atm, secant_bulk_modulus, sigma_t,
                                             sigma_theta, smow, specific_volume_anomaly)

# UNESCO Tech. Paper in Marine Sci. No. 44 check values
S1, T1, P1 = 35.0, 30.0, 0.0
S2, T2, P2 = 34.67, 2.48, 10035.0


def test_smow():
    assert smow(0.0) == 999.842594
    assert smow(30.0) == pytest.approx(995.65113374, abs=1e-8)


def test_density_reference_values():
    assert density(S1, T1, P1) == pytest.approx(1021.729, abs=5e-4)
    assert density(S2, T2, P2) == pytest.approx(1070.136, abs=5e-4)


@pytest.mark.parametrize("S, T", [(0.0, 0.0), (35.0, 30.0), (34.67, 2.48), (40.0, -2.0)])
def test_density_at_surface_equals_atmospheric_density(S, T):
    assert density(S, T, 0.0) == density_atm(S, T)


def test_fresh_water_atmospheric_density_is_smow():
    assert density_atm(0.0, 20.0) == smow(20.0)


def test_secant_bulk_modulus_standard_seawater():
    # K(35,0,0) of the EOS-80
    assert secant_bulk_modulus(35.0, 0.0, 0.0) == pytest.approx(21582.27, abs=0.01)
    assert secant_bulk_modulus(S2, T2, P2) > secant_bulk_modulus(S2, T2, 0.0)


@pytest.mark.parametrize("S, T, P", [(S1, T1, P1), (S2, T2, P2), (20.0, 15.0, 500.0)])
def test_sigma_t_definition(S, T, P):
    assert sigma_t(S, T, P) == density(S, T, 0.0) - 1000.0


def test_sigma_t_reference_values():
    assert sigma_t(S1, T1, P1) == pytest.approx(21.729, abs=5e-4)
    assert sigma_t(S2, T2, P2) == pytest.approx(27.668, abs=5e-4)


def test_sigma_theta_reference_values():
    assert sigma_theta(S1, T1, P1) == pytest.approx(21.729, abs=5e-4)
    assert sigma_theta(S2, T2, P2) == pytest.approx(27.764, abs=5e-4)


def test_specific_volume_anomaly_reference_values():
    assert specific_volume_anomaly(S1, T1, P1) == pytest.approx(6.071e-06, abs=5e-10)
    assert specific_volume_anomaly(S2, T2, P2) == pytest.approx(8.352e-07, abs=5e-11)


def test_specific_volume_anomaly_vanishes_for_standard_seawater():
    assert specific_volume_anomaly(35.0, 0.0, 4000.0) == 0.0


@pytest.mark.parametrize("func, args", [
    (density_atm, (-0.1, 10.0)),
    (secant_bulk_modulus, (-1.0, 10.0, 100.0)),
    (density, (-35.0, 10.0, 100.0)),
    (sigma_t, (-5.0, 10.0, 0.0)),
])
def test_negative_salinity_is_rejected(func, args):
    with pytest.raises(NegativeSalinityError) as exc:
        func(*args)
    assert isinstance(exc.value, SeawaterDomainError)
    assert exc.value.salinity == args[0]


def test_density_pressure_singularity(monkeypatch):
    # force the bulk modulus onto the scaled pressure
    monkeypatch.setattr(water_properties, "secant_bulk_modulus", lambda S, T, P: P / 10.0)
    with pytest.raises(PressureSingularityError) as exc:
        water_properties.density(35.0, 0.0, 1000.0)
    assert exc.value.bulk_modulus == 100.0


@pytest.mark.parametrize("P", [0.0, 2500.0, 10000.0, 1.0e5])
def test_density_finite_far_from_singularity(P):
    assert math.isfinite(density(0.0, 0.0, P))


def test_pressure_singularity_error_message():
    err = PressureSingularityError(1.0e6, 1.0e5)
    assert "1000000.0" in str(err)
    assert isinstance(err, ValueError)


def test_density_beyond_bulk_modulus_raises():
    # above ~9.4e5 dbar P/10 exceeds K(35,40,P)
    with pytest.raises(PressureSingularityError) as exc:
        density(35.0, 40.0, 1.0e6)
    assert exc.value.bulk_modulus < 1.0e5


@pytest.mark.parametrize("func, args", [
    (density_atm, (float("nan"), 10.0)),
    (secant_bulk_modulus, (float("nan"), 10.0, 100.0)),
    (density, (float("nan"), 10.0, 100.0)),
])
def test_nan_salinity_is_rejected(func, args):
    with pytest.raises(NegativeSalinityError):
        func(*args)


def test_density_chain_imports_without_coolprop(monkeypatch):
    for name in ("CoolProp", "CoolProp.CoolProp", "seawater_calcs.reference_fluid"):
        monkeypatch.setitem(sys.modules, name, None)
    module = importlib.reload(water_properties)
    assert module.density(35.0, 30.0, 0.0) == pytest.approx(1021.729, abs=5e-4)
