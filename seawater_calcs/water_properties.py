import logging

import numpy as np
import numpy.polynomial.polynomial as npoly

from .adiabatic import potential_temperature
from .checks import require_salinity
from .constants import DENS0, SECANT, SMOW, S_STANDARD, T_STANDARD
from .exceptions import PressureSingularityError
from .units import decibar_to_bar

logger = logging.getLogger(__name__)


def smow(T):
    """
    Density of Standard Mean Ocean Water (pure water), kg/m^3.
    UNESCO 1983 eqn (31) p.39, T in degC (ITS-90).
    """
    return npoly.polyval(T, SMOW)


def density_atm(S, T):
    """
    UNESCO 1983 (EOS-80) density of seawater at zero sea pressure (kg/m^3).
    Millero & Poisson (1981), Deep-Sea Res. 28A pp625-629.
    """
    require_salinity(S)
    return (
        smow(T)
        + npoly.polyval(T, DENS0.b) * S
        + npoly.polyval(T, DENS0.c) * S * np.sqrt(S)
        + DENS0.d0 * S * S
    )


def secant_bulk_modulus(S, T, P):
    """
    Secant bulk modulus K(S,T,P) of seawater in bars.
    P is sea pressure in dbar; UNESCO eqns 15-19 work in bars.
    """
    require_salinity(S)
    P = decibar_to_bar(P)
    c = SECANT

    # pure water terms at atmospheric pressure, eqn 19
    AW = npoly.polyval(T, c.h)
    BW = npoly.polyval(T, c.k)
    KW = npoly.polyval(T, c.e)

    # sea water terms at atmospheric pressure
    SR = np.sqrt(S)
    A = AW + (npoly.polyval(T, c.i) + c.j0 * SR) * S
    B = BW + npoly.polyval(T, c.m) * S  # eqn 18
    K0 = KW + (npoly.polyval(T, c.f) + npoly.polyval(T, c.g) * SR) * S  # eqn 16

    return K0 + (A + B * P) * P  # eqn 15


def density(S, T, P):
    """In-situ density of seawater (kg/m^3), UNESCO 1983 (EOS-80)."""
    rho0 = density_atm(S, T)
    K = secant_bulk_modulus(S, T, P)
    denom = 1.0 - decibar_to_bar(P) / K
    if not denom > 0:
        raise PressureSingularityError(P, K)
    return rho0 / denom


def sigma_t(S, T, P):
    """Density anomaly at zero pressure, density(S,T,0) - 1000. P is unused."""
    return density(S, T, 0.0) - 1000.0


def sigma_theta(S, T, P):
    """Potential density anomaly referenced to the surface."""
    theta = potential_temperature(S, T, P, 0.0)
    return density(S, theta, 0.0) - 1000.0


def specific_volume_anomaly(S, T, P):
    """
    Specific volume anomaly (m^3/kg) relative to standard seawater
    (S=35, T=0) at the same pressure.
    """
    return 1.0 / density(S, T, P) - 1.0 / density(S_STANDARD, T_STANDARD, P)


# Density uncertainty between models
def density_uncertainty(S, T, P=0.0):
    """
    Compute both UNESCO and CoolProp (MIT seawater) densities and their
    difference (kg/m^3). Returns (rho_unesco, rho_coolprop, abs_delta).
    """
    from .reference_fluid import coolprop_seawater_props

    rho_u = density(S, T, P)
    rho_c, _, _ = coolprop_seawater_props(S, T, P)
    delta = abs(rho_u - rho_c)
    logger.debug("density S=%s T=%s P=%s unesco=%.4f coolprop=%.4f", S, T, P, rho_u, rho_c)
    return rho_u, rho_c, delta
