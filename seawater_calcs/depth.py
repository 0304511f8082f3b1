import numpy as np
import numpy.polynomial.polynomial as npoly

from .constants import (DEPTH_C, GAM_DASH, GRAVITY_EQUATOR, GRAVITY_X,
                        SAUNDERS_C1, SAUNDERS_C2)


def _sin2_lat(lat):
    # sign of the latitude does not matter
    return np.sin(np.radians(abs(lat))) ** 2


def surface_gravity(lat):
    """Gravity at the sea surface (m/s^2) as used by UNESCO 1983."""
    X = _sin2_lat(lat)
    return GRAVITY_EQUATOR * (1.0 + npoly.polyval(X, GRAVITY_X) * X)


def depth(P, lat):
    """
    Depth (m) from pressure (dbar), Saunders & Fofonoff (1976).
    UNESCO 1983 eqn 25 p.28.
    """
    top = npoly.polyval(P, DEPTH_C) * P
    bottom = surface_gravity(lat) + GAM_DASH * 0.5 * P
    return top / bottom


def pressure(z, lat):
    """
    Pressure (dbar) from depth (m), Saunders (1981) closed form.
    Approximate inverse of depth(); agrees to about 0.1%.
    """
    c1 = SAUNDERS_C1[0] + _sin2_lat(lat) * SAUNDERS_C1[1]
    return ((1 - c1) - np.sqrt((1 - c1) ** 2 - 2 * SAUNDERS_C2 * z)) / SAUNDERS_C2
