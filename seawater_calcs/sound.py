import numpy as np
import numpy.polynomial.polynomial as npoly

from .checks import require_salinity
from .constants import SVEL
from .units import decibar_to_bar


def _pt_series(rows, T, P):
    # rows[n] holds the temperature polynomial multiplying P**n
    return npoly.polyval(P, [npoly.polyval(T, row) for row in rows])


def sound_velocity(S, T, P):
    """
    Sound velocity in seawater (m/s), UNESCO 1983 after Chen & Millero (1977).
    S in PSU, T in degC, P in dbar.
    """
    require_salinity(S)
    P = decibar_to_bar(P)

    Cw = _pt_series(SVEL.cw, T, P)  # eqn 34
    A = _pt_series(SVEL.a, T, P)    # eqn 35
    B = _pt_series(SVEL.b, T, P)    # eqn 36
    D = npoly.polyval(P, SVEL.d)    # eqn 37

    # eqn 33
    return Cw + A * S + B * S * np.sqrt(S) + D * S * S
