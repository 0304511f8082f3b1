import numpy as np
import numpy.polynomial.polynomial as npoly

from .constants import ADTG, S_STANDARD

SQRT2 = np.sqrt(2.0)


def adiabatic_gradient(S, T, P):
    """
    Adiabatic temperature gradient (degC/dbar), UNESCO 1983 after
    Bryden (1973). S in PSU, T in degC, P in dbar.
    """
    dS = S - S_STANDARD
    c = ADTG
    return (
        npoly.polyval(T, c.a)
        + npoly.polyval(T, c.b) * dS
        + (npoly.polyval(T, c.c) + npoly.polyval(T, c.d) * dS) * P
        + npoly.polyval(T, c.e) * P * P
    )


def potential_temperature(S, T, P, PR=0.0):
    """
    Potential temperature of a parcel moved adiabatically from pressure P
    to reference pressure PR (both dbar).

    Single 4th-order Runge-Kutta step on dtheta/dP = adiabatic_gradient,
    in the form of Fofonoff (1977) used by UNESCO 1983 (eqn 32).
    """
    del_P = PR - P

    # theta1
    del_th = del_P * adiabatic_gradient(S, T, P)
    th = T + 0.5 * del_th
    q = del_th

    # theta2
    del_th = del_P * adiabatic_gradient(S, th, P + 0.5 * del_P)
    th = th + (1 - 1 / SQRT2) * (del_th - q)
    q = (2 - SQRT2) * del_th + (-2 + 3 / SQRT2) * q

    # theta3
    del_th = del_P * adiabatic_gradient(S, th, P + 0.5 * del_P)
    th = th + (1 + 1 / SQRT2) * (del_th - q)
    q = (2 + SQRT2) * del_th + (-2 - 3 / SQRT2) * q

    # theta4
    del_th = del_P * adiabatic_gradient(S, th, P + del_P)
    return th + (del_th - 2 * q) / 6
