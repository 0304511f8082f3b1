import numpy.polynomial.polynomial as npoly

from .constants import PSS78
from .units import conductivity_ratio


def salinity(C, T, P):
    """
    Practical salinity (PSS-78) from conductivity.

    C = conductivity [S/m], T = temperature [degC, IPTS-68], P = pressure [dbar].
    Non-positive conductivity gives a salinity of exactly zero.
    """
    if C <= 0:
        return 0.0
    c = PSS78
    R = conductivity_ratio(C)

    # pressure correction Rp
    B1, B2, B3, B4 = c.B
    Rp = 1 + (P * npoly.polyval(P, c.A)) / (1 + B1 * T + B2 * T * T + B3 * R + B4 * R * T)
    # temperature correction rT
    Rt = R / (Rp * npoly.polyval(T, c.C))

    sum_a = sum_b = 0.0
    for i, (a, b) in enumerate(zip(c.a, c.b)):
        term = Rt ** (i / 2.0)
        sum_a += a * term
        sum_b += b * term

    dT = T - 15.0
    return sum_a + sum_b * dT / (1 + c.k * dT)
