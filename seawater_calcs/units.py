from enum import Enum

from .constants import C3515, DBAR_PER_BAR, T48_QUADRATIC, T68_FACTOR
from .exceptions import UnknownTemperatureScaleError


class TemperatureScale(Enum):
    """Historical temperature scales that can be brought onto ITS-90."""
    IPTS68 = 'T68'  # data collected 1968-1989
    IPTS48 = 'T48'  # data collected before 1968

    @classmethod
    def parse(cls, scale):
        if isinstance(scale, cls):
            return scale
        try:
            return cls(scale)
        except ValueError:
            raise UnknownTemperatureScaleError(
                f'Unrecognized temperature scale {scale!r}. Try "T68" or "T48"'
            ) from None


def to_ipts68(T90):
    """Convert ITS-90 temperature to IPTS-68 (T68 = T90 * 1.00024)."""
    return T90 * T68_FACTOR


def to_its90(T, scale=TemperatureScale.IPTS68):
    """
    Convert an IPTS-68 or IPTS-48 temperature to ITS-90.

    Saunders, P. M., 1991: The International Temperature Scale of 1990,
    ITS-90. WOCE Newsletter, No. 10.
    """
    scale = TemperatureScale.parse(scale)
    if scale is TemperatureScale.IPTS68:
        return T / T68_FACTOR
    # IPTS-48 is first brought onto IPTS-68
    return (T - T48_QUADRATIC * T * (100.0 - T)) / T68_FACTOR


def decibar_to_bar(P):
    return P / DBAR_PER_BAR


def bar_to_decibar(P):
    return P * DBAR_PER_BAR


def psi_to_decibar(psi):
    """Convert pressure from psi to decibar (1 psi = 6894.757 Pa)."""
    return psi * 0.6894757


def fahrenheit_to_celsius(F):
    return (F - 32.0) * (5.0 / 9.0)


def conductivity_ratio(C):
    """Conductivity in S/m as a ratio to C(35,15,0)."""
    # S/m -> mS/cm
    return (C * 10.0) / C3515
