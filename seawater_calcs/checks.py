import logging

from .constants import ENVELOPE
from .exceptions import NegativeSalinityError

logger = logging.getLogger(__name__)


def require_salinity(S):
    """Reject salinities that would send the S**1.5 terms to NaN."""
    if not S >= 0:
        raise NegativeSalinityError(S)
    return S


def check_envelope(**values):
    """
    Log a warning for every quantity outside the practical range of the
    UNESCO polynomials. Returns the names that were out of range.
    Unknown names are ignored.
    """
    outside = []
    for name, value in values.items():
        if name not in ENVELOPE or value is None:
            continue
        lo, hi = ENVELOPE[name]
        if not lo <= value <= hi:
            logger.warning("%s=%s outside practical range [%s, %s]", name, value, lo, hi)
            outside.append(name)
    return outside
