class SeawaterError(ValueError):
    """Base class for errors raised by seawater_calcs."""


class UnknownTemperatureScaleError(SeawaterError):
    """Temperature scale identifier is not one of T68 / T48."""


class SeawaterDomainError(SeawaterError):
    """Inputs outside the domain where the EOS-80 polynomials are defined."""


class NegativeSalinityError(SeawaterDomainError):
    def __init__(self, salinity):
        self.salinity = salinity
        super().__init__(f"Salinity must be non-negative, got {salinity!r}")


class PressureSingularityError(SeawaterDomainError):
    def __init__(self, pressure, bulk_modulus):
        self.pressure = pressure
        self.bulk_modulus = bulk_modulus
        super().__init__(
            f"Pressure {pressure!r} dbar reaches the secant bulk modulus "
            f"{bulk_modulus!r} bar; density is undefined"
        )
