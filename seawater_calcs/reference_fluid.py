from CoolProp.CoolProp import AbstractState, PT_INPUTS

from .checks import require_salinity

# CoolProp incompressible seawater (Sharqawy et al. 2010), used as an
# independent cross-check of the UNESCO polynomials.
BACKEND = "INCOMP"
FLUID = "MITSW"
ATM_PA = 101325.0


def coolprop_seawater_props(S, T, P=0.0):
    """Get rho_mass, mu, cp at S [PSU], T [degC], sea pressure P [dbar] from CoolProp."""
    require_salinity(S)
    T_K = T + 273.15
    # sea pressure -> absolute pressure
    P_Pa = P * 1.0e4 + ATM_PA

    AS = AbstractState(BACKEND, FLUID)
    # PSU ~ g/kg -> mass fraction
    AS.set_mass_fractions([S / 1000.0])
    AS.update(PT_INPUTS, P_Pa, T_K)

    rho_mass = AS.rhomass()      # kg/m³
    mu       = AS.viscosity()    # Pa·s
    cp       = AS.cpmass()       # J/(kg·K)

    return rho_mass, mu, cp
