"""
Batch layer: apply the scalar EOS-80 functions to CTD casts held in pandas
DataFrames. The core functions stay scalar; iteration lives here.
"""
import logging

import pandas as pd

from .adiabatic import potential_temperature
from .checks import check_envelope
from .constants import DEFAULT_LATITUDE, DEFAULT_REFERENCE_PRESSURE
from .depth import depth
from .exceptions import SeawaterError
from .salinity import salinity
from .sound import sound_velocity
from .units import to_ipts68, to_its90
from .water_properties import density, sigma_t, sigma_theta, specific_volume_anomaly

logger = logging.getLogger(__name__)

DERIVED_COLUMNS = [
    "depth",
    "density",
    "sigma_t",
    "sigma_theta",
    "potential_temperature",
    "specific_volume_anomaly",
    "sound_velocity",
]


def derive_profile(cast, lat=DEFAULT_LATITUDE, scale=None, PR=DEFAULT_REFERENCE_PRESSURE):
    """
    Derive seawater properties for every row of a CTD cast.

    cast needs `pressure` [dbar] and `temperature` [degC] columns plus either
    `salinity` [PSU] or `conductivity` [S/m]. Temperatures are ITS-90 unless
    `scale` names the historical scale they were recorded on.
    Returns a new DataFrame with `t90`, `salinity` and DERIVED_COLUMNS added.
    """
    missing = {"pressure", "temperature"} - set(cast.columns)
    if missing:
        raise SeawaterError(f"CTD cast is missing columns: {sorted(missing)}")
    if "salinity" not in cast.columns and "conductivity" not in cast.columns:
        raise SeawaterError("CTD cast needs a salinity or conductivity column")

    df = cast.copy()
    if scale is None:
        df["t90"] = df["temperature"]
    else:
        df["t90"] = [to_its90(T, scale) for T in df["temperature"]]

    if "salinity" not in df.columns:
        # PSS-78 is defined on IPTS-68
        df["salinity"] = [
            salinity(C, to_ipts68(T), P)
            for C, T, P in zip(df["conductivity"], df["t90"], df["pressure"])
        ]

    rows = list(zip(df["salinity"], df["t90"], df["pressure"]))
    n_flagged = sum(
        bool(check_envelope(salinity=S, temperature=T, pressure=P)) for S, T, P in rows
    )
    if n_flagged:
        logger.warning("%d of %d samples outside the EOS-80 envelope", n_flagged, len(rows))

    df["depth"] = [depth(P, lat) for P in df["pressure"]]
    df["density"] = [density(S, T, P) for S, T, P in rows]
    df["sigma_t"] = [sigma_t(S, T, P) for S, T, P in rows]
    df["sigma_theta"] = [sigma_theta(S, T, P) for S, T, P in rows]
    df["potential_temperature"] = [potential_temperature(S, T, P, PR) for S, T, P in rows]
    df["specific_volume_anomaly"] = [specific_volume_anomaly(S, T, P) for S, T, P in rows]
    df["sound_velocity"] = [sound_velocity(S, T, P) for S, T, P in rows]

    logger.info("derived %d samples at lat=%s", len(df), lat)
    return df


def property_grid(func, temps, salinities, P=0.0):
    """Evaluate func(S, T, P) on a salinity x temperature grid (for heat maps)."""
    data = []
    for S in salinities:
        for T in temps:
            data.append({"salinity": S, "temperature": T, "value": func(S, T, P)})
    return pd.DataFrame(data).pivot(index="salinity", columns="temperature", values="value")
