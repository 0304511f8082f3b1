import logging

import streamlit as st
import numpy as np
import pandas as pd
import plotly.express as px

from seawater_calcs.adiabatic import potential_temperature
from seawater_calcs.checks import check_envelope
from seawater_calcs.constants import DEFAULT_LATITUDE, DEFAULT_REFERENCE_PRESSURE
from seawater_calcs.depth import depth, pressure
from seawater_calcs.exceptions import SeawaterError
from seawater_calcs.profile import derive_profile, property_grid
from seawater_calcs.salinity import salinity
from seawater_calcs.sound import sound_velocity
from seawater_calcs.units import bar_to_decibar, fahrenheit_to_celsius, psi_to_decibar, to_ipts68, to_its90
from seawater_calcs.water_properties import (density, density_uncertainty, sigma_t, sigma_theta,
                                             specific_volume_anomaly)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")


# ------------------------------------ Streamlit Application ------------------------------------
st.set_page_config('Seawater Properties Calculator', page_icon="🌊", layout='wide')
st.title("Seawater Properties Calculator (EOS-80)")

with st.expander("Input Parameters"):
    st.info("Default values")
    col1, col2 = st.columns(2)

    # value
    with col1:
        temp_input = st.number_input("Temperature", value=2.48)
        press_input = st.number_input("Pressure / Depth", value=10035.0)
        sal_input = st.number_input("Salinity (PSU)", value=34.67)
        cond_input = st.number_input("Conductivity (S/m)", value=0.0)
        lat = st.number_input("Latitude", value=DEFAULT_LATITUDE, min_value=-90.0, max_value=90.0)
        p_ref = st.number_input("Reference pressure (dbar)", value=DEFAULT_REFERENCE_PRESSURE)

    # unit of measure
    with col2:
        temp_unit = st.selectbox("Unit", ["°C", "°F"], index=0)
        temp_scale = st.selectbox("Temperature scale", ["ITS-90", "T68", "T48"], index=0)
        press_unit = st.selectbox("Pressure unit", ['dbar', 'bar', 'psi', 'm (depth)'], index=0)
        use_cond = st.checkbox("Derive salinity from conductivity", value=False)

# Temp Convert
Temp_C = fahrenheit_to_celsius(temp_input) if temp_unit == "°F" else temp_input

# Pressure
if press_unit == "bar":
    Pressure_dbar = bar_to_decibar(press_input)
elif press_unit == "psi":
    Pressure_dbar = psi_to_decibar(press_input)
elif press_unit == "m (depth)":
    Pressure_dbar = pressure(press_input, lat)
else:
    Pressure_dbar = press_input


if st.button("Calculate"):
    try:
        T90 = Temp_C if temp_scale == "ITS-90" else to_its90(Temp_C, temp_scale)
        S = salinity(cond_input, to_ipts68(T90), Pressure_dbar) if use_cond else sal_input

        for name in check_envelope(salinity=S, temperature=T90, pressure=Pressure_dbar, latitude=lat):
            st.warning(f"{name} is outside the practical range of the EOS-80 polynomials")

        rho      = density(S, T90, Pressure_dbar)
        sig_t    = sigma_t(S, T90, Pressure_dbar)
        sig_th   = sigma_theta(S, T90, Pressure_dbar)
        svan     = specific_volume_anomaly(S, T90, Pressure_dbar)
        theta    = potential_temperature(S, T90, Pressure_dbar, p_ref)
        svel     = sound_velocity(S, T90, Pressure_dbar)
        z        = depth(Pressure_dbar, lat)
    except SeawaterError as err:
        st.error(str(err))
        st.stop()

    st.markdown(" # Results💡")

    # Two-column layout
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Salinity (PSU)",              f"{S:.4f}")
        st.metric("Density (kg/m³)",             f"{rho:.3f}")
        st.metric("Sigma-t (kg/m³)",             f"{sig_t:.3f}")
        st.metric("Sigma-theta (kg/m³)",         f"{sig_th:.3f}")

    with col2:
        st.metric("Potential Temperature (°C)",  f"{theta:.3f}")
        st.metric("Sound Velocity (m/s)",        f"{svel:.3f}")
        st.metric("Depth (m)",                   f"{z:.3f}")
        st.metric("Specific Volume Anomaly (m³/kg)", f"{svan:.3e}")

    # Cross-check against CoolProp at the surface
    try:
        rho_u, rho_c, delta = density_uncertainty(S, T90)
        st.caption(f"Surface density UNESCO {rho_u:.3f} vs CoolProp MITSW {rho_c:.3f} (Δ {delta:.3f} kg/m³)")
    except ValueError as err:
        st.caption(f"CoolProp cross-check unavailable: {err}")

    # Graphs

    st.markdown("# Graphs 📊")

    # ----- Density vs Temp --------
    temps = np.linspace(0, max(T90, 0.0) + 15.0, 20)
    df_Temp = pd.DataFrame({
        "Temperature (°C)": temps,
        "Density (kg/m³)" : [density(S, T, Pressure_dbar) for T in temps]
        })

    fig_T = px.line(df_Temp, x="Temperature (°C)", y="Density (kg/m³)",
                    title=f"Density vs Temperature @ {Pressure_dbar:.0f} dbar, S = {S:.2f} 🥶",
                    markers=True)
    fig_T.update_traces(line_color = 'orange')
    st.plotly_chart(fig_T)

    # ------- Profile with depth -------
    pressures = np.linspace(0.0, max(Pressure_dbar, 100.0), 20)
    cast = pd.DataFrame({"pressure": pressures, "temperature": T90, "salinity": S})
    profile = derive_profile(cast, lat=lat, PR=p_ref)

    fig_P = px.line(profile, x="sound_velocity", y="depth",
                    title=f"Sound velocity profile @ T = {T90:.2f} °C, S = {S:.2f} 💎",
                    labels={"sound_velocity": "Sound velocity (m/s)", "depth": "Depth (m)"},
                    markers=True,
                    line_shape='linear')
    fig_P.update_yaxes(autorange="reversed")
    fig_P.update_traces(line_color = 'lightgreen')
    st.plotly_chart(fig_P)

    # ------- Combined Heat Map -------
    salts = np.linspace(max(S - 5.0, 0.0), S + 5.0, 20)
    pivot_combo = property_grid(sigma_t, temps, salts)

    fig_combo = px.imshow(pivot_combo, aspect='auto', origin='lower',
                          labels={
                                    "x": "Temperature (°C)",
                                    "y": "Salinity (PSU)",
                                    "color": "Sigma-t (kg/m³)"
                          },
                          title="Sigma-t Heatmap 🥵",
                          color_continuous_scale='Greys')

    st.plotly_chart(fig_combo)
