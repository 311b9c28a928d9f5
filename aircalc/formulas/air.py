"""Воздух компрессорной: конденсат, вытяжной проём, утечки.

Единицы:
- φ1: относительная влажность, %
- fmax_TU: насыщенное влагосодержание, g/m³
- V1: производительность компрессора, m³/min
- Vv: производительность вентилятора, m³/h
- Vs: скорость потока, m/s
- V_B: объём ресивера, l; p_A, p_E: bar(g); t: s
"""

from __future__ import annotations

from aircalc.core import units
from aircalc.formulas.guards import finite_or_zero


def condensation_water_inlet(
    temperature_c: float,
    humidity_pct: float,
    flow_m3_min: float,
    fmax_tu_g_m3: float,
) -> float:
    """Water carried into the compressor with intake air (litres/hour).

        m = fmax_TU * φ1 * V1 * 60 / 1000

    ``temperature_c`` is part of the form and must be a valid number, but the
    saturation content ``fmax_tu_g_m3`` is entered directly, so temperature
    does not enter the result.
    """

    del temperature_c
    water = (
        float(fmax_tu_g_m3)
        * float(humidity_pct)
        * float(flow_m3_min)
        * units.MINUTES_PER_HOUR
        / units.GRAMS_PER_KG
    )
    return finite_or_zero(water)


def exhaust_aperture(ventilator_output_m3_h: float, flow_velocity_m_s: float) -> float:
    """Exhaust air aperture cross-section Azu (m²) = Vv / (3600 * Vs)."""

    denominator = units.SECONDS_PER_HOUR * float(flow_velocity_m_s)
    if denominator == 0.0:
        return 0.0
    return finite_or_zero(float(ventilator_output_m3_h) / denominator)


def leakage_quantity(
    receiver_volume: float,
    initial_pressure_bar: float,
    final_pressure_bar: float,
    time: float,
) -> float:
    """Leakage by receiver pressure drop, m³/min.

    V = V_B * (p_A - p_E) / t, then divided by 60. A final pressure above the
    initial one yields a negative value and is returned as is.
    """

    t = float(time)
    if t == 0.0:
        return 0.0
    leakage = float(receiver_volume) * (float(initial_pressure_bar) - float(final_pressure_bar)) / t
    return finite_or_zero(leakage / units.SECONDS_PER_MINUTE)
