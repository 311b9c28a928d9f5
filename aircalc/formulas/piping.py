"""Трубопроводы сжатого воздуха: падение давления и номинальный диаметр.

Эмпирическая формула для стальных труб:

    Δp = 1.6 * (V/60)^1.85 * L * 10^8 / (d^5 * p_e)

Единицы:
- V: расход, m³/min
- L: длина трубопровода, m
- d: внутренний диаметр, mm
- p_e, Δp, P_max: bar
"""

from __future__ import annotations

import math

from aircalc.core import units
from aircalc.formulas.guards import finite_or_zero, safe_pow


def pressure_drop(
    flow_m3_min: float,
    length_m: float,
    diameter_mm: float,
    end_pressure_bar: float,
) -> float:
    """Падение давления в магистрали (bar).

    Нулевой диаметр или нулевое конечное давление дают 0.0 вместо inf.
    Переполнение промежуточных степеней тоже даёт 0.0, а не исключение.
    """

    denominator = safe_pow(diameter_mm, 5) * float(end_pressure_bar)
    if denominator == 0.0:
        return 0.0

    flow_m3_s = float(flow_m3_min) / units.SECONDS_PER_MINUTE
    numerator = (
        units.PIPE_FRICTION_COEFF
        * safe_pow(flow_m3_s, units.PIPE_FLOW_EXPONENT)
        * float(length_m)
        * units.PRESSURE_DROP_SCALE
    )
    return finite_or_zero(numerator / denominator)


def nominal_pipe_diameter(
    flow_m3_min: float,
    length_m: float,
    pressure_drop_bar: float,
    max_pressure_bar: float,
) -> float:
    """Номинальный внутренний диаметр трубы (mm).

    d_i = 5 * sqrt(1.6 * V^1.85 * L / (107 * Δp * P_max))
    """

    denominator = units.NOMINAL_PIPE_DIVISOR * float(pressure_drop_bar) * float(max_pressure_bar)
    if denominator == 0.0:
        return 0.0

    numerator = units.PIPE_FRICTION_COEFF * safe_pow(flow_m3_min, units.PIPE_FLOW_EXPONENT) * float(length_m)
    ratio = numerator / denominator
    if not ratio > 0.0:
        return 0.0
    return finite_or_zero(units.NOMINAL_PIPE_FACTOR * math.sqrt(ratio))
