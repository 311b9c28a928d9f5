"""Формулы калькуляторов (чистые функции)."""

from __future__ import annotations

from .air import condensation_water_inlet, exhaust_aperture, leakage_quantity
from .piping import nominal_pipe_diameter, pressure_drop
from .tubing import (
    calculate_tubing,
    recommend_tube_size,
    recommend_tube_sizes,
    tubing_flow_rate,
    tubing_pressure_drop,
)

__all__ = [
    "pressure_drop",
    "nominal_pipe_diameter",
    "condensation_water_inlet",
    "exhaust_aperture",
    "leakage_quantity",
    "tubing_flow_rate",
    "tubing_pressure_drop",
    "recommend_tube_size",
    "recommend_tube_sizes",
    "calculate_tubing",
]
