"""aircalc.core.units

Множители единиц и эмпирические константы, на которых построены формулы.

Принцип: у каждого числа в формуле есть имя (например, `SECONDS_PER_HOUR`),
а входы формул всегда в «паспортных» единицах поля ввода: m³/min, m, mm, bar.
"""

from __future__ import annotations

# Time
SECONDS_PER_MINUTE: float = 60.0
SECONDS_PER_HOUR: float = 3600.0
MINUTES_PER_HOUR: float = 60.0

# Pressure (base of the converter is kPa)
KPA_PER_BAR: float = 100.0
KPA_PER_ATM: float = 101.325
PA_PER_KPA: float = 1000.0
MBAR_PER_KPA: float = 10.0

# Mass / volume
GRAMS_PER_KG: float = 1000.0
LITRES_PER_M3: float = 1000.0

# Empirical pipe-flow constants (compressed air, steel pipe)
PIPE_FRICTION_COEFF: float = 1.6
PIPE_FLOW_EXPONENT: float = 1.85
PRESSURE_DROP_SCALE: float = 1e8
NOMINAL_PIPE_DIVISOR: float = 107.0
NOMINAL_PIPE_FACTOR: float = 5.0

# Tubing (push-in / polyurethane) empirical constants
TUBING_FLOW_FACTOR: float = 190.0
TUBING_RESISTANCE_K: float = 1.5
