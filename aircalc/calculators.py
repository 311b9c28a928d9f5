"""Реестр калькуляторов.

Каждый калькулятор = поля формы + правило положительности + формула +
точность отображения. `run_calculator()` повторяет то, что делает кнопка
"Calculate": разбор ввода -> формула -> результат или классифицированная
ошибка.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from aircalc.config import DEFAULT_CONFIG, CalcConfig
from aircalc.core.types import CalculationOutcome, CalculatorResult, ValidationError
from aircalc.core.validation import validate
from aircalc.formulas import air, piping, tubing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorSpec:
    """Описание калькулятора.

    fields:
        Имена полей в порядке формы (совпадают с именами аргументов формулы).
    positive:
        Поля, которые обязаны быть > 0.
    labels:
        Подписи полей с единицами, для CLI и отчётов.
    """

    name: str
    title: str
    fields: Tuple[str, ...]
    positive: Tuple[str, ...]
    formula: Callable[..., CalculatorResult]
    decimals: int
    labels: Tuple[str, ...] = ()
    result_unit: str = ""

    def __post_init__(self) -> None:
        unknown = set(self.positive) - set(self.fields)
        if unknown:
            raise ValueError(f"{self.name}: positive fields not in fields: {sorted(unknown)}")
        if self.labels and len(self.labels) != len(self.fields):
            raise ValueError(f"{self.name}: labels must match fields")


def _tubing(cfg: CalcConfig) -> Callable[..., CalculatorResult]:
    def formula(diameter_mm: float, length_m: float, pressure_in_bar: float, pressure_out_bar: float):
        return tubing.calculate_tubing(diameter_mm, length_m, pressure_in_bar, pressure_out_bar, cfg)

    return formula


def build_registry(cfg: Optional[CalcConfig] = None) -> Dict[str, CalculatorSpec]:
    cfg = cfg or DEFAULT_CONFIG
    specs = [
        CalculatorSpec(
            name="pressure_drop",
            title="Pressure drop in compressed air lines",
            fields=("flow_m3_min", "length_m", "diameter_mm", "end_pressure_bar"),
            positive=("flow_m3_min", "length_m", "diameter_mm", "end_pressure_bar"),
            formula=piping.pressure_drop,
            decimals=3,
            labels=("Total flow rate V [m³/min]", "Pipe length L [m]",
                    "Internal diameter d [mm]", "End pressure pₑ [bar]"),
            result_unit="bar",
        ),
        CalculatorSpec(
            name="nominal_pipe",
            title="Nominal pipe width",
            fields=("flow_m3_min", "length_m", "pressure_drop_bar", "max_pressure_bar"),
            positive=("flow_m3_min", "length_m", "pressure_drop_bar", "max_pressure_bar"),
            formula=piping.nominal_pipe_diameter,
            decimals=2,
            labels=("Flow rate V [m³/min]", "Pipe length L [m]",
                    "Pressure drop Δp [bar]", "Switch-off pressure Pₘₐₓ [bar]"),
            result_unit="mm",
        ),
        CalculatorSpec(
            name="condensation",
            title="Water inlet (condensation)",
            fields=("temperature_c", "humidity_pct", "flow_m3_min", "fmax_tu_g_m3"),
            positive=(),
            formula=air.condensation_water_inlet,
            decimals=2,
            labels=("Air temp. at intake [°C]", "Relative humidity φ₁ [%]",
                    "Compressor volume V₁ [m³/min]", "fmaxTU [g/m³]"),
            result_unit="l/h",
        ),
        CalculatorSpec(
            name="exhaust",
            title="Exhaust air aperture cross-section",
            fields=("ventilator_output_m3_h", "flow_velocity_m_s"),
            positive=("ventilator_output_m3_h", "flow_velocity_m_s"),
            formula=air.exhaust_aperture,
            decimals=4,
            labels=("Ventilator output Vv [m³/h]", "Flow velocity Vs [m/s]"),
            result_unit="m²",
        ),
        CalculatorSpec(
            name="leakage",
            title="Quantity of leakage",
            fields=("receiver_volume", "initial_pressure_bar", "final_pressure_bar", "time"),
            positive=("receiver_volume", "initial_pressure_bar", "final_pressure_bar", "time"),
            formula=air.leakage_quantity,
            decimals=2,
            labels=("Receiver volume Vᴮ [L]", "Initial pressure Pᴬ [bar(g)]",
                    "Final pressure Pᴱ [bar(g)]", "Measuring time t [s]"),
            result_unit="m³/min",
        ),
        CalculatorSpec(
            name="tubing",
            title="Tubing",
            fields=("diameter_mm", "length_m", "pressure_in_bar", "pressure_out_bar"),
            positive=("diameter_mm", "length_m"),
            formula=_tubing(cfg),
            decimals=2,
            labels=("Internal diameter [mm]", "Length [m]",
                    "Inlet pressure [bar]", "Outlet pressure [bar]"),
        ),
    ]
    return {s.name: s for s in specs}


CALCULATORS: Dict[str, CalculatorSpec] = build_registry()


def get_calculator(name: str, registry: Optional[Mapping[str, CalculatorSpec]] = None) -> CalculatorSpec:
    registry = CALCULATORS if registry is None else registry
    key = name.strip().lower()
    if key not in registry:
        raise ValueError(f"Unknown calculator: {name}")
    return registry[key]


def run_calculator(
    name: str,
    raw_inputs: Mapping[str, Any],
    registry: Optional[Mapping[str, CalculatorSpec]] = None,
) -> CalculationOutcome:
    """Разобрать ввод и посчитать.

    Отсутствующее поле трактуется как пустое (NOT_A_NUMBER). Лишние ключи
    игнорируются.
    """

    spec = get_calculator(name, registry)
    fields = {f: raw_inputs.get(f) for f in spec.fields}

    parsed = validate(fields, positive=spec.positive)
    if isinstance(parsed, ValidationError):
        logger.debug("%s: rejected input (%s)", spec.name, parsed)
        return CalculationOutcome(spec.name, fields, error=parsed, decimals=spec.decimals)

    result = spec.formula(**parsed)
    logger.debug("%s(%s) -> %s", spec.name, parsed, result)
    return CalculationOutcome(spec.name, fields, result=result, decimals=spec.decimals)
