"""Пневмотрубки: расход, падение давления, рекомендуемый размер.

Единицы:
- d: внутренний диаметр, mm
- L: длина, m
- p_in, p_out: bar
- flow: l/min (эмпирический коэффициент 190)
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from aircalc.config import DEFAULT_CONFIG, CalcConfig
from aircalc.core import units
from aircalc.core.types import TubingResult
from aircalc.formulas.guards import finite_or_zero, safe_pow


def _round_half_up(x: float) -> float:
    return float(math.floor(x + 0.5))


def tubing_flow_rate(
    diameter_mm: float,
    length_m: float,
    pressure_in_bar: float,
    pressure_out_bar: float,
) -> float:
    """Расход через трубку, округлённый до целого.

        flow = 190 * d² * sqrt((p_in² - p_out²) / L)

    Неположительное подкоренное выражение (|p_out| >= |p_in|) даёт 0, а не NaN;
    переполнение даёт 0, а не исключение.
    """

    L = float(length_m)
    if L <= 0.0:
        return 0.0

    # p_in² - p_out² через модули: равные давления дают 0 без вычитания inf - inf
    p_in = abs(float(pressure_in_bar))
    p_out = abs(float(pressure_out_bar))
    if p_in <= p_out:
        return 0.0
    radicand = (p_in - p_out) * (p_in + p_out) / L
    if not radicand > 0.0:
        return 0.0

    d = float(diameter_mm)
    flow = units.TUBING_FLOW_FACTOR * d * d * math.sqrt(radicand)
    if not math.isfinite(flow):
        return 0.0
    return _round_half_up(flow)


def tubing_pressure_drop(
    diameter_mm: float,
    length_m: float,
    flow: float,
    k: float = units.TUBING_RESISTANCE_K,
) -> float:
    """drop = K * (L / d^5) * flow²; d == 0 -> 0."""

    d5 = safe_pow(diameter_mm, 5)
    if d5 == 0.0:
        return 0.0
    return finite_or_zero(float(k) * (float(length_m) / d5) * safe_pow(flow, 2))


def recommend_tube_size(flow: float, cfg: Optional[CalcConfig] = None) -> int:
    """Рекомендуемый наружный размер трубки (mm), границы включительно."""

    cfg = cfg or DEFAULT_CONFIG
    for threshold, size in zip(cfg.tube_size_thresholds, cfg.tube_sizes_mm):
        if flow <= threshold:
            return int(size)
    return int(cfg.tube_sizes_mm[-1])


def recommend_tube_sizes(flows: ArrayLike, cfg: Optional[CalcConfig] = None) -> NDArray[np.int64]:
    """Векторная версия `recommend_tube_size` (batch заполняет ей колонку размера)."""

    cfg = cfg or DEFAULT_CONFIG
    thresholds = np.asarray(cfg.tube_size_thresholds, dtype=np.float64)
    sizes = np.asarray(cfg.tube_sizes_mm, dtype=np.int64)
    # side="left": flow == threshold stays in the smaller size
    idx = np.searchsorted(thresholds, np.asarray(flows, dtype=np.float64), side="left")
    return sizes[idx]


def calculate_tubing(
    diameter_mm: float,
    length_m: float,
    pressure_in_bar: float,
    pressure_out_bar: float,
    cfg: Optional[CalcConfig] = None,
) -> TubingResult:
    """Полный расчёт трубки: расход -> падение давления -> размер.

    Падение давления считается по уже округлённому расходу.
    """

    cfg = cfg or DEFAULT_CONFIG
    flow = tubing_flow_rate(diameter_mm, length_m, pressure_in_bar, pressure_out_bar)
    drop = tubing_pressure_drop(diameter_mm, length_m, flow, k=cfg.tubing_k)
    return TubingResult(
        flow=flow,
        drop=drop,
        recommended_size_mm=recommend_tube_size(flow, cfg),
    )
