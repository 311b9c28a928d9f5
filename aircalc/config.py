"""Конфигурация расчётов.

Data-only конфиг: эмпирические коэффициенты, таблица подбора трубки,
точность вывода. Значения по умолчанию совпадают с «паспортными»
значениями мобильного приложения.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from aircalc.core import units
from aircalc.core.validation import ensure_finite, ensure_in_range, ensure_non_negative, ensure_positive

# float64 carries ~15-17 significant digits
MAX_CONVERSION_DECIMALS = 15


@dataclass(frozen=True)
class CalcConfig:
    """Параметры калькуляторов и конвертера.

    tube_size_thresholds:
        Верхние границы расхода (включительно) для каждого размера трубки.
        Расход выше последней границы -> последний размер.

    conversion_decimals:
        Сколько знаков после запятой оставляет конвертер единиц.

    debounce_s:
        Пауза ввода, после которой конвертер пересчитывает поля.
    """

    tubing_k: float = units.TUBING_RESISTANCE_K
    tube_size_thresholds: Tuple[float, ...] = (100.0, 300.0, 800.0, 1400.0)
    tube_sizes_mm: Tuple[int, ...] = (4, 6, 8, 10, 12)

    conversion_decimals: int = 6
    debounce_s: float = 0.3

    def __post_init__(self) -> None:
        ensure_finite(self.tubing_k, "tubing_k")
        ensure_positive(self.tubing_k, "tubing_k")
        ensure_in_range(self.conversion_decimals, 0, MAX_CONVERSION_DECIMALS, "conversion_decimals")
        ensure_finite(self.debounce_s, "debounce_s")
        ensure_non_negative(self.debounce_s, "debounce_s")
        for i, threshold in enumerate(self.tube_size_thresholds):
            ensure_finite(threshold, f"tube_size_thresholds[{i}]")
        if len(self.tube_sizes_mm) != len(self.tube_size_thresholds) + 1:
            raise ValueError("tube_sizes_mm must have exactly one more entry than tube_size_thresholds")
        if list(self.tube_size_thresholds) != sorted(self.tube_size_thresholds):
            raise ValueError("tube_size_thresholds must be ascending")


DEFAULT_CONFIG = CalcConfig()
