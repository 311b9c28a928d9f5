"""Конвертер «все поля сразу».

Пользователь редактирует одно поле; остальные пересчитываются через базовую
единицу категории. Редактируемое поле всегда возвращается как введено,
без пересчёта, чтобы не портить набранную точность.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from aircalc.config import DEFAULT_CONFIG, CalcConfig
from aircalc.conversion.tables import get_table, get_unit
from aircalc.core.validation import parse_number

logger = logging.getLogger(__name__)


def format_converted(value: float, decimals: int = 6) -> str:
    """Округлить до `decimals` знаков и убрать хвостовые нули (и точку)."""

    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def convert_value(value: float, from_unit: str, to_unit: str, category: str = "pressure") -> float:
    """Pivot-конвертация одного значения без округления."""

    src = get_unit(from_unit, category)
    dst = get_unit(to_unit, category)
    return dst.from_base(src.to_base(float(value)))


def convert(
    source_unit: str,
    raw_value: Any,
    category: str = "pressure",
    cfg: Optional[CalcConfig] = None,
) -> Dict[str, str]:
    """Пересчитать все поля категории по значению одного поля.

    Если `raw_value` не число (пользователь ещё печатает), все остальные поля
    очищаются, а редактируемое поле сохраняет сырой текст.
    """

    cfg = cfg or DEFAULT_CONFIG
    table = get_table(category)
    source = get_unit(source_unit, category)

    value = parse_number(raw_value)
    if value is None:
        logger.debug("convert: %r is not a number, clearing %s fields", raw_value, category)
        return {key: (raw_value if key == source_unit else "") for key in table}

    base = source.to_base(value)
    converted: Dict[str, str] = {}
    for key, unit in table.items():
        if key == source_unit:
            converted[key] = raw_value
        else:
            converted[key] = format_converted(unit.from_base(base), cfg.conversion_decimals)
    return converted
