"""aircalc.core.validation

Проверки входных значений.

Два уровня:
- `ensure_*` бросают ValueError: это guard'ы для кода (конфиги, прямые
  вызовы API с заведомо неверными аргументами);
- `validate()` разбирает сырой пользовательский ввод и возвращает либо
  числа, либо `ValidationError` как значение, без исключений.
"""

from __future__ import annotations

import math
from typing import Any, Collection, Mapping, Optional, Union

from aircalc.core.types import ParsedInputs, ValidationError, ValidationErrorKind


def ensure_finite(value: float, name: str) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def ensure_non_negative(value: float, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def ensure_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def ensure_in_range(value: float, min_value: float, max_value: float, name: str) -> None:
    if not (min_value <= value <= max_value):
        raise ValueError(f"{name} must be in [{min_value}, {max_value}], got {value}")


def parse_number(raw: Any) -> Optional[float]:
    """Разобрать значение поля ввода; None, если это не конечное число."""

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def validate(
    fields: Mapping[str, Any],
    positive: Optional[Collection[str]] = None,
) -> Union[ParsedInputs, ValidationError]:
    """Разобрать все поля формы.

    positive:
        Имена полей, которые обязаны быть > 0. None означает «все поля».

    Поля проверяются в порядке mapping'а, возвращается первая ошибка.
    """

    required_positive = fields.keys() if positive is None else positive
    parsed: ParsedInputs = {}
    for name, raw in fields.items():
        value = parse_number(raw)
        if value is None:
            return ValidationError(ValidationErrorKind.NOT_A_NUMBER, name, raw)
        if name in required_positive and value <= 0:
            return ValidationError(ValidationErrorKind.NON_POSITIVE, name, raw)
        parsed[name] = value
    return parsed
