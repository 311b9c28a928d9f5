"""aircalc.core.types

Типы результатов и ошибок калькуляторов.

Ошибки ввода — это значения (`ValidationError`), а не исключения: вызывающая
сторона (форма, CLI, batch) сама решает, как показать ошибку пользователю.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


class ValidationErrorKind(str, Enum):
    NOT_A_NUMBER = "not_a_number"
    NON_POSITIVE = "non_positive"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Классифицированная ошибка ввода для одного поля."""

    kind: ValidationErrorKind
    field: str
    raw: Any = None

    @property
    def message(self) -> str:
        if self.kind is ValidationErrorKind.NOT_A_NUMBER:
            return f"{self.field}: {self.raw!r} is not a number"
        return f"{self.field}: must be > 0, got {self.raw!r}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class TubingResult:
    flow: float
    drop: float
    recommended_size_mm: int

    def as_dict(self) -> Dict[str, float]:
        return {
            "flow": self.flow,
            "drop": self.drop,
            "recommended_size_mm": self.recommended_size_mm,
        }


CalculatorResult = Union[float, TubingResult]
ParsedInputs = Dict[str, float]


@dataclass(frozen=True)
class CalculationOutcome:
    """Результат одного вызова калькулятора: либо `result`, либо `error`."""

    calculator: str
    inputs: Mapping[str, Any]
    result: Optional[CalculatorResult] = None
    error: Optional[ValidationError] = None
    decimals: int = 2

    @property
    def ok(self) -> bool:
        return self.error is None

    def display(self) -> str:
        """Строка для показа: фиксированное число знаков после запятой."""

        if self.error is not None:
            return self.error.message
        if isinstance(self.result, TubingResult):
            r = self.result
            return (
                f"flow={r.flow:.0f} drop={r.drop:.{self.decimals}f} "
                f"size={r.recommended_size_mm}mm"
            )
        return format_fixed(float(self.result), self.decimals)


def format_fixed(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    # -0.00 -> 0.00
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text
