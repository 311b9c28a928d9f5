"""Защита формул от переполнения.

Формулы должны быть тотальными: для любого конечного ввода результат конечен
и исключения не выходят наружу. Переполнение степени даёт inf (а не
OverflowError), после чего итог проверяется `finite_or_zero` так же, как
деление на ноль даёт 0.0.
"""

from __future__ import annotations

import math


def safe_pow(base: float, exp: float) -> float:
    """base ** exp без исключений.

    Переполнение -> inf; отрицательное основание с дробной степенью -> nan
    (вместо complex у оператора `**`).
    """

    try:
        return math.pow(float(base), float(exp))
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0
