"""aircalc package.

Инженерные расчёты для систем сжатого воздуха и конвертер единиц.

Пакет не должен иметь побочных эффектов при импорте, поэтому здесь нет
eager-import'ов (pandas подтягивается только в `aircalc.batch`).

Импортируй нужное напрямую:
- from aircalc.calculators import run_calculator
- from aircalc.conversion import convert
- from aircalc.formulas.tubing import calculate_tubing
"""

from __future__ import annotations

__version__ = "0.3.0"

__all__: list[str] = ["__version__"]
