"""Batch-расчёт: один калькулятор по таблице входных значений.

Колонки входной таблицы называются как поля калькулятора
(`aircalc list` их показывает). К таблице добавляются колонки результата и
колонка `error` (`<kind>:<field>` или пустая строка).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from aircalc.calculators import get_calculator, run_calculator
from aircalc.core.types import TubingResult
from aircalc.formulas.tubing import recommend_tube_sizes

logger = logging.getLogger(__name__)

RESULT_COLUMN = "result"
ERROR_COLUMN = "error"
SIZE_COLUMN = "recommended_size_mm"
TUBING_COLUMNS = ("flow", "drop", SIZE_COLUMN)


def _row_inputs(row: pd.Series, fields: tuple[str, ...]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in fields:
        value = row.get(f)
        # pandas reads empty CSV cells as NaN; keep them "empty" for validation
        if isinstance(value, float) and np.isnan(value):
            value = None
        out[f] = value
    return out


def evaluate_frame(name: str, df: pd.DataFrame) -> pd.DataFrame:
    spec = get_calculator(name)
    missing = [f for f in spec.fields if f not in df.columns]
    if missing:
        raise ValueError(f"{spec.name}: missing input columns {missing}")

    result_cols = list(TUBING_COLUMNS) if spec.name == "tubing" else [RESULT_COLUMN]
    clash = [c for c in (*result_cols, ERROR_COLUMN) if c in df.columns]
    if clash:
        raise ValueError(f"{spec.name}: input already has output columns {clash}")

    records: List[Dict[str, Any]] = []
    for _, row in df.iterrows():
        outcome = run_calculator(spec.name, _row_inputs(row, spec.fields))
        rec: Dict[str, Any] = {ERROR_COLUMN: ""}
        if outcome.error is not None:
            rec[ERROR_COLUMN] = f"{outcome.error.kind.value}:{outcome.error.field}"
        elif isinstance(outcome.result, TubingResult):
            rec["flow"] = outcome.result.flow
            rec["drop"] = outcome.result.drop
        else:
            rec[RESULT_COLUMN] = outcome.result
        records.append(rec)

    results = pd.DataFrame(records, index=df.index, columns=[*result_cols, ERROR_COLUMN])
    if spec.name == "tubing":
        ok = results[ERROR_COLUMN] == ""
        sizes = pd.Series(pd.NA, index=results.index, dtype="Int64")
        sizes[ok] = recommend_tube_sizes(results.loc[ok, "flow"].to_numpy(dtype=np.float64))
        results[SIZE_COLUMN] = sizes
    n_err = int((results[ERROR_COLUMN] != "").sum())
    logger.info("%s: evaluated %d rows (%d rejected)", spec.name, len(df), n_err)
    return pd.concat([df, results], axis=1)


def evaluate_csv(name: str, in_path: str | Path, out_path: Optional[str | Path] = None) -> pd.DataFrame:
    # dtype=str: validation must see the raw text, exactly as typed
    df = pd.read_csv(in_path, dtype=str, keep_default_na=False)
    out = evaluate_frame(name, df)
    if out_path is not None:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out.to_csv(out_path, index=False)
        logger.info("Saved: %s", out_path)
    return out
