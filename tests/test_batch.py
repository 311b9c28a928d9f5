import pandas as pd
import pytest

from aircalc.batch import ERROR_COLUMN, RESULT_COLUMN, SIZE_COLUMN, evaluate_csv, evaluate_frame
from aircalc.calculators import get_calculator
from aircalc.formulas.tubing import recommend_tube_size


def test_evaluate_frame_scalar() -> None:
    df = pd.DataFrame(
        {
            "ventilator_output_m3_h": ["1000", "abc", "500"],
            "flow_velocity_m_s": ["4", "4", "-1"],
        }
    )
    out = evaluate_frame("exhaust", df)
    assert list(out.columns) == ["ventilator_output_m3_h", "flow_velocity_m_s", RESULT_COLUMN, ERROR_COLUMN]
    assert out.loc[0, RESULT_COLUMN] == pytest.approx(1000.0 / 14400.0)
    assert out.loc[0, ERROR_COLUMN] == ""
    assert out.loc[1, ERROR_COLUMN] == "not_a_number:ventilator_output_m3_h"
    assert out.loc[2, ERROR_COLUMN] == "non_positive:flow_velocity_m_s"


def test_evaluate_frame_tubing() -> None:
    df = pd.DataFrame(
        {
            "diameter_mm": [6.0, 6.0],
            "length_m": [10.0, 10.0],
            "pressure_in_bar": [8.0, 6.0],
            "pressure_out_bar": [6.0, 6.0],
        }
    )
    out = evaluate_frame("tubing", df)
    assert {"flow", "drop", "recommended_size_mm", ERROR_COLUMN} <= set(out.columns)
    assert out.loc[1, "flow"] == 0.0
    assert out.loc[1, "recommended_size_mm"] == 4


def test_missing_column() -> None:
    with pytest.raises(ValueError):
        evaluate_frame("exhaust", pd.DataFrame({"ventilator_output_m3_h": ["1"]}))


def test_evaluate_csv_round_trip(tmp_path) -> None:
    src = tmp_path / "in.csv"
    src.write_text(
        "receiver_volume,initial_pressure_bar,final_pressure_bar,time\n"
        "500,8,6,60\n"
        "500,,6,60\n",
        encoding="utf-8",
    )
    dst = tmp_path / "out" / "res.csv"
    out = evaluate_csv("leakage", src, dst)
    assert dst.exists()
    assert out.loc[0, RESULT_COLUMN] == pytest.approx(500.0 * 2.0 / 60.0 / 60.0)
    assert out.loc[1, ERROR_COLUMN] == "not_a_number:initial_pressure_bar"

    saved = pd.read_csv(dst, keep_default_na=False)
    assert len(saved) == 2


def test_tubing_sizes_filled_vectorised() -> None:
    df = pd.DataFrame(
        {
            "diameter_mm": ["6", "4", "abc", "6"],
            "length_m": ["10", "3", "10", "10"],
            "pressure_in_bar": ["8", "7", "8", "6"],
            "pressure_out_bar": ["6", "5.5", "6", "6"],
        }
    )
    out = evaluate_frame("tubing", df)
    assert out[SIZE_COLUMN].dtype == "Int64"
    assert pd.isna(out.loc[2, SIZE_COLUMN])
    for i in (0, 1, 3):
        assert out.loc[i, SIZE_COLUMN] == recommend_tube_size(out.loc[i, "flow"])


@pytest.mark.parametrize(
    "name,extra",
    [("exhaust", RESULT_COLUMN), ("exhaust", ERROR_COLUMN), ("tubing", "flow"), ("tubing", SIZE_COLUMN)],
)
def test_input_with_output_columns_rejected(name: str, extra: str) -> None:
    spec = get_calculator(name)
    df = pd.DataFrame({f: ["1"] for f in spec.fields})
    df[extra] = ["old"]
    with pytest.raises(ValueError, match="output columns"):
        evaluate_frame(name, df)
