import pytest

from aircalc.config import CalcConfig
from aircalc.conversion import (
    CATEGORIES,
    PRESSURE_UNITS,
    Debouncer,
    convert,
    convert_value,
    format_converted,
    get_unit,
)


PRESSURE_KEYS = ["kpa", "bar", "mbar", "psi", "at", "atm", "mmWc", "torr", "pa", "mmHg", "inHg", "kgcm2"]


class TestPressureTable:
    def test_twelve_units_in_form_order(self) -> None:
        assert list(PRESSURE_UNITS) == PRESSURE_KEYS

    @pytest.mark.parametrize("key", PRESSURE_KEYS)
    @pytest.mark.parametrize("x", [0.0, 1.0, 6.5, 101.325, 12345.678, -3.2])
    def test_round_trip(self, key: str, x: float) -> None:
        unit = PRESSURE_UNITS[key]
        assert unit.from_base(unit.to_base(x)) == pytest.approx(x, abs=1e-6)

    @pytest.mark.parametrize(
        "key,per_kpa",
        [("bar", 0.01), ("mbar", 10.0), ("psi", 0.14504), ("pa", 1000.0), ("atm", 1 / 101.325), ("mmWc", 102.0)],
    )
    def test_factors(self, key: str, per_kpa: float) -> None:
        assert PRESSURE_UNITS[key].from_base(1.0) == pytest.approx(per_kpa)


class TestFormatConverted:
    @pytest.mark.parametrize(
        "value,text",
        [
            (100.0, "100"),
            (1000.0, "1000"),
            (14.504, "14.504"),
            (0.1 + 0.2, "0.3"),
            (0.98692326, "0.986923"),
            (1e-9, "0"),
            (-1e-9, "0"),
            (-2.5, "-2.5"),
        ],
    )
    def test_format(self, value: float, text: str) -> None:
        assert format_converted(value) == text


class TestConvert:
    def test_from_kpa(self) -> None:
        out = convert("kpa", "100")
        assert out["kpa"] == "100"
        assert out["bar"] == "1"
        assert out["mbar"] == "1000"
        assert out["psi"] == "14.504"
        assert out["pa"] == "100000"
        assert out["atm"] == "0.986923"
        assert set(out) == set(PRESSURE_KEYS)

    @pytest.mark.parametrize("key", PRESSURE_KEYS)
    @pytest.mark.parametrize("raw", ["1", "6.50", "0.000", "1e2", " 42 "])
    def test_source_field_echoes_raw(self, key: str, raw: str) -> None:
        assert convert(key, raw)[key] == raw

    @pytest.mark.parametrize("raw", ["", "abc", "12a", "-", "."])
    def test_invalid_clears_other_fields(self, raw: str) -> None:
        out = convert("bar", raw)
        assert out["bar"] == raw
        assert all(v == "" for k, v in out.items() if k != "bar")

    @pytest.mark.parametrize("a", PRESSURE_KEYS)
    @pytest.mark.parametrize("b", ["kpa", "bar", "psi", "mmHg", "inHg"])
    def test_a_to_b_to_a(self, a: str, b: str) -> None:
        x = 650.0
        there = convert(a, str(x))[b]
        back = convert(b, there)[a] if a != b else there
        assert float(back) == pytest.approx(x, rel=1e-4)

    def test_decimals_from_config(self) -> None:
        out = convert("kpa", "100", cfg=CalcConfig(conversion_decimals=2))
        assert out["atm"] == "0.99"

    def test_unknown_unit(self) -> None:
        with pytest.raises(ValueError):
            convert("hpa", "1")

    def test_unknown_category(self) -> None:
        with pytest.raises(ValueError):
            convert("kpa", "1", category="luminosity")


class TestOtherCategories:
    def test_all_categories_present(self) -> None:
        assert set(CATEGORIES) == {"pressure", "volume", "flow_rate", "power", "energy", "temperature"}

    @pytest.mark.parametrize("category", sorted(CATEGORIES))
    def test_round_trip(self, category: str) -> None:
        for unit in CATEGORIES[category].values():
            assert unit.from_base(unit.to_base(37.5)) == pytest.approx(37.5, abs=1e-6)

    def test_temperature(self) -> None:
        assert convert_value(100.0, "c", "f", "temperature") == pytest.approx(212.0)
        assert convert_value(0.0, "c", "k", "temperature") == pytest.approx(273.15)
        assert convert("f", "32", category="temperature")["c"] == "0"

    def test_flow_rate(self) -> None:
        assert convert_value(1.0, "m3_min", "m3_h", "flow_rate") == pytest.approx(60.0)
        assert convert_value(1.0, "m3_min", "l_s", "flow_rate") == pytest.approx(1000.0 / 60.0)

    def test_energy(self) -> None:
        assert convert_value(1.0, "kwh", "kj", "energy") == pytest.approx(3600.0)

    def test_category_name_normalised(self) -> None:
        assert get_unit("cfm", "Flow Rate").key == "cfm"

    def test_pressure_pivot(self) -> None:
        assert convert_value(1.0, "bar", "mbar") == pytest.approx(1000.0)
        assert convert_value(1.0, "atm", "pa") == pytest.approx(101325.0)


class TestDebouncer:
    def test_latest_value_wins(self) -> None:
        now = [0.0]
        d = Debouncer(0.3, clock=lambda: now[0])
        d.submit("bar", "1")
        now[0] = 0.1
        d.submit("bar", "12")
        assert d.poll(now=0.35) is None
        assert d.poll(now=0.45) == ("bar", "12")
        assert d.poll(now=1.0) is None

    def test_cancel(self) -> None:
        d = Debouncer(0.3, clock=lambda: 0.0)
        d.submit("kpa", "5")
        assert d.pending
        d.cancel()
        assert d.poll(now=10.0) is None

    def test_default_delay(self) -> None:
        assert Debouncer().delay_s == pytest.approx(0.3)

    def test_negative_delay(self) -> None:
        with pytest.raises(ValueError):
            Debouncer(-1.0)

    @pytest.mark.parametrize("delay", [float("nan"), float("inf")])
    def test_non_finite_delay(self, delay: float) -> None:
        with pytest.raises(ValueError):
            Debouncer(delay)
