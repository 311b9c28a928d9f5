"""Таблицы единиц для конвертера.

Каждая категория имеет базовую единицу; любая пара единиц конвертируется
через базу (A -> base -> B), прямых попарных формул нет.

Коэффициенты давления совпадают с таблицей мобильного приложения
(например, 1 kPa = 0.14504 psi), а не с CODATA: поля конвертера должны
показывать те же числа, что и приложение.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from aircalc.core import units


Transform = Callable[[float], float]


@dataclass(frozen=True)
class ConversionUnit:
    """Единица измерения в категории.

    to_base:   значение в этой единице -> значение в базовой единице.
    from_base: значение в базовой единице -> значение в этой единице.
    """

    key: str
    label: str
    to_base: Transform
    from_base: Transform

    def __repr__(self) -> str:
        return f"ConversionUnit({self.key!r}, label={self.label!r})"


def _identity(key: str, label: str) -> ConversionUnit:
    return ConversionUnit(key, label, to_base=lambda v: v, from_base=lambda v: v)


def _base_multiple(key: str, label: str, base_per_unit: float) -> ConversionUnit:
    """1 unit = base_per_unit * base (например, 1 bar = 100 kPa)."""

    return ConversionUnit(
        key,
        label,
        to_base=lambda v: v * base_per_unit,
        from_base=lambda v: v / base_per_unit,
    )


def _units_per_base(key: str, label: str, per_base: float) -> ConversionUnit:
    """1 base = per_base * unit (например, 1 kPa = 0.14504 psi)."""

    return ConversionUnit(
        key,
        label,
        to_base=lambda v: v / per_base,
        from_base=lambda v: v * per_base,
    )


def _table(*items: ConversionUnit) -> Dict[str, ConversionUnit]:
    return {u.key: u for u in items}


# Base: kPa. Порядок ключей = порядок полей в форме конвертера.
PRESSURE_UNITS: Dict[str, ConversionUnit] = _table(
    _identity("kpa", "kPa"),
    _base_multiple("bar", "bar", units.KPA_PER_BAR),
    _units_per_base("mbar", "mbar", units.MBAR_PER_KPA),
    _units_per_base("psi", "Psi", 0.14504),
    _units_per_base("at", "at", 0.0102),
    _base_multiple("atm", "atm", units.KPA_PER_ATM),
    _units_per_base("mmWc", "mm Wc", 102.0),
    _units_per_base("torr", "Torr", 7.5),
    _units_per_base("pa", "Pa", units.PA_PER_KPA),
    _units_per_base("mmHg", "mmHg", 7.5),
    _units_per_base("inHg", "inHg", 0.2953),
    _units_per_base("kgcm2", "kg/cm²", 0.0102),
)

# Base: m³
VOLUME_UNITS: Dict[str, ConversionUnit] = _table(
    _identity("m3", "m³"),
    _units_per_base("l", "l", units.LITRES_PER_M3),
    _units_per_base("ml", "ml", 1.0e6),
    _base_multiple("ft3", "ft³", 0.0283168466),
    _base_multiple("gal_us", "US gal", 0.003785411784),
    _base_multiple("gal_uk", "UK gal", 0.00454609),
)

# Base: m³/min (единица расхода всех формул компрессора)
FLOW_RATE_UNITS: Dict[str, ConversionUnit] = _table(
    _identity("m3_min", "m³/min"),
    _units_per_base("m3_h", "m³/h", units.MINUTES_PER_HOUR),
    _units_per_base("l_min", "l/min", units.LITRES_PER_M3),
    _units_per_base("l_s", "l/s", units.LITRES_PER_M3 / units.SECONDS_PER_MINUTE),
    _base_multiple("cfm", "cfm", 0.0283168466),
)

# Base: kW
POWER_UNITS: Dict[str, ConversionUnit] = _table(
    _identity("kw", "kW"),
    _units_per_base("w", "W", 1000.0),
    _base_multiple("hp", "hp", 0.745699872),
    _base_multiple("ps", "PS", 0.73549875),
    _base_multiple("btu_h", "BTU/h", 0.00029307107),
)

# Base: kJ
ENERGY_UNITS: Dict[str, ConversionUnit] = _table(
    _identity("kj", "kJ"),
    _units_per_base("j", "J", 1000.0),
    _base_multiple("kwh", "kWh", 3600.0),
    _base_multiple("kcal", "kcal", 4.1868),
    _base_multiple("btu", "BTU", 1.05505585262),
)

# Base: °C. Аффинные преобразования, не множители.
TEMPERATURE_UNITS: Dict[str, ConversionUnit] = _table(
    _identity("c", "°C"),
    ConversionUnit(
        "f",
        "°F",
        to_base=lambda v: (v - 32.0) * 5.0 / 9.0,
        from_base=lambda v: v * 9.0 / 5.0 + 32.0,
    ),
    ConversionUnit(
        "k",
        "K",
        to_base=lambda v: v - 273.15,
        from_base=lambda v: v + 273.15,
    ),
)

CATEGORIES: Dict[str, Dict[str, ConversionUnit]] = {
    "pressure": PRESSURE_UNITS,
    "volume": VOLUME_UNITS,
    "flow_rate": FLOW_RATE_UNITS,
    "power": POWER_UNITS,
    "energy": ENERGY_UNITS,
    "temperature": TEMPERATURE_UNITS,
}


def get_table(category: str) -> Dict[str, ConversionUnit]:
    key = category.strip().lower().replace(" ", "_")
    try:
        return CATEGORIES[key]
    except KeyError:
        raise ValueError(f"Unknown unit category: {category}") from None


def get_unit(unit: str, category: str = "pressure") -> ConversionUnit:
    table = get_table(category)
    if unit not in table:
        raise ValueError(f"Unknown {category} unit: {unit}")
    return table[unit]
