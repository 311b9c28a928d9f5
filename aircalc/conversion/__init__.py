"""Конвертер единиц (pivot через базовую единицу категории)."""

from __future__ import annotations

from .converter import convert, convert_value, format_converted
from .debounce import Debouncer
from .tables import CATEGORIES, PRESSURE_UNITS, ConversionUnit, get_table, get_unit

__all__ = [
    "ConversionUnit",
    "PRESSURE_UNITS",
    "CATEGORIES",
    "get_table",
    "get_unit",
    "convert",
    "convert_value",
    "format_converted",
    "Debouncer",
]
