"""Command line for the calculators and the unit converter.

Usage:
    aircalc list
    aircalc calc exhaust ventilator_output_m3_h=1000 flow_velocity_m_s=4
    aircalc convert bar 6.5
    aircalc convert c 20 --category temperature
    aircalc batch tubing inputs.csv --out results.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from aircalc.calculators import CALCULATORS, get_calculator, run_calculator
from aircalc.conversion import CATEGORIES, convert, get_table

EXIT_INVALID_INPUT = 2


def _parse_assignments(items: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"expected field=value, got {item!r}")
        out[key.strip()] = value
    return out


def cmd_list(args: argparse.Namespace) -> int:
    for spec in CALCULATORS.values():
        unit = f" [{spec.result_unit}]" if spec.result_unit else ""
        print(f"{spec.name}: {spec.title}{unit}")
        for field, label in zip(spec.fields, spec.labels or spec.fields):
            flag = " (> 0)" if field in spec.positive else ""
            print(f"    {field:<24} {label}{flag}")
    return 0


def cmd_calc(args: argparse.Namespace) -> int:
    spec = get_calculator(args.name)
    outcome = run_calculator(spec.name, _parse_assignments(args.fields))
    if not outcome.ok:
        print(f"Error: {outcome.display()}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    unit = f" {spec.result_unit}" if spec.result_unit else ""
    print(f"{spec.title}: {outcome.display()}{unit}")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    table = get_table(args.category)
    values = convert(args.unit, args.value, category=args.category)
    for key, unit in table.items():
        marker = "*" if key == args.unit else " "
        print(f"{marker} {unit.label:>8}  {values[key]}")
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    from aircalc.batch import ERROR_COLUMN, evaluate_csv

    out = evaluate_csv(args.name, args.input, args.out)
    if args.out is None:
        print(out.to_csv(index=False), end="")
    return EXIT_INVALID_INPUT if (out[ERROR_COLUMN] != "").any() else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aircalc",
        description="Compressed air engineering calculators and unit converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List calculators and their input fields")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("calc", help="Run one calculator")
    p.add_argument("name", choices=sorted(CALCULATORS))
    p.add_argument("fields", nargs="*", metavar="field=value")
    p.set_defaults(func=cmd_calc)

    p = sub.add_parser("convert", help="Convert a value to every unit of a category")
    p.add_argument("unit")
    p.add_argument("value")
    p.add_argument("--category", default="pressure", choices=sorted(CATEGORIES))
    p.set_defaults(func=cmd_convert)

    p = sub.add_parser("batch", help="Run a calculator over a CSV file")
    p.add_argument("name", choices=sorted(CALCULATORS))
    p.add_argument("input", help="CSV with one column per calculator field")
    p.add_argument("--out", default=None, help="Output CSV (default: stdout)")
    p.set_defaults(func=cmd_batch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return int(args.func(args))
    except (ValueError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
