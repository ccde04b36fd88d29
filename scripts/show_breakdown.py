#!/usr/bin/env python
from __future__ import annotations

import argparse

from incometax import ASSESSMENT_YEAR, TaxCalculator, ValidationError
from incometax.config import get_settings
from incometax.telemetry import configure_logging, detach_handlers


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"Income tax of India for assessment year {ASSESSMENT_YEAR}")
    parser.add_argument("--sex", required=True, help="m or f")
    parser.add_argument("--age", required=True, help="Age of the person")
    parser.add_argument("--gross-income", required=True, help=f"Gross income for the year {ASSESSMENT_YEAR}")
    parser.add_argument("--net-only", action="store_true", help="Print only the net tax payable")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    handlers = configure_logging(get_settings())
    try:
        try:
            calc = TaxCalculator({"sex": args.sex, "age": args.age, "gross_income": args.gross_income})
        except ValidationError as exc:
            raise SystemExit(f"ERROR: {exc}") from exc
        net_tax = calc.compute_tax()
        if args.net_only:
            print(net_tax)
        else:
            calc.show_breakdown()
    finally:
        detach_handlers(handlers)


if __name__ == "__main__":
    main()
