"""measureconv — millimeter/inch converter

Run from the command line.

Usage:
    measureconv 50                  # millimeters into inches
    measureconv 1 --to mm           # inches into millimeters
    measureconv 50 --json           # validated JSON payload
"""

import argparse
import json
import logging
import sys

from measureconv.core.contracts import validate_inch_conversion, validate_millimeter_conversion
from measureconv.core.domain.measurement import InchConversion
from measureconv.core.domain.units import FIXED_PLACES, MAX_DENOMINATOR, Unit
from measureconv.core.math.decimal_arithmetic import DEFAULT_PRECISION
from measureconv.converter import ConversionSection, ConverterConfig, MeasurementConverter

log = logging.getLogger(__name__)

# Код выхода при подавленном вводе
EXIT_SUPPRESSED = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="measureconv",
        description="Convert millimeters into inches and inches into millimeters",
    )
    parser.add_argument("value", help="Value to convert.")
    parser.add_argument(
        "--to",
        choices=[unit.value for unit in Unit],
        default=Unit.INCH.value,
        help="Target unit: 'in' converts millimeters, 'mm' converts inches (default: in).",
    )
    parser.add_argument(
        "--places",
        type=int,
        default=FIXED_PLACES,
        help="Decimal places of the fixed-point result.",
    )
    parser.add_argument(
        "--max-denominator",
        type=int,
        default=MAX_DENOMINATOR,
        help="Finest inch fraction, a power of two up to 128.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help="Extra significant digits of decimal division (at least 20).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON payload.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = ConverterConfig(
            precision=args.precision,
            fixed_places=args.places,
            max_denominator=args.max_denominator,
        )
    except ValueError as e:
        parser.error(str(e))

    section = ConversionSection(args.to, MeasurementConverter(config))
    result = section.update(args.value)

    if result is None:
        log.warning("Nothing to convert: %r is not a non-negative number", args.value)
        return EXIT_SUPPRESSED

    if args.json:
        payload = result.to_payload()
        if isinstance(result, InchConversion):
            validate_inch_conversion(payload)
        else:
            validate_millimeter_conversion(payload)
        print(json.dumps(payload, indent=2))
    else:
        print(section.title)
        print(section.render())

    return 0


if __name__ == "__main__":
    sys.exit(main())
