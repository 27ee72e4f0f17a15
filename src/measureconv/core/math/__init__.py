"""
Core math modules для measureconv

Арифметика произвольной точности, дробные дюймы и десятичная конверсия.
"""

# Decimal Arithmetic
from measureconv.core.math.decimal_arithmetic import (
    DEFAULT_BACKEND,
    DEFAULT_PRECISION,
    MIN_PRECISION,
    ContextDecimalBackend,
    DecimalBackend,
    RationalBackend,
    validate_precision,
)

# Inch Fractions
from measureconv.core.math.inch_fractions import (
    gcd,
    needs_mixed,
    reduce_fraction,
    split_mixed,
    to_inch_fraction,
    to_mixed,
)

# Conversion
from measureconv.core.math.conversion import (
    inches_to_mm_decimal,
    mm_to_inches_decimal,
)

__all__ = [
    # Decimal Arithmetic — Constants
    "DEFAULT_PRECISION",
    "MIN_PRECISION",
    "DEFAULT_BACKEND",
    # Decimal Arithmetic — Backends
    "DecimalBackend",
    "ContextDecimalBackend",
    "RationalBackend",
    "validate_precision",
    # Inch Fractions
    "gcd",
    "reduce_fraction",
    "to_inch_fraction",
    "split_mixed",
    "to_mixed",
    "needs_mixed",
    # Conversion
    "mm_to_inches_decimal",
    "inches_to_mm_decimal",
]
