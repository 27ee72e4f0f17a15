"""
Domain models and value objects.

Contains unit tags, conversion constants and conversion result models.
"""

from measureconv.core.domain.measurement import (
    InchConversion,
    InchFraction,
    MillimeterConversion,
    MixedNumber,
)
from measureconv.core.domain.units import (
    FIXED_PLACES,
    MAX_DENOMINATOR,
    MM_PER_INCH,
    Unit,
    is_power_of_two,
    validate_max_denominator,
)

__all__ = [
    # Units module
    "MM_PER_INCH",
    "MAX_DENOMINATOR",
    "FIXED_PLACES",
    "Unit",
    "is_power_of_two",
    "validate_max_denominator",
    # Measurement models
    "InchFraction",
    "MixedNumber",
    "InchConversion",
    "MillimeterConversion",
]
