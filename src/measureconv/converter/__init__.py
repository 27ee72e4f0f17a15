"""Converter — presentation-facing conversion layer.

Input gate filters raw field input, MeasurementConverter composes the core
operations, ConversionSection holds the latest input and renders the result.
"""

from .converter import ConverterConfig, MeasurementConverter
from .input_gate import InputCheck, check_input, is_number
from .section import ConversionSection, render_inch_table

__all__ = [
    "ConverterConfig",
    "MeasurementConverter",
    "InputCheck",
    "check_input",
    "is_number",
    "ConversionSection",
    "render_inch_table",
]
