"""
measureconv — millimeter/inch measurement converter.

Decimal and fractional inch representations computed with
arbitrary-precision arithmetic.
"""

__version__ = "0.1.0"
