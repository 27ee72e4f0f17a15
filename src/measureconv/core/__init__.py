"""
Core domain models, arithmetic primitives, and invariants.

This module contains the conversion building blocks that are independent
of any presentation layer (sections, command line).
"""
