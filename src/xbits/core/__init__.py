"""
Core domain models, bit-manipulation primitives, and reference contracts.

This module contains pure, side-effect-free integer transformations
that are independent of any I/O or external systems.
"""
