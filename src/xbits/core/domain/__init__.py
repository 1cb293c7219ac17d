"""
Domain models and value objects.

Contains fixed-width integer types, typed addresses and mutable flag words.
"""

from xbits.core.domain.address import Address
from xbits.core.domain.flag_word import FlagWord
from xbits.core.domain.int_types import (
    INT8,
    INT16,
    INT32,
    INT64,
    INT_TYPES_BY_NAME,
    MAX_SIZE_BYTES,
    MIN_SIZE_BYTES,
    SIZE_T,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntType,
    WidthResolutionError,
    byte_size_int,
    byte_size_uint,
    int_type_by_name,
    shift_left,
    size_of,
    to_int,
    to_uint,
)

__all__ = [
    # Int types — Canonical types
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "SIZE_T",
    "INT_TYPES_BY_NAME",
    "MIN_SIZE_BYTES",
    "MAX_SIZE_BYTES",
    # Int types — Model & exceptions
    "IntType",
    "WidthResolutionError",
    # Int types — Resolution
    "byte_size_uint",
    "byte_size_int",
    "size_of",
    "to_uint",
    "to_int",
    "int_type_by_name",
    "shift_left",
    # Address model
    "Address",
    # Flag word model
    "FlagWord",
]
