"""
xbits — Low-level integer bit-manipulation primitives.

Fixed-width integer resolution, power-of-two alignment, flag masks,
integer log2 and power-of-two rounding, MurmurHash3 finalizer and
bit counting. All operations are pure integer transformations.
"""

from xbits.core.domain import (
    INT8,
    INT16,
    INT32,
    INT64,
    SIZE_T,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    Address,
    FlagWord,
    IntType,
    WidthResolutionError,
    byte_size_int,
    byte_size_uint,
    to_int,
    to_uint,
)
from xbits.core.math import (
    align_address_down,
    align_address_up,
    align_down,
    align_up,
    count_leading_zeros_32,
    count_leading_zeros_64,
    count_trailing_zeros_32,
    count_trailing_zeros_64,
    flag_is_on,
    flag_off,
    flag_on,
    flag_toggle,
    flags_are_on,
    fmix32,
    fmix64,
    is_address_aligned,
    is_aligned,
    is_divisible_by_power_of_two,
    is_power_of_two,
    log2_floor,
    log2_round_up,
    murmur_hash3_finalize,
    population_count_32,
    population_count_64,
    round_up_to_power_of_two,
    shift_left_pow2,
)

__version__ = "0.1.0"

__all__ = [
    # Int types
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "SIZE_T",
    "IntType",
    "WidthResolutionError",
    "byte_size_uint",
    "byte_size_int",
    "to_uint",
    "to_int",
    # Models
    "Address",
    "FlagWord",
    # Alignment
    "align_up",
    "align_down",
    "is_aligned",
    "align_address_up",
    "align_address_down",
    "is_address_aligned",
    # Flags
    "flag_toggle",
    "flag_on",
    "flag_off",
    "flag_is_on",
    "flags_are_on",
    # Powers of two
    "shift_left_pow2",
    "log2_floor",
    "log2_round_up",
    "is_power_of_two",
    "round_up_to_power_of_two",
    "is_divisible_by_power_of_two",
    # MurmurHash3
    "fmix32",
    "fmix64",
    "murmur_hash3_finalize",
    # Bit count
    "population_count_32",
    "population_count_64",
    "count_leading_zeros_32",
    "count_leading_zeros_64",
    "count_trailing_zeros_32",
    "count_trailing_zeros_64",
]
