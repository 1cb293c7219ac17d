"""
Core math modules для xbits

Битовые примитивы фиксированной ширины: выравнивание, флаги,
степени двойки, MurmurHash3 finalizer, подсчёт бит.
"""

# Alignment
from xbits.core.math.alignment import (
    align_address_down,
    align_address_up,
    align_down,
    align_up,
    is_address_aligned,
    is_aligned,
)

# Bit count
from xbits.core.math.bit_count import (
    BitCountBackend,
    BitCountConfig,
    BitCounter,
    NativeBitCounter,
    PortableBitCounter,
    count_leading_zeros_32,
    count_leading_zeros_64,
    count_trailing_zeros_32,
    count_trailing_zeros_64,
    get_bit_counter,
    native_available,
    population_count_32,
    population_count_64,
    select_bit_counter,
)

# Flags
from xbits.core.math.flags import (
    flag_is_on,
    flag_off,
    flag_on,
    flag_toggle,
    flags_are_on,
)

# MurmurHash3 finalizer
from xbits.core.math.murmur import (
    FMIX32_C1,
    FMIX32_C2,
    FMIX64_C1,
    FMIX64_C2,
    finalizer_for,
    fmix32,
    fmix64,
    murmur_hash3_finalize,
)

# Powers of two
from xbits.core.math.pow2 import (
    LOG2_ROUND_UP_TABLE,
    is_divisible_by_power_of_two,
    is_power_of_two,
    log2_floor,
    log2_round_up,
    round_up_to_power_of_two,
    shift_left_pow2,
)

__all__ = [
    # Alignment
    "align_up",
    "align_down",
    "is_aligned",
    "align_address_up",
    "align_address_down",
    "is_address_aligned",
    # Bit count — Config & strategies
    "BitCountBackend",
    "BitCountConfig",
    "BitCounter",
    "NativeBitCounter",
    "PortableBitCounter",
    "native_available",
    "select_bit_counter",
    "get_bit_counter",
    # Bit count — Functions
    "population_count_32",
    "population_count_64",
    "count_leading_zeros_32",
    "count_leading_zeros_64",
    "count_trailing_zeros_32",
    "count_trailing_zeros_64",
    # Flags
    "flag_toggle",
    "flag_on",
    "flag_off",
    "flag_is_on",
    "flags_are_on",
    # MurmurHash3 — Constants
    "FMIX32_C1",
    "FMIX32_C2",
    "FMIX64_C1",
    "FMIX64_C2",
    # MurmurHash3 — Functions
    "fmix32",
    "fmix64",
    "finalizer_for",
    "murmur_hash3_finalize",
    # Powers of two — Constants
    "LOG2_ROUND_UP_TABLE",
    # Powers of two — Functions
    "shift_left_pow2",
    "log2_floor",
    "log2_round_up",
    "is_power_of_two",
    "round_up_to_power_of_two",
    "is_divisible_by_power_of_two",
]
