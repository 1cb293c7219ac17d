"""
Murmur — MurmurHash3 finalizer (avalanche mixing)

Детерминированное перемешивание бит: изменение одного входного бита
меняет примерно половину выходных бит. НЕ криптографическая функция,
без seed и без состояния.

ФОРМУЛЫ:
    fmix32: h ^= h>>16; h *= 0x85ebca6b; h ^= h>>13; h *= 0xc2b2ae35; h ^= h>>16
    fmix64: h ^= h>>33; h *= 0xff51afd7ed558ccd; h ^= h>>33;
            h *= 0xc4ceb9fe1a85ec53; h ^= h>>33

Поддерживаются только ширины 4 и 8 байт. Другая ширина отклоняется
при разрешении finalizer (WidthResolutionError), до перемешивания.
"""

from typing import Callable, Final

from xbits.core.domain.int_types import UINT32, UINT64, IntType, WidthResolutionError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

FMIX32_C1: Final[int] = 0x85EBCA6B
FMIX32_C2: Final[int] = 0xC2B2AE35

FMIX64_C1: Final[int] = 0xFF51AFD7ED558CCD
FMIX64_C2: Final[int] = 0xC4CEB9FE1A85EC53


# =============================================================================
# FINALIZERS
# =============================================================================


def fmix32(h: int) -> int:
    """
    32-битный finalizer. Вход приводится к UINT32.

    Examples:
        >>> hex(fmix32(0x12345678))
        '0xe37cd1bc'
        >>> fmix32(0)
        0
    """
    h = UINT32.wrap(h)
    h ^= h >> 16
    h = (h * FMIX32_C1) & 0xFFFFFFFF
    h ^= h >> 13
    h = (h * FMIX32_C2) & 0xFFFFFFFF
    h ^= h >> 16
    return h


def fmix64(h: int) -> int:
    """
    64-битный finalizer. Вход приводится к UINT64.

    Examples:
        >>> hex(fmix64(1))
        '0xb456bcfc34c2cb2c'
    """
    h = UINT64.wrap(h)
    h ^= h >> 33
    h = (h * FMIX64_C1) & 0xFFFFFFFFFFFFFFFF
    h ^= h >> 33
    h = (h * FMIX64_C2) & 0xFFFFFFFFFFFFFFFF
    h ^= h >> 33
    return h


_FINALIZER_BY_SIZE: Final[dict[int, Callable[[int], int]]] = {
    4: fmix32,
    8: fmix64,
}


def finalizer_for(int_type: IntType) -> Callable[[int], int]:
    """
    Разрешение finalizer по ширине типа.

    Signed значения реинтерпретируются как unsigned той же ширины перед
    перемешиванием, результат реинтерпретируется обратно в int_type.

    Raises:
        WidthResolutionError: Если ширина не 4 и не 8 байт
    """
    mix = _FINALIZER_BY_SIZE.get(int_type.size_bytes)
    if mix is None:
        raise WidthResolutionError(
            f"MurmurHash3 finalizer requires a 4 or 8 byte type, got {int_type}"
        )

    def finalize(h: int) -> int:
        return int_type.wrap(mix(int_type.to_unsigned(h)))

    return finalize


def murmur_hash3_finalize(h: int, int_type: IntType = UINT64) -> int:
    """
    MurmurHash3 finalizer для значения типа int_type.

    Examples:
        >>> from xbits.core.domain.int_types import INT32
        >>> murmur_hash3_finalize(-1, INT32)
        -2114883783
    """
    return finalizer_for(int_type)(h)
