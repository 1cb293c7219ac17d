"""
IntType — Целочисленные типы фиксированной ширины

Разрешение ширины по количеству байт (1..8) в канонический
unsigned/signed тип (8/16/32/64 бит).

Python int не ограничен по ширине, поэтому ширина передаётся явно
через IntType. Все примитивы xbits работают в пределах ширины IntType:
результат всегда приводится через wrap() (two's complement).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Разрешение ширины выполняется ДО любой арифметики
2. Неверный размер → WidthResolutionError (ошибка уровня типа)
3. wrap() детерминирован и не бросает исключений для любого int
4. shift_left() не бросает исключений для отрицательных/больших сдвигов

ТАБЛИЦА РАЗРЕШЕНИЯ:
    1 → 8 бит, 2 → 16 бит, 3..4 → 32 бита, 5..8 → 64 бита
"""

import ctypes
from typing import Final, Literal

from pydantic import BaseModel, Field

# =============================================================================
# EXCEPTIONS
# =============================================================================


class WidthResolutionError(ValueError):
    """
    Ошибка разрешения ширины целочисленного типа.

    Аналог ошибки компиляции: возникает при построении типа
    (размер вне [1, 8] байт, неподдерживаемая ширина для hash finalizer),
    никогда во время арифметики.
    """

    pass


# =============================================================================
# INT TYPE MODEL
# =============================================================================


class IntType(BaseModel):
    """
    Целочисленный тип фиксированной ширины.

    Immutable модель (frozen=True). Канонические экземпляры: UINT8..UINT64,
    INT8..INT64.
    """

    bits: Literal[8, 16, 32, 64] = Field(..., description="Ширина в битах")
    signed: bool = Field(False, description="Знаковый тип (two's complement)")

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def size_bytes(self) -> int:
        return self.bits // 8

    @property
    def mask(self) -> int:
        """Маска всех бит ширины (0xFF..FF)."""
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.mask

    @property
    def unsigned(self) -> "IntType":
        """Беззнаковый тип той же ширины."""
        return byte_size_uint(self.size_bytes)

    @property
    def signed_counterpart(self) -> "IntType":
        """Знаковый тип той же ширины."""
        return byte_size_int(self.size_bytes)

    def wrap(self, value: int) -> int:
        """
        Приведение произвольного int к значению этого типа.

        Эквивалент static_cast: берутся младшие `bits` бит, для signed
        типа старший бит интерпретируется как знак.

        Examples:
            >>> UINT8.wrap(256 + 5)
            5
            >>> INT8.wrap(0xFF)
            -1
            >>> UINT32.wrap(-1)
            4294967295
        """
        value &= self.mask
        if self.signed and value >> (self.bits - 1):
            value -= 1 << self.bits
        return value

    def to_unsigned(self, value: int) -> int:
        """Реинтерпретация значения как unsigned той же ширины."""
        return value & self.mask

    def contains(self, value: int) -> bool:
        """True если value представимо в типе без приведения."""
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return self.name


# =============================================================================
# CANONICAL TYPES
# =============================================================================

UINT8: Final[IntType] = IntType(bits=8, signed=False)
UINT16: Final[IntType] = IntType(bits=16, signed=False)
UINT32: Final[IntType] = IntType(bits=32, signed=False)
UINT64: Final[IntType] = IntType(bits=64, signed=False)

INT8: Final[IntType] = IntType(bits=8, signed=True)
INT16: Final[IntType] = IntType(bits=16, signed=True)
INT32: Final[IntType] = IntType(bits=32, signed=True)
INT64: Final[IntType] = IntType(bits=64, signed=True)

# Ширина адреса (size_t / uintptr_t)
SIZE_T: Final[IntType] = UINT64

# Индекс = количество байт - 1
_UINT_BY_SIZE: Final[tuple[IntType, ...]] = (
    UINT8, UINT16, UINT32, UINT32, UINT64, UINT64, UINT64, UINT64,
)
_INT_BY_SIZE: Final[tuple[IntType, ...]] = (
    INT8, INT16, INT32, INT32, INT64, INT64, INT64, INT64,
)

MIN_SIZE_BYTES: Final[int] = 1
MAX_SIZE_BYTES: Final[int] = len(_UINT_BY_SIZE)


# =============================================================================
# РАЗРЕШЕНИЕ ПО РАЗМЕРУ
# =============================================================================


def _check_size_bytes(size_bytes: int) -> int:
    if isinstance(size_bytes, bool) or not isinstance(size_bytes, int):
        raise WidthResolutionError(
            f"size_bytes must be an int, got {type(size_bytes).__name__}"
        )
    if not MIN_SIZE_BYTES <= size_bytes <= MAX_SIZE_BYTES:
        raise WidthResolutionError(
            f"size_bytes must be in [{MIN_SIZE_BYTES}, {MAX_SIZE_BYTES}], got {size_bytes}"
        )
    return size_bytes


def byte_size_uint(size_bytes: int) -> IntType:
    """
    Канонический unsigned тип минимальной ширины >= size_bytes байт.

    Args:
        size_bytes: Количество байт (1..8)

    Returns:
        UINT8 / UINT16 / UINT32 / UINT64

    Raises:
        WidthResolutionError: Если size_bytes вне [1, 8]

    Examples:
        >>> byte_size_uint(3).name
        'uint32'
        >>> byte_size_uint(5).name
        'uint64'
    """
    return _UINT_BY_SIZE[_check_size_bytes(size_bytes) - 1]


def byte_size_int(size_bytes: int) -> IntType:
    """
    Канонический signed тип минимальной ширины >= size_bytes байт.

    Raises:
        WidthResolutionError: Если size_bytes вне [1, 8]
    """
    return _INT_BY_SIZE[_check_size_bytes(size_bytes) - 1]


def size_of(type_: object) -> int:
    """
    Размер типа в байтах.

    Поддерживаются:
    - IntType (и любой объект с целочисленным атрибутом size_bytes)
    - ctypes типы (ctypes.c_uint16, ctypes.c_int64, ...)

    Raises:
        WidthResolutionError: Если размер типа определить нельзя
    """
    size_bytes = getattr(type_, "size_bytes", None)
    if isinstance(size_bytes, int) and not isinstance(size_bytes, bool):
        return size_bytes

    try:
        return ctypes.sizeof(type_)
    except TypeError as e:
        raise WidthResolutionError(f"Cannot resolve byte size of {type_!r}") from e


def to_uint(type_: object) -> IntType:
    """Unsigned тип той же ширины, что и type_ (через его размер в байтах)."""
    return byte_size_uint(size_of(type_))


def to_int(type_: object) -> IntType:
    """Signed тип той же ширины, что и type_ (через его размер в байтах)."""
    return byte_size_int(size_of(type_))


# =============================================================================
# СДВИГИ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================


def shift_left(value: int, amount: int, int_type: IntType) -> int:
    """
    Сдвиг влево в пределах ширины int_type.

    Нативный сдвиг на отрицательную величину или на >= bits не определён.
    Здесь оба случая определены явно и детерминированно:
    - amount < 0 → 0
    - amount >= bits → 0 (все биты вытеснены)

    Args:
        value: Сдвигаемое значение
        amount: Величина сдвига
        int_type: Ширина результата

    Returns:
        int_type.wrap(value << amount)
    """
    if amount < 0 or amount >= int_type.bits:
        return 0
    return int_type.wrap(value << amount)


# =============================================================================
# РАЗРЕШЕНИЕ ПО ИМЕНИ
# =============================================================================

INT_TYPES_BY_NAME: Final[dict[str, IntType]] = {
    t.name: t for t in (UINT8, UINT16, UINT32, UINT64, INT8, INT16, INT32, INT64)
}


def int_type_by_name(name: str) -> IntType:
    """
    Канонический тип по имени ('uint8' .. 'int64').

    Raises:
        WidthResolutionError: Если имя неизвестно
    """
    try:
        return INT_TYPES_BY_NAME[name]
    except KeyError:
        raise WidthResolutionError(
            f"Unknown integer type {name!r}, expected one of {sorted(INT_TYPES_BY_NAME)}"
        ) from None
