"""
Bit Count — Подсчёт бит (popcount, clz, ctz)

Две стратегии с единым контрактом:
- PortableBitCounter: переносимые битовые трюки
    popcount — параллельное суммирование (pairwise partial sums)
    clz      — "размазывание" старшего бита вправо, затем bits - popcount
    ctz      — popcount((x & -x) - 1)
- NativeBitCounter: нативный bit-scan интерпретатора
    (int.bit_count / int.bit_length)

КОНТРАКТ (обе стратегии совпадают бит-в-бит на любом входе):
- popcount32(x) ∈ [0, 32], popcount64(x) ∈ [0, 64]
- clz32(0) = 32, clz64(0) = 64
- ctz32(0) = 32, ctz64(0) = 64
- Вход приводится к ширине слова (UINT32 / UINT64)

Стратегия выбирается один раз при импорте (BitCountConfig, default AUTO);
модульные функции делегируют выбранной стратегии.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol, runtime_checkable

from xbits.core.domain.int_types import UINT32, UINT64

logger = logging.getLogger(__name__)

# =============================================================================
# CONFIG
# =============================================================================


class BitCountBackend(str, Enum):
    """Стратегия подсчёта бит"""

    AUTO = "auto"
    NATIVE = "native"
    PORTABLE = "portable"


@dataclass(frozen=True)
class BitCountConfig:
    """Конфигурация выбора стратегии подсчёта бит.

    AUTO → NATIVE если интерпретатор предоставляет int.bit_count,
    иначе PORTABLE.
    """

    backend: BitCountBackend = BitCountBackend.AUTO


@runtime_checkable
class BitCounter(Protocol):
    """Единый интерфейс стратегии подсчёта бит.

    Все реализации совпадают бит-в-бит на любом входе.
    """

    backend: BitCountBackend

    def popcount32(self, x: int) -> int: ...

    def popcount64(self, x: int) -> int: ...

    def clz32(self, x: int) -> int: ...

    def clz64(self, x: int) -> int: ...

    def ctz32(self, x: int) -> int: ...

    def ctz64(self, x: int) -> int: ...


# =============================================================================
# PORTABLE
# =============================================================================


class PortableBitCounter:
    """Переносимая реализация через битовые трюки."""

    backend: Final[BitCountBackend] = BitCountBackend.PORTABLE

    def popcount32(self, x: int) -> int:
        x = UINT32.wrap(x)
        x -= (x >> 1) & 0x55555555
        x = ((x >> 2) & 0x33333333) + (x & 0x33333333)
        x = ((x >> 4) + x) & 0x0F0F0F0F
        x += x >> 8
        x += x >> 16
        return x & 0x0000003F

    def popcount64(self, x: int) -> int:
        x = UINT64.wrap(x)
        x -= (x >> 1) & 0x5555555555555555
        x = ((x >> 2) & 0x3333333333333333) + (x & 0x3333333333333333)
        x = ((x >> 4) + x) & 0x0F0F0F0F0F0F0F0F
        x += x >> 8
        x += x >> 16
        x += x >> 32
        return x & 0x7F

    def clz32(self, x: int) -> int:
        x = UINT32.wrap(x)
        x |= x >> 1
        x |= x >> 2
        x |= x >> 4
        x |= x >> 8
        x |= x >> 16
        return 32 - self.popcount32(x)

    def clz64(self, x: int) -> int:
        x = UINT64.wrap(x)
        x |= x >> 1
        x |= x >> 2
        x |= x >> 4
        x |= x >> 8
        x |= x >> 16
        x |= x >> 32
        return 64 - self.popcount64(x)

    def ctz32(self, x: int) -> int:
        # x = 0: (0 & 0) - 1 → 0xFFFFFFFF → 32
        x = UINT32.wrap(x)
        return self.popcount32(UINT32.wrap((x & -x) - 1))

    def ctz64(self, x: int) -> int:
        x = UINT64.wrap(x)
        return self.popcount64(UINT64.wrap((x & -x) - 1))


# =============================================================================
# NATIVE
# =============================================================================


class NativeBitCounter:
    """Реализация через нативные операции int (bit-scan)."""

    backend: Final[BitCountBackend] = BitCountBackend.NATIVE

    def popcount32(self, x: int) -> int:
        return UINT32.wrap(x).bit_count()

    def popcount64(self, x: int) -> int:
        return UINT64.wrap(x).bit_count()

    def clz32(self, x: int) -> int:
        return 32 - UINT32.wrap(x).bit_length()

    def clz64(self, x: int) -> int:
        return 64 - UINT64.wrap(x).bit_length()

    def ctz32(self, x: int) -> int:
        x = UINT32.wrap(x)
        if x == 0:
            return 32
        return (x & -x).bit_length() - 1

    def ctz64(self, x: int) -> int:
        x = UINT64.wrap(x)
        if x == 0:
            return 64
        return (x & -x).bit_length() - 1


# =============================================================================
# ВЫБОР СТРАТЕГИИ
# =============================================================================


def native_available() -> bool:
    """True если интерпретатор поддерживает int.bit_count (Python 3.10+)."""
    return hasattr(int, "bit_count")


def select_bit_counter(config: BitCountConfig | None = None) -> BitCounter:
    """
    Выбор стратегии подсчёта бит.

    Args:
        config: Конфигурация (опционально, default AUTO)

    Returns:
        Экземпляр выбранной стратегии

    Raises:
        RuntimeError: Если NATIVE запрошен явно, но недоступен
    """
    config = config or BitCountConfig()
    requested = BitCountBackend(config.backend)
    backend = requested

    if backend is BitCountBackend.AUTO:
        backend = BitCountBackend.NATIVE if native_available() else BitCountBackend.PORTABLE

    if backend is BitCountBackend.NATIVE:
        if not native_available():
            raise RuntimeError("Native bit counting requires int.bit_count (Python 3.10+)")
        counter: BitCounter = NativeBitCounter()
    else:
        counter = PortableBitCounter()

    logger.debug("Bit counter backend selected: %s (requested %s)", backend.value, requested.value)
    return counter


# Стратегия, выбранная один раз при импорте
_BIT_COUNTER: Final[BitCounter] = select_bit_counter()


def get_bit_counter() -> BitCounter:
    """Стратегия, используемая модульными функциями."""
    return _BIT_COUNTER


# =============================================================================
# ЕДИНЫЙ ИНТЕРФЕЙС
# =============================================================================


def population_count_32(x: int) -> int:
    """
    Количество установленных бит в 32-битном слове.

    Examples:
        >>> population_count_32(0xFFFFFFFF)
        32
        >>> population_count_32(16)
        1
    """
    return _BIT_COUNTER.popcount32(x)


def population_count_64(x: int) -> int:
    return _BIT_COUNTER.popcount64(x)


def count_leading_zeros_32(x: int) -> int:
    """
    Количество нулевых бит выше старшего установленного. 32 для x = 0.

    Examples:
        >>> count_leading_zeros_32(16)
        27
    """
    return _BIT_COUNTER.clz32(x)


def count_leading_zeros_64(x: int) -> int:
    return _BIT_COUNTER.clz64(x)


def count_trailing_zeros_32(x: int) -> int:
    """
    Количество нулевых бит ниже младшего установленного. 32 для x = 0.

    Examples:
        >>> count_trailing_zeros_32(16)
        4
    """
    return _BIT_COUNTER.ctz32(x)


def count_trailing_zeros_64(x: int) -> int:
    return _BIT_COUNTER.ctz64(x)
