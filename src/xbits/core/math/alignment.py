"""
Alignment — Выравнивание по границе степени двойки

Выравнивание целых чисел и адресов вверх/вниз, проверка выравнивания.

ФОРМУЛЫ (в беззнаковой арифметике ширины int_type):
    align_up(a, n)   = (a + n - 1) & -n
    align_down(a, n) = a & -n
    is_aligned(a, n) = (a & (n - 1)) == 0

ПРЕДУСЛОВИЯ (НЕ проверяются в runtime):
- align_to — степень двойки >= 1; иначе результат не определён,
  но детерминирован ("garbage in, garbage out", без исключений)
- Переполнение у верхней границы диапазона не защищено: ширину
  int_type выбирает вызывающая сторона

Адресные формы не выполняют арифметику над Address напрямую:
значение адреса проходит через целочисленную форму и обратно.
"""

from xbits.core.domain.address import Address
from xbits.core.domain.int_types import SIZE_T, IntType

# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ФОРМЫ
# =============================================================================


def align_up(address: int, align_to: int, int_type: IntType = SIZE_T) -> int:
    """
    Наименьшее кратное align_to, которое >= address.

    Signed значения реинтерпретируются как unsigned той же ширины,
    результат реинтерпретируется обратно в int_type.

    Args:
        address: Выравниваемое значение
        align_to: Граница (степень двойки >= 1)
        int_type: Ширина арифметики (default: SIZE_T)

    Returns:
        Выровненное вверх значение

    Examples:
        >>> align_up(57, 16)
        64
        >>> align_up(64, 16)
        64
        >>> align_up(0, 16)
        0
    """
    unsigned_t = int_type.unsigned
    value = unsigned_t.wrap(address)
    mask = unsigned_t.wrap(-align_to)
    return int_type.wrap((value + unsigned_t.wrap(align_to - 1)) & mask)


def align_down(address: int, align_to: int, int_type: IntType = SIZE_T) -> int:
    """
    Наибольшее кратное align_to, которое <= address.

    Examples:
        >>> align_down(57, 16)
        48
        >>> align_down(48, 16)
        48
    """
    unsigned_t = int_type.unsigned
    return int_type.wrap(unsigned_t.wrap(address) & unsigned_t.wrap(-align_to))


def is_aligned(address: int, align_to: int, int_type: IntType = SIZE_T) -> bool:
    """
    True если address кратен align_to.

    align_to = 1 → всегда True; address = 0 → True для любой степени двойки.

    Examples:
        >>> is_aligned(64, 16)
        True
        >>> is_aligned(57, 16)
        False
    """
    unsigned_t = int_type.unsigned
    return (unsigned_t.wrap(address) & unsigned_t.wrap(align_to - 1)) == 0


# =============================================================================
# АДРЕСНЫЕ ФОРМЫ
# =============================================================================


def align_address_up(address: Address, align_to: int) -> Address:
    """Адрес, выровненный вверх; referent сохраняется."""
    return address.with_value(align_up(address.value, align_to, address.pointer_type))


def align_address_down(address: Address, align_to: int) -> Address:
    """Адрес, выровненный вниз; referent сохраняется."""
    return address.with_value(align_down(address.value, align_to, address.pointer_type))


def is_address_aligned(address: Address, align_to: int) -> bool:
    return is_aligned(address.value, align_to, address.pointer_type)
