"""
Pow2 — Арифметика степеней двойки

- shift_left_pow2: 2**n через сдвиг
- log2_floor / log2_round_up: целочисленный log2
- is_power_of_two, round_up_to_power_of_two
- is_divisible_by_power_of_two

КОНВЕНЦИИ (сохраняются намеренно):
1. log2_floor(x) = 0 для x <= 1, включая x = 0 (математически не определено).
   log2_round_up опирается на эту конвенцию: log2_round_up(0) = 0.
2. Сдвиги вне [0, bits) не бросают исключений: результат детерминирован
   (см. int_types.shift_left), но не имеет смысла. Проверка диапазона —
   ответственность вызывающей стороны.

ЭТАЛОННАЯ ТАБЛИЦА log2_round_up:
    x:      0 1 2 3 4 5 6 7 8 9 .. 13 1023 1024
    result: 0 1 2 2 3 3 3 3 4 4 .. 4  10   11
"""

from typing import Final

from xbits.core.domain.int_types import INT32, UINT64, IntType, shift_left

LOG2_ROUND_UP_TABLE: Final[dict[int, int]] = {
    0: 0,
    1: 1,
    2: 2,
    3: 2,
    4: 3,
    5: 3,
    6: 3,
    7: 3,
    8: 4,
    9: 4,
    10: 4,
    11: 4,
    12: 4,
    13: 4,
    1023: 10,
    1024: 11,
}


def shift_left_pow2(n: int, int_type: IntType = INT32) -> int:
    """
    2 в степени n как значение int_type.

    ВНИМАНИЕ: требуется 0 <= n < int_type.bits. Вне диапазона результат
    не определён (здесь: 0), безопасного fallback нет.

    Examples:
        >>> shift_left_pow2(10)
        1024
        >>> shift_left_pow2(31)
        -2147483648
    """
    return shift_left(1, n, int_type)


def log2_floor(x: int) -> int:
    """
    floor(log2(x)) для x >= 1.

    Вычисляется последовательными сдвигами вправо до x <= 1.
    Для x <= 1 (включая 0 и отрицательные) возвращает 0 по конвенции.

    Examples:
        >>> log2_floor(1)
        0
        >>> log2_floor(1023)
        9
        >>> log2_floor(0)
        0
    """
    p = 0
    while x > 1:
        x >>= 1
        p += 1
    return p


def log2_round_up(x: int) -> int:
    """
    Количество бит, необходимое для представления x.

    0 если x < 1, иначе log2_floor(x) + 1.

    Examples:
        >>> log2_round_up(1024)
        11
        >>> log2_round_up(3)
        2
    """
    return 0 if x < 1 else log2_floor(x) + 1


def is_power_of_two(x: int) -> bool:
    """
    True если x — степень двойки.

    0 и отрицательные значения → False.
    """
    return x > 0 and ((x - 1) & x) == 0


def round_up_to_power_of_two(x: int, int_type: IntType = UINT64) -> int:
    """
    Наименьшая степень двойки >= x.

    Алгоритм: старший установленный бит (x - 1) "размазывается" вправо
    сдвигами на bits/2, bits/4, ..., 1, затем прибавляется 1.
    Количество шагов — log2(bits).

    x = 0 → 0. Степень двойки отображается сама в себя.
    Если результат не помещается в int_type, он приводится через wrap().

    Examples:
        >>> round_up_to_power_of_two(5)
        8
        >>> round_up_to_power_of_two(8)
        8
        >>> round_up_to_power_of_two(0)
        0
    """
    if x == 0:
        return 0

    unsigned_t = int_type.unsigned
    v = unsigned_t.wrap(x - 1)
    s = int_type.bits >> 1
    while s:
        v |= v >> s
        s >>= 1
    return int_type.wrap(v + 1)


def is_divisible_by_power_of_two(n: int, x: int, int_type: IntType = UINT64) -> bool:
    """
    True если n делится на 2**x.

    Вычисляется как (n & ((1 << x) - 1)) == 0 в ширине int_type.
    x = 0 → всегда True.

    Examples:
        >>> is_divisible_by_power_of_two(48, 4)
        True
        >>> is_divisible_by_power_of_two(40, 4)
        False
    """
    unsigned_t = int_type.unsigned
    mask = unsigned_t.wrap(shift_left(1, x, unsigned_t) - 1)
    return (unsigned_t.wrap(n) & mask) == 0
