"""
Flags — Операции над битовыми флагами

Маска F — 32-битное слово: биты маски обозначают интересующие позиции.
Перед использованием маска приводится к UINT32.

Чистые функции: возвращают новое значение, аргумент не изменяется.
In-place форма — xbits.core.domain.flag_word.FlagWord.

ВЫРОЖДЕННАЯ МАСКА F = 0 (сохраняется в точности):
- flag_toggle / flag_on / flag_off → значение без изменений
- flag_is_on → всегда False
- flags_are_on → всегда True ("нет ограничений")
"""

from xbits.core.domain.int_types import UINT32


def flag_toggle(n: int, f: int) -> int:
    """N xor F."""
    return n ^ UINT32.wrap(f)


def flag_on(n: int, f: int) -> int:
    """N or F."""
    return n | UINT32.wrap(f)


def flag_off(n: int, f: int) -> int:
    """N and (not F)."""
    return n & ~UINT32.wrap(f)


def flag_is_on(n: int, f: int) -> bool:
    """
    True если в N установлен ХОТЯ БЫ ОДИН бит из F.

    Examples:
        >>> flag_is_on(0b0101, 0b0110)
        True
        >>> flag_is_on(0b0101, 0)
        False
    """
    return (n & UINT32.wrap(f)) != 0


def flags_are_on(n: int, f: int) -> bool:
    """
    True если в N установлены ВСЕ биты из F.

    Examples:
        >>> flags_are_on(0b0111, 0b0110)
        True
        >>> flags_are_on(0b0101, 0b0110)
        False
        >>> flags_are_on(0, 0)
        True
    """
    mask = UINT32.wrap(f)
    return (n & mask) == mask
