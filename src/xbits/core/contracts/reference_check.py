"""
Reference Check — Проверка примитивов по эталонным векторам

Эталонные векторы (contracts/vectors/*.json) фиксируют точные значения:
- таблица log2_round_up (0..13, 1023, 1024)
- regression pins MurmurHash3 finalizer (fmix32 / fmix64)
- сценарии выравнивания, флагов и подсчёта бит

Векторы подсчёта бит выполняются на переданной стратегии BitCounter,
поэтому одна и та же проверка применима к PORTABLE и NATIVE.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Файл векторов, не прошедший JSON Schema, не исполняется
2. Неизвестная операция → ValueError (а не пропуск)
3. Сравнение строгое: bool и int различаются
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict

from pydantic import BaseModel, Field, field_validator

from xbits.core.contracts.validators import VECTORS_DIR, load_vector_file
from xbits.core.domain.int_types import IntType, int_type_by_name
from xbits.core.math.alignment import align_down, align_up, is_aligned
from xbits.core.math.bit_count import BitCounter, get_bit_counter
from xbits.core.math.flags import (
    flag_is_on,
    flag_off,
    flag_on,
    flag_toggle,
    flags_are_on,
)
from xbits.core.math.murmur import fmix32, fmix64, murmur_hash3_finalize
from xbits.core.math.pow2 import (
    is_divisible_by_power_of_two,
    is_power_of_two,
    log2_floor,
    log2_round_up,
    round_up_to_power_of_two,
    shift_left_pow2,
)

logger = logging.getLogger(__name__)


def _parse_int(value: Any) -> Any:
    """'0x..' → int; остальные значения без изменений."""
    if isinstance(value, str):
        return int(value, 16)
    return value


# =============================================================================
# MODELS
# =============================================================================


class ReferenceVector(BaseModel):
    """Один эталонный вектор: операция, аргументы, ожидаемый результат."""

    operation: str = Field(..., min_length=1)
    args: list[int] = Field(..., min_length=1)
    int_type: IntType | None = Field(None, description="Ширина (опционально)")
    expected: bool | int

    model_config = {"frozen": True}

    @field_validator("args", mode="before")
    @classmethod
    def parse_hex_args(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [_parse_int(item) for item in v]
        return v

    @field_validator("expected", mode="before")
    @classmethod
    def parse_hex_expected(cls, v: Any) -> Any:
        return _parse_int(v)

    @field_validator("int_type", mode="before")
    @classmethod
    def resolve_int_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return int_type_by_name(v)
        return v


class ReferenceSuite(BaseModel):
    """Набор векторов из одного файла."""

    suite: str
    description: str = ""
    vectors: list[ReferenceVector]

    model_config = {"frozen": True}


class VectorMismatch(BaseModel):
    """Расхождение результата с эталоном."""

    suite: str
    operation: str
    args: list[int]
    expected: bool | int
    actual: bool | int

    model_config = {"frozen": True}


class VerificationReport(BaseModel):
    """Результат проверки по эталонным векторам."""

    backend: str
    checked: int = Field(..., ge=0)
    mismatches: list[VectorMismatch] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def passed(self) -> bool:
        return not self.mismatches


# =============================================================================
# OPERATIONS
# =============================================================================

_WIDTH_AWARE_OPERATIONS: Dict[str, Callable[..., Any]] = {
    "align_up": align_up,
    "align_down": align_down,
    "is_aligned": is_aligned,
    "shift_left_pow2": shift_left_pow2,
    "round_up_to_power_of_two": round_up_to_power_of_two,
    "is_divisible_by_power_of_two": is_divisible_by_power_of_two,
    "murmur_hash3_finalize": murmur_hash3_finalize,
}

_PLAIN_OPERATIONS: Dict[str, Callable[..., Any]] = {
    "flag_toggle": flag_toggle,
    "flag_on": flag_on,
    "flag_off": flag_off,
    "flag_is_on": flag_is_on,
    "flags_are_on": flags_are_on,
    "log2_floor": log2_floor,
    "log2_round_up": log2_round_up,
    "is_power_of_two": is_power_of_two,
    "fmix32": fmix32,
    "fmix64": fmix64,
}

_BIT_COUNT_OPERATIONS = ("popcount32", "popcount64", "clz32", "clz64", "ctz32", "ctz64")


def evaluate_vector(vector: ReferenceVector, counter: BitCounter | None = None) -> bool | int:
    """
    Вычисление операции вектора.

    Args:
        vector: Эталонный вектор
        counter: Стратегия подсчёта бит (default: стратегия модуля)

    Returns:
        Фактический результат операции

    Raises:
        ValueError: Если операция неизвестна или int_type не применим
    """
    op = vector.operation

    if op in _BIT_COUNT_OPERATIONS:
        counter = counter or get_bit_counter()
        return getattr(counter, op)(*vector.args)

    if op in _WIDTH_AWARE_OPERATIONS:
        fn = _WIDTH_AWARE_OPERATIONS[op]
        if vector.int_type is not None:
            return fn(*vector.args, int_type=vector.int_type)
        return fn(*vector.args)

    if op in _PLAIN_OPERATIONS:
        if vector.int_type is not None:
            raise ValueError(f"Operation {op!r} does not take int_type")
        return _PLAIN_OPERATIONS[op](*vector.args)

    raise ValueError(f"Unknown reference operation: {op!r}")


# =============================================================================
# LOADING & VERIFICATION
# =============================================================================


def load_reference_vectors(vectors_dir: Path = VECTORS_DIR) -> list[ReferenceSuite]:
    """
    Загрузка всех файлов эталонных векторов (*.json, в порядке имён).

    Каждый файл валидируется JSON Schema до построения моделей.

    Raises:
        jsonschema.ValidationError: Если файл не соответствует схеме
        FileNotFoundError: Если каталог не содержит векторов
    """
    paths = sorted(Path(vectors_dir).glob("*.json"))
    if not paths:
        raise FileNotFoundError(f"No reference vectors found in {vectors_dir}")

    return [ReferenceSuite.model_validate(load_vector_file(path)) for path in paths]


def verify_reference_vectors(
    suites: list[ReferenceSuite] | None = None,
    counter: BitCounter | None = None,
) -> VerificationReport:
    """
    Проверка примитивов по эталонным векторам.

    Args:
        suites: Наборы векторов (default: поставляемые с пакетом)
        counter: Стратегия подсчёта бит (default: стратегия модуля)

    Returns:
        VerificationReport со всеми расхождениями
    """
    suites = load_reference_vectors() if suites is None else suites
    counter = counter or get_bit_counter()

    checked = 0
    mismatches: list[VectorMismatch] = []

    for suite in suites:
        for vector in suite.vectors:
            actual = evaluate_vector(vector, counter)
            checked += 1
            # bool является подклассом int: True == 1, поэтому сравниваем и тип
            if type(actual) is not type(vector.expected) or actual != vector.expected:
                mismatches.append(
                    VectorMismatch(
                        suite=suite.suite,
                        operation=vector.operation,
                        args=vector.args,
                        expected=vector.expected,
                        actual=actual,
                    )
                )

    report = VerificationReport(
        backend=counter.backend.value,
        checked=checked,
        mismatches=mismatches,
    )
    logger.debug(
        "Reference vectors verified: backend=%s checked=%d mismatches=%d",
        report.backend,
        report.checked,
        len(report.mismatches),
    )
    return report
