"""
Tests for Reference Vector Contracts

Комплексное тестирование эталонных векторов:
- Валидность самой JSON Schema
- Валидность поставляемых файлов векторов
- Детекция нарушений схемы (required, enum, pattern)
- Разбор hex-значений и int_type в моделях
- Проверка примитивов по векторам для обеих стратегий подсчёта бит
"""

import json
import logging
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from xbits.core.contracts import (
    ReferenceSuite,
    ReferenceVector,
    ReferenceVectorsValidator,
    SchemaLoader,
    evaluate_vector,
    load_reference_vectors,
    load_vector_file,
    validate_reference_vectors,
    verify_reference_vectors,
)
from xbits.core.contracts.validators import SCHEMA_DIR, VECTORS_DIR
from xbits.core.domain.int_types import INT32, WidthResolutionError
from xbits.core.math.bit_count import NativeBitCounter, PortableBitCounter

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_vectors():
    """Валидный файл векторов."""
    return {
        "schema_version": "1",
        "suite": "sample",
        "description": "sample vectors",
        "vectors": [
            {"operation": "align_up", "args": [57, 16], "expected": 64},
            {"operation": "is_aligned", "args": [64, 16], "expected": True},
            {"operation": "fmix32", "args": ["0x12345678"], "expected": "0xe37cd1bc"},
            {"operation": "align_down", "args": [-5, 8], "int_type": "int32", "expected": -8},
        ],
    }


@pytest.fixture
def vectors_dir(tmp_path: Path, valid_vectors) -> Path:
    """Каталог с одним файлом векторов."""
    (tmp_path / "sample.json").write_text(json.dumps(valid_vectors), encoding="utf-8")
    return tmp_path


# =============================================================================
# ТЕСТЫ СХЕМЫ
# =============================================================================


class TestSchema:
    """Тесты для JSON Schema эталонных векторов"""

    def test_schema_is_valid(self) -> None:
        """Схема проходит meta-validation"""
        schema = SchemaLoader().load_schema("reference_vectors")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает кэш"""
        loader = SchemaLoader()
        assert loader.load_schema("reference_vectors") is loader.load_schema("reference_vectors")

    def test_missing_schema(self) -> None:
        """Несуществующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("missing")

    def test_missing_schema_dir(self, tmp_path: Path) -> None:
        """Несуществующий каталог схем → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        """Невалидная схема → ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_schema_dir_shipped(self) -> None:
        """Схемы и векторы поставляются внутри пакета"""
        assert (SCHEMA_DIR / "reference_vectors.json").exists()
        assert sorted(p.name for p in VECTORS_DIR.glob("*.json")) == [
            "alignment.json",
            "bit_count.json",
            "flags.json",
            "murmur.json",
            "pow2.json",
        ]


class TestVectorValidation:
    """Тесты для валидации файлов векторов"""

    def test_valid_data(self, valid_vectors) -> None:
        """Валидные данные проходят"""
        validate_reference_vectors(valid_vectors)
        assert ReferenceVectorsValidator().is_valid(valid_vectors)

    def test_missing_required(self, valid_vectors) -> None:
        """Отсутствие required поля"""
        del valid_vectors["vectors"]
        with pytest.raises(ValidationError, match="'vectors' is a required property"):
            validate_reference_vectors(valid_vectors)

    def test_unknown_operation(self, valid_vectors) -> None:
        """Операция вне enum"""
        valid_vectors["vectors"][0]["operation"] = "rotate_left"
        assert not ReferenceVectorsValidator().is_valid(valid_vectors)

    def test_bad_hex_string(self, valid_vectors) -> None:
        """Строка аргумента должна быть hex"""
        valid_vectors["vectors"][0]["args"] = ["57"]
        assert not ReferenceVectorsValidator().is_valid(valid_vectors)

    def test_unknown_int_type(self, valid_vectors) -> None:
        """int_type вне enum"""
        valid_vectors["vectors"][0]["int_type"] = "uint128"
        assert not ReferenceVectorsValidator().is_valid(valid_vectors)

    def test_too_many_args(self, valid_vectors) -> None:
        """Не более 2 аргументов"""
        valid_vectors["vectors"][0]["args"] = [1, 2, 3]
        assert not ReferenceVectorsValidator().is_valid(valid_vectors)

    def test_iter_errors(self, valid_vectors) -> None:
        """Все ошибки перечисляются"""
        valid_vectors["schema_version"] = "2"
        valid_vectors["vectors"][0]["operation"] = "nope"
        errors = list(ReferenceVectorsValidator().iter_errors(valid_vectors))
        assert len(errors) == 2

    def test_shipped_files_valid(self) -> None:
        """Все поставляемые файлы проходят схему"""
        for path in VECTORS_DIR.glob("*.json"):
            load_vector_file(path)


# =============================================================================
# ТЕСТЫ МОДЕЛЕЙ
# =============================================================================


class TestReferenceModels:
    """Тесты для ReferenceVector / ReferenceSuite"""

    def test_hex_parsing(self) -> None:
        """Hex-строки разбираются в int"""
        vector = ReferenceVector(operation="fmix32", args=["0x12345678"], expected="0xe37cd1bc")
        assert vector.args == [0x12345678]
        assert vector.expected == 0xE37CD1BC

    def test_negative_hex(self) -> None:
        """Отрицательные hex-строки"""
        vector = ReferenceVector(operation="log2_floor", args=["-0x10"], expected=0)
        assert vector.args == [-16]

    def test_bool_expected_preserved(self) -> None:
        """bool не превращается в int"""
        vector = ReferenceVector(operation="is_aligned", args=[64, 16], expected=True)
        assert vector.expected is True

        vector = ReferenceVector(operation="log2_floor", args=[2], expected=1)
        assert type(vector.expected) is int

    def test_int_type_resolved(self) -> None:
        """int_type разрешается по имени"""
        vector = ReferenceVector(operation="align_up", args=[1, 8], int_type="int32", expected=8)
        assert vector.int_type == INT32

    def test_unknown_int_type(self) -> None:
        """Неизвестное имя типа → ошибка разрешения"""
        with pytest.raises((WidthResolutionError, ValueError)):
            ReferenceVector(operation="align_up", args=[1, 8], int_type="uint7", expected=8)

    def test_suite_from_file(self, vectors_dir: Path) -> None:
        """Набор строится из файла"""
        suites = load_reference_vectors(vectors_dir)
        assert len(suites) == 1
        assert suites[0].suite == "sample"
        assert len(suites[0].vectors) == 4

    def test_empty_dir(self, tmp_path: Path) -> None:
        """Пустой каталог → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="No reference vectors"):
            load_reference_vectors(tmp_path)

    def test_invalid_file_not_executed(self, tmp_path: Path) -> None:
        """Файл, не прошедший схему, отклоняется до построения моделей"""
        (tmp_path / "bad.json").write_text(json.dumps({"suite": "bad"}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_reference_vectors(tmp_path)


# =============================================================================
# ТЕСТЫ ВЫЧИСЛЕНИЯ
# =============================================================================


class TestEvaluateVector:
    """Тесты для evaluate_vector"""

    def test_width_aware(self) -> None:
        """Операция с int_type"""
        vector = ReferenceVector(operation="align_down", args=[-5, 8], int_type="int32", expected=-8)
        assert evaluate_vector(vector) == -8

    def test_bit_count_on_given_counter(self) -> None:
        """Операции подсчёта бит используют переданную стратегию"""
        vector = ReferenceVector(operation="ctz32", args=[0], expected=32)
        assert evaluate_vector(vector, PortableBitCounter()) == 32
        assert evaluate_vector(vector, NativeBitCounter()) == 32

    def test_unknown_operation(self) -> None:
        """Неизвестная операция → ValueError"""
        vector = ReferenceVector(operation="rotate_left", args=[1], expected=0)
        with pytest.raises(ValueError, match="Unknown reference operation"):
            evaluate_vector(vector)

    def test_int_type_on_plain_operation(self) -> None:
        """int_type для операции без ширины → ValueError"""
        vector = ReferenceVector(operation="fmix32", args=[1], int_type="uint32", expected=0)
        with pytest.raises(ValueError, match="does not take int_type"):
            evaluate_vector(vector)


# =============================================================================
# ТЕСТЫ ПРОВЕРКИ
# =============================================================================


class TestVerifyReferenceVectors:
    """Тесты для verify_reference_vectors"""

    @pytest.mark.parametrize("counter_cls", [PortableBitCounter, NativeBitCounter])
    def test_shipped_vectors_pass(self, counter_cls) -> None:
        """Поставляемые векторы проходят для обеих стратегий"""
        report = verify_reference_vectors(counter=counter_cls())

        assert report.passed, report.mismatches
        assert report.checked > 0
        assert report.backend == counter_cls.backend.value

    def test_default_counter(self) -> None:
        """По умолчанию — стратегия модуля"""
        report = verify_reference_vectors()
        assert report.passed

    def test_mismatch_reported(self) -> None:
        """Расхождение попадает в отчёт"""
        suite = ReferenceSuite(
            suite="broken",
            vectors=[
                ReferenceVector(operation="align_up", args=[57, 16], expected=63),
                ReferenceVector(operation="align_up", args=[57, 16], expected=64),
            ],
        )
        report = verify_reference_vectors([suite])

        assert not report.passed
        assert report.checked == 2
        assert len(report.mismatches) == 1
        mismatch = report.mismatches[0]
        assert mismatch.suite == "broken"
        assert mismatch.expected == 63
        assert mismatch.actual == 64

    def test_bool_int_distinguished(self) -> None:
        """True и 1 различаются"""
        suite = ReferenceSuite(
            suite="strict",
            vectors=[ReferenceVector(operation="is_aligned", args=[64, 16], expected=1)],
        )
        assert not verify_reference_vectors([suite]).passed

    def test_summary_logged(self, caplog) -> None:
        """Итог проверки логируется на уровне DEBUG"""
        with caplog.at_level(logging.DEBUG, logger="xbits.core.contracts.reference_check"):
            verify_reference_vectors()

        assert "Reference vectors verified" in caplog.text
