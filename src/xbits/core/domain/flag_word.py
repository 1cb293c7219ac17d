"""
FlagWord — Изменяемое слово флагов

Python int неизменяем, поэтому in-place мутаторы (toggle/on/off)
работают над держателем значения. Чистые функции над int —
в xbits.core.math.flags.

Параллельное изменение одного FlagWord из нескольких потоков требует
внешней синхронизации (как и для любой переменной).
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from xbits.core.domain.int_types import UINT32, IntType
from xbits.core.math.flags import (
    flag_is_on,
    flag_off,
    flag_on,
    flag_toggle,
    flags_are_on,
)


class FlagWord(BaseModel):
    """
    Слово флагов фиксированной ширины.

    Значение всегда приведено к int_type: validate_assignment=True,
    поэтому приведение выполняется и при каждом присваивании value.
    int_type задаётся только при создании (frozen), иначе уже
    сохранённое value вышло бы за ширину нового типа.
    """

    # int_type объявлен первым: валидатор value читает его из info.data
    int_type: IntType = Field(UINT32, frozen=True, description="Ширина слова")
    value: int = Field(0, description="Текущие биты")

    model_config = {"validate_assignment": True}

    @field_validator("value")
    @classmethod
    def wrap_value(cls, v: int, info: ValidationInfo) -> int:
        int_type = info.data.get("int_type", UINT32)
        return int_type.wrap(v)

    def toggle(self, mask: int) -> None:
        self.value = flag_toggle(self.value, mask)

    def on(self, mask: int) -> None:
        self.value = flag_on(self.value, mask)

    def off(self, mask: int) -> None:
        self.value = flag_off(self.value, mask)

    def is_on(self, mask: int) -> bool:
        """True если установлен ХОТЯ БЫ ОДИН бит mask."""
        return flag_is_on(self.value, mask)

    def are_on(self, mask: int) -> bool:
        """True если установлены ВСЕ биты mask."""
        return flags_are_on(self.value, mask)

    def __int__(self) -> int:
        return self.value
