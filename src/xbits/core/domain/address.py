"""
Address — Модель адреса памяти

Immutable Pydantic модель: числовое значение адреса + тип объекта,
на который он указывает (referent). Аналог типизированного указателя.

Арифметика над адресом напрямую НЕ выполняется: выравнивание всегда
идёт через целочисленную форму (см. xbits.core.math.alignment).
"""

from pydantic import BaseModel, Field, model_validator

from xbits.core.domain.int_types import SIZE_T, IntType


class Address(BaseModel):
    """
    Адрес памяти.

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр
    с тем же referent и pointer_type.
    """

    value: int = Field(..., ge=0, description="Числовое значение адреса")
    referent: str = Field("void", min_length=1, description="Тип объекта по адресу")
    pointer_type: IntType = Field(SIZE_T, description="Ширина адреса (uintptr_t)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_pointer_width(self) -> "Address":
        """Адрес беззнаковый и помещается в pointer_type."""
        if self.pointer_type.signed:
            raise ValueError(f"pointer_type must be unsigned, got {self.pointer_type}")
        if self.value > self.pointer_type.max_value:
            raise ValueError(
                f"address {self.value:#x} does not fit {self.pointer_type}"
            )
        return self

    def with_value(self, value: int) -> "Address":
        """Новый адрес с тем же referent."""
        return Address(value=value, referent=self.referent, pointer_type=self.pointer_type)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"({self.referent}*){self.value:#x}"
