"""
Команды и DTO прикладного слоя.

Команды проверяют входные данные на границе приложения, DTO отдают
состояние агрегата наружу, не раскрывая сам агрегат.
"""

import logging
from decimal import Decimal
from typing import List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from student_tuition.config import (
    PAYMENT_MAX_DECIMAL_PLACES,
    PAYMENT_MAX_INTEGER_DIGITS,
)
from student_tuition.domain.exceptions import InvalidPaymentAmountException

logger = logging.getLogger(__name__)


class RegisterStudentCommand(BaseModel):
    """Команда регистрации студента. Имя не проверяется."""

    name: str


class EnrollCourseCommand(BaseModel):
    """Команда записи студента на курс."""

    student_id: int
    course: str


class PayTuitionCommand(BaseModel):
    """Команда оплаты обучения."""

    student_id: int
    amount: Decimal = Field(..., description="Сумма платежа, может быть отрицательной")

    @field_validator("amount")
    @classmethod
    def amount_must_fit_balance(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("Сумма платежа должна быть конечным числом")
        # as_tuple не зависит от контекста Decimal, поэтому огромный порядок
        # (например 1e999999999) не вызывает Overflow при проверке
        _, digits, exponent = v.as_tuple()
        if not any(digits):
            return v
        digits = list(digits)
        while len(digits) > 1 and digits[-1] == 0 and exponent < 0:
            digits.pop()
            exponent += 1
        if -exponent > PAYMENT_MAX_DECIMAL_PLACES:
            raise ValueError(
                f"Не больше {PAYMENT_MAX_DECIMAL_PLACES} знаков после запятой"
            )
        if len(digits) + exponent > PAYMENT_MAX_INTEGER_DIGITS:
            raise ValueError(
                f"Не больше {PAYMENT_MAX_INTEGER_DIGITS} цифр в целой части"
            )
        return v


class StudentDTO(BaseModel):
    """DTO для представления данных студента."""

    id: int
    name: str
    enrolled_courses: List[str] = Field(default_factory=list)
    balance: Decimal


class PaymentReceiptDTO(BaseModel):
    """DTO подтверждения платежа."""

    student_id: int
    amount: Decimal
    balance: Decimal


def build_payment_command(
    student_id: int, raw_amount: Union[str, Decimal]
) -> PayTuitionCommand:
    """Создает команду оплаты из введенной строки.

    Raises:
        InvalidPaymentAmountException: если строка не является конечным числом.
    """
    if isinstance(raw_amount, str):
        raw_amount = raw_amount.strip()
    try:
        return PayTuitionCommand(student_id=student_id, amount=raw_amount)
    except ValidationError as e:
        logger.info("Отклонена сумма платежа %r", raw_amount)
        raise InvalidPaymentAmountException(str(raw_amount)) from e
