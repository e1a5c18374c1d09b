from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from student_tuition.config import CURRENCY_SYMBOL


@dataclass(frozen=True)
class StudentId:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CourseName:
    """Название курса. Принимается как есть, без проверок."""

    value: str


@dataclass(frozen=True)
class Money:
    """Денежная сумма со знаком. Отрицательная сумма означает переплату."""

    amount: Decimal = field(default_factory=Decimal)

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not self.amount.is_finite():
            raise ValueError("Сумма должна быть конечным числом.")

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError("Можно вычитать только объекты Money")
        return Money(self.amount - other.amount)

    def __str__(self) -> str:
        # 50.00 -> "50", 12.50 -> "12.5", 1E+2 -> "100"
        amount = self.amount.normalize()
        if amount == 0:
            amount = Decimal(0)
        return f"{amount:f}"

    def display(self) -> str:
        """Сумма с символом валюты, например ``$-50``."""
        return f"{CURRENCY_SYMBOL}{self}"
