from decimal import Decimal

import pytest

from student_tuition.domain.value_objects import CourseName, Money, StudentId


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("50"), "50"),
        (Decimal("-50"), "-50"),
        (Decimal("12.50"), "12.5"),
        (Decimal("1E+2"), "100"),
        (Decimal("0.00"), "0"),
        (Decimal("-0"), "0"),
        (Decimal("0.125"), "0.125"),
    ],
)
def test_money_string_form(amount, expected):
    """Тест: сумма выводится без экспоненты и лишних нулей."""
    assert str(Money(amount)) == expected


def test_money_display_uses_currency_symbol():
    assert Money(Decimal("-50")).display() == "$-50"


def test_money_default_is_zero():
    assert Money().amount == Decimal("0")


def test_money_subtraction():
    assert Money(Decimal("10")) - Money(Decimal("15")) == Money(Decimal("-5"))


def test_money_converts_plain_numbers():
    assert Money(7).amount == Decimal("7")


@pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("Infinity")])
def test_money_rejects_non_finite_amounts(amount):
    """Тест: NaN и бесконечность не могут попасть в баланс."""
    with pytest.raises(ValueError, match="конечным числом"):
        Money(amount)


def test_money_operations_require_money():
    with pytest.raises(TypeError):
        Money(Decimal("1")) - 1


def test_identity_value_objects():
    assert StudentId(1) == StudentId(1)
    assert str(StudentId(4)) == "4"
    assert CourseName("Math101").value == "Math101"
