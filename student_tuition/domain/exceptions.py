"""
Исключения доменного слоя.
"""


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class StudentNotFoundException(DomainException):
    """Исключение: студент не найден."""

    def __init__(self, student_id: int):
        super().__init__(f"Студент с ID {student_id} не найден.")
        self.student_id = student_id


class InvalidPaymentAmountException(DomainException):
    """Исключение: сумма платежа не является конечным числом."""

    def __init__(self, raw_amount: str):
        super().__init__(f"Некорректная сумма платежа: {raw_amount!r}")
        self.raw_amount = raw_amount
