"""
Форматирование сообщений для консоли.

Это единственное место, где собираются тексты, которые видит пользователь.
Методы возвращают строки, печатает их ``MenuLoop``.
"""

from decimal import Decimal
from typing import List

from student_tuition.application.commands import PaymentReceiptDTO, StudentDTO
from student_tuition.config import APP_TITLE, MENU_OPTIONS
from student_tuition.domain.value_objects import Money

NAME_PROMPT = "Enter student name: "
CHOICE_PROMPT = "Enter your choice: "
COURSE_PROMPT = "Enter course name: "
AMOUNT_PROMPT = "Enter payment amount: "

INVALID_CHOICE = "Invalid choice. Please enter a valid option.\n"
INVALID_AMOUNT = "Invalid amount. Please enter a numeric value.\n"


def _money(amount: Decimal) -> str:
    return Money(amount).display()


class ConsoleView:
    """Тексты консольного диалога."""

    @staticmethod
    def banner() -> str:
        return f"{APP_TITLE}\n"

    @staticmethod
    def student_created(student: StudentDTO) -> List[str]:
        return [f"Student ID: {student.id}", "Student created successfully.\n"]

    @staticmethod
    def menu() -> List[str]:
        return ["Options:"] + [f"{key}. {label}" for key, label in MENU_OPTIONS]

    @staticmethod
    def enrolled(course: str) -> str:
        return f"Enrolled in {course} successfully.\n"

    @staticmethod
    def balance(amount: Decimal) -> str:
        return f"Current balance: {_money(amount)}"

    @staticmethod
    def payment(receipt: PaymentReceiptDTO) -> str:
        return (
            f"Thank you for your payment of {_money(receipt.amount)}. "
            f"Remaining balance: {_money(receipt.balance)}"
        )

    @staticmethod
    def status(student: StudentDTO) -> List[str]:
        return [
            f"Student ID: {student.id}",
            f"Name: {student.name}",
            f"Enrolled Courses: {', '.join(student.enrolled_courses)}",
            f"Balance: {_money(student.balance)}",
        ]
