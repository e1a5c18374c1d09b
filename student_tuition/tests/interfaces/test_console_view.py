from decimal import Decimal

from student_tuition.application.commands import PaymentReceiptDTO, StudentDTO
from student_tuition.interfaces.console import ConsoleView


def test_menu_text():
    assert ConsoleView.menu() == [
        "Options:",
        "1. Enroll in a course",
        "2. View balance",
        "3. Pay tuition",
        "4. Show status",
        "5. Exit",
    ]


def test_payment_message():
    receipt = PaymentReceiptDTO(
        student_id=1, amount=Decimal("50"), balance=Decimal("-50")
    )
    assert (
        ConsoleView.payment(receipt)
        == "Thank you for your payment of $50. Remaining balance: $-50"
    )


def test_status_lines_order():
    """Тест: статус содержит ID, имя, курсы через запятую и баланс."""
    student = StudentDTO(
        id=3,
        name="Ana",
        enrolled_courses=["Math101", "Art", "Math101"],
        balance=Decimal("-7.50"),
    )
    assert ConsoleView.status(student) == [
        "Student ID: 3",
        "Name: Ana",
        "Enrolled Courses: Math101, Art, Math101",
        "Balance: $-7.5",
    ]


def test_balance_and_enrollment_messages():
    assert ConsoleView.balance(Decimal("0")) == "Current balance: $0"
    assert ConsoleView.enrolled("Math101") == "Enrolled in Math101 successfully.\n"
    assert ConsoleView.banner() == "Student Management System\n"
