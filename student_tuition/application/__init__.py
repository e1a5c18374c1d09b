"""
Прикладной слой: команды, DTO, порт репозитория и сервис приложения.
"""

from .commands import (
    EnrollCourseCommand,
    PaymentReceiptDTO,
    PayTuitionCommand,
    RegisterStudentCommand,
    StudentDTO,
    build_payment_command,
)
from .repositories import StudentRepository
from .services import StudentApplicationService

__all__ = [
    "RegisterStudentCommand",
    "EnrollCourseCommand",
    "PayTuitionCommand",
    "StudentDTO",
    "PaymentReceiptDTO",
    "build_payment_command",
    "StudentRepository",
    "StudentApplicationService",
]
