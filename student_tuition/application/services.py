import logging
from decimal import Decimal

from student_tuition.application.commands import (
    EnrollCourseCommand,
    PaymentReceiptDTO,
    PayTuitionCommand,
    RegisterStudentCommand,
    StudentDTO,
)
from student_tuition.application.repositories import StudentRepository
from student_tuition.domain.exceptions import StudentNotFoundException
from student_tuition.domain.student import Student
from student_tuition.domain.value_objects import CourseName, Money, StudentId

logger = logging.getLogger(__name__)


class StudentApplicationService:
    """Сервис приложения для учета записи на курсы и оплаты обучения."""

    def __init__(self, student_repo: StudentRepository):
        self.student_repo = student_repo

    def register_student(self, command: RegisterStudentCommand) -> StudentDTO:
        """Регистрирует нового студента."""
        student = Student.create(self.student_repo.next_id(), command.name)
        self._commit(student)
        return self._to_dto(student)

    def enroll_in_course(self, command: EnrollCourseCommand) -> StudentDTO:
        """Записывает студента на курс."""
        student = self._get_student(command.student_id)
        student.enroll(CourseName(command.course))
        self._commit(student)
        return self._to_dto(student)

    def pay_tuition(self, command: PayTuitionCommand) -> PaymentReceiptDTO:
        """Принимает платеж и возвращает подтверждение с остатком."""
        student = self._get_student(command.student_id)
        balance = student.pay_tuition(Money(command.amount))
        self._commit(student)
        return PaymentReceiptDTO(
            student_id=student.id.value, amount=command.amount, balance=balance.amount
        )

    def get_balance(self, student_id: int) -> Decimal:
        return self._get_student(student_id).balance.amount

    def get_student_details(self, student_id: int) -> StudentDTO:
        """Получает данные студента в виде DTO."""
        return self._to_dto(self._get_student(student_id))

    def _get_student(self, student_id: int) -> Student:
        student = self.student_repo.find_by_id(StudentId(student_id))
        if not student:
            raise StudentNotFoundException(student_id)
        return student

    def _commit(self, student: Student) -> None:
        self.student_repo.save(student)
        for event in student.pull_domain_events():
            logger.debug("Событие %s: %s", type(event).__name__, event)

    @staticmethod
    def _to_dto(student: Student) -> StudentDTO:
        return StudentDTO(
            id=student.id.value,
            name=student.name,
            enrolled_courses=student.enrolled_courses,
            balance=student.balance.amount,
        )
