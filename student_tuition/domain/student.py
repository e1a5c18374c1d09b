from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from student_tuition.domain.events import (
    CourseEnrolled,
    DomainEvent,
    StudentRegistered,
    TuitionPaid,
)
from student_tuition.domain.value_objects import CourseName, Money, StudentId


@dataclass
class Student:
    """Агрегат 'Студент': список курсов и баланс за обучение."""

    id: StudentId
    name: str
    _courses: List[CourseName] = field(default_factory=list, init=False)
    _balance: Money = field(default_factory=Money, init=False)
    _events: List[DomainEvent] = field(default_factory=list, init=False)
    version: int = 0

    @staticmethod
    def create(student_id: StudentId, name: str) -> Student:
        # Имя принимается как есть, включая пустую строку
        student = Student(id=student_id, name=name)
        student._add_event(StudentRegistered(student_id=student_id.value, name=name))
        return student

    @property
    def enrolled_courses(self) -> List[str]:
        return [course.value for course in self._courses]

    @property
    def balance(self) -> Money:
        return self._balance

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._events)
        self._events.clear()
        return events

    def _add_event(self, event: DomainEvent):
        self._events.append(event)
        self._increment_version()

    def _increment_version(self):
        self.version += 1

    def enroll(self, course: CourseName):
        # Повторная запись на тот же курс допустима и сохраняется в списке
        self._courses.append(course)
        self._add_event(CourseEnrolled(student_id=self.id.value, course=course.value))

    def pay_tuition(self, amount: Money) -> Money:
        """Списывает платеж с баланса и возвращает остаток."""
        self._balance = self._balance - amount
        self._add_event(
            TuitionPaid(
                student_id=self.id.value,
                amount=amount.amount,
                balance=self._balance.amount,
            )
        )
        return self._balance

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.id == other.id
