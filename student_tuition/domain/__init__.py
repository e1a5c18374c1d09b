"""
Доменный слой: агрегат студента, объекты-значения, события и исключения.
"""

from .events import CourseEnrolled, DomainEvent, StudentRegistered, TuitionPaid
from .exceptions import (
    DomainException,
    InvalidPaymentAmountException,
    StudentNotFoundException,
)
from .student import Student
from .value_objects import CourseName, Money, StudentId

__all__ = [
    "Student",
    "StudentId",
    "CourseName",
    "Money",
    "DomainEvent",
    "StudentRegistered",
    "CourseEnrolled",
    "TuitionPaid",
    "DomainException",
    "StudentNotFoundException",
    "InvalidPaymentAmountException",
]
