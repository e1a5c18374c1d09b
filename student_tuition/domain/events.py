from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DomainEvent:
    student_id: int


@dataclass(frozen=True)
class StudentRegistered(DomainEvent):
    name: str


@dataclass(frozen=True)
class CourseEnrolled(DomainEvent):
    course: str


@dataclass(frozen=True)
class TuitionPaid(DomainEvent):
    amount: Decimal
    balance: Decimal
