from abc import ABC, abstractmethod
from typing import Optional

from student_tuition.domain.student import Student
from student_tuition.domain.value_objects import StudentId


class StudentRepository(ABC):
    """Абстрактный репозиторий для агрегата Student."""

    @abstractmethod
    def next_id(self) -> StudentId:
        """Выдает следующий идентификатор из последовательности репозитория."""
        raise NotImplementedError

    @abstractmethod
    def save(self, student: Student) -> None:
        """Сохраняет состояние агрегата."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, student_id: StudentId) -> Optional[Student]:
        """Находит агрегат по его идентификатору."""
        raise NotImplementedError
