import itertools
import logging
from typing import Dict, Optional

from student_tuition.application.repositories import StudentRepository
from student_tuition.config import FIRST_STUDENT_ID
from student_tuition.domain.student import Student
from student_tuition.domain.value_objects import StudentId

logger = logging.getLogger(__name__)


class InMemoryStudentRepository(StudentRepository):
    """Реализация репозитория в памяти для хранения агрегатов Student.

    Каждый экземпляр владеет собственной последовательностью идентификаторов,
    поэтому независимые сессии и тесты не делят между собой счетчик.
    """

    def __init__(self, first_id: int = FIRST_STUDENT_ID) -> None:
        self._students: Dict[StudentId, Student] = {}
        self._ids = itertools.count(first_id)

    def next_id(self) -> StudentId:
        return StudentId(next(self._ids))

    def save(self, student: Student) -> None:
        """Сохраняет или обновляет студента в словаре."""
        logger.debug("Сохранение студента %s в репозиторий", student.id)
        self._students[student.id] = student

    def find_by_id(self, student_id: StudentId) -> Optional[Student]:
        """Находит студента по ID."""
        return self._students.get(student_id)
