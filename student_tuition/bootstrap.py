from student_tuition.application.services import StudentApplicationService
from student_tuition.infrastructure.repositories import InMemoryStudentRepository


def bootstrap_app():
    """Создает и связывает компоненты приложения для одной сессии."""
    # Репозиторий владеет счетчиком ID, поэтому каждая сессия начинает с 1
    student_repo = InMemoryStudentRepository()
    student_service = StudentApplicationService(student_repo)
    return {
        "student_repo": student_repo,
        "student_service": student_service,
    }
