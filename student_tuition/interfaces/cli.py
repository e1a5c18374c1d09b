"""
Интерактивное меню учета студента.

Сессия: запрос имени, регистрация одного студента, затем цикл меню
до выбора пункта "Exit" или до конца ввода.

Запуск:
    python -m student_tuition
"""

import logging
from typing import Callable, Dict, Optional

from student_tuition.application.commands import (
    EnrollCourseCommand,
    RegisterStudentCommand,
    build_payment_command,
)
from student_tuition.application.services import StudentApplicationService
from student_tuition.bootstrap import bootstrap_app
from student_tuition.config import configure_logging
from student_tuition.domain.exceptions import InvalidPaymentAmountException
from student_tuition.infrastructure.input_readers import ConsoleInputReader, InputReader
from student_tuition.interfaces.console import (
    AMOUNT_PROMPT,
    CHOICE_PROMPT,
    COURSE_PROMPT,
    INVALID_AMOUNT,
    INVALID_CHOICE,
    NAME_PROMPT,
    ConsoleView,
)

logger = logging.getLogger(__name__)


class MenuLoop:
    """Цикл меню для одного студента в рамках одной сессии."""

    def __init__(
        self,
        service: StudentApplicationService,
        reader: InputReader,
        view: Optional[ConsoleView] = None,
    ):
        self.service = service
        self.reader = reader
        self.view = view or ConsoleView()
        self.student_id: Optional[int] = None
        self.running = False
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self._enroll,
            "2": self._view_balance,
            "3": self._pay_tuition,
            "4": self._show_status,
            "5": self._exit,
        }

    def run(self) -> int:
        """Проводит сессию и возвращает код завершения."""
        print(self.view.banner())
        try:
            self._register()
            self.running = True
            while self.running:
                self._print_lines(self.view.menu())
                choice = self.reader.prompt(CHOICE_PROMPT).strip()
                self.dispatch(choice)
        except (EOFError, KeyboardInterrupt):
            # Ввод закончился: завершаем сессию так же, как по пункту "Exit"
            print()
            logger.info("Ввод завершен, сессия закрыта")
            self.running = False
        return 0

    def dispatch(self, choice: str) -> None:
        action = self._actions.get(choice)
        if action is None:
            print(INVALID_CHOICE)
            return
        action()

    def _register(self) -> None:
        name = self.reader.prompt(NAME_PROMPT)
        student = self.service.register_student(RegisterStudentCommand(name=name))
        self.student_id = student.id
        self._print_lines(self.view.student_created(student))

    def _enroll(self) -> None:
        course = self.reader.prompt(COURSE_PROMPT)
        self.service.enroll_in_course(
            EnrollCourseCommand(student_id=self.student_id, course=course)
        )
        print(self.view.enrolled(course))

    def _view_balance(self) -> None:
        print(self.view.balance(self.service.get_balance(self.student_id)))

    def _pay_tuition(self) -> None:
        raw_amount = self.reader.prompt(AMOUNT_PROMPT)
        try:
            command = build_payment_command(self.student_id, raw_amount)
        except InvalidPaymentAmountException:
            print(INVALID_AMOUNT)
            return
        receipt = self.service.pay_tuition(command)
        print(self.view.payment(receipt))

    def _show_status(self) -> None:
        self._print_lines(
            self.view.status(self.service.get_student_details(self.student_id))
        )

    def _exit(self) -> None:
        self.running = False

    @staticmethod
    def _print_lines(lines) -> None:
        for line in lines:
            print(line)


def main() -> int:
    """Точка входа консольного приложения."""
    configure_logging()
    app = bootstrap_app()
    with ConsoleInputReader() as reader:
        return MenuLoop(app["student_service"], reader).run()


if __name__ == "__main__":
    raise SystemExit(main())
