"""
Константы конфигурации консольного приложения.

Программа не читает ни аргументов командной строки, ни переменных окружения:
все настраиваемые значения собраны здесь.
"""

import logging

APP_TITLE = "Student Management System"

# Символ валюты, которым предваряются все суммы в выводе
CURRENCY_SYMBOL = "$"

# Границы суммы платежа: не больше 13 цифр в целой части и 2 знаков
# после запятой. Баланс при этом вычисляется в Decimal без округления.
PAYMENT_MAX_INTEGER_DIGITS = 13
PAYMENT_MAX_DECIMAL_PLACES = 2

# Первый идентификатор, выдаваемый репозиторием студентов
FIRST_STUDENT_ID = 1

MENU_OPTIONS = (
    ("1", "Enroll in a course"),
    ("2", "View balance"),
    ("3", "Pay tuition"),
    ("4", "Show status"),
    ("5", "Exit"),
)

# Логи пишутся в stderr, поэтому по умолчанию уровень WARNING:
# stdout остается чистым для диалога с пользователем.
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = LOG_LEVEL) -> None:
    """Настраивает корневой логгер пакета."""
    logger = logging.getLogger("student_tuition")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
