"""
Учет записи студента на курсы и оплаты обучения в рамках одной консольной сессии.

Слои:
    domain/          агрегат Student, объекты-значения, события, исключения
    application/     команды, DTO, порт репозитория, сервис приложения
    infrastructure/  репозиторий в памяти, источники ввода
    interfaces/      консольное меню

Запуск:
    python -m student_tuition
"""

__version__ = "1.0.0"
