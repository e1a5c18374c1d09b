"""
Инфраструктурный слой: хранилище в памяти и источники ввода.
"""

from .input_readers import ConsoleInputReader, InputReader, ScriptedInputReader
from .repositories import InMemoryStudentRepository

__all__ = [
    "InMemoryStudentRepository",
    "InputReader",
    "ConsoleInputReader",
    "ScriptedInputReader",
]
