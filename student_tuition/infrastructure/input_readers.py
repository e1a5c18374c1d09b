"""
Источники пользовательского ввода.

Меню работает только через протокол ``InputReader``: одна строка на каждый
запрос. Консольная реализация читает stdin, сценарная выдает заранее
подготовленные ответы, что позволяет прогонять сессию без терминала.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Protocol

logger = logging.getLogger(__name__)


class InputReader(Protocol):
    """Интерфейс чтения одной строки ввода в ответ на приглашение."""

    def prompt(self, text: str) -> str: ...


class ConsoleInputReader:
    """Чтение из стандартного ввода через встроенный ``input()``."""

    def __init__(self) -> None:
        self._closed = False

    def prompt(self, text: str) -> str:
        if self._closed:
            raise EOFError("Источник ввода уже закрыт")
        return input(text)

    def close(self) -> None:
        self._closed = True
        logger.debug("Консольный ввод закрыт")

    def __enter__(self) -> ConsoleInputReader:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class ScriptedInputReader:
    """Выдает заранее заданные строки, как если бы их вводил пользователь.

    Приглашение и ответ печатаются в stdout, поэтому вывод сессии совпадает
    с тем, что видно в терминале. Когда строки заканчиваются, поднимается
    ``EOFError``, так же как у ``input()`` при закрытом stdin.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self._lines:
            print(text, end="")
            raise EOFError("Сценарий ввода исчерпан")
        line = self._lines.pop(0)
        print(f"{text}{line}")
        return line
