"""
Интерфейсный слой: консольное меню и тексты диалога.
"""

from .cli import MenuLoop, main
from .console import ConsoleView

__all__ = ["MenuLoop", "ConsoleView", "main"]
