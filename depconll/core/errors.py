# depconll/core/errors.py
from typing import Optional


class FormatError(ValueError):
    """
    Ошибка разбора строки CoNLL.
    Сообщение содержит исходную строку и ожидаемую колонку, чтобы
    битое место в корпусе находилось сразу.
    """
    kind = "FormatError"

    def __init__(self, line: str, field: str, column: Optional[int] = None, detail: str = ""):
        self.line = line
        self.field = field
        self.column = column
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        where = f"column {self.column} ({self.field})" if self.column else self.field
        msg = f"{self.kind}: not well formatted CoNLL data, {where}"
        if self.detail:
            msg += f": {self.detail}"
        return f"{msg}; line={self.line!r}"


class MissingField(FormatError):
    kind = "MissingField"


class InvalidInteger(FormatError):
    kind = "InvalidInteger"


class IndexMismatch(ValueError):
    """Контейнеры разной длины в операции, требующей соответствия 1:1."""

    def __init__(self, expected: int, actual: int, operation: str = ""):
        self.expected = expected
        self.actual = actual
        self.operation = operation
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}index mismatch, sentence has {expected} records but got {actual}")
