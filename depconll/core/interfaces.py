# depconll/core/interfaces.py
from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple


class BaseSentence(ABC):
    """
    Контейнер предложения: упорядоченные записи токенов.
    Элемент 0 всегда синтетический корень; после создания или reset()
    контейнер содержит ровно корень и никогда не бывает пустым.
    """
    token_type = None

    def __init__(self):
        self._records: List = []
        self.reset()

    @abstractmethod
    def _make_root(self):
        """Возвращает новый экземпляр корневого токена."""
        pass

    def reset(self):
        self._records = [self._make_root()]

    def append(self, token):
        if not isinstance(token, self.token_type):
            raise TypeError(
                f"{type(self).__name__} accepts {self.token_type.__name__}, got {type(token).__name__}"
            )
        self._records.append(token)

    def tokens(self) -> List:
        """Реальные токены (индексы 1..N), без корня."""
        return self._records[1:]

    def to_word_tag_pairs(self) -> List[Tuple[str, str]]:
        """Пары (word, tag) для всех записей, включая корень."""
        return [(t.word, t.tag) for t in self._records]

    def is_empty(self) -> bool:
        return len(self._records) == 1

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, item):
        return self._records[item]

    def __iter__(self) -> Iterator:
        return iter(self._records)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        words = " ".join(t.word for t in self.tokens())
        return f"{type(self).__name__}({len(self) - 1} tokens: {words!r})"
