# depconll/core/data_structures.py
from pydantic import BaseModel

# Единственное значение "нет вершины" для всего формата.
# Используется и при чтении, и при записи HEAD/PHEAD.
NO_HEAD = -1

# Теги синтетического корня (индекс 0 в каждом предложении)
ROOT_TAG = "-BEGIN-"
ROOT_ID = 0


class InputToken(BaseModel):
    """
    Токен до синтаксического разбора: первые 6 колонок CoNLL.
    ID  WORD  LEMMA  CPOSTAG  POSTAG  FEATS
    """
    id: int  # 1-based index in sentence, 0 = root
    word: str
    lemma: str
    ctag: str  # coarse POS
    tag: str  # fine POS
    feats: str  # opaque morphological features

    @classmethod
    def root(cls) -> "InputToken":
        return cls(id=ROOT_ID, word="", lemma="", ctag=ROOT_TAG, tag=ROOT_TAG, feats="")


class OutputToken(BaseModel):
    """
    Токен после разбора: входной токен (base) + 4 колонки зависимостей.
    HEAD  DEPREL  PHEAD  PDEPREL

    Входная часть хранится целиком в поле `base`, а не наследуется,
    поэтому кодек явно читает сначала префикс, потом расширение.
    """
    base: InputToken
    head: int = NO_HEAD
    label: str = ""
    phead: int = NO_HEAD
    plabel: str = ""

    @classmethod
    def root(cls) -> "OutputToken":
        return cls(base=InputToken.root())

    # Shortcuts to the embedded input prefix
    @property
    def id(self) -> int:
        return self.base.id

    @property
    def word(self) -> str:
        return self.base.word

    @property
    def lemma(self) -> str:
        return self.base.lemma

    @property
    def ctag(self) -> str:
        return self.base.ctag

    @property
    def tag(self) -> str:
        return self.base.tag

    @property
    def feats(self) -> str:
        return self.base.feats

    @property
    def has_head(self) -> bool:
        return self.head != NO_HEAD
