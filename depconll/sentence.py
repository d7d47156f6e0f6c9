# depconll/sentence.py
from typing import Sequence

from depconll.core.data_structures import InputToken, OutputToken
from depconll.core.dependency import DependencyTree, DependencyTreeNode
from depconll.core.errors import IndexMismatch
from depconll.core.interfaces import BaseSentence


class InputSentence(BaseSentence):
    """Предложение из InputToken (6 колонок) с корнем на позиции 0."""
    token_type = InputToken

    def _make_root(self) -> InputToken:
        return InputToken.root()


class OutputSentence(BaseSentence):
    """
    Предложение из OutputToken (10 колонок).
    Может быть построено из InputSentence и затем заполнено вершинами
    из внешнего дерева зависимостей.
    """
    token_type = OutputToken

    def _make_root(self) -> OutputToken:
        return OutputToken.root()

    def from_input(self, sentence: InputSentence) -> "OutputSentence":
        """
        Копирует общий префикс (id, word, lemma, ctag, tag, feats) поэлементно.
        Поля HEAD/DEPREL/PHEAD/PDEPREL остаются со значениями по умолчанию.
        Контейнер перестраивается под длину входа, поэтому индексы совпадают 1:1.
        """
        self._records = [OutputToken(base=t.model_copy()) for t in sentence]
        return self

    def copy_dependency_heads(self, tree: Sequence):
        """Проставляет head[i] из узла i дерева (индекс 0 - корень)."""
        if len(tree) != len(self._records):
            raise IndexMismatch(len(self._records), len(tree), "copy_dependency_heads")
        for i, node in enumerate(tree):
            self._records[i].head = node.head

    def to_dependency_tree(self) -> DependencyTree:
        tree = DependencyTree()
        for t in self._records:
            tree.append(DependencyTreeNode(word=t.word, tag=t.tag, head=t.head))
        return tree
