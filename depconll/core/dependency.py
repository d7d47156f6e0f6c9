# depconll/core/dependency.py
from typing import Iterator, List, Tuple

from pydantic import BaseModel, Field

from .data_structures import NO_HEAD


class DependencyTreeNode(BaseModel):
    word: str
    tag: str
    head: int = NO_HEAD


class DependencyTree(BaseModel):
    """
    Обобщенное дерево зависимостей: упорядоченный список узлов (word, tag, head).
    Узел 0 - искусственный корень, как и в предложениях CoNLL.
    """
    nodes: List[DependencyTreeNode] = Field(default_factory=list)

    @classmethod
    def from_triples(cls, triples) -> "DependencyTree":
        return cls(nodes=[DependencyTreeNode(word=w, tag=t, head=h) for w, t, h in triples])

    def append(self, node: DependencyTreeNode):
        self.nodes.append(node)

    def triples(self) -> List[Tuple[str, str, int]]:
        return [(n.word, n.tag, n.head) for n in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, item):
        return self.nodes[item]

    def __iter__(self) -> Iterator[DependencyTreeNode]:
        return iter(self.nodes)
