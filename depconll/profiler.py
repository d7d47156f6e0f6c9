# depconll/profiler.py
import logging
from itertools import combinations

import networkx as nx

from depconll.core.data_structures import NO_HEAD, ROOT_ID
from depconll.core.dependency import DependencyTree

logger = logging.getLogger(__name__)


class TreeProfiler:
    """Структурные метрики дерева зависимостей (узел 0 - корень)."""

    def profile(self, tree: DependencyTree) -> dict:
        return {
            "tokens": len(tree) - 1,
            "roots": self._count_roots(tree),
            "unattached": self._count_unattached(tree),
            "tree_depth": self._calculate_tree_depth(tree),
            "non_projectivity": self._is_non_projective(tree),
        }

    @staticmethod
    def _count_roots(tree: DependencyTree) -> int:
        return sum(1 for node in tree.nodes[1:] if node.head == ROOT_ID)

    @staticmethod
    def _count_unattached(tree: DependencyTree) -> int:
        return sum(1 for node in tree.nodes[1:] if node.head == NO_HEAD)

    def _calculate_tree_depth(self, tree: DependencyTree) -> int:
        """
        Максимальная глубина (в дугах) от искусственного корня.
        -1, если в графе есть цикл (ошибка разметки).
        """
        g = nx.DiGraph()
        g.add_node(ROOT_ID)
        for idx, node in enumerate(tree.nodes[1:], 1):
            g.add_node(idx)
            if node.head != NO_HEAD:
                g.add_edge(node.head, idx)

        if not nx.is_directed_acyclic_graph(g):
            logger.debug("Cycle in dependency tree, depth is undefined")
            return -1

        lengths = nx.shortest_path_length(g, source=ROOT_ID)
        return max(lengths.values())

    def _is_non_projective(self, tree: DependencyTree) -> bool:
        """
        Есть ли пересекающиеся дуги. Дуги от корня тоже учитываются.
        """
        # Дуги как отрезки (левый, правый), упорядоченные по левому концу
        arcs = sorted(
            (min(idx, node.head), max(idx, node.head))
            for idx, node in enumerate(tree.nodes[1:], 1)
            if node.head != NO_HEAD
        )
        # После сортировки left <= other_left, поэтому хватает одного условия
        for (left, right), (other_left, other_right) in combinations(arcs, 2):
            if left < other_left < right < other_right:
                return True
        return False
