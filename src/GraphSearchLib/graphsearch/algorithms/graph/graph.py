"""Взвешенный ориентированный граф"""

from typing import Iterable, List, Tuple, TypeVar, Generic

from ..errors import GraphContractError
from .base_edge import BaseEdge

TEdge = TypeVar('TEdge', bound=BaseEdge)


class GraphW(Generic[TEdge]):
    """
    Взвешенный ориентированный граф с типизированными ребрами.

    Вершины представлены индексами (int), ребра - объектами типа TEdge.
    Реализует контракт GraphProvider: neighbours() и cost().
    """

    def __init__(self, v: int):
        """
        Инициализация графа.

        Args:
            v: Количество вершин
        """
        if v < 0:
            raise ValueError(f"Количество вершин не может быть отрицательным: {v}")

        self._v = v  # Количество вершин
        self._e = 0  # Количество ребер
        self._adj: List[List[TEdge]] = [[] for _ in range(v)]  # Списки смежности

    @classmethod
    def from_edges(
        cls,
        v: int,
        edges: Iterable[Tuple[int, int, float]],
        undirected: bool = False
    ) -> 'GraphW[BaseEdge]':
        """
        Построить граф из списка троек (start_v, end_v, w).

        Args:
            v: Количество вершин
            edges: Тройки (начало, конец, вес)
            undirected: Добавлять каждое ребро в обоих направлениях

        Returns:
            Новый граф
        """
        graph = cls(v)
        for start_v, end_v, w in edges:
            edge = BaseEdge(start_v, end_v, w)
            if undirected:
                graph.add_undirected_edge(edge)
            else:
                graph.add_edge(edge)
        return graph

    @property
    def v(self) -> int:
        """Количество вершин"""
        return self._v

    @property
    def e(self) -> int:
        """Количество ребер"""
        return self._e

    def _check_vertex(self, v: int):
        if not 0 <= v < self._v:
            raise ValueError(f"Неверный индекс вершины: {v}")

    def add_edge(self, edge: TEdge):
        """
        Добавить ребро в граф.

        Args:
            edge: Ребро для добавления
        """
        self._check_vertex(edge.start_v)
        self._check_vertex(edge.end_v)
        if edge.w < 0:
            raise ValueError(f"Отрицательный вес ребра: {edge}")

        self._adj[edge.start_v].append(edge)
        self._e += 1

    def add_undirected_edge(self, edge: TEdge):
        """Добавить ребро и обратное к нему"""
        self.add_edge(edge)
        if edge.start_v != edge.end_v:
            self.add_edge(edge.reversed())

    def adj(self, v: int) -> List[TEdge]:
        """
        Получить список смежных ребер для вершины.

        Args:
            v: Индекс вершины

        Returns:
            Список ребер, исходящих из вершины v
        """
        self._check_vertex(v)
        return self._adj[v]

    def neighbours(self, node: int) -> List[int]:
        """
        Соседи вершины в порядке добавления ребер.

        Параллельные ребра дают одного соседа один раз.
        """
        seen = set()
        result = []
        for edge in self.adj(node):
            if edge.end_v not in seen:
                seen.add(edge.end_v)
                result.append(edge.end_v)
        return result

    def cost(self, from_node: int, to_node: int) -> float:
        """
        Вес перехода from_node -> to_node.

        Для параллельных ребер берется минимальный вес.

        Raises:
            GraphContractError: Если ребра from_node -> to_node нет
        """
        weights = [edge.w for edge in self.adj(from_node) if edge.end_v == to_node]
        if not weights:
            raise GraphContractError(f"Нет ребра {from_node} -> {to_node}")
        return float(min(weights))

    def remove_edge(self, edge: TEdge):
        """
        Удалить ребро из графа.

        Args:
            edge: Ребро для удаления
        """
        v = edge.start_v
        if 0 <= v < self._v and edge in self._adj[v]:
            self._adj[v].remove(edge)
            self._e -= 1

    def edges(self) -> List[TEdge]:
        """
        Получить все ребра графа.

        Returns:
            Список всех ребер
        """
        all_edges = []
        for v in range(self._v):
            all_edges.extend(self._adj[v])
        return all_edges

    def __repr__(self):
        return f"GraphW(v={self._v}, e={self._e})"
