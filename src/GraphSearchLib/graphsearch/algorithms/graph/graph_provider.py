"""Контракт поставщика графа для стратегий поиска"""

from typing import List, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class GraphProvider(Protocol):
    """
    Граф, по которому работают стратегии поиска.

    Стратегия не владеет графом и только опрашивает его.
    Граф не должен меняться во время одного вызова find_path().
    """

    def neighbours(self, node: int) -> Sequence[int]:
        """Вершины, достижимые из node одним переходом (может быть пусто)"""
        ...

    def cost(self, from_node: int, to_node: int) -> float:
        """Неотрицательный вес перехода from_node -> to_node (нужен только A*)"""
        ...


@runtime_checkable
class PositionedGraph(GraphProvider, Protocol):
    """Граф, вершины которого имеют координаты на плоскости"""

    def position(self, node: int) -> Tuple[float, float]:
        """Координаты (x, y) вершины"""
        ...


def path_cost(graph: GraphProvider, path: List[int]) -> float:
    """
    Суммарная стоимость пути по весам графа.

    Args:
        graph: Граф
        path: Последовательность вершин от старта до цели

    Returns:
        Сумма cost() по всем переходам пути (0 для пути из одной вершины)
    """
    return float(sum(graph.cost(a, b) for a, b in zip(path, path[1:])))
