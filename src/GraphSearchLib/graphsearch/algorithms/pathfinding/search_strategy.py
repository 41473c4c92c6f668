"""Общий контракт стратегий поиска пути и результат поиска"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol, runtime_checkable

from ... import config
from ...logging_config import get_trace_logger
from ..errors import GraphNotSetError
from ..graph.graph_provider import GraphProvider

# Приемник строк трассировки
TraceSink = Callable[[str], None]

# Предшественник стартовой вершины в карте came_from
NONE = None


@dataclass
class SearchResult:
    """
    Результат одного вызова поиска.

    Attributes:
        start: Стартовая вершина
        goal: Целевая вершина
        path: Путь от start до goal включительно или None, если пути нет
        came_from: Карта предшественников (она же множество посещенных вершин)
        cost_so_far: Лучшая известная стоимость до вершин (заполняет только A*)
        nodes_expanded: Сколько вершин извлечено из фронта
    """

    start: int
    goal: int
    path: Optional[List[int]] = None
    came_from: Dict[int, Optional[int]] = field(default_factory=dict)
    cost_so_far: Dict[int, float] = field(default_factory=dict)
    nodes_expanded: int = 0

    @property
    def found(self) -> bool:
        """Найден ли путь"""
        return self.path is not None

    def has_path_to(self, v: int) -> bool:
        """Была ли вершина обнаружена поиском"""
        return v in self.came_from

    def distance_to(self, v: int) -> float:
        """Стоимость до вершины по таблице стоимостей (inf, если неизвестна)"""
        return self.cost_so_far.get(v, float('inf'))


@runtime_checkable
class SearchStrategy(Protocol):
    """
    Стратегия поиска пути в графе.

    Вызывающий код задает граф через set_graph(), затем вызывает
    find_path(). Состояние поиска локально для каждого вызова.
    """

    def set_graph(self, graph: GraphProvider):
        ...

    def find_path(self, start: int, goal: int, trace: Optional[bool] = None) -> Optional[List[int]]:
        ...

    def search(self, start: int, goal: int, trace: Optional[bool] = None) -> SearchResult:
        ...


class SearchTrace:
    """
    Пошаговая трассировка поиска.

    Сообщения передаются в приемник только если трассировка включена.
    """

    def __init__(self, enabled: bool, sink: Optional[TraceSink] = None):
        self.enabled = enabled
        self._sink = sink if sink is not None else get_trace_logger().info

    def __call__(self, message: str, *args):
        if self.enabled:
            self._sink(message % args if args else message)


def resolve_trace(trace: Optional[bool]) -> bool:
    """Значение флага трассировки с учетом GRAPHSEARCH_TRACE"""
    if trace is None:
        return config.DEFAULT_TRACE
    return bool(trace)


def require_graph(graph: Optional[GraphProvider], strategy_name: str) -> GraphProvider:
    """Проверить, что граф задан"""
    if graph is None:
        raise GraphNotSetError(f"{strategy_name}: graph is not set, call set_graph() first")
    return graph
