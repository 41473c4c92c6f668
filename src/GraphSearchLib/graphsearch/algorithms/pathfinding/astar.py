"""Алгоритм A* для поиска пути минимальной стоимости"""

from typing import Dict, List, Optional, Sequence, Tuple

from ... import config
from ..errors import GraphContractError
from ..graph.graph_provider import GraphProvider
from .heuristics import Heuristic, euclidean_distance
from .path_reconstruction import reconstruct_path
from .priority_queue import PriorityQueue
from .search_strategy import (
    NONE,
    SearchResult,
    SearchTrace,
    TraceSink,
    require_graph,
    resolve_trace,
)


class AStarSearch:
    """
    Алгоритм A* с накоплением стоимости пути.

    Приоритет вершины = накопленная стоимость + эвристика.

    Эвристика задается одним из двух способов:
    - функция h(node), переданная в конструктор (классический A*);
    - постоянное значение, заданное через set_heuristic(a, b) как
      расстояние между двумя точками. Постоянная добавляется ко всем
      приоритетам одинаково и не влияет на порядок раскрытия вершин,
      поэтому в этом режиме A* эквивалентен алгоритму Дейкстры.

    Если функция задана, постоянная эвристика не используется.
    При равных приоритетах вершины раскрываются в порядке добавления.
    """

    name = "A*"

    def __init__(
        self,
        graph: Optional[GraphProvider] = None,
        heuristic: Optional[Heuristic] = None,
        trace_sink: Optional[TraceSink] = None
    ):
        """
        Args:
            graph: Граф (можно задать позже через set_graph)
            heuristic: Эвристика h(node). Если None, используется постоянная
            trace_sink: Приемник трассировки. Если None - логгер graphsearch.trace
        """
        self._graph = graph
        self._heuristic_fn = heuristic
        self._heuristic = config.DEFAULT_CONSTANT_HEURISTIC
        self._trace_sink = trace_sink

    @property
    def graph(self) -> Optional[GraphProvider]:
        return self._graph

    @property
    def heuristic(self) -> float:
        """Текущее значение постоянной эвристики"""
        return self._heuristic

    @property
    def heuristic_function(self) -> Optional[Heuristic]:
        return self._heuristic_fn

    def set_graph(self, graph: GraphProvider):
        """Задать граф для последующих поисков"""
        self._graph = graph

    def set_heuristic(self, x: Sequence[float], y: Sequence[float]):
        """
        Задать постоянную эвристику как расстояние между точками x и y.

        Args:
            x: Точка (x, y)
            y: Точка (x, y)
        """
        self._heuristic = euclidean_distance(x, y)

    def _estimate(self, node: int) -> float:
        if self._heuristic_fn is not None:
            return self._heuristic_fn(node)
        return self._heuristic

    def find_path(self, start: int, goal: int, trace: Optional[bool] = None) -> Optional[List[int]]:
        """
        Найти путь минимальной стоимости.

        Args:
            start: Стартовая вершина
            goal: Целевая вершина
            trace: Пошаговая трассировка (None - по GRAPHSEARCH_TRACE)

        Returns:
            Список вершин от start до goal или None, если goal недостижима
        """
        return self.search(start, goal, trace).path

    def search(self, start: int, goal: int, trace: Optional[bool] = None) -> SearchResult:
        """Выполнить поиск и вернуть полный результат"""
        graph = require_graph(self._graph, self.name)
        log = SearchTrace(resolve_trace(trace), self._trace_sink)
        log("A* Search: looking for path from %s to %s", start, goal)

        # Записи фронта: (вершина, стоимость на момент добавления)
        frontier: PriorityQueue[Tuple[int, float]] = PriorityQueue()
        frontier.enqueue((start, 0.0), 0.0)
        came_from: Dict[int, Optional[int]] = {start: NONE}
        cost_so_far: Dict[int, float] = {start: 0.0}
        result = SearchResult(start=start, goal=goal, came_from=came_from, cost_so_far=cost_so_far)

        done = False
        while frontier:
            current, queued_cost = frontier.dequeue()

            # Устаревшая запись: к вершине уже найден более дешевый путь
            if queued_cost > cost_so_far[current]:
                log("Skipping stale entry for %s", current)
                continue

            result.nodes_expanded += 1
            log("Current node is %s", current)

            if current == goal:
                done = True
                log("Found goal node %s", goal)
                break

            neighbours = list(graph.neighbours(current))
            log("%d neighbours found", len(neighbours))

            for next_node in neighbours:
                new_cost = cost_so_far[current] + self._edge_cost(graph, current, next_node)

                if next_node not in cost_so_far or new_cost < cost_so_far[next_node]:
                    cost_so_far[next_node] = new_cost
                    came_from[next_node] = current
                    priority = new_cost + self._estimate(next_node)
                    log("Adding %s to frontier with cost %.3f, priority %.3f",
                        next_node, new_cost, priority)
                    frontier.enqueue((next_node, new_cost), priority)
                else:
                    log("Already visited %s", next_node)

        if done:
            result.path = reconstruct_path(came_from, start, goal, log)
        else:
            log("No path from %s to %s", start, goal)

        return result

    @staticmethod
    def _edge_cost(graph: GraphProvider, from_node: int, to_node: int) -> float:
        """Вес ребра с проверкой контракта графа"""
        raw = graph.cost(from_node, to_node)
        try:
            cost = float(raw)
        except (TypeError, ValueError) as e:
            raise GraphContractError(
                f"Invalid cost {raw!r} for edge {from_node} -> {to_node}"
            ) from e

        # NaN тоже не проходит эту проверку
        if not cost >= 0:
            raise GraphContractError(f"Negative or NaN cost {cost} for edge {from_node} -> {to_node}")
        return cost

    def __repr__(self):
        return f"AStarSearch(graph={self._graph!r}, heuristic={self._heuristic:.3f})"
