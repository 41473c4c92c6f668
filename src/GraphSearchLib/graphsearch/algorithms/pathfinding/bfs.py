"""Поиск в ширину"""

from collections import deque
from typing import Deque, Dict, List, Optional

from ..graph.graph_provider import GraphProvider
from .path_reconstruction import reconstruct_path
from .search_strategy import (
    NONE,
    SearchResult,
    SearchTrace,
    TraceSink,
    require_graph,
    resolve_trace,
)


class BreadthFirstSearch:
    """
    Поиск в ширину (BFS).

    Вершины раскрываются в порядке обнаружения, все ребра считаются
    одинаковыми: находится путь с наименьшим числом ребер. Веса
    ребер (cost) не используются.
    """

    name = "BFS"

    def __init__(self, graph: Optional[GraphProvider] = None, trace_sink: Optional[TraceSink] = None):
        """
        Args:
            graph: Граф (можно задать позже через set_graph)
            trace_sink: Приемник трассировки. Если None - логгер graphsearch.trace
        """
        self._graph = graph
        self._trace_sink = trace_sink

    @property
    def graph(self) -> Optional[GraphProvider]:
        return self._graph

    def set_graph(self, graph: GraphProvider):
        """Задать граф для последующих поисков"""
        self._graph = graph

    def find_path(self, start: int, goal: int, trace: Optional[bool] = None) -> Optional[List[int]]:
        """
        Найти путь с наименьшим числом ребер.

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
        log("BFS: looking for path from %s to %s", start, goal)

        frontier: Deque[int] = deque([start])
        came_from: Dict[int, Optional[int]] = {start: NONE}
        result = SearchResult(start=start, goal=goal, came_from=came_from)

        done = False
        while frontier:
            current = frontier.popleft()
            result.nodes_expanded += 1
            log("Current node is %s", current)

            if current == goal:
                done = True
                log("Found goal node %s", goal)
                break

            neighbours = list(graph.neighbours(current))
            log("%d neighbours found", len(neighbours))

            for next_node in neighbours:
                if next_node not in came_from:
                    log("Adding %s to frontier", next_node)
                    came_from[next_node] = current
                    frontier.append(next_node)
                else:
                    log("Already visited %s", next_node)

        if done:
            result.path = reconstruct_path(came_from, start, goal, log)
        else:
            log("No path from %s to %s", start, goal)

        return result

    def __repr__(self):
        return f"BreadthFirstSearch(graph={self._graph!r})"
