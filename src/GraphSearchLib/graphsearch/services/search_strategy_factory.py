"""
Фабрика стратегий поиска пути.

Выбирает реализацию SearchStrategy по алгоритму:
- PathfindingAlgorithm.BFS - BreadthFirstSearch
- PathfindingAlgorithm.ASTAR - AStarSearch
"""

import logging
import os
from typing import Optional, Sequence, Union

from ..algorithms.graph.graph_provider import GraphProvider
from ..algorithms.pathfinding.astar import AStarSearch
from ..algorithms.pathfinding.bfs import BreadthFirstSearch
from ..algorithms.pathfinding.heuristics import Heuristic
from ..algorithms.pathfinding.search_strategy import SearchStrategy, TraceSink
from .pathfinding_algorithm import PathfindingAlgorithm

logger = logging.getLogger(__name__)


def parse_algorithm(algorithm: Union[PathfindingAlgorithm, str]) -> PathfindingAlgorithm:
    """
    Привести имя алгоритма к PathfindingAlgorithm.

    Raises:
        ValueError: Если алгоритм неизвестен
    """
    if isinstance(algorithm, PathfindingAlgorithm):
        return algorithm

    name = str(algorithm).strip().lower()
    if name in ("a*", "a_star"):
        name = PathfindingAlgorithm.ASTAR.value
    try:
        return PathfindingAlgorithm(name)
    except ValueError:
        known = ", ".join(a.value for a in PathfindingAlgorithm)
        raise ValueError(f"Unknown pathfinding algorithm: {algorithm!r} (known: {known})") from None


def create_search_strategy(
    algorithm: Union[PathfindingAlgorithm, str] = PathfindingAlgorithm.ASTAR,
    graph: Optional[GraphProvider] = None,
    heuristic: Optional[Heuristic] = None,
    heuristic_points: Optional[Sequence[Sequence[float]]] = None,
    trace_sink: Optional[TraceSink] = None
) -> SearchStrategy:
    """
    Создать стратегию поиска.

    Args:
        algorithm: Алгоритм (PathfindingAlgorithm или его имя)
        graph: Граф, на котором будет выполняться поиск
        heuristic: Эвристика h(node) для A*
        heuristic_points: Пара точек (a, b) для постоянной эвристики A*
        trace_sink: Приемник трассировки

    Returns:
        Стратегия с заданным графом
    """
    algorithm = parse_algorithm(algorithm)

    if algorithm == PathfindingAlgorithm.BFS:
        if heuristic is not None or heuristic_points is not None:
            logger.warning("Heuristic settings are ignored by BFS")
        logger.debug("Creating BreadthFirstSearch")
        return BreadthFirstSearch(graph=graph, trace_sink=trace_sink)

    logger.debug("Creating AStarSearch")
    strategy = AStarSearch(graph=graph, heuristic=heuristic, trace_sink=trace_sink)
    if heuristic_points is not None:
        a, b = heuristic_points
        strategy.set_heuristic(a, b)
    return strategy


def create_search_strategy_from_env(
    graph: Optional[GraphProvider] = None,
    trace_sink: Optional[TraceSink] = None
) -> SearchStrategy:
    """
    Создать стратегию из переменных окружения.

    Читает конфигурацию из environment variables:
    - GRAPHSEARCH_ALGORITHM: "bfs" или "astar"

    Returns:
        Стратегия с заданным графом
    """
    algorithm = os.getenv("GRAPHSEARCH_ALGORITHM", "astar")
    logger.info(f"Creating search strategy from env: {algorithm}")
    return create_search_strategy(algorithm, graph=graph, trace_sink=trace_sink)
