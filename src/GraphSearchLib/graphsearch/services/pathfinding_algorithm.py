"""Перечисление алгоритмов поиска пути"""

from enum import Enum


class PathfindingAlgorithm(Enum):
    """Доступные алгоритмы поиска пути в графе"""

    BFS = "bfs"        # Поиск в ширину (минимум ребер)
    ASTAR = "astar"    # A* (минимум стоимости)
