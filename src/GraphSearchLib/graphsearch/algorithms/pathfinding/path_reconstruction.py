"""Восстановление пути по карте предшественников"""

import logging
from typing import Dict, List, Optional

from .search_strategy import SearchTrace

logger = logging.getLogger(__name__)


def reconstruct_path(
    came_from: Dict[int, Optional[int]],
    start: int,
    goal: int,
    trace: Optional[SearchTrace] = None
) -> Optional[List[int]]:
    """
    Восстановить путь от start до goal.

    Идем от goal по came_from назад до start, затем разворачиваем.
    Если очередной предшественник уже есть в строящемся пути (цикл)
    или цепочка обрывается раньше start, карта повреждена - путь
    не строится.

    Args:
        came_from: Карта предшественников после успешного поиска
        start: Стартовая вершина
        goal: Целевая вершина
        trace: Трассировка поиска

    Returns:
        Список вершин от start до goal включительно или None
    """
    if trace is None:
        trace = SearchTrace(False)

    if goal not in came_from:
        trace("Goal node %s was never reached", goal)
        return None

    path = []
    on_path = set()
    current = goal

    while current != start:
        path.append(current)
        on_path.add(current)
        current = came_from.get(current)

        if current is None:
            trace("Error: predecessor chain ends before start node %s", start)
            logger.warning(f"Broken predecessor chain while reconstructing path {start} -> {goal}")
            return None

        if current in on_path:
            trace("Error: path contains a loop")
            logger.warning(f"Predecessor map contains a loop at node {current} "
                           f"while reconstructing path {start} -> {goal}")
            return None

    path.append(start)
    path.reverse()
    return path
