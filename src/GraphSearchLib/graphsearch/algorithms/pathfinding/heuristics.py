"""Эвристики для A*"""

from typing import Callable, Sequence

import numpy as np

from ..graph.graph_provider import PositionedGraph

# Эвристика: оценка оставшейся стоимости от вершины до цели
Heuristic = Callable[[int], float]


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Евклидово расстояние между двумя точками на плоскости.

    Args:
        a: Точка (x, y)
        b: Точка (x, y)

    Returns:
        Длина вектора a - b
    """
    pa = np.asarray(a, dtype=float)
    pb = np.asarray(b, dtype=float)
    if pa.shape != (2,) or pb.shape != (2,):
        raise ValueError(f"Ожидались двумерные точки, получено: {pa.shape} и {pb.shape}")
    return float(np.linalg.norm(pa - pb))


def zero_heuristic(node: int) -> float:
    """Нулевая эвристика: A* ведет себя как алгоритм Дейкстры"""
    return 0.0


def positional_heuristic(graph: PositionedGraph, goal: int) -> Heuristic:
    """
    Евклидова эвристика по координатам вершин графа.

    Допустима, если стоимость перехода не меньше расстояния между
    вершинами (как в GridGraph).

    Args:
        graph: Граф с координатами вершин
        goal: Целевая вершина

    Returns:
        Функция h(node) - расстояние от node до goal
    """
    goal_position = np.asarray(graph.position(goal), dtype=float)

    def heuristic(node: int) -> float:
        return float(np.linalg.norm(np.asarray(graph.position(node), dtype=float) - goal_position))

    return heuristic
