"""Граф на двумерной сетке проходимых клеток"""

import math
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import GraphContractError
from ... import config

# Ортогональные направления (4-связность)
ORTHOGONAL_DIRECTIONS = [(0, 1), (1, 0), (0, -1), (-1, 0)]
# Диагональные направления (добавляются для 8-связности)
DIAGONAL_DIRECTIONS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


class GridGraph:
    """
    Граф клеток прямоугольной сетки.

    Вершина - проходимая клетка, ее индекс равен y * width + x.
    Переход возможен в соседнюю проходимую клетку; ортогональный шаг
    стоит 1, диагональный - sqrt(2).
    """

    def __init__(
        self,
        walkable: Union[np.ndarray, Sequence[Sequence[bool]]],
        allow_diagonal: Optional[bool] = None
    ):
        """
        Args:
            walkable: Маска проходимости, walkable[y][x] == True для свободной клетки
            allow_diagonal: Разрешить диагональные переходы.
                            Если None, берется из GRAPHSEARCH_ALLOW_DIAGONAL
        """
        mask = np.asarray(walkable, dtype=bool)
        if mask.ndim != 2:
            raise ValueError(f"Сетка должна быть двумерной, получено измерений: {mask.ndim}")

        self._walkable = mask
        self._height, self._width = mask.shape
        if allow_diagonal is None:
            allow_diagonal = config.DEFAULT_ALLOW_DIAGONAL
        self._allow_diagonal = allow_diagonal

        self._directions = list(ORTHOGONAL_DIRECTIONS)
        if allow_diagonal:
            self._directions.extend(DIAGONAL_DIRECTIONS)

    @classmethod
    def from_strings(cls, rows: Sequence[str], allow_diagonal: Optional[bool] = None) -> 'GridGraph':
        """
        Построить сетку из строк, где '#' - препятствие, любой другой символ - свободно.

        Первая строка соответствует y = 0.
        """
        mask = [[ch != '#' for ch in row] for row in rows]
        if len({len(row) for row in mask}) > 1:
            raise ValueError("Все строки сетки должны быть одной длины")
        return cls(mask, allow_diagonal=allow_diagonal)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def allow_diagonal(self) -> bool:
        return self._allow_diagonal

    @property
    def node_count(self) -> int:
        """Количество клеток (включая непроходимые)"""
        return self._width * self._height

    def node_id(self, x: int, y: int) -> int:
        """Индекс вершины для клетки (x, y)"""
        if not self._in_bounds(x, y):
            raise ValueError(f"Клетка ({x}, {y}) вне сетки {self._width}x{self._height}")
        return y * self._width + x

    def position(self, node: int) -> Tuple[int, int]:
        """Координаты (x, y) клетки вершины"""
        if not 0 <= node < self.node_count:
            raise ValueError(f"Неверный индекс вершины: {node}")
        return node % self._width, node // self._width

    def is_walkable(self, node: int) -> bool:
        x, y = self.position(node)
        return bool(self._walkable[y, x])

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def neighbours(self, node: int) -> List[int]:
        """
        Проходимые соседние клетки.

        Порядок фиксирован: сначала ортогональные направления,
        затем диагональные (если разрешены).
        """
        x, y = self.position(node)
        result = []
        for dx, dy in self._directions:
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny) and self._walkable[ny, nx]:
                result.append(ny * self._width + nx)
        return result

    def cost(self, from_node: int, to_node: int) -> float:
        """
        Стоимость шага между соседними клетками.

        Raises:
            GraphContractError: Если клетки не соседние или to_node непроходима
        """
        x1, y1 = self.position(from_node)
        x2, y2 = self.position(to_node)
        step = (x2 - x1, y2 - y1)

        if step not in self._directions or not self._walkable[y2, x2]:
            raise GraphContractError(f"Нет перехода {from_node} -> {to_node} в сетке")

        # Диагональный шаг дороже
        if step in DIAGONAL_DIRECTIONS:
            return math.sqrt(2)
        return 1.0

    def __repr__(self):
        return (f"GridGraph({self._width}x{self._height}, "
                f"diagonal={self._allow_diagonal})")
