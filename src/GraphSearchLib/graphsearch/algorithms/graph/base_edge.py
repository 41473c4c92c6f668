"""Базовый класс ребра графа"""


class BaseEdge:
    """
    Ребро взвешенного ориентированного графа.

    Ребро ведет из вершины start_v в вершину end_v и имеет вес w.
    """

    def __init__(self, start_v: int = 0, end_v: int = 0, w: float = 1.0):
        self.start_v = start_v  # Начальная вершина
        self.end_v = end_v      # Конечная вершина
        self.w = w              # Вес ребра

    def reversed(self) -> 'BaseEdge':
        """Ребро того же веса в обратном направлении"""
        return BaseEdge(self.end_v, self.start_v, self.w)

    def __repr__(self):
        return f"Edge({self.start_v} -> {self.end_v}, w={self.w:.2f})"

    def __eq__(self, other):
        if not isinstance(other, BaseEdge):
            return False
        return (self.start_v == other.start_v and
                self.end_v == other.end_v and
                abs(self.w - other.w) < 1e-9)

    def __hash__(self):
        return hash((self.start_v, self.end_v, self.w))
