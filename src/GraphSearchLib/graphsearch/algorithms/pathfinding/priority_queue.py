"""Очередь с приоритетом для фронта поиска A*"""

from typing import Generic, List, Tuple, TypeVar
import heapq
import itertools

T = TypeVar('T')


class PriorityQueue(Generic[T]):
    """
    Очередь с минимальным приоритетом.

    Первым извлекается элемент с наименьшим приоритетом. При равных
    приоритетах элементы извлекаются в порядке добавления (FIFO):
    каждой записи присваивается возрастающий порядковый номер.

    Один и тот же элемент может лежать в очереди несколько раз
    с разными приоритетами.
    """

    def __init__(self):
        # Куча записей (priority, sequence, item)
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def enqueue(self, item: T, priority: float):
        """
        Добавить элемент с приоритетом.

        Args:
            item: Элемент
            priority: Приоритет (меньше - раньше)
        """
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def dequeue(self) -> T:
        """
        Извлечь элемент с минимальным приоритетом.

        Raises:
            IndexError: Если очередь пуста
        """
        return self.dequeue_with_priority()[1]

    def dequeue_with_priority(self) -> Tuple[float, T]:
        """Извлечь пару (приоритет, элемент) с минимальным приоритетом"""
        if not self._heap:
            raise IndexError("dequeue from an empty priority queue")
        priority, _, item = heapq.heappop(self._heap)
        return priority, item

    def peek(self) -> T:
        """Элемент с минимальным приоритетом без извлечения"""
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][2]

    @property
    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __repr__(self):
        return f"PriorityQueue(size={len(self._heap)})"
