"""Исключения алгоритмов поиска"""


class GraphSearchError(Exception):
    """Базовое исключение библиотеки поиска в графе"""


class GraphNotSetError(GraphSearchError, RuntimeError):
    """Поиск запущен до вызова set_graph()"""


class GraphContractError(GraphSearchError, ValueError):
    """
    Граф нарушил контракт поставщика.

    Например, cost() запрошен для пары вершин, не связанных ребром,
    или вернул отрицательный вес.
    """
