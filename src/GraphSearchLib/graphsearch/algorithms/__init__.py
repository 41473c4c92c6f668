"""Модуль алгоритмов - графы и поиск путей"""

from . import graph
from . import pathfinding
from .errors import GraphSearchError, GraphNotSetError, GraphContractError

__all__ = ['graph', 'pathfinding', 'GraphSearchError', 'GraphNotSetError', 'GraphContractError']
