"""Стратегии поиска пути: BFS и A*"""

from .priority_queue import PriorityQueue
from .search_strategy import NONE, SearchResult, SearchStrategy, SearchTrace
from .path_reconstruction import reconstruct_path
from .heuristics import euclidean_distance, positional_heuristic, zero_heuristic
from .bfs import BreadthFirstSearch
from .astar import AStarSearch

__all__ = [
    'PriorityQueue',
    'NONE',
    'SearchResult',
    'SearchStrategy',
    'SearchTrace',
    'reconstruct_path',
    'euclidean_distance',
    'positional_heuristic',
    'zero_heuristic',
    'BreadthFirstSearch',
    'AStarSearch',
]
