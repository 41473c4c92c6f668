"""Базовые структуры графа"""

from .base_edge import BaseEdge
from .graph import GraphW
from .graph_provider import GraphProvider, PositionedGraph, path_cost
from .grid_graph import GridGraph

__all__ = ['BaseEdge', 'GraphW', 'GraphProvider', 'PositionedGraph', 'path_cost', 'GridGraph']
