"""Модуль сервисов - выбор стратегии поиска"""

from .pathfinding_algorithm import PathfindingAlgorithm
from .search_strategy_factory import create_search_strategy, create_search_strategy_from_env

__all__ = ['PathfindingAlgorithm', 'create_search_strategy', 'create_search_strategy_from_env']
