"""
Configuration module for graphsearch.
Centralizes all configuration values.
"""
import os

# Алгоритм по умолчанию для create_search_strategy_from_env: "bfs" или "astar"
DEFAULT_ALGORITHM = os.getenv("GRAPHSEARCH_ALGORITHM", "astar")

# Пошаговая трассировка поиска, если find_path() вызван с trace=None
DEFAULT_TRACE = os.getenv("GRAPHSEARCH_TRACE", "false").lower() == "true"

# Постоянная эвристика A* (добавляется к приоритету каждой вершины)
DEFAULT_CONSTANT_HEURISTIC = float(os.getenv("GRAPHSEARCH_CONSTANT_HEURISTIC", "1.0"))

# Диагональные переходы в GridGraph
DEFAULT_ALLOW_DIAGONAL = os.getenv("GRAPHSEARCH_ALLOW_DIAGONAL", "false").lower() == "true"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TRACE_LOGGER_NAME = "graphsearch.trace"
