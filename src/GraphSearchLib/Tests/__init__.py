"""
Пакет тестов для graphsearch.

Структура:
- test_graph_algorithms.py - стратегии поиска (BFS, A*), восстановление пути
- test_entities.py - очередь с приоритетом, графы, эвристики
- test_services.py - фабрика стратегий, конфигурация, логирование

Запуск:
    pytest Tests/ -v
    pytest Tests/test_graph_algorithms.py -v
    pytest Tests/ --cov=graphsearch
"""

__version__ = "1.0.0"
