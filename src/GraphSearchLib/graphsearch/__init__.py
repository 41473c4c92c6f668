"""
graphsearch - поиск пути в графе.

Две взаимозаменяемые стратегии поверх абстрактного графа:
- BreadthFirstSearch - поиск в ширину (минимум ребер)
- AStarSearch - A* (минимум суммарной стоимости)
"""

__version__ = "1.0.0"
