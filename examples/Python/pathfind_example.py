"""
Демонстрация поиска пути на сетке с выбором алгоритма.

Строит лабиринт, ищет путь BFS и A* (с постоянной и с позиционной
эвристикой) и выводит найденные пути и их стоимость.
"""

import sys
from pathlib import Path

# Добавляем путь к библиотеке graphsearch
project_root = Path(__file__).parent.parent.parent / "src" / "GraphSearchLib"
sys.path.insert(0, str(project_root))

from graphsearch.algorithms.graph.graph_provider import path_cost
from graphsearch.algorithms.graph.grid_graph import GridGraph
from graphsearch.algorithms.pathfinding.heuristics import positional_heuristic
from graphsearch.logging_config import setup_logging
from graphsearch.services.pathfinding_algorithm import PathfindingAlgorithm
from graphsearch.services.search_strategy_factory import create_search_strategy


MAZE = [
    "..........",
    ".####.###.",
    ".#......#.",
    ".#.####.#.",
    "...#..#...",
    "##.#.##.##",
    "...#......",
    ".###.####.",
    "..........",
]


def render(grid, path):
    """Нарисовать сетку с путем"""
    on_path = {grid.position(node) for node in path or []}
    lines = []
    for y, row in enumerate(MAZE):
        lines.append("".join("*" if (x, y) in on_path else ch for x, ch in enumerate(row)))
    return "\n".join(lines)


def main():
    """Главная функция"""
    setup_logging()

    grid = GridGraph.from_strings(MAZE, allow_diagonal=True)
    start = grid.node_id(0, 0)
    goal = grid.node_id(9, 8)

    runs = [
        ("BFS", create_search_strategy(PathfindingAlgorithm.BFS, graph=grid)),
        ("A* (constant)", create_search_strategy(
            PathfindingAlgorithm.ASTAR, graph=grid,
            heuristic_points=(grid.position(start), grid.position(goal)))),
        ("A* (euclidean)", create_search_strategy(
            PathfindingAlgorithm.ASTAR, graph=grid,
            heuristic=positional_heuristic(grid, goal))),
    ]

    for title, strategy in runs:
        result = strategy.search(start, goal, trace="-v" in sys.argv)
        print("=" * 40)
        print(title)
        print("=" * 40)
        if not result.found:
            print("Путь не найден")
            continue
        print(f"Шагов: {len(result.path) - 1}, "
              f"стоимость: {path_cost(grid, result.path):.3f}, "
              f"раскрыто вершин: {result.nodes_expanded}")
        print(render(grid, result.path))
        print()


if __name__ == "__main__":
    main()
