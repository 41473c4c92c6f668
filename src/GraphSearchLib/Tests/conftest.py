"""
Конфигурация pytest и общие фикстуры для всех тестов.

Этот файл автоматически загружается pytest перед запуском тестов.
"""

import pytest
import sys
from pathlib import Path

# Добавляем путь к модулю graphsearch в sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphsearch.algorithms.graph.base_edge import BaseEdge
from graphsearch.algorithms.graph.graph import GraphW
from graphsearch.algorithms.graph.grid_graph import GridGraph


# ==================== Маркеры тестов ====================

def pytest_configure(config):
    """Регистрация пользовательских маркеров"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "stochastic: marks tests that use randomness (seeded)"
    )


def pytest_addoption(parser):
    """Добавление пользовательских опций командной строки"""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="run only fast tests"
    )


def pytest_runtest_setup(item):
    """Пропуск медленных тестов в режиме --fast"""
    if "slow" in item.keywords and item.config.getoption("--fast", default=False):
        pytest.skip("skipping slow test in fast mode")


def pytest_collection_modifyitems(config, items):
    """Модификация собранных тестов"""
    # Автоматически добавляем маркер "unit" к тестам без других маркеров
    for item in items:
        if not any(mark.name in ["integration", "slow", "stochastic"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# ==================== Графы ====================

@pytest.fixture
def diamond_graph():
    """
    Ромб с дешевой и дорогой ветками.

        0 --1-> 1 --1-> 3 --1-> 4
        |               ^
        5               1
        v               |
        2 --------------+

    Путь 0-1-3-4 стоит 3, путь 0-2-3-4 стоит 7.
    """
    return GraphW.from_edges(5, [
        (0, 1, 1.0),
        (0, 2, 5.0),
        (1, 3, 1.0),
        (2, 3, 1.0),
        (3, 4, 1.0),
    ])


@pytest.fixture
def uniform_diamond_graph():
    """Тот же ромб с единичными весами"""
    return GraphW.from_edges(5, [
        (0, 1, 1.0),
        (0, 2, 1.0),
        (1, 3, 1.0),
        (2, 3, 1.0),
        (3, 4, 1.0),
    ])


@pytest.fixture
def simple_graph():
    """
    Взвешенный граф из 6 вершин.

    Кратчайшие расстояния от 0: [0, 7, 9, 20, 26, 11]
    """
    graph = GraphW[BaseEdge](6)
    graph.add_edge(BaseEdge(0, 1, 7))
    graph.add_edge(BaseEdge(0, 2, 9))
    graph.add_edge(BaseEdge(0, 5, 14))
    graph.add_edge(BaseEdge(1, 2, 10))
    graph.add_edge(BaseEdge(1, 3, 15))
    graph.add_edge(BaseEdge(2, 3, 11))
    graph.add_edge(BaseEdge(2, 5, 2))
    graph.add_edge(BaseEdge(3, 4, 6))
    graph.add_edge(BaseEdge(4, 5, 9))
    return graph


@pytest.fixture
def disconnected_graph():
    """Граф с несвязными компонентами 0-1-2 и 3-4-5"""
    graph = GraphW[BaseEdge](6)
    graph.add_undirected_edge(BaseEdge(0, 1, 5))
    graph.add_undirected_edge(BaseEdge(1, 2, 3))
    graph.add_undirected_edge(BaseEdge(3, 4, 2))
    graph.add_undirected_edge(BaseEdge(4, 5, 4))
    return graph


@pytest.fixture
def maze_grid():
    """
    Лабиринт 5x5, '#' - стена.

    Кратчайший путь из (0, 0) в (4, 4) - 8 шагов.
    """
    return GridGraph.from_strings([
        ".....",
        ".###.",
        "...#.",
        ".#...",
        ".....",
    ], allow_diagonal=False)


@pytest.fixture
def open_grid():
    """Пустая сетка 10x10"""
    return GridGraph([[True] * 10 for _ in range(10)], allow_diagonal=False)


# ==================== Настройки для случайных тестов ====================

@pytest.fixture
def seed_random():
    """Фиксация seed для воспроизводимости случайных тестов"""
    import random
    random.seed(42)
    yield
    # Восстановление случайности после теста
    random.seed()


@pytest.fixture
def trace_lines():
    """Приемник трассировки, собирающий строки в список"""
    lines = []
    return lines
