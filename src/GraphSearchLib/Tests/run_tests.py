#!/usr/bin/env python
"""
Скрипт для удобного запуска тестов graphsearch.

Использование:
    python run_tests.py                     # Все тесты
    python run_tests.py --fast              # Без медленных и случайных тестов
    python run_tests.py --coverage          # С покрытием
    python run_tests.py --module services   # Только services
"""

import sys
import subprocess
import argparse
from pathlib import Path


TEST_FILES = {
    "algorithms": "test_graph_algorithms.py",
    "pathfinding": "test_graph_algorithms.py",
    "graph": "test_entities.py",
    "entities": "test_entities.py",
    "services": "test_services.py",
}


class TestRunner:
    """Утилита для запуска тестов"""

    def __init__(self):
        self.tests_dir = Path(__file__).parent
        self.project_root = self.tests_dir.parent

    def build_command(self, args):
        """Собрать командную строку pytest по опциям"""
        cmd = ["pytest", "-v", "--tb=short"]

        # Выбор модуля
        if args.module:
            test_file = self._get_test_file(args.module)
            if test_file is None:
                raise ValueError(f"Тестовый файл для модуля '{args.module}' не найден")
            cmd.append(str(test_file))
        else:
            cmd.append(str(self.tests_dir))

        # Быстрые тесты
        if args.fast:
            cmd.extend(["-m", "not slow and not stochastic"])

        # Покрытие кода
        if args.coverage:
            cmd.extend([
                "--cov=graphsearch",
                "--cov-report=html",
                "--cov-report=term-missing"
            ])

        # Параллельное выполнение (pytest-xdist)
        if args.parallel:
            cmd.extend(["-n", "auto"])

        # Конкретный тест
        if args.test:
            cmd.extend(["-k", args.test])

        if args.fail_fast:
            cmd.append("-x")

        return cmd

    def run(self, args):
        """Запуск тестов с опциями"""
        try:
            cmd = self.build_command(args)
        except ValueError as e:
            print(e)
            return 1

        print(f"Команда: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=self.project_root)
            return result.returncode
        except KeyboardInterrupt:
            print("\n\nТесты прерваны пользователем")
            return 130

    def _get_test_file(self, module_name):
        """Получить файл теста по имени модуля"""
        filename = TEST_FILES.get(module_name.lower())
        if filename:
            return self.tests_dir / filename
        return None


def main():
    parser = argparse.ArgumentParser(description="Запуск тестов graphsearch")
    parser.add_argument("--fast", action="store_true", help="Без медленных и случайных тестов")
    parser.add_argument("--coverage", action="store_true", help="Измерить покрытие кода")
    parser.add_argument("--parallel", action="store_true",
                        help="Параллельное выполнение (требует pytest-xdist)")
    parser.add_argument("--module", "-m", type=str, help="Запустить тесты для конкретного модуля")
    parser.add_argument("--test", "-t", type=str, help="Запустить конкретный тест (по имени)")
    parser.add_argument("--fail-fast", "-x", action="store_true", help="Остановиться на первой ошибке")

    args = parser.parse_args()
    return TestRunner().run(args)


if __name__ == "__main__":
    sys.exit(main())
