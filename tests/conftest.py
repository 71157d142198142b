import random
from pathlib import Path

import pytest

from llrb import OrderedTree

TEST_DIR = Path(__file__).parent.absolute()

SAMPLE_KEYS = [5, 3, 8, 1, 4, 7, 9, 2, 6, 0]


def pytest_addoption(parser):
    parser.addoption("--benchmark", action="store_true", default=False, help="run benchmark tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: mark benchmark tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--benchmark"):
        return
    benchmark_skip_marker = pytest.mark.skip(reason="use --benchmark marker to run")
    for item in items:
        filename = Path(str(item.fspath)).name
        if "benchmark" in item.keywords or filename.startswith('test_benchmark'):
            item.add_marker(benchmark_skip_marker)


@pytest.fixture
def tree() -> OrderedTree:
    yield OrderedTree()


@pytest.fixture
def sample_tree() -> OrderedTree:
    yield OrderedTree(SAMPLE_KEYS)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
