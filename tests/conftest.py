import os
import random

import pytest

from graph_helpers import make_store
from nx_bench.graph import GraphStore


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: small correctness tests")
    config.addinivalue_line("markers", "performance: timing comparisons between representations")
    config.addinivalue_line("markers", "slow: long-running tests")


@pytest.fixture(scope="session")
def rng_seed() -> int:
    """
    session-level random seed
    - if TEST_SEED env var is set, use that to reproduce flaky runs
    - else, generate a random seed each pytest run
    - print the seed so runs can be reproduced
    """
    env_seed = os.getenv("TEST_SEED")
    if env_seed is not None:
        seed = int(env_seed)
        print("")
        print(f"Using TEST_SEED from environment: {seed}")
    else:
        seed = random.SystemRandom().randint(0, 2**32 - 1)
        print("")
        print(f"Random seed for this test run: {seed}")

    return seed


@pytest.fixture
def rng(rng_seed) -> random.Random:
    return random.Random(rng_seed)


@pytest.fixture
def sp_scenario() -> GraphStore:
    # 0 -> 1 (1), 1 -> 2 (2), 0 -> 2 (5), 2 -> 3 (1)
    return make_store(4, [(0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)], directed=True)


@pytest.fixture
def mst_scenario() -> GraphStore:
    # square with one heavy side; MST weight 6
    return make_store(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (0, 3, 10)], directed=False)
