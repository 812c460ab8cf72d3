import random

import pytest

from algorithms import avl, binomial_heap, bst, rbt
from engine import Workspace


def build(insert, values, start=None):
    """Fold `values` into a structure with `insert`."""
    structure = start
    for v in values:
        structure = insert(structure, v)
    return structure


def random_sequences(count=25, length=40, seed=1234, low=0, high=200):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(rng.randint(1, length))] for _ in range(count)]


SEQUENCES = random_sequences()

SHAPED_SEQUENCES = [
    list(range(1, 31)),             # ascending
    list(range(30, 0, -1)),         # descending
    [50, 25, 75, 12, 37, 62, 87],   # already balanced
    [5, 5, 5, 5, 5],                # all equal
    [10, 20, 30, 15, 25],
]


@pytest.fixture(params=[bst.insert, avl.insert, rbt.insert], ids=["bst", "avl", "rbt"])
def any_tree_insert(request):
    return request.param


@pytest.fixture
def heap_from():
    def make(keys):
        return build(binomial_heap.insert, keys)
    return make


@pytest.fixture
def workspace():
    return Workspace(history_limit=20)


@pytest.fixture
def app():
    import main

    main.app.config.update(
        TESTING=True,
        REJECT_DUPLICATES=False,
        DEFAULT_KIND="BST",
        MAX_WORKSPACES=main.DEFAULTS["MAX_WORKSPACES"],
    )
    main.WORKSPACES.clear()
    yield main.app
    main.WORKSPACES.clear()


@pytest.fixture
def client(app):
    return app.test_client()
