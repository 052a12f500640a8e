import pytest

from cardwheel.catalog import Catalog


@pytest.fixture
def small_catalog() -> Catalog:
    # 20 names, sorted order == numeric order
    return Catalog([f"Card {i:02d}" for i in range(20)])


@pytest.fixture
def hundred_catalog() -> Catalog:
    return Catalog([f"Card {i:03d}" for i in range(100)])


@pytest.fixture
def lotus_catalog() -> Catalog:
    return Catalog([
        "Black Lotus",
        "Lotus Petal",
        "Lotus Bloom",
        "Lotus",
        "Blotus",
        "Mox Pearl",
    ])
