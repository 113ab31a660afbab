import pytest

from theater.catalog import Catalog
from theater.config import Config, load_config
from theater.types import Genre, Invoice, Performance, Play


@pytest.fixture(autouse=True)
def clear_theater_env(monkeypatch):
    for key in [
        "THEATER_CURRENCY",
        "THEATER_LOCALE",
        "THEATER_LINE_SEPARATOR",
    ]:
        monkeypatch.delenv(key, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def catalog():
    return Catalog(
        {
            "hamlet": Play("Hamlet", Genre.TRAGEDY),
            "as-you-like-it": Play("As You Like It", Genre.COMEDY),
        }
    )


@pytest.fixture
def bigco_invoice():
    return Invoice.of(
        "BigCo",
        [Performance("hamlet", 55), Performance("as-you-like-it", 35)],
    )


@pytest.fixture
def lf_config():
    return Config(line_separator="\n")
