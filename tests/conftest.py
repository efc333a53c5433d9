import pytest

from passgen import random_source
from passgen.password_settings import GenerationSettings
from passgen.random_source import RandomSource


class FixedRandomSource(RandomSource):
    """Întoarce valorile date, ciclic; numără câte valori s-au cerut."""

    is_secure = True
    name = "fixed"

    def __init__(self, values):
        self.values = list(values)
        self.requested = 0

    def random_uint32(self, count):
        self.requested += count
        return [self.values[i % len(self.values)] for i in range(count)]


@pytest.fixture
def make_source():
    return FixedRandomSource


@pytest.fixture
def fixed_source():
    return FixedRandomSource([0, 1, 2, 3])


@pytest.fixture
def all_classes():
    return GenerationSettings(
        length=16,
        include_uppercase=True,
        include_lowercase=True,
        include_numbers=True,
        include_symbols=True,
    )


@pytest.fixture(autouse=True)
def _fresh_default_source():
    random_source.reset_default_random_source()
    yield
    random_source.reset_default_random_source()
