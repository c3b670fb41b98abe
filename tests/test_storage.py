import pytest

from quadkit.storage import Storage


class WorldBoundaries:
    def __init__(self, value):
        self.value = value


class SpecialBoundaries(WorldBoundaries):
    pass


def test_store_and_get():
    storage = Storage()
    storage.store(WorldBoundaries(23))
    assert storage.get(WorldBoundaries).value == 23


def test_try_get_missing_returns_none():
    assert Storage().try_get(WorldBoundaries) is None


def test_get_missing_raises_key_error():
    with pytest.raises(KeyError):
        Storage().get(WorldBoundaries)


def test_store_overwrites_previous_value():
    storage = Storage()
    storage.store(WorldBoundaries(1))
    storage.store(WorldBoundaries(2))
    assert storage.get(WorldBoundaries).value == 2


def test_mutation_is_visible_to_later_lookups():
    storage = Storage()
    storage.store(WorldBoundaries(1))
    storage.get(WorldBoundaries).value = 7
    assert storage.try_get(WorldBoundaries).value == 7


def test_keys_are_exact_types():
    storage = Storage()
    storage.store(SpecialBoundaries(3))
    assert storage.try_get(WorldBoundaries) is None
    assert storage.get(SpecialBoundaries).value == 3
    assert SpecialBoundaries in storage
    assert WorldBoundaries not in storage