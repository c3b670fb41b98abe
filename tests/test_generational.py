import pytest

from quadkit.generational import GenerationalId, GenerationalStorage


def test_push_then_get_returns_data():
    storage = GenerationalStorage()
    gid = storage.push("a")
    assert storage.get(gid) == "a"
    assert storage.count() == 1


def test_first_push_uses_first_slot_and_generation_zero():
    storage = GenerationalStorage()
    assert storage.push("a") == GenerationalId(0, 0)


def test_freed_slot_is_reused_with_next_generation():
    storage = GenerationalStorage()
    first = storage.push("a")
    storage.free(first)
    second = storage.push("b")
    assert second.index == first.index
    assert second.generation == first.generation + 1
    assert storage.get(first) is None
    assert storage.get(second) == "b"


def test_free_with_stale_id_keeps_current_data():
    storage = GenerationalStorage()
    first = storage.push("a")
    storage.free(first)
    second = storage.push("b")
    storage.free(first)
    assert storage.get(second) == "b"
    assert storage.count() == 1


def test_double_free_does_not_duplicate_slot():
    storage = GenerationalStorage()
    gid = storage.push("a")
    storage.free(gid)
    storage.free(gid)
    one = storage.push("b")
    two = storage.push("c")
    assert one.index != two.index
    assert storage.get(one) == "b"
    assert storage.get(two) == "c"


def test_get_unknown_index_returns_none():
    storage = GenerationalStorage()
    storage.push("a")
    assert storage.get(GenerationalId(5, 0)) is None


def test_retain_removes_rejected_items_in_order():
    storage = GenerationalStorage()
    ids = [storage.push(value) for value in range(6)]
    visited = []

    def keep_even(value):
        visited.append(value)
        return value % 2 == 0

    storage.retain(keep_even)
    assert visited == list(range(6))
    assert storage.count() == 3
    assert [storage.get(gid) for gid in ids] == [0, None, 2, None, 4, None]


def test_set_replaces_live_data_and_rejects_stale_id():
    storage = GenerationalStorage()
    gid = storage.push("a")
    storage.set(gid, "z")
    assert storage.get(gid) == "z"
    storage.free(gid)
    with pytest.raises(KeyError):
        storage.set(gid, "y")


def test_clear_empties_storage():
    storage = GenerationalStorage()
    gid = storage.push("a")
    storage.push("b")
    storage.clear()
    assert storage.count() == 0
    assert storage.get(gid) is None
    assert storage.push("c").index == 0