import pytest

from tabu_routing.models import Solution
from tabu_routing.optimization import TabuMemory


def test_recorded_signature_is_tabu():
    memory = TabuMemory(capacity=3)
    signature = Solution(routes=[[1, 2], [3]]).signature

    memory.record(signature)

    assert memory.is_tabu(signature)
    assert memory.is_tabu(Solution(routes=[[1, 2], [3]]).signature)
    assert not memory.is_tabu(Solution(routes=[[3], [1, 2]]).signature)


def test_size_never_exceeds_capacity():
    memory = TabuMemory(capacity=4)

    for i in range(50):
        memory.record(("route", i))
        assert len(memory) <= 4


def test_oldest_entry_evicted_first():
    memory = TabuMemory(capacity=2)

    memory.record("a")
    memory.record("b")
    memory.record("c")

    assert "a" not in memory
    assert "b" in memory
    assert "c" in memory


def test_countdown_ticks_when_full():
    memory = TabuMemory(capacity=3)
    for key in ("a", "b", "c"):
        memory.record(key)

    memory.record("d")

    assert memory.remaining("d") == 3
    assert memory.remaining("c") == 2
    assert memory.remaining("zzz") == 0


def test_expired_entries_dropped():
    memory = TabuMemory(capacity=2, tenure=1)
    memory.record("a")
    memory.record("b")

    memory.record("c")

    # both countdowns hit zero on the tick
    assert len(memory) == 1
    assert "c" in memory


def test_refresh_moves_entry_to_back():
    memory = TabuMemory(capacity=2, tenure=5)
    memory.record("a")
    memory.record("b")
    memory.record("a")

    memory.record("c")

    assert "a" in memory
    assert "b" not in memory


def test_refresh_at_capacity_does_not_evict_others():
    memory = TabuMemory(capacity=2, tenure=5)
    memory.record("a")
    memory.record("b")

    memory.record("b")

    assert len(memory) == 2
    assert memory.remaining("b") == 5
    assert memory.remaining("a") == 4


def test_invalid_capacity():
    with pytest.raises(ValueError):
        TabuMemory(capacity=0)
