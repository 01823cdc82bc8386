import pytest

from udprtt.fdset import FD_SETSIZE, FdSet


def test_add_and_contains():
    fds = FdSet()
    assert fds.add(7) is True
    assert 7 in fds
    assert 8 not in fds
    assert len(fds) == 1


def test_duplicate_add_is_noop():
    fds = FdSet()
    fds.add(3)
    assert fds.add(3) is True
    assert list(fds) == [3]


def test_iteration_keeps_insertion_order():
    fds = FdSet()
    for sock in (9, 2, 5):
        fds.add(sock)
    assert list(fds) == [9, 2, 5]


def test_full_set_ignores_new_members():
    fds = FdSet(capacity=2)
    fds.add(1)
    fds.add(2)
    assert fds.add(3) is False
    assert 3 not in fds
    assert list(fds) == [1, 2]
    assert fds.add(2) is True


def test_default_capacity():
    fds = FdSet()
    for sock in range(FD_SETSIZE + 10):
        fds.add(sock)
    assert len(fds) == FD_SETSIZE
    assert fds.capacity == FD_SETSIZE


def test_discard_preserves_order():
    fds = FdSet()
    for sock in (1, 2, 3, 4):
        fds.add(sock)
    fds.discard(2)
    assert list(fds) == [1, 3, 4]


def test_discard_missing_leaves_set_unchanged():
    fds = FdSet()
    fds.add(1)
    fds.discard(42)
    assert list(fds) == [1]


def test_discard_frees_room():
    fds = FdSet(capacity=1)
    fds.add(1)
    fds.discard(1)
    assert fds.add(2) is True
    assert list(fds) == [2]


def test_clear():
    fds = FdSet()
    fds.add(1)
    fds.add(2)
    fds.clear()
    assert len(fds) == 0
    assert 1 not in fds


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        FdSet(capacity=0)


def test_iteration_is_snapshot():
    fds = FdSet()
    fds.add(1)
    fds.add(2)
    seen = []
    for sock in fds:
        seen.append(sock)
        fds.discard(sock)
    assert seen == [1, 2]
    assert len(fds) == 0