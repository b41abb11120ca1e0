import pytest

from kitchensim.pqueue import PriorityQueue


def drain(queue):
    out = []
    while queue:
        out.append(queue.pop())
    return out


def test_empty_queue():
    queue = PriorityQueue()
    assert len(queue) == 0
    assert not queue
    assert list(queue) == []


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().peek()


def test_highest_priority_first():
    queue = PriorityQueue()
    for name, priority in [("b", 2), ("d", 4), ("a", 1), ("c", 3)]:
        queue.push(name, priority)
    assert drain(queue) == ["d", "c", "b", "a"]


def test_equal_low_priorities_keep_arrival_order():
    queue = PriorityQueue()
    for name in "xyz":
        queue.push(name, 1)
    assert drain(queue) == ["x", "y", "z"]


def test_equal_to_front_goes_after_front():
    queue = PriorityQueue()
    queue.push("a", 5)
    queue.push("b", 5)
    queue.push("x", 3)
    queue.push("c", 5)
    assert list(queue) == ["a", "c", "b", "x"]


def test_middle_insertion():
    queue = PriorityQueue()
    queue.push("hi", 10)
    queue.push("lo", 1)
    queue.push("mid", 5)
    assert list(queue) == ["hi", "mid", "lo"]


def test_negative_priorities_serve_smallest_time_first():
    queue = PriorityQueue()
    for finish in [7, 3, 9, 3]:
        queue.push(finish, -finish)
    assert drain(queue) == [3, 3, 7, 9]


def test_peek_and_iter_do_not_consume():
    queue = PriorityQueue()
    queue.push("a", 1)
    queue.push("b", 2)
    assert queue.peek() == "b"
    assert list(queue) == ["b", "a"]
    assert len(queue) == 2
    assert queue


def test_result_is_sorted_non_increasing():
    queue = PriorityQueue()
    priorities = [4, -1, 8, 0, 8, 2, 2, 7, -3]
    for p in priorities:
        queue.push(p, p)
    result = drain(queue)
    assert result == sorted(priorities, reverse=True)