import pytest

from refqueue import InvalidReferenceError, ReferencePriorityQueue


@pytest.mark.contract
def test_reference_walkthrough(pq):
    """
    Handles, re-prioritization, ties and positional removal
    exercised through the public API only.
    """
    a = pq.enqueue("A", 1)
    b = pq.enqueue("B", 2)
    assert (a, b) == (1, 2)
    assert pq.peek_front() == "B"

    assert pq.change_priority(a, 3) == 1
    assert pq.peek_front() == "A"
    assert pq.dequeue_front() == "A"
    assert pq.size() == 1

    pq.enqueue("C", -5)
    pq.enqueue("D", -5)
    pq.enqueue("D2", -5)

    seen = []
    pq.for_each(lambda value, position: seen.append(value))
    assert seen == ["B", "C", "D", "D2"]

    for _ in range(3):
        pq.remove_by_handle(pq.at(2).handle)

    assert pq.size() == 1
    assert pq.remove_by_position(1) is True
    assert pq.size() == 0
    assert pq.remove_by_position(1) is False


@pytest.mark.contract
def test_mixed_payload_walkthrough(pq):
    first = "I came here first!"
    second = "But I have higher priority!"

    def fn_value():
        return "I am function returning a string!"

    obj_value = {"a": 2, "b": 1}

    assert pq.size() == 0
    first_ref = pq.enqueue(first, 1)
    assert pq.size() == 1

    second_ref = pq.enqueue(second, 2)
    assert pq.peek_front() == second
    assert pq.stats()[2] == 1

    assert pq.change_priority(first_ref, 3) == 1
    assert pq.peek_front() == first
    assert pq.dequeue_front() == first
    assert pq.size() == 1

    pq.enqueue(fn_value, 7)
    obj_ref1 = pq.enqueue(obj_value, -12.123456789)
    obj_ref2 = pq.enqueue(obj_value, -12.123456789)
    obj_ref3 = pq.enqueue(obj_value, -12.123456789)

    assert pq.at(2).handle == second_ref
    assert pq.at(2).value == second
    assert pq.at(17) is None
    assert pq.position_of(obj_ref3) == 5
    assert pq.remove_by_handle(obj_ref2) is True
    assert pq.position_of(obj_ref3) == 4
    assert pq.total_issued() == 6
    assert pq.size() == 4
    assert pq.remove_by_position(4) is True
    assert pq.remove_by_position(4) is False

    obj_value["c"] = "some new property"
    assert pq.change_priority(obj_ref1, 999) == 1
    assert pq.peek_front()["c"] == "some new property"

    seen = []
    pq.for_each(lambda value, position: seen.append((position, value)))
    assert seen == [(1, obj_value), (2, fn_value), (3, second)]

    pq.clear()
    assert pq.size() == 0
    assert pq.total_issued() == 6

    assert pq.position_of(first_ref) == -1
    with pytest.raises(InvalidReferenceError):
        pq.position_of(7)


@pytest.mark.contract
def test_queues_do_not_share_handles(settings):
    left = ReferencePriorityQueue(settings)
    right = ReferencePriorityQueue(settings)

    left.enqueue("x", 1)
    left.enqueue("y", 1)

    assert right.enqueue("z", 1) == 1
    with pytest.raises(InvalidReferenceError):
        right.position_of(2)
