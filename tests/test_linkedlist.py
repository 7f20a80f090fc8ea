import pytest

from cubraycast.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_from_items_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head.content == "a"


def test_push_returns_node():
    lst = LinkedList()
    node = lst.push_back(7)
    assert isinstance(node, Node) and node.content == 7 and node.next is None


def test_last_returns_final_node():
    lst = LinkedList(["x", "y", "z"])
    assert lst.last().content == "z"
    lst.push_front("w")
    assert lst.last().content == "z"


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    lst.push_front(5)
    assert lst.last().content == 5


def test_len_matches_iteration():
    lst = LinkedList(range(10))
    assert len(lst) == len(list(lst))


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.last() is None


def test_clear_then_reuse():
    lst = LinkedList([1])
    lst.clear()
    lst.push_back(2)
    assert list(lst) == [2]


def test_for_each_visits_every_content():
    seen = []
    LinkedList(["a", "b"]).for_each(seen.append)
    assert seen == ["a", "b"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]


def test_map_failure_deletes_partial_results():
    deleted = []
    lst = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        lst.map(lambda v: None if v == 3 else v, deleted.append)
    assert deleted == [1, 2]
    assert list(lst) == [1, 2, 3]