import pytest

from pipekit.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_build_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.next.content == 2


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() is node
    assert node.next is None


def test_last_returns_final_node():
    lst = LinkedList([10, 20, 30])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 30
    assert tail.next is None


def test_len_tracks_pushes():
    lst = LinkedList()
    for count, item in enumerate(["p", "q", "r", "s"], start=1):
        lst.push_back(item)
        assert len(lst) == count


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList(["a"])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList(["a", "b"]).for_each(seen.append)
    assert seen == ["a", "b"]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList(["ab", "cd"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(original) == ["ab", "cd"]
    assert mapped.head is not original.head


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_deletes_partial_result():
    deleted = []

    def f(item):
        if item == 3:
            raise ValueError("boom")
        return item * 10

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]