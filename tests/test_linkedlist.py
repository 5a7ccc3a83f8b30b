import pytest

from fdfview.linkedlist import LinkedList, Node


def _build(*items):
    lst = LinkedList()
    for item in items:
        lst.push_back(item)
    return lst


def test_empty_list_has_no_items():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_back_keeps_order():
    lst = _build("Node1", "Node2", "Node3")
    assert list(lst) == ["Node1", "Node2", "Node3"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = _build("I am second")
    lst.push_front("I am first")
    assert list(lst) == ["I am first", "I am second"]


def test_push_returns_node_linked_in_place():
    lst = LinkedList()
    first = lst.push_back("a")
    second = lst.push_back("b")
    assert isinstance(first, Node)
    assert first.next is second
    assert lst.head is first


def test_last_returns_final_node():
    lst = _build("Test1", "Test2")
    assert lst.last().content == "Test2"
    assert lst.last().next is None


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last().content == "only"
    assert lst.head is lst.last()


def test_size_counts_nodes():
    lst = _build("Holis 1", "Holis 2", "Holis 3", "Holis 4")
    assert len(lst) == 4


def test_pop_front_releases_and_returns_content():
    released = []
    lst = _build("x", "y")
    assert lst.pop_front(released.append) == "x"
    assert released == ["x"]
    assert list(lst) == ["y"]
    assert len(lst) == 1


def test_pop_front_last_item_empties_list():
    lst = _build("x")
    lst.pop_front()
    assert lst.head is None
    assert lst.last() is None
    lst.push_back("z")
    assert list(lst) == ["z"]


def test_pop_front_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_releases_each_in_order():
    released = []
    items = ["Node1", "Node2", "Node3"]
    lst = _build(*items)
    lst.clear(released.append)
    assert released == items
    assert len(lst) == 0
    assert lst.head is None


def test_clear_empty_list_calls_nothing():
    released = []
    LinkedList().clear(released.append)
    assert released == []


def test_iterate_visits_every_content():
    seen = []
    items = [3, 1, 2]
    _build(*items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list_and_keeps_original():
    original = _build("Node1", "Node2", "Node3")
    mapped = original.map(lambda s: "a" * len(s), None)
    assert list(mapped) == ["aaaaa", "aaaaa", "aaaaa"]
    assert list(original) == ["Node1", "Node2", "Node3"]
    assert len(mapped) == len(original)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str.upper, None)) == []


def test_map_failure_releases_built_contents():
    released = []

    def convert(value):
        if value == "bad":
            raise ValueError(value)
        return value.upper()

    lst = _build("one", "two", "bad", "four")
    with pytest.raises(ValueError):
        lst.map(convert, released.append)
    assert released == ["ONE", "TWO"]
    assert list(lst) == ["one", "two", "bad", "four"]