import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.linkedlist import LinkedList, Node, delete_one


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


@given(st.lists(st.integers()))
def test_construction_round_trip(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    last = lst.last()
    assert last.content == "c"
    assert last.next is None


def test_add_front_replaces_old_successor():
    lst = LinkedList([2, 3])
    node = Node(1, next=Node(99))
    lst.add_front(node)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node


def test_add_front_none_is_ignored():
    lst = LinkedList([1])
    lst.add_front(None)
    assert list(lst) == [1]


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = Node("x")
    lst.add_back(node)
    assert lst.head is node
    assert list(lst) == ["x"]


def test_add_back_keeps_chain_of_added_node():
    lst = LinkedList([1])
    lst.add_back(Node(2, next=Node(3)))
    assert list(lst) == [1, 2, 3]
    assert lst.last().content == 3


def test_add_back_none_leaves_list():
    lst = LinkedList([1, 2])
    lst.add_back(None)
    assert list(lst) == [1, 2]


def test_clear_deletes_in_order_and_empties():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_keeps_list():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == [1, 2]


def test_for_each_visits_every_content():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.for_each(seen.append)
    assert seen == [1, 2, 3]


def test_for_each_none_changes_nothing():
    lst = LinkedList([1])
    lst.for_each(None)
    assert list(lst) == [1]


@given(st.lists(st.integers()))
def test_map_applies_function_and_keeps_source(items):
    lst = LinkedList(items)
    mapped = lst.map(lambda x: x * 2, lambda _: None)
    assert list(mapped) == [x * 2 for x in items]
    assert list(lst) == items


def test_map_nodes_are_new():
    lst = LinkedList([1])
    mapped = lst.map(lambda x: x, lambda _: None)
    assert mapped.head is not lst.head
    assert list(mapped) == [1]


def test_map_failure_deletes_produced_contents():
    lst = LinkedList([1, 2, 3])
    deleted = []
    with pytest.raises(ValueError):
        lst.map(lambda x: None if x == 3 else x * 10, deleted.append)
    assert deleted == [10, 20]
    assert list(lst) == [1, 2, 3]


def test_map_requires_functions():
    lst = LinkedList([1])
    with pytest.raises(TypeError):
        lst.map(None, lambda _: None)
    with pytest.raises(TypeError):
        lst.map(lambda x: x, None)


def test_delete_one_hands_content_to_delete():
    tail = Node(2)
    node = Node(1, next=tail)
    deleted = []
    delete_one(node, deleted.append)
    assert deleted == [1]
    assert node.next is None


def test_delete_one_with_none_does_nothing():
    node = Node(1, next=Node(2))
    delete_one(node, None)
    assert node.next.content == 2
    deleted = []
    delete_one(None, deleted.append)
    assert deleted == []