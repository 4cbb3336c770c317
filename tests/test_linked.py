from fdfkit.linked import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_init_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_becomes_head():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b"]


def test_push_back_becomes_last():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert lst.last() is node
    assert node.next is None
    assert list(lst) == ["a", "b"]


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("only")
    assert lst.head is node
    assert lst.last() is node


def test_node_links():
    second = Node("y")
    first = Node("x", second)
    assert first.next is second
    assert second.next is None


def test_len_matches_pushes():
    lst = LinkedList()
    for i in range(10):
        lst.push_front(i)
    assert len(lst) == 10
    assert list(lst) == list(reversed(range(10)))


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["x", "y", "z"]).for_each(seen.append)
    assert seen == ["x", "y", "z"]


def test_map_returns_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_empty():
    assert len(LinkedList().map(str)) == 0


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList(["a", "b"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_delete():
    lst = LinkedList([1])
    lst.clear()
    assert list(lst) == []


def test_repr_shows_contents():
    assert repr(LinkedList([1, 2])) == "LinkedList([1, 2])"