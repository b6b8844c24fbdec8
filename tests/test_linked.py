from safecracker.linked import (
    Node,
    delete_all,
    delete_one,
    for_each,
    iterate,
    map_nodes,
    push_front,
)


def _build(values):
    head = None
    for value in reversed(values):
        head = push_front(head, Node(value))
    return head


def _contents(head):
    return [node.content for node in iterate(head)]


def test_push_front_prepends():
    head = push_front(None, Node("b"))
    head = push_front(head, Node("a"))
    assert _contents(head) == ["a", "b"]


def test_push_front_none_keeps_head():
    head = Node("x")
    assert push_front(head, None) is head


def test_iterate_empty():
    assert list(iterate(None)) == []


def test_node_is_iterable():
    head = _build([1, 2, 3])
    assert [node.content for node in head] == [1, 2, 3]


def test_for_each_visits_in_order():
    seen = []
    for_each(_build([1, 2, 3]), lambda node: seen.append(node.content))
    assert seen == [1, 2, 3]


def test_map_nodes_keeps_order_and_original():
    head = _build([1, 2, 3])
    mapped = map_nodes(head, lambda node: Node(node.content * 10))
    assert _contents(mapped) == [10, 20, 30]
    assert _contents(head) == [1, 2, 3]


def test_map_nodes_none():
    assert map_nodes(None, lambda node: node) is None
    assert map_nodes(Node(1), None) is None


def test_delete_one_calls_callback():
    seen = []
    node = Node("x", Node("y"))
    delete_one(node, seen.append)
    assert seen == ["x"]
    assert node.next is None


def test_delete_all_last_first():
    seen = []
    delete_all(_build([1, 2, 3]), seen.append)
    assert seen == [3, 2, 1]