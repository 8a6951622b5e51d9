import sexpr


def test_iter_all_children():
    t = sexpr.parse("(a b c)")
    values = [node.value for node in t]
    assert values == ["a", "b", "c"]


def test_iter_empty():
    t = sexpr.parse("()")
    assert list(t) == []


def test_iter_nested():
    t = sexpr.parse("(a (b c) d)")
    values = [repr(node) for node in t]
    assert values == ["a", "(b c)", "d"]


def test_iter_is_exhaustible():
    t = sexpr.parse("(a b)")
    it = iter(t)
    assert repr(next(it)) == "a"
    assert repr(next(it)) == "b"
    assert next(it, None) is None


def test_node_iter():
    t = sexpr.parse("(a (b c d) e)")
    inner = t[1]
    values = [n.value for n in inner]
    assert values == ["b", "c", "d"]


def test_children_is_tuple():
    t = sexpr.parse("(a b)")
    assert t.children == (sexpr.Atom("a"), sexpr.Atom("b"))
