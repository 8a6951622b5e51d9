import pytest

import sexpr


def test_removed_middle_child():
    t = sexpr.parse("(a b c)")
    assert repr(t.removed(1)) == "(a c)"


def test_removed_first_child():
    t = sexpr.parse("(a b c)")
    assert repr(t.removed(0)) == "(b c)"


def test_removed_last_child():
    t = sexpr.parse("(a b c)")
    assert repr(t.removed(-1)) == "(a b)"


def test_removed_only_child():
    t = sexpr.parse("(a)")
    assert len(t.removed(0)) == 0


def test_removed_entire_inner_list():
    t = sexpr.parse("(a (b c) d)")
    assert repr(t.removed(1)) == "(a d)"


def test_removed_out_of_range_raises():
    t = sexpr.parse("(a b)")
    with pytest.raises(IndexError):
        t.removed(2)


def test_removed_leaves_original_unchanged():
    t = sexpr.parse("(a b c d)")
    t.removed(2)
    assert repr(t) == "(a b c d)"
    assert len(t) == 4
