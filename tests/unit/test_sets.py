"""Tests for the powerset helper."""

from poolbet.utils.sets import subsets


def test_full_powerset():
    """Defaults include the empty set and the set itself."""
    result = subsets([1, 2, 3])
    assert len(result) == 8
    assert () in result
    assert (1, 2, 3) in result


def test_proper_non_empty_subsets():
    """Excluding both boundaries leaves 2**n - 2 subsets, each exactly once."""
    result = subsets([1, 2, 3, 4], include_empty=False, include_self=False)
    assert len(result) == 2**4 - 2
    assert len({frozenset(s) for s in result}) == len(result)
    assert () not in result
    assert all(0 < len(s) < 4 for s in result)


def test_single_element():
    """A single element has no non-empty proper subset."""
    assert subsets(["x"], include_empty=False, include_self=False) == []
    assert sorted(subsets(["x"])) == [(), ("x",)]


def test_empty_input():
    """The empty collection's only subset is itself."""
    assert subsets([]) == [()]
    assert subsets([], include_empty=False) == []


def test_elements_keep_relative_order():
    """Elements inside a subset follow the input order."""
    for subset in subsets(["a", "b", "c"]):
        assert list(subset) == sorted(subset)
