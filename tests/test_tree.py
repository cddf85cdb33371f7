import pytest

from huffpack.tree import Node, build_tree, encoding_table, frequency_table


def test_frequency_table_counts():
    assert frequency_table(b"aab") == {97: 2, 98: 1}


def test_frequency_table_orders_high_bytes_first():
    assert list(frequency_table(b"a\xffb\x01")) == [255, 1, 97, 98]


def test_frequency_table_empty():
    assert frequency_table(b"") == {}


def test_build_tree_empty_is_none():
    assert build_tree({}) is None


def test_node_is_leaf():
    leaf = Node(65, 1)
    parent = Node(None, 2, leaf, Node(66, 1))
    assert leaf.is_leaf() is True
    assert parent.is_leaf() is False


def test_root_weight_is_total():
    freqs = frequency_table(b"go go gophers for the win!")
    root = build_tree(freqs)
    assert root.weight == sum(freqs.values())


def test_single_symbol_tree_is_leaf_with_empty_code():
    root = build_tree({120: 5})
    assert root.is_leaf()
    assert root.letter == 120
    assert encoding_table(root) == {120: ""}


def test_encoding_table_covers_all_symbols():
    data = b"go go gophers for the win!"
    table = encoding_table(build_tree(frequency_table(data)))
    assert set(table) == set(data)


def test_encoding_table_is_prefix_free():
    data = b"abracadabra alakazam 0123456789"
    codes = list(encoding_table(build_tree(frequency_table(data))).values())
    for first in codes:
        for second in codes:
            if first is not second:
                assert not second.startswith(first)


@pytest.mark.parametrize("data", [b"aaaaaaaab", b"xxxxxyyz", b"eeeeeeeeeeetaoin"])
def test_more_frequent_symbols_have_shorter_or_equal_codes(data):
    freqs = frequency_table(data)
    table = encoding_table(build_tree(freqs))
    for a in freqs:
        for b in freqs:
            if freqs[a] > freqs[b]:
                assert len(table[a]) <= len(table[b])


def test_build_tree_is_deterministic():
    freqs = frequency_table(b"mississippi river")
    assert encoding_table(build_tree(freqs)) == encoding_table(build_tree(dict(reversed(freqs.items()))))