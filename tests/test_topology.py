import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from huffcode.encoding_schemes.code_table import build_code_table
from huffcode.encoding_schemes.frequency import count_frequencies
from huffcode.encoding_schemes.topology import deserialize_tree, serialize_tree
from huffcode.encoding_schemes.tree import Branch, Leaf, build_tree, iter_leaves
from huffcode.utils.bits_bytes_utils import bitstring_to_bits


def _shape(node):
    if isinstance(node, Leaf):
        return node.symbol
    return (_shape(node.left), _shape(node.right))


def test_serialize_small_tree():
    tree = Branch(Leaf(ord("a")), Branch(Leaf(ord("b")), Leaf(ord("c"))))
    expected = "101100001" "101100010" "101100011" "0" "0" "0"
    assert serialize_tree(tree).to01() == expected


def test_serialize_empty_and_single_leaf():
    assert serialize_tree(None).to01() == "0"
    assert serialize_tree(Leaf(ord("a"), 3)).to01() == "1011000010"


def test_deserialize_keeps_left_right_order():
    topology = bitstring_to_bits("101100001" "101100010" "101100011" "0" "0" "0")
    tree = deserialize_tree(topology)
    assert _shape(tree) == (ord("a"), (ord("b"), ord("c")))


def test_deserialize_degenerate_topologies():
    assert deserialize_tree(bitstring_to_bits("0")) is None
    assert deserialize_tree(bitstring_to_bits("")) is None
    assert deserialize_tree(bitstring_to_bits("1011000010")) == Leaf(ord("a"))
    # Missing sentinel: running out of bits ends the read as well.
    assert deserialize_tree(bitstring_to_bits("101100001")) == Leaf(ord("a"))


def test_rebuilt_tree_matches_original():
    for sample in (b"mississippi", b"abracadabra", bytes(range(256)), b"x"):
        tree = build_tree(count_frequencies(sample))
        rebuilt = deserialize_tree(serialize_tree(tree))
        assert _shape(rebuilt) == _shape(tree)
        assert [leaf.symbol for leaf in iter_leaves(rebuilt)] == [
            leaf.symbol for leaf in iter_leaves(tree)
        ]
        assert build_code_table(rebuilt).encoding == build_code_table(tree).encoding


def test_topology_length():
    tree = build_tree(count_frequencies(bytes(range(256))))
    # 9 bits per leaf, one marker per branch, one sentinel
    assert len(serialize_tree(tree)) == 256 * 9 + 255 + 1
