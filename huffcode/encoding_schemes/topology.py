"""
Tree topology encoding.

The tree is written post-order: a leaf is a ``1`` marker followed by its
8-bit byte value, a branch is a ``0`` marker emitted after both of its
children. A final ``0`` closes the topology. The reader runs a stack machine
over the same markers, so no subtree lengths need to be stored.
"""

from typing import List, Optional

from huffcode.encoding_schemes.tree import Branch, Leaf, Node
from huffcode.utils.bits_bytes_utils import Bits, append_byte, new_bits, read_byte

LEAF_MARKER = 1
BRANCH_MARKER = 0


def serialize_tree(root: Optional[Node]) -> Bits:
    """Post-order topology of `root`, sentinel included. None -> just the sentinel."""
    topology = new_bits()

    def walk(node: Node) -> None:
        if isinstance(node, Leaf):
            topology.append(LEAF_MARKER)
            append_byte(topology, node.symbol)
            return
        walk(node.left)
        walk(node.right)
        topology.append(BRANCH_MARKER)

    if root is not None:
        walk(root)
    topology.append(BRANCH_MARKER)
    return topology


def deserialize_tree(topology: Bits) -> Optional[Node]:
    """
    Rebuild the tree written by `serialize_tree`.

    A branch marker with fewer than two nodes on the stack ends the read
    (that is the trailing sentinel). Running out of bits also ends it.
    Returns None for a topology that holds no leaves.
    """
    stack: List[Node] = []
    cursor = 0
    while cursor < len(topology):
        marker = topology[cursor]
        cursor += 1
        if marker == LEAF_MARKER:
            stack.append(Leaf(read_byte(topology, cursor)))
            cursor += 8
            continue

        if len(stack) < 2:
            break
        right = stack.pop()
        left = stack.pop()
        stack.append(Branch(left, right))

    return stack.pop() if stack else None
