"""
Huffman tree construction.

Leaves are seeded into a `heapq` min-priority queue and the two lightest
entries are merged until a single root remains. Queue entries are keyed by
``(weight, lowest byte value in the subtree)``. Live subtrees never share a
leaf, so the secondary key is unique and equal weights are always resolved
in favour of the subtree holding the smaller byte value. This keeps the code
lengths (and therefore the whole envelope) reproducible across runs.
"""

import heapq
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

from huffcode.encoding_schemes.frequency import saturating_add
from huffcode.utils.debug import dbg, debug_enabled


@dataclass
class Leaf:
    symbol: int
    weight: int = 0


@dataclass
class Branch:
    left: "Node"
    right: "Node"
    weight: int = 0


Node = Union[Leaf, Branch]

# (weight, lowest symbol below the node, node)
_HeapEntry = Tuple[int, int, Node]


def build_tree(frequencies: Dict[int, int]) -> Optional[Node]:
    """
    Build the Huffman tree for a byte -> weight mapping.

    Returns None when there are no symbols. A single symbol becomes the root
    leaf directly.
    """
    queue: List[_HeapEntry] = [
        (weight, symbol, Leaf(symbol, weight)) for symbol, weight in frequencies.items()
    ]
    heapq.heapify(queue)

    while len(queue) > 1:
        left_weight, left_min, left = heapq.heappop(queue)
        right_weight, right_min, right = heapq.heappop(queue)
        weight = saturating_add(left_weight, right_weight)
        heapq.heappush(queue, (weight, min(left_min, right_min), Branch(left, right, weight)))

    if not queue:
        return None
    root = queue[0][2]
    if debug_enabled():
        dbg("TREE", f"symbols={len(frequencies)} root_weight={root.weight} depth={tree_depth(root)}")
    return root


def iter_leaves(node: Optional[Node]) -> Iterator[Leaf]:
    """Yield the leaves of `node` from left to right."""
    if node is None:
        return
    if isinstance(node, Leaf):
        yield node
        return
    yield from iter_leaves(node.left)
    yield from iter_leaves(node.right)


def tree_depth(node: Optional[Node]) -> int:
    if node is None or isinstance(node, Leaf):
        return 0
    return 1 + max(tree_depth(node.left), tree_depth(node.right))
