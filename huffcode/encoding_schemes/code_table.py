from dataclasses import dataclass, field
from typing import Dict, Optional

from bitarray import frozenbitarray

from huffcode.encoding_schemes.tree import Branch, Node
from huffcode.utils.bits_bytes_utils import Bits, new_bits


@dataclass
class CodeTable:
    """
    Byte <-> code mapping derived from one Huffman tree.

    - encoding: byte value -> code (path of 0=left / 1=right from the root)
    - decoding: code -> byte value, the exact inverse of `encoding`
    """
    encoding: Dict[int, frozenbitarray] = field(default_factory=dict)
    decoding: Dict[frozenbitarray, int] = field(default_factory=dict)

    def code_lengths(self) -> Dict[int, int]:
        return {symbol: len(code) for symbol, code in self.encoding.items()}

    def to_bitstrings(self) -> Dict[int, str]:
        return {symbol: code.to01() for symbol, code in sorted(self.encoding.items())}

    def is_prefix_free(self) -> bool:
        codes = sorted(code.to01() for code in self.encoding.values())
        # After sorting, a code that prefixes another sorts directly before one of them.
        return not any(b.startswith(a) for a, b in zip(codes, codes[1:]))


def build_code_table(root: Optional[Node]) -> CodeTable:
    """
    Walk the tree pre-order and record each leaf's path in both directions.

    A tree made of a single leaf has an empty path; that leaf gets the code
    ``0`` so every symbol costs at least one bit.
    """
    table = CodeTable()
    if root is None:
        return table

    def walk(node: Node, path: Bits) -> None:
        if isinstance(node, Branch):
            left_path = path.copy()
            left_path.append(0)
            walk(node.left, left_path)
            right_path = path.copy()
            right_path.append(1)
            walk(node.right, right_path)
            return

        if not path:
            path.append(0)
        code = frozenbitarray(path)
        table.encoding[node.symbol] = code
        table.decoding[code] = node.symbol

    walk(root, new_bits())
    return table
