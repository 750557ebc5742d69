from huffcode.encoding_schemes.code_table import CodeTable, build_code_table
from huffcode.encoding_schemes.envelope import HEADER_BITS, Envelope, decode, encode
from huffcode.encoding_schemes.frequency import count_frequencies
from huffcode.encoding_schemes.huffman import HuffmanEncoded, huffman_decode, huffman_encode
from huffcode.encoding_schemes.topology import deserialize_tree, serialize_tree
from huffcode.encoding_schemes.tree import Branch, Leaf, build_tree

__all__ = [
    "CodeTable",
    "build_code_table",
    "HEADER_BITS",
    "Envelope",
    "decode",
    "encode",
    "count_frequencies",
    "HuffmanEncoded",
    "huffman_decode",
    "huffman_encode",
    "deserialize_tree",
    "serialize_tree",
    "Branch",
    "Leaf",
    "build_tree",
]
