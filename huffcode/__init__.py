"""Canonical Huffman coding into a single self-describing bitstream."""

from huffcode.encoding_schemes.envelope import decode, encode
from huffcode.encoding_schemes.huffman import HuffmanEncoded, huffman_decode, huffman_encode
from huffcode.pipeline import CodecConfig, decode_bitstring, encode_text

__version__ = "0.1.0"

__all__ = [
    "decode",
    "encode",
    "HuffmanEncoded",
    "huffman_decode",
    "huffman_encode",
    "CodecConfig",
    "decode_bitstring",
    "encode_text",
]
