"""Utility helpers shared across codec components."""

from huffcode.utils.file_utils import add_suffix_to_top_level, suffix_filename
from huffcode.utils.bits_bytes_utils import (
    Bits,
    append_byte,
    append_u32,
    bits_to_bitstring,
    bitstring_to_bits,
    new_bits,
    read_byte,
    read_u32,
)

__all__ = [
    "add_suffix_to_top_level",
    "suffix_filename",
    "Bits",
    "append_byte",
    "append_u32",
    "bits_to_bitstring",
    "bitstring_to_bits",
    "new_bits",
    "read_byte",
    "read_u32",
]
