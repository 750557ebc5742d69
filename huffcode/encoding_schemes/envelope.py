"""
Self-describing Huffman envelope.

Layout (all fields big-endian, MSB first):

    bits   0..31   payload bit-length
    bits  32..63   original byte count
    bits  64..95   topology bit-length
    bits  96..     topology, then payload
"""

from dataclasses import dataclass, field

from bitarray import frozenbitarray

from huffcode.encoding_schemes.code_table import build_code_table
from huffcode.encoding_schemes.frequency import count_frequencies
from huffcode.encoding_schemes.topology import deserialize_tree, serialize_tree
from huffcode.encoding_schemes.tree import build_tree
from huffcode.utils.bits_bytes_utils import Bits, append_u32, new_bits, read_u32
from huffcode.utils.debug import dbg

HEADER_FIELD_BITS = 32
HEADER_BITS = 3 * HEADER_FIELD_BITS


@dataclass
class Envelope:
    """
    Parsed form of an encoded bitstream.

    The three integer fields are the header exactly as stored; `topology`
    and `payload` are the sliced bit regions that follow it.
    """
    payload_bit_length: int
    original_length: int
    topology_bit_length: int
    topology: Bits = field(default_factory=new_bits)
    payload: Bits = field(default_factory=new_bits)

    @property
    def total_bits(self) -> int:
        return HEADER_BITS + self.topology_bit_length + self.payload_bit_length

    def to_bits(self) -> Bits:
        bits = new_bits()
        append_u32(bits, self.payload_bit_length)
        append_u32(bits, self.original_length)
        append_u32(bits, self.topology_bit_length)
        bits.extend(self.topology)
        bits.extend(self.payload)
        return bits

    @classmethod
    def from_bits(cls, bits: Bits) -> "Envelope":
        if len(bits) < HEADER_BITS:
            raise ValueError(
                f"Envelope needs at least {HEADER_BITS} header bits, got {len(bits)}"
            )
        payload_bit_length = read_u32(bits, 0)
        original_length = read_u32(bits, HEADER_FIELD_BITS)
        topology_bit_length = read_u32(bits, 2 * HEADER_FIELD_BITS)

        topology_end = HEADER_BITS + topology_bit_length
        payload_end = topology_end + payload_bit_length
        if payload_end > len(bits):
            raise ValueError(
                f"Envelope is truncated: header declares {payload_end} bits, got {len(bits)}"
            )

        return cls(
            payload_bit_length=payload_bit_length,
            original_length=original_length,
            topology_bit_length=topology_bit_length,
            topology=bits[HEADER_BITS:topology_end],
            payload=bits[topology_end:payload_end],
        )


def build_envelope(data: bytes) -> Envelope:
    """Run frequency analysis, tree building and coding for `data`."""
    root = build_tree(count_frequencies(data))
    table = build_code_table(root)

    payload = new_bits()
    for byte in data:
        code = table.encoding.get(byte)
        if code is None:
            continue
        payload.extend(code)

    topology = serialize_tree(root)
    envelope = Envelope(
        payload_bit_length=len(payload),
        original_length=len(data),
        topology_bit_length=len(topology),
        topology=topology,
        payload=payload,
    )
    dbg(
        "ENV",
        f"encode original={envelope.original_length} topology_bits={envelope.topology_bit_length} "
        f"payload_bits={envelope.payload_bit_length}",
    )
    return envelope


def encode(data: bytes) -> Bits:
    """Encode `data` into a single envelope bitstream."""
    return build_envelope(data).to_bits()


def decode(bits: Bits) -> bytes:
    """Reconstruct the original bytes from an envelope bitstream."""
    envelope = Envelope.from_bits(bits)
    table = build_code_table(deserialize_tree(envelope.topology))

    out = bytearray()
    candidate = new_bits()
    for bit in envelope.payload:
        candidate.append(bit)
        symbol = table.decoding.get(frozenbitarray(candidate))
        if symbol is None:
            continue
        out.append(symbol)
        candidate.clear()

    if candidate:
        dbg("ENV", f"dropping {len(candidate)} unmatched trailing payload bits")
    if len(out) != envelope.original_length:
        dbg("ENV", f"decoded {len(out)} bytes, header declares {envelope.original_length}")
    return bytes(out)
