from dataclasses import dataclass

from huffcode.encoding_schemes.envelope import Envelope, build_envelope, decode
from huffcode.utils.bits_bytes_utils import bits_to_bitstring, bitstring_to_bits


@dataclass
class HuffmanEncoded:
    """
    Container for Huffman-encoded data.

    - bits: the full envelope as a bit string (e.g. '0000...0101')
    - envelope: parsed header, topology and payload that produced `bits`
    """
    bits: str
    envelope: Envelope


def huffman_encode(data: bytes) -> HuffmanEncoded:
    """
    Encode raw bytes into a self-describing Huffman envelope.

    """
    envelope = build_envelope(data)
    return HuffmanEncoded(bits=bits_to_bitstring(envelope.to_bits()), envelope=envelope)


def huffman_decode(encoded: HuffmanEncoded | str) -> bytes:
    """
    Decode an envelope bit string (or HuffmanEncoded) back to the original bytes.

    Only the bit string is consulted; the tree is rebuilt from its topology.
    """
    bits = encoded.bits if isinstance(encoded, HuffmanEncoded) else encoded
    return decode(bitstring_to_bits(bits))
