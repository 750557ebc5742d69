from bitarray import bitarray
from bitarray.util import ba2int, int2ba

# Every buffer in the codec is big-endian so fixed-width fields read MSB-first.
Bits = bitarray

BIT_CHARS = frozenset("01")
U32_MAX = (1 << 32) - 1


def new_bits() -> Bits:
    """Return an empty big-endian bit buffer."""
    return bitarray(endian="big")


def append_byte(bits: Bits, value: int) -> None:
    """Append `value` as 8 bits, most significant bit first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    bits.extend(int2ba(value, length=8, endian="big"))


def append_u32(bits: Bits, value: int) -> None:
    """Append `value` as a 32-bit big-endian unsigned field."""
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"value does not fit in 32 bits: {value}")
    bits.extend(int2ba(value, length=32, endian="big"))


def _read_uint(bits: Bits, offset: int, width: int) -> int:
    if offset < 0 or offset + width > len(bits):
        raise IndexError(
            f"cannot read {width} bits at offset {offset} from a {len(bits)}-bit buffer"
        )
    return ba2int(bits[offset:offset + width])


def read_byte(bits: Bits, offset: int) -> int:
    return _read_uint(bits, offset, 8)


def read_u32(bits: Bits, offset: int) -> int:
    return _read_uint(bits, offset, 32)


def bits_to_bitstring(bits: Bits) -> str:
    """Bit buffer -> '0'/'1' text."""
    return bits.to01()


def bitstring_to_bits(text: str) -> Bits:
    """
    '0'/'1' text -> bit buffer.

    Any other character (whitespace included) is rejected.
    """
    for pos, ch in enumerate(text):
        if ch not in BIT_CHARS:
            raise ValueError(f"invalid bit character {ch!r} at position {pos}")
    bits = new_bits()
    bits.extend(text)
    return bits
