from typing import Tuple

from huffcode.encoding_schemes.huffman import huffman_decode, huffman_encode
from huffcode.pipeline.config import CodecConfig
from huffcode.pipeline.validation import validate_bitstring, validate_plain


def encode_text(text: str, cfg: CodecConfig | None = None) -> str:
    """
    Validate and encode text, returning the envelope as a '0'/'1' string.

    With `ascii_only` set, non-ASCII text is rejected before any work is done.
    """
    if cfg is None:
        cfg = CodecConfig()
    data = text.encode("utf-8")
    validate_plain(data, cfg)
    return huffman_encode(data).bits


def decode_bitstring(text: str, cfg: CodecConfig | None = None) -> str:
    """Validate a '0'/'1' envelope string and decode it back to text."""
    if cfg is None:
        cfg = CodecConfig()
    bits = validate_bitstring(text, cfg)
    return huffman_decode(bits).decode("utf-8")


def encode_file_bytes(data: bytes, cfg: CodecConfig) -> Tuple[str, bytes]:
    """
    Encode a file's bytes and decode the result straight back.
    Returns (envelope_bits, decoded_bytes).
    """
    validate_plain(data, cfg)
    enc = huffman_encode(data)
    decoded = huffman_decode(enc)
    return enc.bits, decoded
