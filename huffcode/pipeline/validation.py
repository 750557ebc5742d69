from huffcode.pipeline.config import CodecConfig
from huffcode.utils.bits_bytes_utils import BIT_CHARS


def validate_plain(data: bytes, cfg: CodecConfig) -> None:
    """Raise ValueError if `data` may not be encoded under `cfg`."""
    if not cfg.ascii_only:
        return
    for pos, byte in enumerate(data):
        if byte >= 0x80:
            raise ValueError(f"non-ASCII byte 0x{byte:02x} at position {pos}")


def validate_bitstring(text: str, cfg: CodecConfig) -> str:
    """
    Check that `text` holds only '0' and '1'.

    Returns the text that should be decoded (stripped when configured).
    """
    if cfg.strip_whitespace:
        text = text.strip()
    for pos, ch in enumerate(text):
        if ch not in BIT_CHARS:
            raise ValueError(
                f"decode expects a bitstring containing only '0' and '1', "
                f"got {ch!r} at position {pos}"
            )
    return text
