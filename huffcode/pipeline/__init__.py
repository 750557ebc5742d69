from huffcode.pipeline.config import CodecConfig
from huffcode.pipeline.runner import decode_bitstring, encode_file_bytes, encode_text
from huffcode.pipeline.validation import validate_bitstring, validate_plain


def run_batch_on_folder(*args, **kwargs):
    # Lazy import so importing `huffcode.pipeline` doesn't pull in the reporting
    # stack (e.g. dahuffman) unless batch execution is actually requested.
    from huffcode.utils.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "CodecConfig",
    "decode_bitstring",
    "encode_file_bytes",
    "encode_text",
    "validate_bitstring",
    "validate_plain",
    "run_batch_on_folder",
]
