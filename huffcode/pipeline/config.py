from dataclasses import dataclass
from typing import Tuple


@dataclass
class CodecConfig:
    """
    Configuration for the text <-> envelope pipeline.
    """
    # Reject input bytes >= 128 before encoding. The codec itself is byte-agnostic.
    ascii_only: bool = True
    # Drop leading/trailing whitespace (e.g. a trailing newline from a file)
    # before validating bit strings.
    strip_whitespace: bool = True
    report_formats: Tuple[str, ...] = ("csv", "json")
