import os
import sys

# Debug tracing controlled by environment variable HUFFCODE_DEBUG
_DEBUG = os.environ.get("HUFFCODE_DEBUG", "").lower() in {"1", "true", "yes"}


def debug_enabled() -> bool:
    return _DEBUG


def dbg(tag: str, msg: str) -> None:
    if _DEBUG:
        print(f"[{tag}] {msg}", file=sys.stderr)
