import os
from pathlib import Path
from typing import Dict, List

from huffcode.pipeline.config import CodecConfig
from huffcode.pipeline.runner import encode_file_bytes
from huffcode.utils.file_utils import relative_output_path


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: CodecConfig | None = None,
) -> Dict[str, List[str]]:
    """
    Encode and decode every file below `input_root`.

    Envelopes are written as '0'/'1' text under `output_root/out_encoded`,
    round-tripped bytes under `output_root/out_decoded`. Files rejected by
    validation are skipped. Returns the processed and skipped relative paths.
    """
    if cfg is None:
        cfg = CodecConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()

    out_encoded_root = output_root / "out_encoded"
    out_decoded_root = output_root / "out_decoded"

    result: Dict[str, List[str]] = {"processed": [], "skipped": []}
    for root, _, files in os.walk(input_root):
        for filename in sorted(files):
            in_path = Path(root) / filename
            rel = str(in_path.relative_to(input_root))
            print("Processing:", in_path)
            try:
                process_file(in_path, input_root, out_encoded_root, out_decoded_root, cfg)
            except ValueError as exc:
                print(f"Skipped {in_path}: {exc}")
                result["skipped"].append(rel)
                continue
            result["processed"].append(rel)

    return result


def process_file(
    in_path: Path,
    input_root: Path,
    out_encoded_root: Path,
    out_decoded_root: Path,
    cfg: CodecConfig,
) -> None:
    data = in_path.read_bytes()
    envelope_bits, decoded_bytes = encode_file_bytes(data, cfg)

    encoded_out_path = relative_output_path(in_path, input_root, out_encoded_root, "_encoded")
    encoded_out_path.parent.mkdir(parents=True, exist_ok=True)
    encoded_out_path.write_text(envelope_bits, encoding="utf-8")

    decoded_out_path = relative_output_path(in_path, input_root, out_decoded_root, "_decoded")
    decoded_out_path.parent.mkdir(parents=True, exist_ok=True)
    decoded_out_path.write_bytes(decoded_bytes)
