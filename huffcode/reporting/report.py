from __future__ import annotations

import csv
import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from dahuffman import HuffmanCodec

from huffcode.encoding_schemes.code_table import build_code_table
from huffcode.encoding_schemes.envelope import HEADER_BITS, build_envelope
from huffcode.encoding_schemes.topology import deserialize_tree
from huffcode.pipeline.config import CodecConfig
from huffcode.utils.file_utils import relative_output_path

REPORT_COLUMNS = [
    "input_path",
    "status",
    "original_size_bytes",
    "distinct_symbols",
    "max_code_length",
    "header_bits",
    "topology_bits",
    "payload_bits",
    "envelope_bits",
    "compression_ratio",
    "dahuffman_payload_bits",
    "success",
]


def _dahuffman_payload_bits(data: bytes) -> int:
    # dahuffman adds its own EOF symbol and pads to whole bytes, and keeps the
    # code table out of band; it serves as a payload-only baseline.
    if not data:
        return 0
    return len(HuffmanCodec.from_data(data).encode(data)) * 8


def envelope_stats(data: bytes) -> Dict[str, object]:
    """Size breakdown of the envelope produced for `data`."""
    envelope = build_envelope(data)
    lengths = build_code_table(deserialize_tree(envelope.topology)).code_lengths()
    original_bits = len(data) * 8
    return {
        "original_size_bytes": len(data),
        "distinct_symbols": len(lengths),
        "max_code_length": max(lengths.values(), default=0),
        "header_bits": HEADER_BITS,
        "topology_bits": envelope.topology_bit_length,
        "payload_bits": envelope.payload_bit_length,
        "envelope_bits": envelope.total_bits,
        "compression_ratio": (envelope.total_bits / original_bits) if original_bits else None,
        "dahuffman_payload_bits": _dahuffman_payload_bits(data),
    }


def _iter_files(root: Path) -> Iterable[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def generate_report(
    input_root: Path,
    output_root: Path,
    report_dir: Path,
    formats: Sequence[str] | None = None,
) -> Dict[str, object]:
    if formats is None:
        formats = CodecConfig().report_formats
    input_root = input_root.resolve()
    output_root = output_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = []
    total_original_bytes = 0
    total_envelope_bits = 0
    success_count = 0
    ratios: List[float] = []

    for input_file in _iter_files(input_root):
        decoded_path = relative_output_path(
            input_file, input_root, output_root / "out_decoded", "_decoded"
        )
        row: Dict[str, object] = {
            "input_path": str(input_file.relative_to(input_root)),
            "status": "ok",
        }

        original_bytes = input_file.read_bytes()
        total_original_bytes += len(original_bytes)
        row.update(envelope_stats(original_bytes))
        total_envelope_bits += row["envelope_bits"]
        if row["compression_ratio"] is not None:
            ratios.append(row["compression_ratio"])

        decoded_bytes: Optional[bytes] = None
        if decoded_path.exists():
            decoded_bytes = decoded_path.read_bytes()
            row["success"] = decoded_bytes == original_bytes
            if row["success"]:
                success_count += 1
        else:
            row["success"] = False
            row["status"] = "missing_decoded"

        rows.append(row)

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    summary = {
        "total_files": len(rows),
        "success_count": success_count,
        "success_rate": (success_count / len(rows)) if rows else 0.0,
        "total_original_bytes": total_original_bytes,
        "total_envelope_bits": total_envelope_bits,
        "mean_compression_ratio": statistics.mean(ratios) if ratios else 0.0,
        "median_compression_ratio": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "output_root": str(output_root),
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}
