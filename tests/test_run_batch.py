import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from huffcode.cli import main
from huffcode.encoding_schemes.huffman import huffman_decode
from huffcode.pipeline import CodecConfig, run_batch_on_folder
from huffcode.reporting.report import envelope_stats, generate_report
from huffcode.utils.file_utils import add_suffix_to_top_level, suffix_filename


def _make_inputs(root: Path) -> None:
    (root / "corpus" / "notes").mkdir(parents=True)
    (root / "corpus" / "alice.txt").write_bytes(b"Alice was beginning to get very tired.")
    (root / "corpus" / "notes" / "todo").write_bytes(b"aaaa")
    (root / "corpus" / "empty.txt").write_bytes(b"")
    (root / "corpus" / "binary.bin").write_bytes(b"\x00\xff\x80")


def test_path_helpers():
    assert add_suffix_to_top_level(Path("corpus/notes/a.txt"), "_encoded") == Path(
        "corpus_encoded/notes/a.txt"
    )
    assert add_suffix_to_top_level(Path(), "_encoded") == Path()
    assert suffix_filename(Path("alice.txt"), "_decoded") == Path("alice_decoded.txt")
    assert suffix_filename(Path("LICENSE"), "_encoded") == Path("LICENSE_encoded")


def test_run_batch_writes_outputs(tmp_path):
    input_root = tmp_path / "in"
    output_root = tmp_path / "out"
    _make_inputs(input_root)

    result = run_batch_on_folder(input_root, output_root, CodecConfig())

    assert sorted(result["processed"]) == sorted(
        [
            str(Path("corpus/alice.txt")),
            str(Path("corpus/empty.txt")),
            str(Path("corpus/notes/todo")),
        ]
    )
    assert result["skipped"] == [str(Path("corpus/binary.bin"))]

    encoded = output_root / "out_encoded" / "corpus_encoded" / "alice_encoded.txt"
    decoded = output_root / "out_decoded" / "corpus_decoded" / "alice_decoded.txt"
    assert huffman_decode(encoded.read_text(encoding="utf-8")) == b"Alice was beginning to get very tired."
    assert decoded.read_bytes() == b"Alice was beginning to get very tired."
    assert (output_root / "out_decoded" / "corpus_decoded" / "notes" / "todo_decoded").read_bytes() == b"aaaa"


def test_generate_report(tmp_path):
    input_root = tmp_path / "in"
    output_root = tmp_path / "out"
    report_dir = tmp_path / "report"
    _make_inputs(input_root)
    run_batch_on_folder(input_root, output_root, CodecConfig())

    report = generate_report(input_root, output_root, report_dir, formats=("csv", "json"))

    assert (report_dir / "report.csv").exists()
    payload = json.loads((report_dir / "report.json").read_text(encoding="utf-8"))
    assert payload["summary"]["total_files"] == 4
    assert payload["summary"]["success_count"] == 3

    rows = {row["input_path"]: row for row in report["files"]}
    assert rows[str(Path("corpus/binary.bin"))]["status"] == "missing_decoded"
    assert rows[str(Path("corpus/empty.txt"))]["compression_ratio"] is None
    assert rows[str(Path("corpus/notes/todo"))]["payload_bits"] == 4


def test_payload_never_exceeds_dahuffman_baseline():
    for data in (b"abracadabra", b"the quick brown fox jumps over the lazy dog" * 3, b"aaaa"):
        stats = envelope_stats(data)
        assert stats["payload_bits"] <= stats["dahuffman_payload_bits"]


def test_cli_batch(tmp_path, capsys):
    input_root = tmp_path / "in"
    output_root = tmp_path / "out"
    _make_inputs(input_root)

    code = main(
        [
            "batch",
            "--input-root", str(input_root),
            "--output-root", str(output_root),
            "--formats", "json",
        ]
    )

    assert code == 0
    assert (output_root / "report" / "report.json").exists()
    assert not (output_root / "report" / "report.csv").exists()
    assert "Report written to" in capsys.readouterr().out


def test_cli_batch_uses_configured_formats(tmp_path):
    input_root = tmp_path / "in"
    output_root = tmp_path / "out"
    _make_inputs(input_root)

    assert main(["batch", "--input-root", str(input_root), "--output-root", str(output_root)]) == 0

    for fmt in CodecConfig().report_formats:
        assert (output_root / "report" / f"report.{fmt}").exists()


def test_generate_report_defaults_to_config_formats(tmp_path):
    input_root = tmp_path / "in"
    _make_inputs(input_root)
    report_dir = tmp_path / "report"

    generate_report(input_root, tmp_path / "out", report_dir)

    assert sorted(p.name for p in report_dir.iterdir()) == ["report.csv", "report.json"]
