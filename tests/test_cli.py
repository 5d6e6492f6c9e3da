import json
from pathlib import Path

from vispeak.cli import main


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: vispeak" in captured.out


def test_cli_normalize_returns_json(capsys) -> None:
    exit_code = main(["normalize", "Giá 50%"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["normalized"] == "giá năm mươi phần trăm"
    assert payload["chunks"] == ["giá năm mươi phần trăm."]
    assert payload["metadata"]["chunk_count"] == 1
    assert payload["metadata"]["replacement_entries"] > 0
    assert payload["traces"] == []


def test_cli_normalize_flags(capsys) -> None:
    exit_code = main(["normalize", "Tôi thích data", "--no-transliteration", "--debug"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["normalized"] == "tôi thích data"
    assert payload["metadata"]["enable_transliteration"] is False
    assert payload["traces"][0]["stage"] == "unicode"


def test_cli_normalize_writes_json_file(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "normalized.json"
    exit_code = main(["normalize", "Xin chào", "-o", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Wrote normalization JSON" in captured.out
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["chunks"] == ["xin chào."]


def test_cli_reads_text_file(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "input.txt"
    input_path.write_text("Xin chào. Tôi là An.\nHẹn gặp lại", encoding="utf-8")

    exit_code = main(["normalize", str(input_path), "--chunks-only"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.splitlines() == ["xin chào.", "tôi là an.", "hẹn gặp lại."]


def test_cli_chunks_only_writes_text_file(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "chunks.txt"
    exit_code = main(
        ["normalize", "Xin chào. Tôi là An.", "--chunks-only", "-o", str(output_path)]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Wrote 2 chunks" in captured.out
    assert output_path.read_text(encoding="utf-8") == "xin chào.\ntôi là an.\n"
