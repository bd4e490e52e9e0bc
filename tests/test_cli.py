# tests/test_cli.py

import io
import json

from gpgkey_core.cli import main

BLOCK = (
    "pub   2048R/ABCD1234 2020-01-01 [expires: 2025-01-01]\n"
    "uid  Jane Doe <jane@example.com>\n"
    "sub   2048R/EF567890 2025-01-01\n"
)


def _stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(text.encode("utf-8"))))


def test_json_output(tmp_path, capsys):
    """JSON output carries every field of each listed key."""
    path = tmp_path / "keys.txt"
    path.write_text("/home/jane/.gnupg/pubring.gpg\n-----\n" + BLOCK)

    assert main([str(path), "--format", "json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert len(out) == 1
    assert out[0]["fingerprint"] == "ABCD1234"
    assert out[0]["sub_key_expiration"] == "2025-01-01T00:00:00"
    assert out[0]["raw"] == BLOCK


def test_text_output_from_stdin(monkeypatch, capsys):
    """'-' reads stdin and the text format labels each field."""
    _stdin(monkeypatch, BLOCK)
    assert main(["-", "--single"]) == 0
    out = capsys.readouterr().out
    assert "Key: ABCD1234" in out
    assert "UserName: Jane Doe" in out


def test_crlf_stdin_keeps_raw(monkeypatch, capsys):
    """CRLF on stdin survives into raw unchanged."""
    block = BLOCK.replace("\n", "\r\n")
    _stdin(monkeypatch, block)
    assert main(["--single", "--format", "json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out[0]["raw"] == block


def test_malformed_single_block(monkeypatch, capsys):
    """A malformed single block exits 2 with an error on stderr."""
    _stdin(monkeypatch, "pub\n")
    assert main(["--single"]) == 2
    assert "error:" in capsys.readouterr().err


def test_strict_listing(tmp_path, capsys):
    """--strict turns a skipped block into a failure."""
    path = tmp_path / "keys.txt"
    path.write_text("pub\n\n" + BLOCK)
    assert main([str(path), "--strict"]) == 2
    assert main([str(path), "--format", "json"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out[out.index("["):])[0]["fingerprint"] == "ABCD1234"


def test_log_file_gets_parser_warnings(tmp_path, monkeypatch, capsys, detach_file_logs):
    """GPGKEY_LOG_FILE collects the parser's skipped-block warnings."""
    log_path = tmp_path / "logs" / "cli.log"
    monkeypatch.setenv("GPGKEY_LOG_FILE", str(log_path))
    path = tmp_path / "keys.txt"
    path.write_text("pub\n\n" + BLOCK)

    assert main([str(path)]) == 0
    lines = [json.loads(l) for l in log_path.read_text().splitlines()]
    assert any(e["name"] == "gpgkey.parser" and "skipping block" in e["msg"] for e in lines)


def test_missing_file(tmp_path, capsys):
    """An unreadable path exits 2."""
    assert main([str(tmp_path / "nope.txt")]) == 2
    assert "error:" in capsys.readouterr().err
