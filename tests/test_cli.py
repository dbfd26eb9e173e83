import pytest
import requests

from apps.cli.wordle import build_parser, main
from wordlebot.datasets import source as source_mod

BODY = "crane\t30\nab\t20\ngrape\t15\nstone\t10\n"


def test_solve_end_to_end(tmp_path, capsys):
    p = tmp_path / "words.txt"
    p.write_text(BODY, encoding="utf-8")
    rc = main(["--words-file", str(p), "solve", "STONE"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "word: stone, turn: 2" in out
    assert "done: 3 words" in out


def test_solve_rejects_bad_target_before_download(tmp_path, capsys):
    p = tmp_path / "words.txt"
    rc = main(["--words-file", str(p), "solve", "cran"])
    assert rc == 1
    assert "target must be 5 characters in length" in capsys.readouterr().out
    assert not p.exists()


def test_download_failure_reported(tmp_path, monkeypatch, capsys):
    def boom(url, **kw):
        raise requests.ConnectionError("no network")

    monkeypatch.setattr(source_mod.requests, "get", boom)
    rc = main(["--words-file", str(tmp_path / "words.txt"), "play"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "not found, downloading" in out
    assert "error: no network" in out


def test_play_end_to_end(tmp_path, monkeypatch, capsys):
    p = tmp_path / "words.txt"
    p.write_text(BODY, encoding="utf-8")
    answers = iter(["bbbgg", "ggggg"])
    monkeypatch.setattr("builtins.input", lambda *a: next(answers))
    rc = main(["--count", "2", "--words-file", str(p), "play"])
    out = capsys.readouterr().out
    assert rc == 0
    # only crane and grape were loaded, so bbbgg on crane leaves nothing
    assert "word not found" in out


def test_undecodable_source_reported(tmp_path, capsys):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\t30\n\xff\xfe\t1\n")
    rc = main(["--words-file", str(p), "solve", "crane"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "error:" in out
    assert "attempting to solve" not in out


def test_unreadable_source_reported(tmp_path, capsys):
    # a directory where the word file should be: exists, but can't be opened
    p = tmp_path / "words.txt"
    p.mkdir()
    rc = main(["--words-file", str(p), "play"])
    assert rc == 1
    assert "error:" in capsys.readouterr().out


def test_no_solver_flag():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--solver", "most_frequent", "play"])
