import io
import json

import pytest

from resume_extractor.__main__ import main


def test_cli_prints_json_for_file(sample_resume_file, capsys):
    assert main([str(sample_resume_file), "--indent", "0"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["personalInfo"]["fullName"] == "Jane Doe"
    assert len(out["experience"]) == 2


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Skills\nPython, Go"))
    assert main(["-"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["skills"] == [{"category": "General", "items": ["Python", "Go"]}]


def test_cli_rejects_unknown_log_level(sample_resume_file, capsys):
    import pytest

    with pytest.raises(SystemExit) as exc:
        main([str(sample_resume_file), "--log-level", "loud"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_cli_log_level_is_case_insensitive(sample_resume_file, capsys):
    assert main([str(sample_resume_file), "--log-level", "debug"]) == 0
    assert json.loads(capsys.readouterr().out)["personalInfo"]["fullName"] == "Jane Doe"
