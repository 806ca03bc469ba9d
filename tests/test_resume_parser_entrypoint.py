import pytest


def test_parse_resume_calls_parse_file_and_adapt(monkeypatch, tmp_path):
    import resume_parser

    calls = {"parse_file": 0, "adapt": 0}

    def fake_parse_file(path):
        calls["parse_file"] += 1
        return object()

    def fake_adapt(res):
        calls["adapt"] += 1
        return {"ok": True}

    monkeypatch.setattr(resume_parser, "parse_file", fake_parse_file)
    monkeypatch.setattr(resume_parser, "adapt_for_backend", fake_adapt)

    f = tmp_path / "x.pdf"
    f.write_bytes(b"%PDF-1.4 fake")

    out = resume_parser.parse_resume(str(f))
    assert out == {"ok": True}
    assert calls["parse_file"] == 1
    assert calls["adapt"] == 1


def test_parse_resume_txt_end_to_end(sample_resume_file):
    import resume_parser

    out = resume_parser.parse_resume(str(sample_resume_file))
    assert out["personalInfo"]["fullName"] == "Jane Doe"
    assert out["certifications"][0]["date"] == "2021"


def test_parse_resume_unsupported_extension_raises(tmp_path):
    import resume_parser

    f = tmp_path / "x.rtf"
    f.write_text("no")
    with pytest.raises(ValueError):
        resume_parser.parse_resume(str(f))
