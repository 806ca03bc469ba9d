from resume_extractor.rules import extract_skills


def test_labeled_line_becomes_named_group():
    assert extract_skills(["Languages: Python, Go, Rust"]) == [
        {"category": "Languages", "items": ["Python", "Go", "Rust"]}
    ]


def test_unlabeled_line_lands_in_general():
    assert extract_skills(["Python, SQL; Flask"]) == [
        {"category": "General", "items": ["Python", "SQL", "Flask"]}
    ]


def test_each_line_is_its_own_group_and_duplicates_are_kept():
    out = extract_skills(["Tools: Git, Docker", "Git", "Frameworks: Django; Django"])
    assert [g["category"] for g in out] == ["Tools", "General", "Frameworks"]
    assert out[2]["items"] == ["Django", "Django"]


def test_empty_items_are_skipped():
    assert extract_skills([", ;"]) == []
    assert extract_skills(["Cloud: AWS, , GCP"])[0]["items"] == ["AWS", "GCP"]
