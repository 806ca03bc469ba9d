from resume_extractor.rules import extract_projects


def test_projects_extraction_happy_path_structured_fields():
    lines = [
        "Resume Parser",
        "- Extracts structured data from resumes",
        "- Technologies: Python, pydantic; pytest",
        "- Handles PDF input",
        "- Handles DOCX input",
    ]
    projects = extract_projects(lines)
    assert len(projects) == 1
    p0 = projects[0]
    assert p0["id"] == "proj-0"
    assert p0["title"] == "Resume Parser"
    assert p0["description"] == "Extracts structured data from resumes"
    assert p0["technologies"] == ["Python", "pydantic", "pytest"]
    assert p0["highlights"] == ["Handles PDF input", "Handles DOCX input"]


def test_every_plain_line_starts_a_project():
    projects = extract_projects(["Alpha", "Beta", "• beta detail", "Gamma"])
    assert [p["title"] for p in projects] == ["Alpha", "Beta", "Gamma"]
    assert [p["id"] for p in projects] == ["proj-0", "proj-1", "proj-2"]
    assert projects[1]["description"] == "beta detail"


def test_tech_stack_label_is_case_insensitive():
    projects = extract_projects(["Site", "* TECH STACK: Next.js, Tailwind,"])
    assert projects[0]["technologies"] == ["Next.js", "Tailwind"]
    assert projects[0]["description"] == ""


def test_empty_tech_label_is_ignored():
    projects = extract_projects(["Site", "- Technologies:", "- A static site"])
    assert projects[0]["technologies"] == []
    assert projects[0]["description"] == "A static site"


def test_bullets_before_any_title_are_dropped():
    assert extract_projects(["- orphan bullet"]) == []
