import pytest


SAMPLE_RESUME = """
Jane Doe
San Francisco, CA | jane.doe@example.com | (415) 555-0132
linkedin.com/in/janedoe | github.com/janedoe | https://janedoe.dev

Education
Bachelor of Science in Computer Science 2014 - 2018
Stanford University
GPA: 3.8/4.0

Skills
Languages: Python, Go; Rust
Docker, Kubernetes

Experience
Jan 2020 - Present
Senior Software Engineer
Acme Corp
- Led migration of billing services
- Mentored four engineers
2018 - 2019
Software Engineer
Initech
• Built internal tooling

Projects
Resume Parser
- Extracts structured data from resumes
- Technologies: Python, pydantic
- Handles PDF and DOCX input
Portfolio Site
* Static site

Certifications
AWS Certified Solutions Architect 2021
Certified Kubernetes Administrator
"""


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_resume_file(tmp_path):
    f = tmp_path / "resume.txt"
    f.write_text(SAMPLE_RESUME, encoding="utf-8")
    return f
