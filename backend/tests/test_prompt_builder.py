from services.prompt_builder import build_skills_prompt, build_skills_prompt_for_pdf

RESUME = "Jane Smith\nBuilt {templated} services in Python and Go"
JD = "Looking for Python, Docker, Kubernetes expertise"


def test_embeds_texts_verbatim():
    prompt = build_skills_prompt(RESUME, JD)
    assert RESUME in prompt
    assert JD in prompt


def test_default_skill_count():
    assert "exactly 10 most frequently mentioned skills" in build_skills_prompt(RESUME, JD)


def test_custom_skill_count():
    prompt = build_skills_prompt(RESUME, JD, skill_count=7)
    assert "exactly 7 most frequently mentioned skills" in prompt
    assert "exactly 10" not in prompt


def test_requires_json_only_reply():
    prompt = build_skills_prompt(RESUME, JD)
    assert "ONLY valid JSON" in prompt
    for key in ('"skills"', '"skill"', '"present"', '"explanation"'):
        assert key in prompt


def test_pdf_prompt_omits_resume_text():
    prompt = build_skills_prompt_for_pdf(JD, skill_count=5)
    assert JD in prompt
    assert "provided as a PDF file" in prompt
    assert "exactly 5 most frequently mentioned skills" in prompt
    assert '"skills"' in prompt
