"""Prompt templates for the Gemini skills comparison call."""

_RESPONSE_FORMAT = """Respond with ONLY valid JSON (no markdown, no code fences, no additional text) in this exact structure:
{
  "skills": [
    {
      "skill": "<skill name>",
      "present": <true or false>,
      "explanation": "<brief explanation>"
    }
  ]
}"""


def _task_section(skill_count: int) -> str:
    return f"""TASK:
1. Be consistent in your analysis.
2. Extract exactly {skill_count} most frequently mentioned skills from the job description.
3. For each skill, determine if the resume explicitly demonstrates this skill (true or false).
4. Use only exact or similar keyword matches to determine presence.
5. Return the skills in order of importance to the job description."""


def build_skills_prompt(resume_text: str, job_description: str, skill_count: int = 10) -> str:
    """Skills comparison with the resume embedded as plain text."""
    return f"""You are a professional resume analyzer. I will provide you with a job description and a resume.

JOB DESCRIPTION:
---
{job_description}
---

RESUME:
---
{resume_text}
---

{_task_section(skill_count)}

{_RESPONSE_FORMAT}"""


def build_skills_prompt_for_pdf(job_description: str, skill_count: int = 10) -> str:
    """Skills comparison where the resume is attached as a PDF document."""
    return f"""You are a professional resume analyzer. I will provide you with a job description and a resume PDF.

JOB DESCRIPTION:
---
{job_description}
---

RESUME:
The resume is provided as a PDF file. Please analyze its entire content carefully.

{_task_section(skill_count)}

{_RESPONSE_FORMAT}"""
