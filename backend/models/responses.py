from pydantic import BaseModel


class SkillFinding(BaseModel):
    skill: str
    present: bool
    explanation: str = ""


class AnalysisResult(BaseModel):
    skills: list[SkillFinding]


class ErrorResponse(BaseModel):
    error: str
    trace: str | None = None
