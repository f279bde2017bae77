from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str | None = Field(
        None, alias="resumeText", max_length=50000, description="Plain text resume content"
    )
    resume_pdf_base64: str | None = Field(
        None, alias="resumePdfBase64", description="Base64-encoded resume PDF"
    )
    job_description: str | None = Field(
        None, alias="jobDescription", max_length=10000, description="Job description text"
    )
