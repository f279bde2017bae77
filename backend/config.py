from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.2
    gemini_max_output_tokens: int = 4096
    gemini_timeout_seconds: float = 60.0

    # Number of job-description skills the model is asked to report
    skill_count: int = Field(default=10, ge=1, le=25)
    # "extract": embed pdfplumber text in the prompt
    # "multimodal": attach the PDF itself to the Gemini request
    pdf_mode: Literal["extract", "multimodal"] = "extract"
    max_upload_size_mb: int = 5

    analyze_path: str = "/api/analyze"
    rate_limit: str = "10/minute"

    debug: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
