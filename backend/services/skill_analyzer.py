"""Orchestrator: resume vs. job description skills analysis.

Pipeline:
1. Validate the request
2. Extract PDF text (only when no plain-text resume was sent)
3. Build the prompt
4. Await the completion service
5. Parse the JSON skills list out of the reply

Any stage may fail; the error propagates to the route, which responds.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from fastapi.concurrency import run_in_threadpool

from config import Settings
from models.requests import AnalyzeRequest
from models.responses import AnalysisResult
from services import pdf_parser, prompt_builder, response_parser
from services.errors import AnalysisError, ValidationError
from services.gemini_client import CompletionClient

logger = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE = (
    "Missing required field. Please provide resumeText or resumePdfBase64, and jobDescription."
)


class Stage(str, Enum):
    RECEIVING_REQUEST = "ReceivingRequest"
    VALIDATING = "Validating"
    EXTRACTING_PDF = "ExtractingPdf"
    BUILDING_PROMPT = "BuildingPrompt"
    AWAITING_COMPLETION = "AwaitingCompletion"
    PARSING_RESPONSE = "ParsingResponse"
    RESPONDED = "Responded"


@dataclass
class ValidatedInput:
    job_description: str
    resume_text: str | None = None
    resume_pdf: str | None = None


def _present(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def validate_request(body: AnalyzeRequest) -> ValidatedInput:
    """Check that a resume and a job description were both supplied."""
    resume_text = _present(body.resume_text)
    resume_pdf = _present(body.resume_pdf_base64)
    job_description = _present(body.job_description)

    if (resume_text is None and resume_pdf is None) or job_description is None:
        raise ValidationError(MISSING_FIELD_MESSAGE)

    return ValidatedInput(
        job_description=job_description,
        resume_text=resume_text,
        # Plain text wins when both are sent
        resume_pdf=resume_pdf if resume_text is None else None,
    )


class _StageTracker:
    def __init__(self) -> None:
        self.stage = Stage.RECEIVING_REQUEST

    def enter(self, stage: Stage) -> None:
        logger.debug("%s -> %s", self.stage.value, stage.value)
        self.stage = stage


async def analyze(
    body: AnalyzeRequest,
    client: CompletionClient,
    settings: Settings,
) -> AnalysisResult:
    """Run the full analysis for one request."""
    tracker = _StageTracker()
    try:
        tracker.enter(Stage.VALIDATING)
        validated = validate_request(body)

        attachment = None
        resume_text = validated.resume_text
        if resume_text is None:
            tracker.enter(Stage.EXTRACTING_PDF)
            pdf_bytes = pdf_parser.decode_pdf_base64(
                validated.resume_pdf, max_size_mb=settings.max_upload_size_mb
            )
            pdf_parser.check_pdf_header(pdf_bytes)
            if settings.pdf_mode == "multimodal":
                attachment = pdf_bytes
            else:
                # pdfplumber is CPU-bound; keep it off the event loop
                resume_text = await run_in_threadpool(pdf_parser.extract_text, pdf_bytes)

        tracker.enter(Stage.BUILDING_PROMPT)
        if attachment is not None:
            prompt = prompt_builder.build_skills_prompt_for_pdf(
                validated.job_description, settings.skill_count
            )
        else:
            prompt = prompt_builder.build_skills_prompt(
                resume_text, validated.job_description, settings.skill_count
            )
        logger.info(
            "Analyzing resume (%s, %d chars) against job description (%d chars)",
            "pdf attachment" if attachment is not None else "text",
            len(attachment) if attachment is not None else len(resume_text),
            len(validated.job_description),
        )

        tracker.enter(Stage.AWAITING_COMPLETION)
        reply = await client.complete(prompt, attachment=attachment)

        tracker.enter(Stage.PARSING_RESPONSE)
        result = response_parser.parse_analysis(reply)
    except AnalysisError as e:
        logger.warning("Analysis failed during %s: %s", tracker.stage.value, e)
        raise
    finally:
        tracker.enter(Stage.RESPONDED)

    logger.info("Analysis complete: %d skill(s)", len(result.skills))
    return result
