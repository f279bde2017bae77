import base64
import binascii
import io
import logging

import pdfplumber

from services.errors import ExtractionError, ValidationError

logger = logging.getLogger(__name__)

# Prefix produced by FileReader.readAsDataURL in browsers
_DATA_URL_MARKER = ";base64,"


def decode_pdf_base64(data: str, max_size_mb: int | None = None) -> bytes:
    """Decode a base64 PDF payload, optionally enforcing a size limit."""
    payload = data.strip()
    if payload.startswith("data:") and _DATA_URL_MARKER in payload:
        payload = payload.split(_DATA_URL_MARKER, 1)[1]
    # Clients sometimes wrap long base64 strings across lines
    payload = "".join(payload.split())

    try:
        pdf_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ExtractionError(f"invalid base64 data ({e})") from e

    if max_size_mb is not None and len(pdf_bytes) > max_size_mb * 1024 * 1024:
        raise ValidationError(f"File too large. Max size: {max_size_mb}MB")
    return pdf_bytes


def check_pdf_header(pdf_bytes: bytes) -> None:
    """Raise ExtractionError unless the bytes carry a PDF header."""
    # Readers accept the header anywhere in the first 1024 bytes
    if b"%PDF-" not in pdf_bytes[:1024]:
        raise ExtractionError("not a PDF document (missing %PDF- header)")


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file, one page per line block."""
    if not pdf_bytes:
        raise ExtractionError("empty PDF payload")

    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("pdfplumber could not read document: %s", e)
        raise ExtractionError("Could not parse PDF file") from e

    text = "\n".join(pages).strip()
    if not text:
        raise ExtractionError("No text could be extracted from PDF")

    logger.debug("Extracted %d chars from %d page(s)", len(text), len(pages))
    return text
