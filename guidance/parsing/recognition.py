"""
Document Analyzer

Boundary between the external text-recognition service and the parser.

The recogniser is a collaborator: it is invoked once, returns one string or
fails once. Failures are never retried and never propagated - they come back
as a ParseResult carrying a recognition_failure error.
"""

import logging
from typing import Optional, Protocol

from ..logic.contracts import ParseErrorKind, ParseResult
from .document_parser import DocumentParser

logger = logging.getLogger(__name__)


class TextRecognizer(Protocol):
    """Anything that turns image bytes into recognised text."""

    def recognize(self, image: bytes) -> str:
        ...


class DocumentAnalyzer:
    """Runs a recogniser and hands its text to the DocumentParser."""

    def __init__(self, recognizer: TextRecognizer, parser: Optional[DocumentParser] = None):
        self.recognizer = recognizer
        self.parser = parser or DocumentParser()

    def analyze(self, image: Optional[bytes]) -> ParseResult:
        """
        Recognise and parse one document image.

        Args:
            image: Raw image bytes as uploaded

        Returns:
            ParseResult; recognition problems are reported on ``error``
        """
        logger.debug("Starting document analysis...")

        if not image:
            logger.error("❌ Could not decode image: empty payload")
            return _failure("Could not decode image from file")

        try:
            text = self.recognizer.recognize(image)
        except Exception as e:
            logger.exception(f"❌ Error analyzing document: {e}")
            return _failure(f"Analysis failed: {e}")

        if not isinstance(text, str):
            logger.error(f"❌ Recognizer returned {type(text).__name__}, expected text")
            return _failure("Recognition returned no usable text")

        logger.debug(f"Text extraction completed. Text length: {len(text)}")
        if text:
            logger.debug(f"First 200 chars: {text[:200]}")

        return self.parser.parse(text)


def _failure(message: str) -> ParseResult:
    return ParseResult(
        subjects=[],
        raw_text="",
        confidence=0.0,
        error=message,
        error_kind=ParseErrorKind.RECOGNITION_FAILURE,
    )
