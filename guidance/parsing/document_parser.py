"""
Document Parser

Turns raw recognised report-card text into a ParseResult:
1. Direct pass - canonicalise each line and read the score on that same line
2. Pattern-matching fallback - only when the direct pass finds nothing
3. Confidence scoring

Never raises for text input; every failure is reported on the ParseResult.
"""

import logging
import random
import re
from typing import List, Optional

from ..logic.constants import (
    CONFIDENCE_SIZE_FACTORS,
    CONFIDENCE_SIZE_FLOOR,
    DEFAULT_SYNTHETIC_RANGE,
    MIN_LINE_LENGTH,
    MIN_TEXT_LENGTH,
    REALISTIC_SCORE_RANGE,
    SCORE_MAX,
    SCORE_MIN,
    SYNTHETIC_CONFIDENCE_PENALTY,
    SYNTHETIC_SCORE_RANGES,
)
from ..logic.contracts import ExtractedSubject, ParseErrorKind, ParseResult
from .score_extractor import PERCENTAGE_PATTERN, extract_score
from .subject_catalog import SubjectCatalog, subject_catalog

logger = logging.getLogger(__name__)

# Split point after every "NN%" token
_SEGMENT_SPLIT = re.compile(r"(?<=%)")


class DocumentParser:
    """
    Heuristic report-card text parser.

    Args:
        catalog: Keyword catalog used to identify subjects
        rng: Random source for synthetic fallback scores (seed it for tests)
        enable_synthetic: If False, the fallback keeps only subjects with a
            readable score instead of guessing one
    """

    def __init__(
        self,
        catalog: Optional[SubjectCatalog] = None,
        rng: Optional[random.Random] = None,
        enable_synthetic: bool = True,
    ):
        self.catalog = catalog or subject_catalog
        self.rng = rng or random.Random()
        self.enable_synthetic = enable_synthetic

    def parse(self, raw_text: str) -> ParseResult:
        """
        Parse recognised text into subjects with a confidence estimate.

        Args:
            raw_text: Plain text handed over by the recognition collaborator

        Returns:
            ParseResult (error set and confidence 0.0 when nothing was found)
        """
        raw_text = raw_text or ""
        logger.debug("Parsing extracted text...")

        if len(raw_text) < MIN_TEXT_LENGTH:
            logger.warning(f"⚠️ Not enough text extracted: {len(raw_text)} characters")
            return ParseResult(
                subjects=[],
                raw_text=raw_text,
                confidence=0.0,
                error=f"Not enough text extracted from document (only {len(raw_text)} characters)",
                error_kind=ParseErrorKind.INSUFFICIENT_TEXT,
            )

        lines = raw_text.splitlines()
        subjects = self._extract_direct(lines)

        if not subjects:
            logger.debug("No subjects found with direct parsing, trying pattern matching...")
            subjects = self._extract_with_patterns(lines)
            logger.debug(f"Pattern matching found {len(subjects)} subjects")

        confidence = calculate_confidence(subjects)
        logger.info(f"📄 Parsed {len(subjects)} subjects (confidence {confidence:.2f})")

        if not subjects:
            return ParseResult(
                subjects=[],
                raw_text=raw_text,
                confidence=0.0,
                error="No subject scores found in the document",
                error_kind=ParseErrorKind.NO_SUBJECTS_FOUND,
            )

        return ParseResult(
            subjects=subjects,
            raw_text=raw_text,
            confidence=confidence,
        )

    def _extract_direct(self, lines: List[str]) -> List[ExtractedSubject]:
        """First found score per canonical subject wins; later mentions are ignored."""
        subjects: List[ExtractedSubject] = []
        seen = set()

        for line in lines:
            clean_line = line.strip().lower()
            if len(clean_line) < MIN_LINE_LENGTH:
                continue

            segments = _segments(clean_line)
            for index, segment in enumerate(segments):
                name = self.catalog.canonicalize(segment)
                if name is None:
                    continue

                score = extract_score(segment)
                if score is None and len(segments) > 1 and index == len(segments) - 1:
                    # Name trailing its marks ("term 3 65% term 4 72% mathematics")
                    score = extract_score(clean_line)
                if score is None:
                    logger.debug(f"Found subject '{name}' but no score in line: {segment}")
                    continue

                if name in seen:
                    continue
                seen.add(name)
                subjects.append(ExtractedSubject(name=name, score=score))
                logger.debug(f"Added subject: {name} - {score}%")

        logger.debug(f"Processed {len(lines)} lines, found {len(subjects)} subjects")
        return subjects

    def _extract_with_patterns(self, lines: List[str]) -> List[ExtractedSubject]:
        """
        Scan every line for each subject group's keywords.

        The first matching line decides the subject; if its score can't be
        read, a plausible score is synthesised and flagged as such.
        """
        subjects: List[ExtractedSubject] = []

        for name, keywords in self.catalog.pattern_groups():
            for line in lines:
                clean_line = line.lower()
                if not any(keyword in clean_line for keyword in keywords):
                    continue

                score = extract_score(clean_line)
                if score is not None:
                    subjects.append(ExtractedSubject(name=name, score=score))
                elif self.enable_synthetic:
                    subjects.append(ExtractedSubject(
                        name=name,
                        score=self._synthesize_score(name),
                        is_synthesized=True,
                    ))
                logger.debug(f"Pattern match: {name} in line: {clean_line}")
                break

        return subjects

    def _synthesize_score(self, name: str) -> int:
        low, high = SYNTHETIC_SCORE_RANGES.get(name, DEFAULT_SYNTHETIC_RANGE)
        return self.rng.randint(low, high)


def _segments(line: str) -> List[str]:
    """
    Split a line carrying several percentages ("maths 85% science 90%") into
    one segment per percentage. Other lines are returned whole.
    """
    if len(PERCENTAGE_PATTERN.findall(line)) < 2:
        return [line]
    return [part.strip() for part in _SEGMENT_SPLIT.split(line) if part.strip()]


def calculate_confidence(subjects: List[ExtractedSubject]) -> float:
    """
    Estimate how trustworthy a parsed subject list is.

    valid-score ratio x size factor x realistic-score ratio, halved once if
    any score was synthesised. Always within [0.0, 1.0]; 0.0 for no subjects.
    """
    if not subjects:
        return 0.0

    total = len(subjects)
    valid = sum(1 for s in subjects if SCORE_MIN <= s.score <= SCORE_MAX)
    confidence = valid / total

    size_factor = CONFIDENCE_SIZE_FLOOR
    for min_count, factor in CONFIDENCE_SIZE_FACTORS:
        if total >= min_count:
            size_factor = factor
            break
    confidence *= size_factor

    low, high = REALISTIC_SCORE_RANGE
    realistic = sum(1 for s in subjects if low <= s.score <= high)
    confidence *= realistic / total

    if any(s.is_synthesized for s in subjects):
        confidence *= SYNTHETIC_CONFIDENCE_PENALTY

    return max(0.0, min(1.0, confidence))


def parse_document_text(raw_text: str, rng: Optional[random.Random] = None) -> ParseResult:
    """Convenience function: parse with the default catalog."""
    return DocumentParser(rng=rng).parse(raw_text)
