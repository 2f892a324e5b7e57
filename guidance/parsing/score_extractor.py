"""
Score Extractor

Finds the most plausible percentage score on a single line of report-card text.
"""

import logging
import re
from typing import Optional

from ..logic.constants import PLAUSIBLE_SCORE_RANGE, SCORE_MAX, SCORE_MIN

logger = logging.getLogger(__name__)

PERCENTAGE_PATTERN = re.compile(r"(\d{1,3})%")
BARE_NUMBER_PATTERN = re.compile(r"\b([7-9][0-9]|[1-9][0-9]?)\b")


def extract_score(line: str) -> Optional[int]:
    """
    Extract a score from one line of text.

    An explicit percentage ("72%") wins outright when it is 0-100. Otherwise
    every bare 1-2 digit number is a candidate; candidates outside the
    plausible score range are dropped and the largest survivor is returned,
    since subject codes and term numbers on the same line are usually smaller
    than the mark itself.

    Args:
        line: One line of recognised text

    Returns:
        Score 0-100, or None if the line carries no plausible score
    """
    match = PERCENTAGE_PATTERN.search(line)
    if match:
        score = int(match.group(1))
        if SCORE_MIN <= score <= SCORE_MAX:
            logger.debug(f"Found percentage score: {score}% in line: {line}")
            return score

    low, high = PLAUSIBLE_SCORE_RANGE
    candidates = [
        int(value) for value in BARE_NUMBER_PATTERN.findall(line)
        if low <= int(value) <= high
    ]
    if candidates:
        score = max(candidates)
        logger.debug(f"Found numeric score: {score} in line: {line}")
        return score

    return None
